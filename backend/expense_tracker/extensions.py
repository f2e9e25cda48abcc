import logging

from flask import current_app
from pymongo import MongoClient
from pymongo.errors import ConnectionFailure, PyMongoError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(app):
    """Attach a stream handler to the package logger at the configured level."""
    level = app.config.get("LOG_LEVEL", "INFO")
    package_logger = logging.getLogger("expense_tracker")
    package_logger.setLevel(level)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    app.logger.setLevel(level)


def init_mongo(app, client=None):
    """Open the process-wide Mongo connection and keep it on ``app.extensions``.

    Connection problems are logged and do not abort startup; routes fail at
    call time instead. ``client`` lets tests hand in an in-memory client.
    """
    state = {"client": None, "db": None}
    app.extensions["mongo"] = state

    try:
        if client is None:
            client = MongoClient(
                app.config["MONGO_URI"],
                serverSelectionTimeoutMS=app.config["MONGO_SERVER_SELECTION_TIMEOUT_MS"],
            )
        dbname = app.config.get("MONGO_DBNAME")
        if dbname:
            db = client[dbname]
        else:
            db = client.get_default_database(default=app.config["MONGO_DEFAULT_DBNAME"])
    except PyMongoError as exc:
        logger.error("[MongoDB] Could not create client: %s", exc)
        return state

    state["client"] = client
    state["db"] = db

    if app.config.get("MONGO_PING_ON_START", True):
        try:
            client.admin.command("ping")
            logger.info("[MongoDB] Connected to database: %s", db.name)
        except PyMongoError as exc:
            logger.error("[MongoDB] Connection to %s failed: %s", db.name, exc)
    else:
        logger.info("[MongoDB] Using database: %s", db.name)

    return state


def _require(name):
    resource = current_app.extensions.get(name)
    if resource is None:
        raise ConnectionFailure("Database not initialized")
    return resource


def get_expense_store():
    return _require("expense_store")


def get_user_store():
    return _require("user_store")


def get_notifier():
    return current_app.extensions["expense_notifier"]
