from flask import Flask
from flask_cors import CORS
from flask_mail import Mail

from expense_tracker.config import Config
from expense_tracker.core import ExpenseNotifier
from expense_tracker.errors import register_error_handlers
from expense_tracker.expenses.services import ExpenseStore
from expense_tracker.extensions import configure_logging, init_mongo
from expense_tracker.users.services import UserLimitStore

mail = Mail()


def create_app(config_class=Config, mongo_client=None):
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Disable strict slashes so /expenses and /expenses/ both match
    app.url_map.strict_slashes = False

    configure_logging(app)

    # Any origin may call the API
    CORS(app)

    # Process-wide resources, created once and looked up per request
    mongo = init_mongo(app, client=mongo_client)
    if mongo["db"] is not None:
        app.extensions["expense_store"] = ExpenseStore(mongo["db"])
        app.extensions["user_store"] = UserLimitStore(mongo["db"])

    mail.init_app(app)
    app.extensions["expense_notifier"] = ExpenseNotifier(
        mail,
        sender=app.config.get("MAIL_DEFAULT_SENDER"),
        subject=app.config.get("REPORT_SUBJECT", "Expense Update"),
    )

    register_error_handlers(app)

    from expense_tracker.expenses.routes import expenses_bp
    from expense_tracker.users.routes import users_bp

    app.register_blueprint(expenses_bp, url_prefix='/expenses')
    app.register_blueprint(users_bp, url_prefix='/set-expense-limit')

    return app
