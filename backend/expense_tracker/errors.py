"""API error types and the JSON handlers that render them."""
import logging

from bson.errors import BSONError
from flask import jsonify
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

# What a store call can raise: driver errors plus BSON encoding failures
STORE_ERRORS = (PyMongoError, BSONError, OverflowError)


class ApiError(Exception):
    """Base class for errors that map onto a single HTTP response."""

    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"message": self.message}


class ValidationError(ApiError):
    """A required field is missing, null or of the wrong type."""

    status_code = 400


class NotFoundError(ApiError):
    status_code = 404


class InternalError(ApiError):
    """A database or mail failure. The raw cause is echoed to the client."""

    status_code = 500

    def __init__(self, message, cause=None):
        super().__init__(message)
        self.cause = cause

    def to_dict(self):
        payload = super().to_dict()
        payload["error"] = str(self.cause) if self.cause is not None else None
        return payload


def handle_api_error(error):
    if isinstance(error, InternalError):
        logger.error("[API] %s: %r", error.message, error.cause)
    return jsonify(error.to_dict()), error.status_code


def register_error_handlers(app):
    app.register_error_handler(ApiError, handle_api_error)
