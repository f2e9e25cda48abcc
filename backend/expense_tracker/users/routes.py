from flask import Blueprint, jsonify

from expense_tracker.errors import STORE_ERRORS, InternalError
from expense_tracker.extensions import get_user_store
from expense_tracker.utils.request_body import get_payload
from expense_tracker.utils.validators import parse_expense_limit

users_bp = Blueprint("users", __name__)


@users_bp.route("/", methods=["POST"])
def set_expense_limit():
    """Create or overwrite the spending limit for an email."""
    email, expense_limit = parse_expense_limit(get_payload())

    try:
        get_user_store().set_limit(email, expense_limit)
    except STORE_ERRORS as exc:
        raise InternalError("Error setting expense limit", exc)

    return jsonify({"message": "Expense limit set successfully"})


# Lists every user and their limit; the path is shared with the setter above.
@users_bp.route("/", methods=["GET"])
def list_users():
    try:
        users = get_user_store().list_all()
    except STORE_ERRORS as exc:
        raise InternalError("Error set expenses", exc)
    return jsonify([u.to_json() for u in users])
