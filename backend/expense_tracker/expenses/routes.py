# expense_tracker/expenses/routes.py

from flask import Blueprint, jsonify

from expense_tracker.errors import STORE_ERRORS, InternalError, NotFoundError
from expense_tracker.extensions import get_expense_store, get_user_store, get_notifier
from expense_tracker.utils.request_body import get_payload
from expense_tracker.utils.validators import parse_expense

expenses_bp = Blueprint("expenses", __name__)


@expenses_bp.route("/", methods=["POST"])
def add_expense():
    """
    Add an expense, then email every user their spend-vs-limit summary.

    Request body:
    {
        "amount": 100,
        "description": "lunch",
        "category": "food",
        "date": "2024-01-01",
        "paymentMethod": "cash",
        "userEmail": "..."  // optional
    }

    The response is 201 once the expense is stored, whatever happens to the
    report emails.
    """
    fields = parse_expense(get_payload())

    try:
        store = get_expense_store()
        expense = store.create(fields)
    except STORE_ERRORS as exc:
        raise InternalError("Error adding expense", exc)

    get_notifier().send_expense_report(store, get_user_store())

    return jsonify(expense.to_json()), 201


@expenses_bp.route("/", methods=["GET"])
def list_expenses():
    try:
        expenses = get_expense_store().list_all()
    except STORE_ERRORS as exc:
        raise InternalError("Error fetching expenses", exc)
    return jsonify([e.to_json() for e in expenses])


@expenses_bp.route("/<expense_id>", methods=["PUT"])
def update_expense(expense_id):
    """Replace amount, description, category, date and paymentMethod."""
    fields = parse_expense(get_payload(), allow_user_email=False)

    try:
        expense = get_expense_store().update(expense_id, fields)
    except STORE_ERRORS as exc:
        raise InternalError("Error updating expense", exc)

    if expense is None:
        raise NotFoundError("Expense not found")
    return jsonify(expense.to_json())


@expenses_bp.route("/<expense_id>", methods=["DELETE"])
def delete_expense(expense_id):
    try:
        deleted = get_expense_store().delete(expense_id)
    except STORE_ERRORS as exc:
        raise InternalError("Error deleting expense", exc)

    if not deleted:
        raise NotFoundError("Expense not found")
    return jsonify({"message": "Expense deleted successfully"})
