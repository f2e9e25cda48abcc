"""Expense persistence on the ``expenses`` collection."""
from typing import List, Optional, Dict, Any

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument

from expense_tracker.expenses.models import Expense


def _object_id(expense_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(expense_id)
    except (InvalidId, TypeError):
        return None


class ExpenseStore:
    """CRUD access to expense documents. Errors from pymongo propagate."""

    def __init__(self, db):
        self.collection = db.expenses

    def create(self, fields: Dict[str, Any]) -> Expense:
        doc = dict(fields)
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return Expense.from_document(doc)

    def list_all(self) -> List[Expense]:
        return [Expense.from_document(doc) for doc in self.collection.find()]

    def update(self, expense_id: str, fields: Dict[str, Any]) -> Optional[Expense]:
        """Replace the given fields in place; None when no expense has this id."""
        oid = _object_id(expense_id)
        if oid is None:
            return None
        doc = self.collection.find_one_and_update(
            {"_id": oid},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )
        return Expense.from_document(doc) if doc else None

    def delete(self, expense_id: str) -> bool:
        oid = _object_id(expense_id)
        if oid is None:
            return False
        return self.collection.delete_one({"_id": oid}).deleted_count == 1

    def total_amount(self) -> float:
        """Sum of ``amount`` over every expense, regardless of owner."""
        result = list(self.collection.aggregate([
            {"$group": {"_id": None, "total": {"$sum": "$amount"}}}
        ]))
        return result[0]["total"] if result else 0
