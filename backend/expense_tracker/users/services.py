"""Spending limits on the ``users`` collection, keyed by email."""
from typing import List

from expense_tracker.users.model import User


class UserLimitStore:
    def __init__(self, db):
        self.collection = db.users

    def set_limit(self, email: str, expense_limit: float) -> None:
        """Upsert: create the user when the email is new, else overwrite the limit."""
        self.collection.update_one(
            {"email": email},
            {"$set": {"expenseLimit": expense_limit}},
            upsert=True,
        )

    def list_all(self) -> List[User]:
        return [User.from_document(doc) for doc in self.collection.find()]
