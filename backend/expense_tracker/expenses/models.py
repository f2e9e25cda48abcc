"""Expense models."""
from dataclasses import dataclass
from typing import Optional, Dict, Any


@dataclass
class Expense:
    id: str
    amount: float
    description: str
    category: str
    date: str
    paymentMethod: str
    userEmail: Optional[str] = None

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Expense":
        return cls(
            id=str(doc["_id"]),
            amount=doc["amount"],
            description=doc["description"],
            category=doc["category"],
            date=doc["date"],
            paymentMethod=doc["paymentMethod"],
            userEmail=doc.get("userEmail"),
        )

    def to_json(self) -> Dict[str, Any]:
        data = {
            "_id": self.id,
            "amount": self.amount,
            "description": self.description,
            "category": self.category,
            "date": self.date,
            "paymentMethod": self.paymentMethod,
        }
        if self.userEmail is not None:
            data["userEmail"] = self.userEmail
        return data
