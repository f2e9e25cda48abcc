from dataclasses import dataclass


@dataclass
class User:
    id: str
    email: str
    expenseLimit: float = 0

    @classmethod
    def from_document(cls, doc):
        return cls(
            id=str(doc["_id"]),
            email=doc.get("email"),
            expenseLimit=doc.get("expenseLimit", 0),
        )

    def to_json(self):
        return {"_id": self.id, "email": self.email, "expenseLimit": self.expenseLimit}
