"""HTTP tests for the /expenses routes."""
import pytest
from bson import ObjectId
from pymongo.errors import PyMongoError

REQUIRED = ["amount", "description", "category", "date", "paymentMethod"]


def _list(client):
    response = client.get("/expenses")
    assert response.status_code == 200
    return response.get_json()


def test_create_expense_end_to_end(client, lunch):
    response = client.post("/expenses", json=lunch)

    assert response.status_code == 201
    created = response.get_json()
    assert ObjectId.is_valid(created["_id"])

    expenses = _list(client)
    assert expenses == [created]
    assert {k: expenses[0][k] for k in REQUIRED} == lunch


def test_create_expense_keeps_user_email(client, lunch):
    lunch["userEmail"] = "ana@example.com"
    response = client.post("/expenses", json=lunch)

    assert response.status_code == 201
    assert _list(client)[0]["userEmail"] == "ana@example.com"


@pytest.mark.parametrize("field", REQUIRED)
def test_create_expense_missing_field(client, lunch, field):
    del lunch[field]
    response = client.post("/expenses", json=lunch)

    assert response.status_code == 400
    assert response.get_json() == {"message": "All fields are required"}
    assert _list(client) == []


@pytest.mark.parametrize("field", REQUIRED)
def test_create_expense_empty_field(client, lunch, field):
    lunch[field] = 0 if field == "amount" else ""
    response = client.post("/expenses", json=lunch)

    assert response.status_code == 400
    assert _list(client) == []


def test_create_expense_without_body(client):
    response = client.post("/expenses", data="not json", content_type="application/json")
    assert response.status_code == 400


@pytest.mark.parametrize("amount", [-5, "abc", True, [1]])
def test_create_expense_rejects_bad_amount(client, lunch, amount):
    lunch["amount"] = amount
    response = client.post("/expenses", json=lunch)

    assert response.status_code == 400
    assert "amount" in response.get_json()["message"]
    assert _list(client) == []


def test_create_expense_rejects_non_text_description(client, lunch):
    lunch["description"] = {"text": "lunch"}
    response = client.post("/expenses", json=lunch)

    assert response.status_code == 400
    assert response.get_json() == {"message": "description must be a string"}


def test_create_expense_coerces_numeric_string(client, lunch):
    lunch["amount"] = "12.50"
    response = client.post("/expenses", json=lunch)

    assert response.status_code == 201
    assert response.get_json()["amount"] == 12.5


def test_create_expense_from_form_body(client, lunch):
    response = client.post("/expenses", data={k: str(v) for k, v in lunch.items()})

    assert response.status_code == 201
    assert response.get_json()["amount"] == 100


def test_update_expense(client, lunch):
    expense_id = client.post("/expenses", json=lunch).get_json()["_id"]
    changed = dict(lunch, amount=42, description="dinner", paymentMethod="card")

    response = client.put(f"/expenses/{expense_id}", json=changed)

    assert response.status_code == 200
    assert response.get_json()["amount"] == 42
    assert _list(client) == [dict(changed, _id=expense_id)]


def test_update_does_not_touch_user_email(client, lunch):
    lunch["userEmail"] = "ana@example.com"
    expense_id = client.post("/expenses", json=lunch).get_json()["_id"]

    changed = dict(lunch, userEmail="bob@example.com", amount=7)
    response = client.put(f"/expenses/{expense_id}", json=changed)

    assert response.status_code == 200
    assert response.get_json()["userEmail"] == "ana@example.com"


def test_update_missing_expense(client, lunch):
    response = client.put(f"/expenses/{ObjectId()}", json=lunch)

    assert response.status_code == 404
    assert response.get_json() == {"message": "Expense not found"}


def test_update_with_malformed_id(client, lunch):
    response = client.put("/expenses/not-an-id", json=lunch)
    assert response.status_code == 404


def test_update_requires_all_fields(client, lunch):
    expense_id = client.post("/expenses", json=lunch).get_json()["_id"]

    response = client.put(f"/expenses/{expense_id}", json={"amount": 5})

    assert response.status_code == 400
    assert _list(client)[0]["amount"] == 100


def test_delete_expense(client, lunch):
    expense_id = client.post("/expenses", json=lunch).get_json()["_id"]

    response = client.delete(f"/expenses/{expense_id}")

    assert response.status_code == 200
    assert response.get_json() == {"message": "Expense deleted successfully"}
    assert _list(client) == []


def test_delete_missing_expense(client):
    response = client.delete(f"/expenses/{ObjectId()}")

    assert response.status_code == 404
    assert response.get_json() == {"message": "Expense not found"}


def test_list_failure_returns_500(app, client, monkeypatch):
    def boom():
        raise PyMongoError("connection reset")

    monkeypatch.setattr(app.extensions["expense_store"], "list_all", boom)
    response = client.get("/expenses")

    assert response.status_code == 500
    assert response.get_json() == {
        "message": "Error fetching expenses",
        "error": "connection reset",
    }


def test_create_failure_returns_500(app, client, lunch, monkeypatch):
    def boom(fields):
        raise PyMongoError("write concern failed")

    monkeypatch.setattr(app.extensions["expense_store"], "create", boom)
    response = client.post("/expenses", json=lunch)

    assert response.status_code == 500
    assert response.get_json()["message"] == "Error adding expense"


def test_routes_fail_when_database_is_missing(app, client, lunch):
    app.extensions.pop("expense_store")

    response = client.get("/expenses")
    assert response.status_code == 500
    assert response.get_json() == {
        "message": "Error fetching expenses",
        "error": "Database not initialized",
    }

    response = client.delete(f"/expenses/{ObjectId()}")
    assert response.status_code == 500
    assert response.get_json()["message"] == "Error deleting expense"


@pytest.mark.parametrize("amount", [10 ** 400, 2 ** 63, "1e30", "1e400"])
def test_create_expense_rejects_out_of_range_amount(client, lunch, amount):
    lunch["amount"] = amount
    response = client.post("/expenses", json=lunch)

    assert response.status_code == 400
    assert "amount" in response.get_json()["message"]
    assert _list(client) == []


def test_largest_storable_amount_is_accepted(client, lunch):
    lunch["amount"] = 2 ** 63 - 1
    response = client.post("/expenses", json=lunch)

    assert response.status_code == 201
    assert response.get_json()["amount"] == 2 ** 63 - 1


def test_encoding_failure_returns_json_500(app, client, lunch, monkeypatch):
    def boom(fields):
        raise OverflowError("MongoDB can only handle up to 8-byte ints")

    monkeypatch.setattr(app.extensions["expense_store"], "create", boom)
    response = client.post("/expenses", json=lunch)

    assert response.status_code == 500
    assert response.get_json() == {
        "message": "Error adding expense",
        "error": "MongoDB can only handle up to 8-byte ints",
    }


def test_update_failure_returns_500(app, client, lunch, monkeypatch):
    expense_id = client.post("/expenses", json=lunch).get_json()["_id"]

    def boom(expense_id, fields):
        raise PyMongoError("not primary")

    monkeypatch.setattr(app.extensions["expense_store"], "update", boom)
    response = client.put(f"/expenses/{expense_id}", json=dict(lunch, amount=5))

    assert response.status_code == 500
    assert response.get_json() == {"message": "Error updating expense", "error": "not primary"}
