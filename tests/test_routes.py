import pytest
from fastapi.testclient import TestClient

from auth import dependencies as auth_dependencies
from core import db
from customers import repository as customer_repository
from invoices import repository as invoice_repository
from main import app

CUSTOMER_ID = "3958dc9e-712f-4377-85e9-fec4b6a6442a"
INVOICE_ID = "cc27c14a-0acf-4f4a-a6c9-d45682c144b9"


@pytest.fixture
def client(monkeypatch):
    async def current_user():
        return {"id": 1, "email": "user@nextmail.com", "is_active": True}

    app.dependency_overrides[auth_dependencies.get_current_user] = current_user
    try:
        yield TestClient(app, follow_redirects=False)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def written(monkeypatch):
    rows: list[tuple] = []

    async def insert_customer(**kwargs):
        rows.append(("insert_customer", kwargs))
        return {"id": CUSTOMER_ID}

    async def update_customer(customer_id, **kwargs):
        rows.append(("update_customer", customer_id, kwargs))

    async def delete_customer(customer_id):
        rows.append(("delete_customer", customer_id))

    async def insert_invoice(**kwargs):
        rows.append(("insert_invoice", kwargs))
        return {"id": INVOICE_ID}

    monkeypatch.setattr(customer_repository, "insert_customer", insert_customer)
    monkeypatch.setattr(customer_repository, "update_customer", update_customer)
    monkeypatch.setattr(customer_repository, "delete_customer", delete_customer)
    monkeypatch.setattr(invoice_repository, "insert_invoice", insert_invoice)
    return rows


def test_create_customer_redirects_to_listing(client, written):
    response = client.post(
        "/dashboard/customers",
        data={"name": "Jane Doe", "email": "jane@x.com", "url": "https://x.com"},
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/dashboard/customers"
    assert written == [
        ("insert_customer", {"name": "Jane Doe", "email": "jane@x.com", "url": "https://x.com"}),
    ]


def test_create_customer_invalid_form_returns_field_errors(client, written):
    response = client.post("/dashboard/customers", data={"name": "", "url": "nope"})

    assert response.status_code == 422
    assert response.json() == {
        "errors": {
            "name": ["Name must contain at least 1 character."],
            "url": ["Please enter a valid URL"],
        },
    }
    assert written == []


def test_update_customer_database_error_returns_500(client, monkeypatch):
    async def update_customer(customer_id, **kwargs):
        raise db.DatabaseError("deadlock detected")

    monkeypatch.setattr(customer_repository, "update_customer", update_customer)

    response = client.put(f"/dashboard/customers/{CUSTOMER_ID}", data={"name": "Jane Doe"})

    assert response.status_code == 500
    assert response.json() == {"message": "Database Error: Failed to Update Customer Jane Doe."}


def test_delete_customer_returns_ok(client, written):
    response = client.delete(f"/dashboard/customers/{CUSTOMER_ID}")

    assert response.status_code == 200
    assert response.json() == {"ok": True}
    assert written == [("delete_customer", CUSTOMER_ID)]


def test_malformed_id_is_rejected_before_the_handler(client, written):
    response = client.delete("/dashboard/customers/not-a-uuid")

    assert response.status_code == 422
    assert written == []


def test_create_invoice_zero_amount(client, written):
    response = client.post(
        "/dashboard/invoices",
        data={"customerId": "123", "amount": "0", "status": "pending"},
    )

    assert response.status_code == 422
    assert response.json() == {
        "errors": {"amount": ["Please enter an amount greater than $0."]},
        "message": "Missing Fields. Failed to Create Invoice.",
    }
    assert written == []


def test_create_invoice_redirects_to_listing(client, written):
    response = client.post(
        "/dashboard/invoices",
        data={"customerId": "123", "amount": "49.99", "status": "pending"},
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/dashboard/invoices"
    assert written[0][1]["amount"] == 4999


def test_invoice_listing_is_served_from_cache_until_a_mutation(client, written, monkeypatch):
    loads = []

    async def list_invoices():
        loads.append(1)
        return [{"id": INVOICE_ID, "amount": 4999, "status": "pending", "name": "Jane Doe"}]

    monkeypatch.setattr(invoice_repository, "list_invoices", list_invoices)

    assert client.get("/dashboard/invoices").json()["count"] == 1
    client.get("/dashboard/invoices")
    assert len(loads) == 1

    client.post("/dashboard/invoices", data={"customerId": "123", "amount": "5", "status": "paid"})
    client.get("/dashboard/invoices")
    assert len(loads) == 2


def test_get_missing_invoice_returns_404(client, monkeypatch):
    async def get_invoice(invoice_id):
        return None

    monkeypatch.setattr(invoice_repository, "get_invoice", get_invoice)

    response = client.get(f"/dashboard/invoices/{INVOICE_ID}")

    assert response.status_code == 404


def test_dashboard_requires_sign_in():
    response = TestClient(app).get("/dashboard/customers")

    assert response.status_code == 401


def test_login_sets_cookie_and_redirects(monkeypatch):
    from auth import provider, schemas

    async def sign_in(provider_id, credentials):
        assert provider_id == "credentials"
        return schemas.Session(user_id=1, email="user@nextmail.com", access_token="token-123")

    monkeypatch.setattr(provider, "sign_in", sign_in)
    client = TestClient(app, follow_redirects=False)

    response = client.post(
        "/login",
        data={"email": "user@nextmail.com", "password": "123456", "redirectTo": "/dashboard/invoices"},
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/dashboard/invoices"
    assert response.cookies.get("access_token") == "token-123"


def test_login_with_wrong_password(monkeypatch):
    from auth import provider

    async def sign_in(provider_id, credentials):
        raise provider.AuthError(provider.CREDENTIALS_SIGNIN)

    monkeypatch.setattr(provider, "sign_in", sign_in)

    response = TestClient(app).post("/login", data={"email": "user@nextmail.com", "password": "nope"})

    assert response.status_code == 401
    assert response.json() == {"message": "Invalid credentials."}


def test_me_accepts_bearer_token(monkeypatch):
    from datetime import datetime, timezone

    from auth import repository as auth_repository
    from auth import security

    async def get_user_by_id(user_id):
        return {
            "id": user_id,
            "email": "user@nextmail.com",
            "is_active": True,
            "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
        }

    monkeypatch.setattr(auth_repository, "get_user_by_id", get_user_by_id)
    token = security.build_access_token(user_id=1, email="user@nextmail.com")

    response = TestClient(app).get("/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json()["email"] == "user@nextmail.com"


def test_me_rejects_malformed_authorization_header():
    response = TestClient(app).get("/me", headers={"Authorization": "Token abc"})

    assert response.status_code == 401


def test_logout_clears_cookie():
    response = TestClient(app, follow_redirects=False).post("/logout")

    assert response.status_code == 303
    assert response.headers["location"] == "/login"
    set_cookie = response.headers["set-cookie"].lower()
    assert set_cookie.startswith("access_token=")
    assert "max-age=0" in set_cookie
