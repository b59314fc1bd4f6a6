import pytest
from fastapi.testclient import TestClient

from ..core.dependencies import get_ledger_service
from ..main import app
from ..services import LedgerService

@pytest.fixture
def client() -> TestClient:
    service = LedgerService()
    app.dependency_overrides[get_ledger_service] = lambda: service

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def test_create_account_deposit_withdraw(client: TestClient) -> None:
    response = client.post("/accounts/A/create")
    assert response.status_code == 201
    assert response.json() == {"id": "A", "balance": 0}

    deposit = client.post("/accounts/A/deposit", json=500)
    assert deposit.status_code == 200
    assert deposit.json()["balance"] == 500

    withdraw = client.post("/accounts/A/withdraw", json=200)
    assert withdraw.status_code == 200
    assert withdraw.json()["balance"] == 300

    rejected = client.post("/accounts/A/withdraw", json=600)
    assert rejected.status_code == 400
    assert rejected.json() == {"error": "Insufficient funds"}

    snapshot = client.get("/accounts/A")
    assert snapshot.status_code == 200
    assert snapshot.json() == {"id": "A", "balance": 300}

def test_create_duplicate_account_conflicts(client: TestClient) -> None:
    client.post("/accounts/dup/create")
    client.post("/accounts/dup/deposit", json=250)

    response = client.post("/accounts/dup/create")
    assert response.status_code == 409
    assert response.json() == {"error": "Account already exists"}
    assert client.get("/accounts/dup").json()["balance"] == 250

@pytest.mark.parametrize(
    "method, path, body",
    [
        ("get", "/accounts/ghost", None),
        ("post", "/accounts/ghost/deposit", 10),
        ("post", "/accounts/ghost/add-money", {"amount": 10}),
        ("post", "/accounts/ghost/withdraw", 10),
    ],
)
def test_unknown_account_returns_404(client: TestClient, method: str, path: str, body) -> None:
    if body is None:
        response = client.request(method, path)
    else:
        response = client.request(method, path, json=body)

    assert response.status_code == 404
    assert response.json() == {"error": "Account not found"}

def test_add_money_and_deposit_share_semantics(client: TestClient) -> None:
    client.post("/accounts/B/create")
    client.post("/accounts/C/create")

    via_object = client.post("/accounts/B/add-money", json={"amount": 500})
    via_number = client.post("/accounts/C/deposit", json=500)

    assert via_object.status_code == 200
    assert via_number.status_code == 200
    assert client.get("/accounts/B").json()["balance"] == 500
    assert client.get("/accounts/C").json()["balance"] == 500

@pytest.mark.parametrize("path, body", [
    ("/accounts/D/deposit", 10000.01),
    ("/accounts/D/add-money", {"amount": 10001}),
])
def test_deposit_above_limit_rejected(client: TestClient, path: str, body) -> None:
    client.post("/accounts/D/create")

    response = client.post(path, json=body)
    assert response.status_code == 400
    assert response.json() == {"error": "Deposit amount exceeds the limit"}
    assert client.get("/accounts/D").json()["balance"] == 0

def test_deposit_at_limit_accepted(client: TestClient) -> None:
    client.post("/accounts/E/create")

    response = client.post("/accounts/E/deposit", json=10000)
    assert response.status_code == 200
    assert response.json()["balance"] == 10000

@pytest.mark.parametrize("path, body", [
    ("/accounts/F/deposit", -50),
    ("/accounts/F/deposit", 0),
    ("/accounts/F/add-money", {"amount": -1}),
    ("/accounts/F/withdraw", -10),
])
def test_non_positive_amount_rejected(client: TestClient, path: str, body) -> None:
    client.post("/accounts/F/create")
    client.post("/accounts/F/deposit", json=1000)

    response = client.post(path, json=body)
    assert response.status_code == 400
    assert response.json() == {"error": "Amount must be a positive number"}
    assert client.get("/accounts/F").json()["balance"] == 1000

@pytest.mark.parametrize("path, body, message", [
    ("/accounts/G/deposit", {"amount": 5}, "Invalid deposit amount"),
    ("/accounts/G/deposit", "lots", "Invalid deposit amount"),
    ("/accounts/G/add-money", {"value": 5}, "Invalid deposit amount"),
    ("/accounts/G/withdraw", [1, 2], "Invalid withdraw amount"),
    ("/accounts/G/deposit", "500", "Invalid deposit amount"),
    ("/accounts/G/add-money", {"amount": "500"}, "Invalid deposit amount"),
    ("/accounts/G/withdraw", "50", "Invalid withdraw amount"),
])
def test_malformed_body_returns_400(client: TestClient, path: str, body, message: str) -> None:
    client.post("/accounts/G/create")

    response = client.post(path, json=body)
    assert response.status_code == 400
    assert response.json() == {"error": message}

def test_missing_body_returns_400(client: TestClient) -> None:
    client.post("/accounts/H/create")

    response = client.post("/accounts/H/withdraw")
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid withdraw amount"}

def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
