import pytest


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture(scope="function")
def policy(client) -> dict:
    owner = client.post(
        "/api/v1/clients",
        json={
            "name": "John Doe",
            "date_of_birth": "1990-01-01",
            "address": "123 Main St",
            "contact_information": "9876543210",
        },
    ).json()
    response = client.post(
        "/api/v1/policies",
        json={
            "policy_number": "POL123",
            "type": "Health",
            "coverage_amount": 50000.00,
            "premium": 500.00,
            "start_date": "2023-01-01",
            "end_date": "2024-01-01",
            "client_id": owner["id"],
        },
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture(scope="function")
def claim_payload(policy: dict) -> dict:
    return {
        "claim_number": "CLM123",
        "description": "Hospitalization after an accident",
        "claim_date": "2023-01-01",
        "status": "OPEN",
        "policy_id": policy["id"],
    }


@pytest.fixture(scope="function")
def created_claim(client, claim_payload: dict) -> dict:
    response = client.post("/api/v1/claims", json=claim_payload)
    assert response.status_code == 201
    return response.json()


# ============================================================================
# CREATE CLAIM TESTS
# ============================================================================


def test_create_claim_success(client, policy: dict, claim_payload: dict):
    response = client.post("/api/v1/claims", json=claim_payload)

    assert response.status_code == 201
    data = response.json()
    assert data["id"] == 1
    assert data["policy_id"] == policy["id"]
    assert data["claim_number"] == "CLM123"
    assert data["claim_date"] == "2023-01-01"
    assert data["status"] == "OPEN"


def test_create_claim_without_status(client, claim_payload: dict):
    payload = dict(claim_payload)
    del payload["status"]

    response = client.post("/api/v1/claims", json=payload)

    assert response.status_code == 201
    assert response.json()["status"] is None


def test_create_claim_policy_not_found(client, claim_payload: dict):
    response = client.post("/api/v1/claims", json={**claim_payload, "policy_id": 999})

    assert response.status_code == 404
    assert response.json()["detail"] == "Policy not found with id: 999"
    assert client.get("/api/v1/claims").json() == []


def test_create_claim_blank_description(client, claim_payload: dict):
    response = client.post("/api/v1/claims", json={**claim_payload, "description": ""})

    assert response.status_code == 400


def test_create_claim_date_in_future(client, claim_payload: dict):
    response = client.post("/api/v1/claims", json={**claim_payload, "claim_date": "2999-12-31"})

    assert response.status_code == 400
    assert "claim_date" in response.json()["detail"]


# ============================================================================
# GET / UPDATE / DELETE CLAIM TESTS
# ============================================================================


def test_get_claim_by_id(client, created_claim: dict):
    response = client.get(f"/api/v1/claims/{created_claim['id']}")

    assert response.status_code == 200
    assert response.json() == created_claim


def test_get_claim_by_id_not_found(client):
    response = client.get("/api/v1/claims/5")

    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"


def test_update_claim_status(client, created_claim: dict, claim_payload: dict):
    response = client.put(
        f"/api/v1/claims/{created_claim['id']}",
        json={**claim_payload, "status": "APPROVED"},
    )

    assert response.status_code == 200
    assert response.json()["status"] == "APPROVED"
    assert response.json()["policy_id"] == created_claim["policy_id"]


def test_update_claim_to_other_policy_rejected(client, created_claim: dict, claim_payload: dict):
    response = client.put(
        f"/api/v1/claims/{created_claim['id']}",
        json={**claim_payload, "policy_id": created_claim["policy_id"] + 1},
    )

    assert response.status_code == 400
    assert client.get(f"/api/v1/claims/{created_claim['id']}").json() == created_claim


def test_update_claim_not_found(client, claim_payload: dict):
    response = client.put("/api/v1/claims/999", json=claim_payload)

    assert response.status_code == 404


def test_delete_claim_keeps_policy(client, created_claim: dict, policy: dict):
    response = client.delete(f"/api/v1/claims/{created_claim['id']}")

    assert response.status_code == 204
    assert client.get("/api/v1/claims").json() == []
    assert client.get(f"/api/v1/policies/{policy['id']}").status_code == 200


def test_delete_policy_cascades_to_claims(client, created_claim: dict, policy: dict):
    assert client.delete(f"/api/v1/policies/{policy['id']}").status_code == 204

    assert client.get("/api/v1/claims").json() == []


def test_delete_client_cascades_to_claims(client, created_claim: dict, policy: dict):
    assert client.delete(f"/api/v1/clients/{policy['client_id']}").status_code == 204

    assert client.get("/api/v1/policies").json() == []
    assert client.get("/api/v1/claims").json() == []
