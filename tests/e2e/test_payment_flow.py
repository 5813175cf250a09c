"""End-to-end tests for payment endpoints."""

import pytest
from fastapi.testclient import TestClient

from invest.domain.value import Role
from invest.interface.api.app import create_app
from invest.util.di.container import setup_di
from tests.conftest import auth_cookies
from tests.di import build_test_container

INVESTOR = auth_cookies(1)
ADMIN = auth_cookies(900, role=Role.ADMIN)


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


def _pay(client, amount_cents: int, investment_id: int = 7) -> str:
    response = client.post(
        "/payments",
        json={
            "investment_id": investment_id,
            "payment_method": "wire_transfer",
            "amount_cents": amount_cents,
            "payment_reference": "WT-1",
        },
        cookies=INVESTOR,
    )
    assert response.status_code == 201
    return response.json()["payment_id"]


class TestPaymentEndpoints:
    """End-to-end tests for the payment API."""

    def test_payment_starts_pending_and_enters_queue(self, client):
        payment_id = _pay(client, 10_000)

        payment = client.get(f"/payments/{payment_id}", cookies=INVESTOR)
        queue = client.get("/payments/pending", cookies=ADMIN)

        assert payment.status_code == 200
        assert payment.json()["verification_status"] == "pending"
        assert [p["payment_id"] for p in queue.json()["payments"]] == [payment_id]

    def test_unknown_payment_method_rejected(self, client):
        response = client.post(
            "/payments",
            json={"investment_id": 7, "payment_method": "cash", "amount_cents": 1},
            cookies=INVESTOR,
        )

        assert response.status_code == 422

    def test_verification_flow(self, client):
        # Arrange
        first = _pay(client, 10_000)
        second = _pay(client, 2_500)
        _pay(client, 99_999)

        # Act
        for payment_id in (first, second):
            response = client.post(
                f"/payments/{payment_id}/verify",
                json={"status": "verified", "notes": "funds received"},
                cookies=ADMIN,
            )
            assert response.status_code == 200
        total = client.get("/payments/investment/7/total", cookies=INVESTOR)

        # Assert
        assert total.json() == {"total_cents": 12_500}
        listed = client.get("/payments/investment/7", cookies=INVESTOR).json()
        assert len(listed["payments"]) == 3

    def test_second_verification_conflicts(self, client):
        payment_id = _pay(client, 1_000)
        client.post(
            f"/payments/{payment_id}/verify", json={"status": "failed"}, cookies=ADMIN
        )

        response = client.post(
            f"/payments/{payment_id}/verify",
            json={"status": "verified"},
            cookies=ADMIN,
        )

        assert response.status_code == 409
        assert response.json()["kind"] == "invalid_transition"

    def test_pending_is_not_a_verification_decision(self, client):
        payment_id = _pay(client, 1_000)

        response = client.post(
            f"/payments/{payment_id}/verify",
            json={"status": "pending"},
            cookies=ADMIN,
        )

        assert response.status_code == 422

    def test_investor_cannot_verify_or_see_queue(self, client):
        payment_id = _pay(client, 1_000)

        verify = client.post(
            f"/payments/{payment_id}/verify",
            json={"status": "verified"},
            cookies=INVESTOR,
        )
        queue = client.get("/payments/pending", cookies=INVESTOR)

        assert verify.status_code == 403
        assert queue.status_code == 403

    def test_restricted_reads_hide_investment_payments(self, client, monkeypatch):
        monkeypatch.setenv("PAYMENTS__RESTRICT_READS_TO_ADMINS", "true")
        _pay(client, 1_000)

        listing = client.get("/payments/investment/7", cookies=INVESTOR)
        total = client.get("/payments/investment/7/total", cookies=INVESTOR)
        admin_listing = client.get("/payments/investment/7", cookies=ADMIN)

        assert listing.status_code == 403
        assert total.status_code == 403
        assert len(admin_listing.json()["payments"]) == 1
