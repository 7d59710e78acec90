"""
Tests for public offer submission and owner notification
"""
import json
from decimal import Decimal

import httpx
import pytest
from sqlalchemy import select

from parking.config import settings
from parking.db import connection
from parking.db.models import Domain, Offer
from parking.services.notifier import RESEND_API_URL, NotificationStatus, Notifier
from tests.conftest import add_domain, disable_profile


@pytest.fixture
def resend_key(monkeypatch):
    monkeypatch.setattr(settings, "resend_api_key", "re_test_key_123456")


@pytest.mark.asyncio
async def test_offer_without_email_key_is_stored_and_skipped(client, db, seller, outbound):
    domain = await add_domain(db, seller["profile"], "forsale.org", list_price="5000")

    response = await client.post("/api/v1/offers", json={
        "domain_id": domain.id,
        "buyer_email": "buyer@example.com",
        "offer_amount": 4200,
        "message": "Love this name"
    })

    assert response.status_code == 201
    data = response.json()
    assert data["domain"] == "forsale.org"
    assert data["notification"] == "skipped"
    assert outbound.requests == []

    async with connection.async_session_maker() as session:
        offer = (await session.execute(select(Offer).where(Offer.id == data["offer_id"]))).scalar_one()
        assert offer.buyer_email == "buyer@example.com"
        assert offer.offer_amount == Decimal("4200")
        assert offer.message == "Love this name"


@pytest.mark.asyncio
async def test_offer_notifies_owner(client, db, seller, outbound, resend_key):
    domain = await add_domain(db, seller["profile"], "notify.org")

    response = await client.post("/api/v1/offers", json={
        "domain_id": domain.id,
        "buyer_email": "buyer@example.com",
        "offer_amount": 1234.5
    })

    assert response.status_code == 201
    assert response.json()["notification"] == "sent"
    assert len(outbound.requests) == 1

    sent = outbound.requests[0]
    assert str(sent.url) == RESEND_API_URL
    assert sent.headers["authorization"] == "Bearer re_test_key_123456"
    payload = json.loads(sent.content)
    assert payload["to"] == ["seller@example.com"]
    assert payload["reply_to"] == "buyer@example.com"
    assert "A new offer has been submitted for your domain: notify.org" in payload["text"]
    assert "Offer Amount: $1,234.50" in payload["text"]


@pytest.mark.asyncio
async def test_failed_notification_does_not_fail_offer(client, db, seller, outbound, resend_key):
    domain = await add_domain(db, seller["profile"], "flaky.org")
    outbound.status_code = 500

    response = await client.post("/api/v1/offers", json={
        "domain_id": domain.id,
        "buyer_email": "buyer@example.com"
    })

    assert response.status_code == 201
    assert response.json()["notification"] == "failed"


@pytest.mark.asyncio
async def test_unreachable_email_api_is_failed(client, db, seller, outbound, resend_key):
    domain = await add_domain(db, seller["profile"], "offline.org")
    outbound.error = httpx.ConnectError("connection refused")

    response = await client.post("/api/v1/offers", json={
        "domain_id": domain.id,
        "buyer_email": "buyer@example.com"
    })

    assert response.status_code == 201
    assert response.json()["notification"] == "failed"


@pytest.mark.asyncio
async def test_offer_for_unknown_domain(client, outbound):
    response = await client.post("/api/v1/offers", json={
        "domain_id": 424242,
        "buyer_email": "buyer@example.com"
    })
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_offer_for_domain_not_for_sale(client, db, seller, outbound):
    domain = await add_domain(db, seller["profile"], "private.org", is_for_sale=False)

    response = await client.post("/api/v1/offers", json={
        "domain_id": domain.id,
        "buyer_email": "buyer@example.com"
    })
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_offer_for_disabled_owner_is_404(client, db, seller, outbound):
    domain = await add_domain(db, seller["profile"], "suspended.org")
    await disable_profile(db, seller["profile"])

    response = await client.post("/api/v1/offers", json={
        "domain_id": domain.id,
        "buyer_email": "buyer@example.com"
    })
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_offer_invalid_email(client, db, seller, outbound):
    domain = await add_domain(db, seller["profile"], "strict.org")

    response = await client.post("/api/v1/offers", json={
        "domain_id": domain.id,
        "buyer_email": "nope"
    })
    assert response.status_code == 422


def test_offer_body_without_amount():
    notifier = Notifier(http_client=None, settings=settings)
    offer = Offer(id=1, buyer_email="buyer@example.com", offer_amount=None, message="")
    body = notifier.build_offer_body(offer, Domain(name="example.org"))

    assert "Offer Amount: N/A" in body
    assert "Buyer Contact: buyer@example.com" in body
    assert "Message:" not in body


@pytest.mark.asyncio
async def test_notifier_timeout_is_failed(monkeypatch):
    monkeypatch.setattr(settings, "resend_api_key", "re_test_key_123456")

    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
        notifier = Notifier(http_client, settings)
        offer = Offer(id=1, buyer_email="buyer@example.com", offer_amount=Decimal("10"), message="hi")
        status = await notifier.notify_offer(offer, Domain(name="slow.org"), "owner@example.com")

    assert status == NotificationStatus.FAILED
