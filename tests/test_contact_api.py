"""
Tests for the public contact form
"""
import json

import pytest

from parking.config import settings


@pytest.mark.asyncio
async def test_contact_saved_without_admin_address(client, outbound):
    response = await client.post("/api/v1/contact", json={
        "email": "visitor@example.com",
        "message": "How do I park my domain?"
    })

    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "New"
    assert data["notification"] == "skipped"
    assert outbound.requests == []


@pytest.mark.asyncio
async def test_contact_notifies_admin(client, outbound, monkeypatch):
    monkeypatch.setattr(settings, "resend_api_key", "re_test_key_123456")
    monkeypatch.setattr(settings, "admin_notification_email", "ops@iolab.com")

    response = await client.post("/api/v1/contact", json={
        "email": "visitor@example.com",
        "message": "Question about pricing"
    })

    assert response.status_code == 201
    assert response.json()["notification"] == "sent"
    payload = json.loads(outbound.requests[0].content)
    assert payload["to"] == ["ops@iolab.com"]
    assert payload["reply_to"] == "visitor@example.com"
    assert "Question about pricing" in payload["text"]


@pytest.mark.asyncio
async def test_contact_blank_message_rejected(client, outbound):
    response = await client.post("/api/v1/contact", json={
        "email": "visitor@example.com",
        "message": "   "
    })
    assert response.status_code == 400
    assert response.json()["detail"] == "Email and message are required."
