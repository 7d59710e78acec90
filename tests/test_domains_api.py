"""
Tests for the seller domain inventory API and ownership checks
"""
from decimal import Decimal

import pytest
from sqlalchemy import func, select

from parking.db import connection
from parking.db.models import Domain, Offer
from tests.conftest import add_domain


async def count_rows(model, *criteria) -> int:
    async with connection.async_session_maker() as session:
        result = await session.execute(select(func.count()).select_from(model).where(*criteria))
        return result.scalar_one()


@pytest.mark.asyncio
async def test_create_domain(client, seller):
    response = await client.post(
        "/api/v1/domains",
        json={"name": "  NewDomain.org ", "list_price": 2500},
        headers=seller["headers"]
    )

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "newdomain.org"
    assert data["list_price"] == 2500
    assert data["is_for_sale"] is True
    assert data["landing_page_type"] == "default_inspiration"
    assert data["owner_id"] == seller["profile"].id


@pytest.mark.asyncio
async def test_create_duplicate_domain_is_conflict(client, db, seller, other_seller):
    await add_domain(db, other_seller["profile"], "claimed.org")

    response = await client.post(
        "/api/v1/domains",
        json={"name": "Claimed.org"},
        headers=seller["headers"]
    )
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_create_invalid_domain_name(client, seller):
    response = await client.post(
        "/api/v1/domains",
        json={"name": "https://example.com/page"},
        headers=seller["headers"]
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_negative_price_rejected(client, seller):
    response = await client.post(
        "/api/v1/domains",
        json={"name": "cheap.org", "list_price": -5},
        headers=seller["headers"]
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_only_own_domains_sorted_with_offer_counts(client, db, seller, other_seller):
    zeta = await add_domain(db, seller["profile"], "zeta.org")
    await add_domain(db, seller["profile"], "alpha.org")
    await add_domain(db, other_seller["profile"], "notmine.org")
    db.add(Offer(domain_id=zeta.id, buyer_email="buyer@example.com", message=""))
    db.add(Offer(domain_id=zeta.id, buyer_email="buyer2@example.com", message=""))
    await db.commit()

    response = await client.get("/api/v1/domains", headers=seller["headers"])

    assert response.status_code == 200
    data = response.json()
    assert [d["name"] for d in data] == ["alpha.org", "zeta.org"]
    assert [d["offer_count"] for d in data] == [0, 2]


@pytest.mark.asyncio
async def test_update_domain_partial(client, db, seller):
    domain = await add_domain(db, seller["profile"], "edit.org", list_price="100")

    response = await client.patch(
        f"/api/v1/domains/{domain.id}",
        json={"is_for_sale": False},
        headers=seller["headers"]
    )
    assert response.status_code == 200
    assert response.json()["is_for_sale"] is False
    assert response.json()["list_price"] == 100

    cleared = await client.patch(
        f"/api/v1/domains/{domain.id}",
        json={"list_price": None, "landing_page_type": "minimal"},
        headers=seller["headers"]
    )
    assert cleared.status_code == 200
    assert cleared.json()["list_price"] is None
    assert cleared.json()["landing_page_type"] == "minimal"
    assert cleared.json()["is_for_sale"] is False


@pytest.mark.asyncio
async def test_cannot_update_someone_elses_domain(client, db, seller, other_seller):
    domain = await add_domain(db, other_seller["profile"], "theirs.org", list_price="10")

    response = await client.patch(
        f"/api/v1/domains/{domain.id}",
        json={"list_price": 1},
        headers=seller["headers"]
    )
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_admin_can_update_any_domain(client, db, seller, admin):
    domain = await add_domain(db, seller["profile"], "managed.org")

    response = await client.patch(
        f"/api/v1/domains/{domain.id}",
        json={"list_price": "750.50"},
        headers=admin["headers"]
    )
    assert response.status_code == 200
    assert response.json()["list_price"] == 750.5


@pytest.mark.asyncio
async def test_update_missing_domain_is_404(client, seller):
    response = await client.patch("/api/v1/domains/9999", json={"is_for_sale": True}, headers=seller["headers"])
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_domain_removes_offers(client, db, seller):
    domain = await add_domain(db, seller["profile"], "gone.org")
    db.add(Offer(domain_id=domain.id, buyer_email="buyer@example.com", offer_amount=Decimal("10"), message=""))
    await db.commit()

    response = await client.delete(f"/api/v1/domains/{domain.id}", headers=seller["headers"])

    assert response.status_code == 200
    assert response.json() == {"deleted": True, "id": domain.id, "name": "gone.org"}
    assert await count_rows(Domain, Domain.id == domain.id) == 0
    assert await count_rows(Offer, Offer.domain_id == domain.id) == 0


@pytest.mark.asyncio
async def test_cannot_delete_someone_elses_domain(client, db, seller, other_seller):
    domain = await add_domain(db, other_seller["profile"], "keep.org")

    response = await client.delete(f"/api/v1/domains/{domain.id}", headers=seller["headers"])

    assert response.status_code == 403
    assert await count_rows(Domain, Domain.id == domain.id) == 1


@pytest.mark.asyncio
async def test_list_offers_newest_first(client, db, seller, other_seller):
    domain = await add_domain(db, seller["profile"], "offers.org")
    for email in ["first@example.com", "second@example.com"]:
        db.add(Offer(domain_id=domain.id, buyer_email=email, message=""))
        await db.commit()

    response = await client.get(f"/api/v1/domains/{domain.id}/offers", headers=seller["headers"])
    assert response.status_code == 200
    assert [o["buyer_email"] for o in response.json()] == ["second@example.com", "first@example.com"]

    forbidden = await client.get(f"/api/v1/domains/{domain.id}/offers", headers=other_seller["headers"])
    assert forbidden.status_code == 403


@pytest.mark.asyncio
async def test_domains_require_session(client):
    response = await client.get("/api/v1/domains")
    assert response.status_code == 401
