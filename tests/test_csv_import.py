"""
Tests for bulk CSV parsing and the import endpoint
"""
from decimal import Decimal

import pytest
from sqlalchemy import select

from parking.db import connection
from parking.db.models import DEFAULT_LANDING_PAGE_TYPE, Domain
from parking.services.csv_import import parse_domain_csv, parse_price
from tests.conftest import add_domain


def test_parse_price_variants():
    assert parse_price("5000") == Decimal("5000.00")
    assert parse_price(" $1250.5 ") == Decimal("1250.50")
    assert parse_price("") is None
    assert parse_price(None) is None
    assert parse_price("call me") is None
    assert parse_price("-10") is None
    assert parse_price("NaN") is None


def test_parse_keeps_valid_rows_in_order():
    result = parse_domain_csv("example.com, 5000\nanother-domain.net, 250\njust-parked.org,\n")

    assert [row.name for row in result.rows] == ["example.com", "another-domain.net", "just-parked.org"]
    assert result.rows[0].list_price == Decimal("5000.00")
    assert result.rows[2].list_price is None
    assert result.skipped_lines == 0


def test_parse_handles_crlf_and_blank_lines():
    result = parse_domain_csv("one.com,10\r\n\r\ntwo.com,20\r\n")
    assert [row.name for row in result.rows] == ["one.com", "two.com"]
    assert result.skipped_lines == 0


def test_parse_skips_header_and_short_names():
    result = parse_domain_csv("domain,price\na.b,1\ngood.org,7")
    assert [row.name for row in result.rows] == ["good.org"]
    assert result.skipped_lines == 2


def test_parse_skips_duplicates_within_file():
    result = parse_domain_csv("Dup.com,1\ndup.com,2")
    assert len(result.rows) == 1
    assert result.rows[0].list_price == Decimal("1.00")
    assert result.skipped_lines == 1


def test_parse_non_numeric_price_is_null():
    result = parse_domain_csv("priced.com, make offer")
    assert result.rows[0].list_price is None


@pytest.mark.asyncio
async def test_import_endpoint_adds_and_reports_existing(client, db, seller, other_seller):
    await add_domain(db, other_seller["profile"], "taken.com")

    body = "fresh.com, 100\ntaken.com, 200\nbad\nfresh.com, 300\n"
    response = await client.post(
        "/api/v1/domains/import",
        content=body.encode("utf-8"),
        headers={**seller["headers"], "Content-Type": "text/csv"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["added"] == ["fresh.com"]
    assert data["already_exists"] == ["taken.com"]
    assert data["skipped_lines"] == 2

    async with connection.async_session_maker() as session:
        result = await session.execute(select(Domain).where(Domain.name == "fresh.com"))
        domain = result.scalar_one()
        assert domain.owner_id == seller["profile"].id
        assert domain.is_for_sale is True
        assert domain.landing_page_type == DEFAULT_LANDING_PAGE_TYPE
        assert domain.list_price == Decimal("100.00")


@pytest.mark.asyncio
async def test_import_requires_session(client):
    response = await client.post("/api/v1/domains/import", content=b"x.com,1")
    assert response.status_code == 401
