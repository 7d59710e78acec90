"""
Pytest configuration and shared fixtures.

Each test gets a fresh in-memory SQLite database. The ASGI app is driven
through httpx.AsyncClient + ASGITransport on the test's own event loop, and
outbound HTTP (Vercel, Resend) goes through httpx.MockTransport.
"""
import os

# Must be set before parking.config is imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"
os.environ["SESSION_SECRET"] = "test-session-secret-with-enough-length-for-hs256"
os.environ["PLATFORM_HOSTS"] = "localhost,iolab.com,www.iolab.com"
os.environ["RESEND_API_KEY"] = ""
os.environ["VERCEL_API_TOKEN"] = ""
os.environ["PROJECT_ID_VERCEL"] = ""
os.environ["TEAM_ID_VERCEL"] = ""
os.environ["ADMIN_NOTIFICATION_EMAIL"] = ""

from decimal import Decimal

import httpx
import pytest
import pytest_asyncio

from parking.api.auth import create_session_token
from parking.api.deps import get_http_client
from parking.db import connection
from parking.db.connection import close_db, init_db
from parking.db.models import ContentType, Domain, ProfileRole, ProfileStatus
from parking.main import app
from parking.services.content_service import ContentService
from parking.services.profile_service import ProfileService


@pytest_asyncio.fixture(scope="function", autouse=True)
async def clean_database():
    """Fresh in-memory database for every test"""
    await init_db()
    yield
    await close_db()
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def db():
    """A session on the test database, separate from the request sessions"""
    async with connection.async_session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def client():
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


class OutboundRecorder:
    """Captures outbound requests and answers them with a canned response"""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.json_body = {"id": "mock-id"}
        self.error = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json=self.json_body)


@pytest.fixture
def outbound():
    """Route every outbound HTTP call of the app through a MockTransport"""
    recorder = OutboundRecorder()

    async def mock_http_client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(recorder.handler)) as http_client:
            yield http_client

    app.dependency_overrides[get_http_client] = mock_http_client
    return recorder


async def create_profile_with_token(db, email, role=ProfileRole.USER, password="password123"):
    profile = await ProfileService.create_profile(db, email, password, role=role)
    token, _ = create_session_token(profile)
    return profile, {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def seller(db):
    profile, headers = await create_profile_with_token(db, "seller@example.com")
    return {"profile": profile, "headers": headers}


@pytest_asyncio.fixture
async def other_seller(db):
    profile, headers = await create_profile_with_token(db, "other@example.com")
    return {"profile": profile, "headers": headers}


@pytest_asyncio.fixture
async def admin(db):
    profile, headers = await create_profile_with_token(db, "admin@example.com", role=ProfileRole.ADMIN)
    return {"profile": profile, "headers": headers}


async def add_domain(db, owner, name, list_price=None, is_for_sale=True):
    domain = Domain(
        name=name,
        list_price=Decimal(list_price) if list_price is not None else None,
        is_for_sale=is_for_sale,
        owner_id=owner.id
    )
    db.add(domain)
    await db.commit()
    await db.refresh(domain)
    return domain


async def disable_profile(db, profile):
    await ProfileService.update_profile(db, profile.id, status=ProfileStatus.DISABLED)


async def add_content(db, body="For God so loved the world", content_type=ContentType.VERSE, **kwargs):
    return await ContentService.create_content(db, content_type=content_type, body=body, **kwargs)
