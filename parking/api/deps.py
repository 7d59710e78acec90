"""
Shared FastAPI dependencies for outbound HTTP integrations.

Tests override get_http_client with a client on httpx.MockTransport.
"""
from typing import AsyncIterator

import httpx
from fastapi import Depends

from parking.clients.vercel_client import VercelClient
from parking.config import settings
from parking.services.notifier import Notifier


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient() as client:
        yield client


def get_notifier(http_client: httpx.AsyncClient = Depends(get_http_client)) -> Notifier:
    return Notifier(http_client, settings)


def get_vercel_client(http_client: httpx.AsyncClient = Depends(get_http_client)) -> VercelClient:
    return VercelClient(http_client, settings)
