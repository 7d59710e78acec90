"""Outbound API clients"""
from parking.clients.vercel_client import VercelClient

__all__ = ["VercelClient"]
