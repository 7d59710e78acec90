"""Data access repositories."""
from parking.repositories.domain_repository import DomainRepository
from parking.repositories.content_repository import ContentRepository

__all__ = ["DomainRepository", "ContentRepository"]
