"""Database package - all database-related code."""
from parking.db.connection import init_db, get_db_session, close_db
from parking.db.models import Base, Profile, Domain, DailyContent, Offer, Inquiry

__all__ = [
    "init_db",
    "get_db_session",
    "close_db",
    "Base",
    "Profile",
    "Domain",
    "DailyContent",
    "Offer",
    "Inquiry",
]
