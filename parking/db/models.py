"""
SQLAlchemy ORM models for database tables.

Four core tables (profiles, domains, daily_content, offers) plus inquiries
from the public contact form. Ownership is explicit: every domain points at
the profile that registered it, and access checks live in the services.
"""
from sqlalchemy import Column, String, Text, DateTime, Index, ForeignKey, Boolean, Integer, Numeric, Enum
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func
import enum

Base = declarative_base()

DEFAULT_LANDING_PAGE_TYPE = "default_inspiration"


# ============================================
# Enums
# ============================================

class ProfileRole(str, enum.Enum):
    """Dashboard roles"""
    USER = "user"  # Seller - manages own domains
    ADMIN = "admin"  # Full access to all rows


class ProfileStatus(str, enum.Enum):
    """Account status - disabled sellers lose their landing pages"""
    ACTIVE = "active"
    DISABLED = "disabled"


class ContentType(str, enum.Enum):
    """Kinds of rotating landing page content"""
    VERSE = "verse"
    QUOTE = "quote"
    BANNER = "banner"  # Promotional banner, links to target_url


# ============================================
# Accounts
# ============================================

class Profile(Base):
    """
    Seller / admin accounts.

    Created at sign-up with role=user and status=active.
    Admins change role and status; a disabled profile's domains render as not found.
    """
    __tablename__ = "profiles"

    id = Column(String(50), primary_key=True)  # uuid4 string
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)  # bcrypt hash
    role = Column(Enum(ProfileRole), nullable=False, default=ProfileRole.USER)
    status = Column(Enum(ProfileStatus), nullable=False, default=ProfileStatus.ACTIVE)
    created_at = Column(DateTime, nullable=False, default=func.now())
    updated_at = Column(DateTime, nullable=False, default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index('idx_profiles_status', 'status'),
    )

    domains = relationship("Domain", back_populates="owner")


# ============================================
# Inventory
# ============================================

class Domain(Base):
    """
    Parked domains - one row per host name served by the landing route.

    name is the exact host the landing route matches against (stored lowercase).
    """
    __tablename__ = "domains"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(253), unique=True, nullable=False)
    list_price = Column(Numeric(12, 2), nullable=True)  # Asking price in USD, None = make an offer
    is_for_sale = Column(Boolean, nullable=False, default=True)
    landing_page_type = Column(String(50), nullable=False, default=DEFAULT_LANDING_PAGE_TYPE)
    owner_id = Column(String(50), ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False)
    created_at = Column(DateTime, nullable=False, default=func.now())

    __table_args__ = (
        Index('idx_domains_owner_id', 'owner_id'),
    )

    owner = relationship("Profile", back_populates="domains")
    offers = relationship("Offer", back_populates="domain")


class Offer(Base):
    """
    Buyer offers submitted anonymously from a landing page.

    Readable only by the domain owner (and admins).
    """
    __tablename__ = "offers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    domain_id = Column(Integer, ForeignKey('domains.id', ondelete='CASCADE'), nullable=False)
    buyer_email = Column(String(255), nullable=False)
    offer_amount = Column(Numeric(12, 2), nullable=True)
    message = Column(Text, nullable=False, default="")
    created_at = Column(DateTime, nullable=False, default=func.now())

    __table_args__ = (
        Index('idx_offers_domain_id', 'domain_id'),
    )

    domain = relationship("Domain", back_populates="offers")


# ============================================
# Content
# ============================================

class DailyContent(Base):
    """
    Rotating landing page content (verses, quotes, banners).

    Seeded by admins. One active row is picked at random per landing request.
    """
    __tablename__ = "daily_content"

    id = Column(Integer, primary_key=True, autoincrement=True)
    content_type = Column(Enum(ContentType), nullable=False)
    body = Column(Text, nullable=False)
    reference = Column(String(255), nullable=True)  # e.g. "John 3:16" or quote author
    target_url = Column(String(500), nullable=True)  # Banner click-through
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=func.now())

    __table_args__ = (
        Index('idx_daily_content_is_active', 'is_active'),
    )


class Inquiry(Base):
    """General inquiries from the platform contact form"""
    __tablename__ = "inquiries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    submitter_email = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default='New', server_default='New')
    created_at = Column(DateTime, nullable=False, default=func.now())
