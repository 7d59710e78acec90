"""
Response models shared by the dashboard and admin routers.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from parking.db.models import ContentType, ProfileRole, ProfileStatus

# Loose shape check; delivery is the real test
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class ProfileResponse(BaseModel):
    """Profile details (password hash excluded)"""
    id: str
    email: str
    role: ProfileRole
    status: ProfileStatus
    created_at: datetime

    class Config:
        from_attributes = True


class DomainResponse(BaseModel):
    """Parked domain as shown on the dashboards"""
    id: int
    name: str
    list_price: Optional[float]
    is_for_sale: bool
    landing_page_type: str
    owner_id: str
    created_at: datetime

    class Config:
        from_attributes = True


class OfferResponse(BaseModel):
    id: int
    domain_id: int
    buyer_email: str
    offer_amount: Optional[float]
    message: str
    created_at: datetime

    class Config:
        from_attributes = True


class ContentResponse(BaseModel):
    id: int
    content_type: ContentType
    body: str
    reference: Optional[str]
    target_url: Optional[str]
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True


class InquiryResponse(BaseModel):
    id: int
    submitter_email: str
    message: str
    status: str
    created_at: datetime

    class Config:
        from_attributes = True
