"""
Public contact form endpoint for general inquiries.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from parking.api.deps import get_notifier
from parking.api.schemas import EMAIL_PATTERN
from parking.db.connection import get_db_session
from parking.services.inquiry_service import InquiryService
from parking.services.notifier import NotificationStatus, Notifier

logger = logging.getLogger(__name__)

router = APIRouter()


class ContactRequest(BaseModel):
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    message: str = Field(..., max_length=5000)


class ContactResponse(BaseModel):
    id: int
    status: str
    notification: NotificationStatus


@router.post("/contact", response_model=ContactResponse, status_code=status.HTTP_201_CREATED)
async def submit_contact(
    request: ContactRequest,
    db: AsyncSession = Depends(get_db_session),
    notifier: Notifier = Depends(get_notifier)
):
    """Save an inquiry and alert the platform admin"""
    try:
        inquiry, notification = await InquiryService.submit_inquiry(
            db, notifier, request.email, request.message
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return ContactResponse(id=inquiry.id, status=inquiry.status, notification=notification)
