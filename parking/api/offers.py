"""
Public offer endpoint, called by the "Make an Offer" form on parked pages.
"""
import logging
from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from parking.api.deps import get_notifier
from parking.api.schemas import EMAIL_PATTERN
from parking.db.connection import get_db_session
from parking.services.notifier import NotificationStatus, Notifier
from parking.services.offer_service import OfferService

logger = logging.getLogger(__name__)

router = APIRouter()


class SubmitOfferRequest(BaseModel):
    domain_id: int
    buyer_email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    offer_amount: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    message: Optional[str] = Field(None, max_length=5000)


class SubmitOfferResponse(BaseModel):
    offer_id: int
    domain: str
    notification: NotificationStatus


@router.post("/offers", response_model=SubmitOfferResponse, status_code=status.HTTP_201_CREATED)
async def submit_offer(
    request: SubmitOfferRequest,
    db: AsyncSession = Depends(get_db_session),
    notifier: Notifier = Depends(get_notifier)
):
    """
    Store a buyer offer and e-mail the owner.

    No authentication. The offer is accepted even when the e-mail can't be
    delivered; "notification" says what happened.
    """
    submission = await OfferService.submit_offer(
        db,
        notifier,
        domain_id=request.domain_id,
        buyer_email=request.buyer_email,
        offer_amount=request.offer_amount,
        message=request.message
    )
    return SubmitOfferResponse(
        offer_id=submission.offer.id,
        domain=submission.domain_name,
        notification=submission.notification
    )
