"""
E-mail notifications for offers and inquiries.

Sends through the Resend HTTP API. Without RESEND_API_KEY the send is
skipped and logged, which is the normal development setup. Delivery
failures are logged and reported to the caller but never raised: the offer
or inquiry row is already stored by then.
"""
import enum
import logging
from typing import Optional

import httpx

from parking.config import Settings, settings as default_settings
from parking.db.models import Domain, Inquiry, Offer

logger = logging.getLogger(__name__)

RESEND_API_URL = "https://api.resend.com/emails"


class NotificationStatus(str, enum.Enum):
    SENT = "sent"
    SKIPPED = "skipped"
    FAILED = "failed"


class Notifier:
    """
    Service for e-mailing domain owners and the platform admin.

    Usage:
        notifier = Notifier(http_client)
        status = await notifier.notify_offer(offer, domain, owner_email)
    """

    def __init__(self, http_client: httpx.AsyncClient, settings: Settings = default_settings):
        """
        Initialize notifier.

        Args:
            http_client: Async HTTP client for the e-mail API
            settings: Application settings with API key and sender address
        """
        self.http_client = http_client
        self.settings = settings

    async def notify_offer(self, offer: Offer, domain: Domain, owner_email: str) -> NotificationStatus:
        """Tell the domain owner about a new offer."""
        subject = f"New offer for {domain.name}"
        return await self._send(
            to=owner_email,
            subject=subject,
            text=self.build_offer_body(offer, domain),
            reply_to=offer.buyer_email,
            context=f"offer {offer.id}"
        )

    async def notify_inquiry(self, inquiry: Inquiry) -> NotificationStatus:
        """Tell the platform admin about a contact form inquiry."""
        if not self.settings.admin_notification_email:
            logger.info(f"No ADMIN_NOTIFICATION_EMAIL set - inquiry {inquiry.id} saved without e-mail")
            return NotificationStatus.SKIPPED
        return await self._send(
            to=self.settings.admin_notification_email,
            subject="New general inquiry",
            text=self.build_inquiry_body(inquiry),
            reply_to=inquiry.submitter_email,
            context=f"inquiry {inquiry.id}"
        )

    def build_offer_body(self, offer: Offer, domain: Domain) -> str:
        amount = f"${offer.offer_amount:,.2f}" if offer.offer_amount is not None else "N/A"
        lines = [
            f"A new offer has been submitted for your domain: {domain.name}",
            "",
            "Details:",
            "--------------------------",
            f"Domain: {domain.name}",
            f"Offer Amount: {amount}",
            f"Buyer Contact: {offer.buyer_email}",
        ]
        if offer.message:
            lines += ["", "Message:", offer.message]
        lines += [
            "",
            f"Action: Please log into the {self.settings.platform_name} Seller Dashboard "
            "to review the full details and contact the buyer.",
        ]
        return "\n".join(lines)

    def build_inquiry_body(self, inquiry: Inquiry) -> str:
        return "\n".join([
            "A new general inquiry was submitted.",
            "",
            f"From: {inquiry.submitter_email}",
            "",
            inquiry.message,
        ])

    async def _send(self, to: str, subject: str, text: str, reply_to: Optional[str], context: str) -> NotificationStatus:
        if not self.settings.resend_api_key:
            logger.warning(f"RESEND_API_KEY not set - skipping e-mail for {context}")
            return NotificationStatus.SKIPPED

        payload = {
            "from": self.settings.notification_from_email,
            "to": [to],
            "subject": subject,
            "text": text,
        }
        if reply_to:
            payload["reply_to"] = reply_to

        try:
            response = await self.http_client.post(
                RESEND_API_URL,
                json=payload,
                headers={"Authorization": f"Bearer {self.settings.resend_api_key}"},
                timeout=self.settings.email_api_timeout
            )

            if 200 <= response.status_code < 300:
                logger.info(f"📧 Notification sent for {context}")
                return NotificationStatus.SENT

            logger.warning(
                f"⚠️ E-mail API returned non-2xx status for {context}: {response.status_code}"
            )
            return NotificationStatus.FAILED

        except httpx.TimeoutException:
            logger.warning(f"⚠️ E-mail API timeout for {context}")
            return NotificationStatus.FAILED

        except httpx.RequestError as e:
            logger.warning(f"⚠️ Failed to send e-mail for {context}: {e}")
            return NotificationStatus.FAILED
