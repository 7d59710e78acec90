"""
Services package for business logic.
"""
from parking.services.profile_service import ProfileService
from parking.services.domain_service import DomainService
from parking.services.content_service import ContentService
from parking.services.offer_service import OfferService
from parking.services.inquiry_service import InquiryService
from parking.services.landing_service import LandingService
from parking.services.notifier import Notifier, NotificationStatus

__all__ = [
    'ProfileService',
    'DomainService',
    'ContentService',
    'OfferService',
    'InquiryService',
    'LandingService',
    'Notifier',
    'NotificationStatus',
]
