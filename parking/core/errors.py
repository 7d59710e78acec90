"""
Service-layer exceptions.

Raised by services and mapped to HTTP responses in parking.api.errors.
"""
from typing import Optional


class ParkingError(Exception):
    """Base exception for service layer errors"""
    pass


class DomainNotFoundError(ParkingError):
    """Raised when a domain doesn't exist (or isn't visible to the caller)"""

    def __init__(self, domain_ref):
        self.domain_ref = domain_ref
        super().__init__(f"Domain {domain_ref} not found")


class DomainAlreadyExistsError(ParkingError):
    """Raised when registering a host name that is already in inventory"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Domain '{name}' already exists")


class InvalidDomainNameError(ParkingError, ValueError):
    """Raised when a submitted name can't be a parked host name"""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid domain name '{name}': {reason}")


class PermissionDeniedError(ParkingError):
    """Raised when a profile acts on a row it doesn't own"""
    pass


class ProfileNotFoundError(ParkingError):
    """Raised when a profile doesn't exist"""

    def __init__(self, profile_id: str):
        self.profile_id = profile_id
        super().__init__(f"Profile {profile_id} not found")


class EmailAlreadyRegisteredError(ParkingError):
    """Raised on sign-up with an e-mail that already has a profile"""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email '{email}' is already registered")


class OfferNotAllowedError(ParkingError):
    """Raised when an offer targets a domain that isn't for sale"""
    pass


class ContentNotFoundError(ParkingError):
    """Raised when a daily content row doesn't exist"""

    def __init__(self, content_id: int):
        self.content_id = content_id
        super().__init__(f"Content {content_id} not found")


class HostingProviderError(ParkingError):
    """Raised when the hosting provider rejects or can't be reached"""

    def __init__(self, message: str, status_code: Optional[int] = None, response_body: Optional[dict] = None):
        self.message = message
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(self.message)
