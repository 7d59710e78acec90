"""
Centralized error handlers for FastAPI.

Maps service-layer exceptions to HTTP responses with a {"detail": ...} body.
Unexpected errors become a generic 500; no stack traces reach the client.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from parking.core.errors import (
    ContentNotFoundError,
    DomainAlreadyExistsError,
    DomainNotFoundError,
    EmailAlreadyRegisteredError,
    HostingProviderError,
    InvalidDomainNameError,
    OfferNotAllowedError,
    ParkingError,
    PermissionDeniedError,
    ProfileNotFoundError,
)

logger = logging.getLogger(__name__)


def _error_response(status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail})


def register_error_handlers(app: FastAPI) -> None:
    """Register service error handlers on the FastAPI application."""

    @app.exception_handler(DomainNotFoundError)
    @app.exception_handler(ProfileNotFoundError)
    @app.exception_handler(ContentNotFoundError)
    async def handle_not_found(request: Request, exc: ParkingError) -> JSONResponse:
        logger.warning(f"Not found on {request.method} {request.url.path}: {exc}")
        return _error_response(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(DomainAlreadyExistsError)
    @app.exception_handler(EmailAlreadyRegisteredError)
    async def handle_conflict(request: Request, exc: ParkingError) -> JSONResponse:
        logger.warning(f"Conflict on {request.method} {request.url.path}: {type(exc).__name__}")
        return _error_response(status.HTTP_409_CONFLICT, str(exc))

    @app.exception_handler(InvalidDomainNameError)
    async def handle_invalid_domain(request: Request, exc: InvalidDomainNameError) -> JSONResponse:
        logger.warning(f"Rejected domain name '{exc.name}': {exc.reason}")
        return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, str(exc))

    @app.exception_handler(PermissionDeniedError)
    async def handle_permission_denied(request: Request, exc: PermissionDeniedError) -> JSONResponse:
        logger.warning(f"Permission denied on {request.method} {request.url.path}")
        return _error_response(status.HTTP_403_FORBIDDEN, str(exc) or "Permission denied")

    @app.exception_handler(OfferNotAllowedError)
    async def handle_offer_not_allowed(request: Request, exc: OfferNotAllowedError) -> JSONResponse:
        logger.info(f"Offer rejected: {exc}")
        return _error_response(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(HostingProviderError)
    async def handle_hosting_provider(request: Request, exc: HostingProviderError) -> JSONResponse:
        # No status means the integration is switched off
        status_code = exc.status_code or status.HTTP_503_SERVICE_UNAVAILABLE
        logger.error(f"Hosting provider error ({status_code}): {exc.message}")
        return _error_response(status_code, exc.message)

    @app.exception_handler(ParkingError)
    async def handle_parking_error(request: Request, exc: ParkingError) -> JSONResponse:
        logger.error(f"Unhandled service error: {type(exc).__name__}: {exc}")
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception(f"Unexpected error on {request.method} {request.url.path}: {type(exc).__name__}")
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
