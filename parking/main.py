"""
Domain Parking Service - Main Application Entry Point
"""
from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging
import re

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from parking.api import admin, contact, domains, hosting, landing, offers, session
from parking.api.errors import register_error_handlers
from parking.config import settings
from parking.db import close_db, init_db
from parking.version import __version__


# Custom logging filter to redact sensitive data
class SensitiveDataFilter(logging.Filter):
    """Filter to redact sensitive data from logs"""

    BEARER = re.compile(r"(Bearer\s+)[A-Za-z0-9._\-]+")
    BASIC = re.compile(r"(Basic\s+)[A-Za-z0-9+/=]+")
    JWT = re.compile(r"eyJ[A-Za-z0-9_-]*\.eyJ[A-Za-z0-9_-]*\.[A-Za-z0-9_-]*")
    RESEND_KEY = re.compile(r"\bre_[A-Za-z0-9_]{10,}")
    SECRET_FIELD = re.compile(
        r"(['\"]?(?:password|password_hash|api_key|token|secret)['\"]?\s*[:=]\s*['\"]?)[^'\",\s}]+",
        re.IGNORECASE
    )

    def filter(self, record):
        if hasattr(record, 'msg'):
            msg = str(record.msg)
            msg = self.BEARER.sub(r"\1[REDACTED]", msg)
            msg = self.BASIC.sub(r"\1[REDACTED]", msg)
            msg = self.JWT.sub("[JWT_REDACTED]", msg)
            msg = self.RESEND_KEY.sub("[KEY_REDACTED]", msg)
            msg = self.SECRET_FIELD.sub(r"\1[REDACTED]", msg)
            record.msg = msg
        return True


# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

# Add filter to all loggers
for handler in logging.root.handlers:
    handler.addFilter(SensitiveDataFilter())

# Add filter to httpx logger (logs API requests)
httpx_logger = logging.getLogger('httpx')
httpx_logger.addFilter(SensitiveDataFilter())

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - handles startup and shutdown"""
    logger.info("🚀 Starting Domain Parking Service")
    logger.info(f"📦 Version: {__version__}")
    logger.info(f"📝 Environment: {settings.environment}")

    await init_db()

    logger.info(f"✅ Platform hosts: {', '.join(settings.platform_hosts)}")
    if not settings.hosting_configured:
        logger.warning("⚠️  Hosting provider not configured - POST /api/v1/hosting/domains will return 503")

    yield

    logger.info("Shutting down...")
    await close_db()


app = FastAPI(
    title="Domain Parking Service",
    description="Host-keyed landing pages, seller inventory and buyer offers for parked domains",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)


# ============================================
# CORS Middleware Configuration
# ============================================

# Development origins (local dashboard dev server)
dev_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]

# Set CORS_ORIGINS env var as comma-separated list: "https://example.com,https://www.example.com"
production_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]

allowed_origins = dev_origins + production_origins

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

logger.info(f"✅ CORS configured for origins: {allowed_origins}")


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Log validation errors (field locations only, never the body)"""
    logger.warning(
        f"Validation error for {request.method} {request.url.path}: "
        f"{[error.get('loc') for error in exc.errors()]}"
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": jsonable_errors(exc)}
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    """Validation errors without the raw input or exception context"""
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}
        for error in exc.errors()
    ]


register_error_handlers(app)

# Dashboard and public API routes
app.include_router(session.router, prefix="/api/v1", tags=["auth"])
app.include_router(domains.router, prefix="/api/v1", tags=["domains"])
app.include_router(hosting.router, prefix="/api/v1", tags=["hosting"])
app.include_router(offers.router, prefix="/api/v1", tags=["offers"])
app.include_router(contact.router, prefix="/api/v1", tags=["contact"])
app.include_router(admin.router, prefix="/api/v1", tags=["admin"])


@app.get("/health")
async def health_check():
    """Liveness check"""
    return {
        "status": "healthy",
        "version": __version__,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.environment
    }


# Catch-all landing route - must stay last so the routes above take precedence
app.include_router(landing.router, tags=["landing"])
