"""Configuration management using environment variables"""
import os
import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_PLATFORM_HOSTS = "localhost,iolab.com,www.iolab.com"


class Settings:
    """Application settings - only what the service reads today"""

    def __init__(self):
        # Environment
        self.environment = os.getenv("ENVIRONMENT", "development")

        # JWT/Session configuration for dashboard authentication
        if self.environment == "production":
            self.session_secret = self._get_required("SESSION_SECRET")
        else:
            session_secret_env = os.getenv("SESSION_SECRET", "")
            if session_secret_env:
                self.session_secret = session_secret_env
            else:
                # Generate a random secret on startup for development
                import secrets
                self.session_secret = secrets.token_urlsafe(32)
                logging.getLogger(__name__).warning(
                    "⚠️  No SESSION_SECRET provided - generated random secret for this session. "
                    "Session tokens will not survive restarts. Set SESSION_SECRET in .env."
                )

        self.jwt_algorithm = os.getenv("JWT_ALGORITHM", "HS256")
        self.jwt_expiration_hours = int(os.getenv("JWT_EXPIRATION_HOURS", "24"))

        # Server configuration
        self.host = os.getenv("HOST", "0.0.0.0")
        self.port = int(os.getenv("PORT", "8000"))

        # Database configuration (SQLite by default - any async SQLAlchemy URL works)
        self.database_url = os.getenv(
            "DATABASE_URL",
            "sqlite+aiosqlite:///./parking.db"
        )

        # Host names that serve the platform marketing page instead of a parked domain
        self.platform_hosts = self._split_list(
            os.getenv("PLATFORM_HOSTS", DEFAULT_PLATFORM_HOSTS)
        )
        self.platform_name = os.getenv("PLATFORM_NAME", "iolab.com")
        self.featured_domains_limit = int(os.getenv("FEATURED_DOMAINS_LIMIT", "8"))

        # Hosting provider (Vercel) - used to attach parked domains to the deployment
        self.vercel_api_token = os.getenv("VERCEL_API_TOKEN", "")
        self.vercel_project_id = os.getenv("PROJECT_ID_VERCEL", "")
        self.vercel_team_id = os.getenv("TEAM_ID_VERCEL", "")
        self.hosting_api_timeout = float(os.getenv("HOSTING_API_TIMEOUT", "10.0"))  # seconds

        # Transactional e-mail (Resend) for offer and inquiry notifications
        self.resend_api_key = os.getenv("RESEND_API_KEY", "")
        self.notification_from_email = os.getenv(
            "NOTIFICATION_FROM_EMAIL", "iolab <notifications@iolab.com>"
        )
        self.admin_notification_email = os.getenv("ADMIN_NOTIFICATION_EMAIL", "")
        self.email_api_timeout = float(os.getenv("EMAIL_API_TIMEOUT", "10.0"))  # seconds

        # CORS origins (comma-separated list) for the dashboard frontend
        self.cors_origins = os.getenv("CORS_ORIGINS", "")

        # Logging
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()

        if self.environment != "production":
            self._warn_missing_integrations()

    @property
    def hosting_configured(self) -> bool:
        return bool(self.vercel_api_token and self.vercel_project_id)

    @staticmethod
    def _split_list(raw: str) -> list[str]:
        return [item.strip() for item in raw.split(",") if item.strip()]

    def _get_required(self, key: str) -> str:
        """Get required environment variable or raise error."""
        value = os.getenv(key, "").strip()
        if not value:
            raise ValueError(
                f"Missing required environment variable: {key}. "
                f"Required in production mode."
            )
        return value

    def _warn_missing_integrations(self) -> None:
        """Warn about optional integrations that are switched off in development."""
        logger = logging.getLogger(__name__)

        missing = []
        if not self.hosting_configured:
            missing.append("VERCEL_API_TOKEN / PROJECT_ID_VERCEL - adding domains to the hosting project is disabled")
        if not self.resend_api_key:
            missing.append("RESEND_API_KEY - offer and inquiry e-mails will be skipped")

        if missing:
            logger.warning(
                "⚠️  Optional integrations not configured:\n" +
                "\n".join(f"  - {item}" for item in missing)
            )


# Global settings instance
settings = Settings()
