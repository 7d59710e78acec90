"""
Vercel REST API client for attaching parked domains to the deployment.

A domain only reaches the landing route once the hosting project knows about
it, so sellers call this after adding a domain to inventory.
"""
import httpx
import logging
from typing import Optional
from parking.config import Settings
from parking.core.errors import HostingProviderError

logger = logging.getLogger(__name__)


class VercelClient:
    """
    Client for the Vercel project domains API.

    POST /v10/projects/{project_id}/domains?teamId={team_id} with {"name": domain}
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: Settings,
        logger_instance: logging.Logger = logger
    ):
        """
        Initialize Vercel API client.

        Args:
            http_client: httpx AsyncClient for making HTTP requests
            settings: Application settings containing token and project IDs
            logger_instance: Logger for tracking API calls
        """
        self._http_client = http_client
        self._settings = settings
        self._logger = logger_instance
        self._api_base_url = "https://api.vercel.com"

    def _project_domains_url(self) -> str:
        return f"{self._api_base_url}/v10/projects/{self._settings.vercel_project_id}/domains"

    async def add_domain(self, domain_name: str) -> dict:
        """
        Register a domain with the hosting project.

        Args:
            domain_name: Bare host name (e.g. "example.com")

        Returns:
            Vercel's JSON response describing the project domain

        Raises:
            HostingProviderError: Not configured (no status), rejected by Vercel
                (Vercel's status), or unreachable (502)
        """
        if not self._settings.hosting_configured:
            raise HostingProviderError("Hosting provider is not configured")

        params = {}
        if self._settings.vercel_team_id:
            params["teamId"] = self._settings.vercel_team_id

        self._logger.info(f"Sending add-domain request to Vercel for {domain_name}")

        try:
            response = await self._http_client.post(
                self._project_domains_url(),
                params=params,
                json={"name": domain_name},
                headers={
                    "Authorization": f"Bearer {self._settings.vercel_api_token}",
                    "Content-Type": "application/json",
                },
                timeout=self._settings.hosting_api_timeout
            )
        except httpx.TimeoutException as e:
            self._logger.error(f"❌ Vercel API timeout for {domain_name}")
            raise HostingProviderError("Hosting provider timed out", status_code=504) from e
        except httpx.RequestError as e:
            self._logger.error(f"❌ Vercel API request failed for {domain_name}: {e}")
            raise HostingProviderError("Failed to reach hosting provider", status_code=502) from e

        data = self._parse_json(response)

        if response.status_code < 200 or response.status_code >= 300:
            error_message = self._error_message(data)
            self._logger.error(
                f"❌ Vercel API error - status: {response.status_code}, message: {error_message}"
            )
            raise HostingProviderError(
                error_message,
                status_code=response.status_code,
                response_body=data
            )

        self._logger.info(f"✅ Domain {domain_name} added to hosting project")
        return data or {}

    @staticmethod
    def _parse_json(response: httpx.Response) -> Optional[dict]:
        if not response.content:
            return None
        try:
            data = response.json()
        except ValueError:
            return None
        return data if isinstance(data, dict) else None

    @staticmethod
    def _error_message(data: Optional[dict]) -> str:
        error = (data or {}).get("error")
        if isinstance(error, dict) and error.get("message"):
            return error["message"]
        return "Unknown hosting provider error"
