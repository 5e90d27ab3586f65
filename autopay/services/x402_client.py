"""
x402 resource server client.

Calls the resource server's health and weather endpoints with a hard
timeout. Network failures never raise; they come back as an ``ok: False``
response with status code 0.
"""

import asyncio
import json
import logging

import httpx

from autopay.core.config import Settings
from autopay.schemas.payments import X402ServerResponse

logger = logging.getLogger(__name__)

UNREACHABLE_ERROR = "X402_SERVER_UNREACHABLE"


class X402ServerClient:
    """Client for the x402 resource server."""

    def __init__(
        self,
        base_url: str,
        timeout_ms: int,
        client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the resource server client.

        Args:
            base_url: Resource server base URL
            timeout_ms: Hard limit for each request in milliseconds
            client: Optional preconfigured HTTP client
        """
        self.base_url = base_url
        self.timeout_ms = timeout_ms
        self.client = client or httpx.AsyncClient(timeout=timeout_ms / 1000)

    @classmethod
    def from_settings(cls, settings: Settings) -> "X402ServerClient":
        return cls(settings.x402_server_base_url, settings.x402_server_timeout_ms)

    async def __aenter__(self) -> "X402ServerClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()

    def build_url(self, path: str) -> str:
        """Join the base URL and path, trimming one trailing slash from the base."""
        base = self.base_url[:-1] if self.base_url.endswith("/") else self.base_url
        return f"{base}{path}"

    async def request(self, path: str) -> X402ServerResponse:
        """
        GET a path on the resource server.

        Args:
            path: Path starting with "/"

        Returns:
            X402ServerResponse describing the outcome
        """
        url = self.build_url(path)
        try:
            response = await asyncio.wait_for(
                self.client.get(url, headers={"Accept": "application/json"}),
                timeout=self.timeout_ms / 1000,
            )
        except asyncio.TimeoutError as e:
            logger.warning(f"x402 server request to {url} timed out after {self.timeout_ms}ms")
            return self._unreachable(e)
        except httpx.HTTPError as e:
            logger.warning(f"x402 server request to {url} failed: {e}")
            return self._unreachable(e)
        except Exception as e:
            logger.error(f"x402 server request to {url} failed unexpectedly: {e!r}")
            return self._unreachable(e)

        return X402ServerResponse(
            ok=response.is_success,
            status_code=response.status_code,
            body=self._safe_parse_json(response),
        )

    async def get_health(self) -> X402ServerResponse:
        return await self.request("/health")

    async def get_weather(self) -> X402ServerResponse:
        return await self.request("/weather")

    @staticmethod
    def _unreachable(error: object) -> X402ServerResponse:
        detail = str(error) or type(error).__name__
        return X402ServerResponse(
            ok=False,
            status_code=0,
            body={"error": UNREACHABLE_ERROR, "detail": detail},
        )

    @staticmethod
    def _safe_parse_json(response: httpx.Response):
        """Parse the body as JSON, returning None when it isn't."""
        if not response.content:
            return None
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.debug(f"Non-JSON body from x402 server: {e}")
            return None
