"""Identity provider (Clerk) client.

This module wraps the provider's backend REST API. Only the user listing
endpoint is used: local users link to these records through clerk_id.
"""

import logging
from typing import List, Optional

import pydantic
import requests

from config import CLERK_API_URL, CLERK_PAGE_SIZE, CLERK_SECRET_KEY, HTTP_TIMEOUT
from core.exceptions import ConfigurationError, IdentityProviderError
from schemas.identity import IdentityRecord

logger = logging.getLogger(__name__)


class ClerkClient:
    """Thin HTTP client for the identity provider's user listing."""

    def __init__(
        self,
        secret_key: Optional[str] = CLERK_SECRET_KEY,
        base_url: str = CLERK_API_URL,
        page_size: int = CLERK_PAGE_SIZE,
        timeout: float = HTTP_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """Initialize ClerkClient.

        Args:
            secret_key: Static bearer credential for the backend API.
            base_url: API root, e.g. "https://api.clerk.com/v1".
            page_size: Number of users requested per page.
            timeout: Request timeout in seconds.
            session: Optional requests session (one is created if omitted).
        """
        self.secret_key = secret_key
        self.base_url = base_url.rstrip("/")
        self.page_size = page_size
        self.timeout = timeout
        self.session = session or requests.Session()

    def _headers(self) -> dict:
        if not self.secret_key:
            raise ConfigurationError("CLERK_SECRET_KEY is not set")
        return {
            "Authorization": f"Bearer {self.secret_key}",
            "Content-Type": "application/json",
        }

    def list_identity_users(self) -> List[IdentityRecord]:
        """Fetch every user known to the identity provider.

        Pages through ``/users`` with limit/offset until a short page comes
        back.

        Returns:
            List of IdentityRecord objects.

        Raises:
            ConfigurationError: If no secret key is configured.
            IdentityProviderError: On network failure or a non-2xx response.
        """
        headers = self._headers()
        records: List[IdentityRecord] = []
        offset = 0
        while True:
            page = self._get_page(headers, offset)
            try:
                records.extend(IdentityRecord.model_validate(item) for item in page)
            except pydantic.ValidationError as e:
                logger.error("Identity provider returned a malformed user: %s", e)
                raise IdentityProviderError(
                    "Failed to fetch identity users: invalid response"
                ) from e
            if len(page) < self.page_size:
                break
            offset += self.page_size
        logger.info("Fetched %d identity users", len(records))
        return records

    def _get_page(self, headers: dict, offset: int) -> list:
        url = f"{self.base_url}/users"
        params = {"limit": self.page_size, "offset": offset}
        try:
            response = self.session.get(url, headers=headers, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("Error fetching identity users: %s", e)
            raise IdentityProviderError(f"Failed to fetch identity users: {e}") from e

        if response.status_code >= 400:
            message = _upstream_message(response)
            logger.error(
                "Identity provider returned %s: %s", response.status_code, message
            )
            raise IdentityProviderError(
                f"Failed to fetch identity users: {message}",
                upstream_status=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.error("Identity provider returned a non-JSON body (HTTP %s)", response.status_code)
            raise IdentityProviderError(
                "Failed to fetch identity users: invalid response"
            ) from e
        if not isinstance(data, list):
            # Some API versions wrap the page as {"data": [...], "total_count": n}
            data = data.get("data", []) if isinstance(data, dict) else []
        return data


def _upstream_message(response) -> str:
    """Best-effort error text from a provider error response."""
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    errors = body.get("errors") if isinstance(body, dict) else None
    if errors:
        first = errors[0] if isinstance(errors, list) else errors
        if isinstance(first, dict):
            return first.get("long_message") or first.get("message") or str(first)
        return str(first)
    return str(body)
