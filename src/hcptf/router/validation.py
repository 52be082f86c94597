"""
Resource-existence validation for routed addresses.

Routing never calls these. Callers that want to confirm an organization or
workspace before dispatch (the CLI with ``router.validation`` enabled, an
interactive shell) ask the router's validator explicitly and decide whether
a ``ResourceNotFoundError`` is fatal or advisory.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol, runtime_checkable
from urllib.parse import quote

from hcptf.config import DEFAULT_ADDRESS
from hcptf.exceptions import ResourceNotFoundError

logger = logging.getLogger(__name__)


@runtime_checkable
class ResourceValidator(Protocol):
    """Capability interface for resource-existence checks.

    Both methods return None when the resource exists and raise
    ``ResourceNotFoundError`` otherwise. ``timeout`` bounds the lookup in
    seconds; None means the implementation's default.
    """

    def organization_exists(self, name: str, timeout: Optional[float] = None) -> None: ...

    def workspace_exists(
        self, org: str, name: str, timeout: Optional[float] = None
    ) -> None: ...


class NullValidator:
    """Validator that accepts every name. Used when no API client is configured."""

    def organization_exists(self, name: str, timeout: Optional[float] = None) -> None:
        return None

    def workspace_exists(
        self, org: str, name: str, timeout: Optional[float] = None
    ) -> None:
        return None


class APIResourceValidator:
    """
    Validator backed by the HCP Terraform / Terraform Enterprise REST API.

    Example::

        with APIResourceValidator("https://app.terraform.io", token) as validator:
            validator.workspace_exists("acme", "prod", timeout=5)
    """

    def __init__(
        self,
        address: str = DEFAULT_ADDRESS,
        token: Optional[str] = None,
        timeout: float = 30.0,
    ):
        """
        Initialize the validator.

        Args:
            address: API base address (scheme and host)
            token: API token sent as a bearer token
            timeout: Default request timeout in seconds
        """
        self.address = address.rstrip("/")
        self.token = token
        self.timeout = timeout
        self._session = None

    def _get_default_headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/vnd.api+json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _get_session(self):
        """Get or create requests session with default headers."""
        if self._session is None:
            import requests

            self._session = requests.Session()
            self._session.headers.update(self._get_default_headers())
        return self._session

    def _get(self, path: str, timeout: Optional[float]) -> None:
        """GET an API path, raising requests errors on any failure."""
        url = f"{self.address}/api/v2/{path}"
        logger.debug(f"GET {url}")
        response = self._get_session().get(
            url, timeout=self.timeout if timeout is None else timeout
        )
        response.raise_for_status()

    def organization_exists(self, name: str, timeout: Optional[float] = None) -> None:
        import requests

        try:
            self._get(f"organizations/{quote(name, safe='')}", timeout)
        except requests.RequestException as e:
            logger.warning(f"Organization lookup failed for '{name}': {e}")
            raise ResourceNotFoundError("organization", name, cause=e) from e

    def workspace_exists(
        self, org: str, name: str, timeout: Optional[float] = None
    ) -> None:
        import requests

        path = f"organizations/{quote(org, safe='')}/workspaces/{quote(name, safe='')}"
        try:
            self._get(path, timeout)
        except requests.RequestException as e:
            logger.warning(f"Workspace lookup failed for '{org}/{name}': {e}")
            raise ResourceNotFoundError("workspace", name, organization=org, cause=e) from e

    def close(self) -> None:
        """Close the HTTP session."""
        if self._session:
            self._session.close()
            self._session = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
