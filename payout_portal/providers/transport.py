"""
HTTP transport for the Mural Pay API.

Every request carries the bearer API key. Two optional headers are added per
call:

  - ``transfer-api-key``: the elevated credential, only for payout execution.
  - ``on-behalf-of``: the account a privileged operation acts for.

Single attempt, no timeout, no caching. Any non-2xx response becomes an
ApiRequestError carrying enough context to diagnose the failure.
"""

import logging
from typing import Any, Optional

import httpx

from payout_portal.config import Settings

logger = logging.getLogger("payout_portal.transport")


class TransportError(Exception):
    """A request to the API could not be completed or understood."""


class ApiRequestError(TransportError):
    """The API answered with a non-2xx status."""

    def __init__(self, method: str, path: str, status_code: int, body: str):
        super().__init__(f"{method} {path} failed: {status_code} {body}")
        self.method = method
        self.path = path
        self.status_code = status_code
        self.body = body


class MuralPayTransport:
    """Sends authenticated JSON requests and returns parsed JSON bodies."""

    def __init__(self, config: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._config = config
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            timeout=None,
            transport=transport,
        )

    def build_headers(
        self,
        use_transfer_key: bool = False,
        on_behalf_of: Optional[str] = None,
    ) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._config.api_key}",
            "accept": "application/json",
        }
        if use_transfer_key and self._config.transfer_api_key:
            headers["transfer-api-key"] = self._config.transfer_api_key
        if on_behalf_of:
            headers["on-behalf-of"] = on_behalf_of
        return headers

    async def send(
        self,
        method: str,
        path: str,
        body: Any = None,
        *,
        use_transfer_key: bool = False,
        on_behalf_of: Optional[str] = None,
    ) -> Any:
        """
        Send one request and return the parsed JSON body.

        Args:
            method: HTTP method ("GET" or "POST").
            path: API path, e.g. "/api/accounts".
            body: JSON-serializable request body, if any.
            use_transfer_key: Attach the elevated transfer credential.
            on_behalf_of: Account id for the on-behalf-of header.

        Returns:
            The decoded JSON value, or None for an empty body.

        Raises:
            ApiRequestError: On a non-2xx response.
            TransportError: On network failure or an unparseable body.
        """
        headers = self.build_headers(use_transfer_key, on_behalf_of)
        try:
            response = await self._client.request(
                method,
                path,
                json=body,
                headers=headers,
            )
        except httpx.HTTPError as e:
            logger.error("API request %s %s could not be sent: %s", method, path, e)
            raise TransportError(f"{method} {path} failed: {e}") from e

        if not response.is_success:
            logger.error(
                "API request failed | url=%s method=%s status=%d response=%s",
                response.request.url,
                method,
                response.status_code,
                response.text[:500],
            )
            raise ApiRequestError(method, path, response.status_code, response.text)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise TransportError(f"{method} {path} returned invalid JSON: {e}") from e

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "MuralPayTransport":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
