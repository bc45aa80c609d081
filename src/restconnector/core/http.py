"""Transport collaborator for restconnector."""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from restconnector.config.settings import get_settings
from restconnector.errors.types import TransportError
from restconnector.models import RequestDescriptor
from restconnector.models import TransportResponse

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Sends one request descriptor.

    Implementations return the full response on success, may return
    None when nothing came back, and raise TransportError otherwise.
    """

    async def send(self, descriptor: RequestDescriptor) -> TransportResponse | None: ...


def get_timeout_config() -> httpx.Timeout:
    """Get timeout configuration from settings."""
    fetch = get_settings().fetch
    return httpx.Timeout(fetch.timeout, connect=fetch.connect_timeout)


class HttpxTransport:
    """Transport backed by httpx.AsyncClient.

    Usage:
        async with HttpxTransport() as transport:
            response = await transport.send(descriptor)
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: httpx.Timeout | float | None = None,
    ) -> None:
        self._client = client
        self._owns_client = client is None
        self._timeout = timeout

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            limits = httpx.Limits(
                max_connections=20,
                max_keepalive_connections=5,
            )
            self._client = httpx.AsyncClient(
                timeout=self._timeout if self._timeout is not None else get_timeout_config(),
                limits=limits,
                follow_redirects=True,
            )
        return self._client

    async def send(self, descriptor: RequestDescriptor) -> TransportResponse:
        """Send a descriptor and return the full response.

        Raises:
            TransportError: On non-2xx status or network failure
        """
        client = self._get_client()
        try:
            response = await client.request(
                descriptor.method,
                descriptor.url,
                headers=descriptor.headers,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                e.response.status_code, e.response.reason_phrase or str(e)
            ) from e
        except httpx.TimeoutException as e:
            raise TransportError(522, "Connection timed out.") from e
        except httpx.HTTPError as e:
            logger.debug("Request to %s failed: %s", descriptor.url, e)
            raise TransportError(None, str(e) or type(e).__name__) from e

        return TransportResponse(
            status_code=response.status_code,
            body=response.text,
            headers=dict(response.headers),
        )

    async def aclose(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> HttpxTransport:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
