"""Shared plumbing for upstream synthesis clients."""

from __future__ import annotations

import logging
from typing import Any

import httpx

log = logging.getLogger(__name__)


class UpstreamError(RuntimeError):
    """Raised when an upstream returns a non-2xx response."""

    def __init__(self, provider: str, status_code: int, text: str) -> None:
        super().__init__(f"{provider} returned {status_code}: {text[:200]}")
        self.provider = provider
        self.status_code = status_code
        self.text = text


class UpstreamClient:
    """Thin async wrapper around a single ``httpx.AsyncClient``.

    ``start()`` opens a pooled client for the life of the app. Calls made
    without it (e.g. from tests that skip the lifespan) use a one-shot client.
    """

    provider = "upstream"

    def __init__(
        self,
        *,
        timeout_s: float,
        connect_timeout_s: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = httpx.Timeout(timeout_s, connect=connect_timeout_s)
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def start(self) -> None:
        if self._client is None:
            self._client = self._new_client()

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._timeout, transport=self._transport)

    async def _post(self, url: str, **kwargs: Any) -> bytes:
        """POST to ``url`` and return the body bytes.

        Raises:
            UpstreamError: if the upstream answers with a non-2xx status.
            httpx.HTTPError: on transport failures and timeouts.
        """
        if self._client is not None:
            resp = await self._client.post(url, **kwargs)
        else:
            async with self._new_client() as client:
                resp = await client.post(url, **kwargs)

        if not resp.is_success:
            log.error("%s error: %d %s", self.provider, resp.status_code, resp.text)
            raise UpstreamError(self.provider, resp.status_code, resp.text)

        log.info(
            "%s returned %d bytes (%s)",
            self.provider,
            len(resp.content),
            resp.headers.get("content-type", "unknown"),
        )
        return resp.content
