"""Client for the voice-cloning (RVC) synthesis server."""

from __future__ import annotations

from typing import Any

import httpx

from voice_proxy.upstream.base import UpstreamClient

SYNTHESIZE_PATH = "/synthesize"
DEFAULT_AUDIO_CONTENT_TYPE = "application/octet-stream"


class RVCClient(UpstreamClient):
    """Talks to ``POST {base}/synthesize`` in either JSON or raw-audio form."""

    provider = "RVC"

    def __init__(
        self,
        base_url: str,
        *,
        timeout_s: float,
        connect_timeout_s: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(
            timeout_s=timeout_s,
            connect_timeout_s=connect_timeout_s,
            transport=transport,
        )
        self._base_url = base_url.strip().rstrip("/")

    @property
    def configured(self) -> bool:
        return bool(self._base_url)

    @property
    def synthesize_url(self) -> str:
        return f"{self._base_url}{SYNTHESIZE_PATH}"

    async def synthesize_text(self, text: Any, language: Any) -> bytes:
        """Synthesize ``text`` in the cloned voice. ``mode`` is not forwarded."""
        return await self._post(
            self.synthesize_url,
            json={"text": text, "language": language},
        )

    async def forward_audio(self, body: bytes, content_type: str | None) -> bytes:
        """Forward an audio or multipart upload unchanged."""
        return await self._post(
            self.synthesize_url,
            content=body,
            headers={"Content-Type": content_type or DEFAULT_AUDIO_CONTENT_TYPE},
        )
