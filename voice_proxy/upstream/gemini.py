"""Client for the Gemini text-to-speech endpoint."""

from __future__ import annotations

from typing import Any

import httpx

from voice_proxy.upstream.base import UpstreamClient

AUDIO_ENCODING = "LINEAR16"
SAMPLE_RATE_HZ = 24000


class GeminiTTSClient(UpstreamClient):
    """Bearer-authenticated JSON TTS call returning raw audio bytes."""

    provider = "Gemini TTS"

    def __init__(
        self,
        url: str,
        api_key: str,
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
        self._url = url
        self._api_key = api_key.strip()

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    @staticmethod
    def build_payload(text: Any) -> dict:
        # No voice/languageCode: the request language is not sent upstream.
        return {
            "input": {"text": text},
            "audio": {"encoding": AUDIO_ENCODING, "sampleRateHertz": SAMPLE_RATE_HZ},
        }

    async def synthesize(self, text: Any) -> bytes:
        return await self._post(
            self._url,
            json=self.build_payload(text),
            headers={"Authorization": f"Bearer {self._api_key}"},
        )
