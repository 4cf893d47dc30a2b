"""VoiceProxy: configured upstream clients plus destination lookup."""

from __future__ import annotations

import logging

import httpx

from voice_proxy.config import Settings
from voice_proxy.routing import Destination, select_audio_destination, select_destination
from voice_proxy.upstream import GeminiTTSClient, RVCClient

log = logging.getLogger(__name__)


class VoiceProxy:
    """Owns one client per upstream for the lifetime of the app."""

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self.rvc = RVCClient(
            settings.rvc_server_url,
            timeout_s=settings.upstream_timeout_s,
            connect_timeout_s=settings.upstream_connect_timeout_s,
            transport=transport,
        )
        self.gemini = GeminiTTSClient(
            settings.gemini_tts_url,
            settings.gemini_api_key,
            timeout_s=settings.upstream_timeout_s,
            connect_timeout_s=settings.upstream_connect_timeout_s,
            transport=transport,
        )

    async def start(self) -> None:
        await self.rvc.start()
        await self.gemini.start()
        log.info(
            "Voice proxy ready (rvc=%s, gemini=%s)",
            "on" if self.rvc.configured else "off",
            "on" if self.gemini.configured else "off",
        )

    async def close(self) -> None:
        await self.rvc.close()
        await self.gemini.close()

    def destination_for(self, mode: object) -> Destination:
        return select_destination(
            mode,
            rvc_configured=self.rvc.configured,
            gemini_configured=self.gemini.configured,
        )

    def audio_destination(self) -> Destination:
        return select_audio_destination(rvc_configured=self.rvc.configured)

    def debug_snapshot(self) -> dict:
        return {
            "rvc_configured": self.rvc.configured,
            "gemini_configured": self.gemini.configured,
        }
