"""Proxy configuration with environment variable overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv(override=False)


DEFAULT_GEMINI_TTS_URL = (
    "https://api.generativeai.googleapis.com/v1beta2/speech:generate"
)
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True, slots=True)
class Settings:
    """Voice proxy settings. Override any field via environment variable.

    Built once per process; an empty ``rvc_server_url`` or ``gemini_api_key``
    disables that upstream.
    """

    rvc_server_url: str = os.environ.get("RVC_SERVER_URL", "").strip()
    gemini_api_key: str = os.environ.get("GEMINI_API_KEY", "").strip()
    gemini_tts_url: str = (
        os.environ.get("GEMINI_TTS_URL", "").strip() or DEFAULT_GEMINI_TTS_URL
    )
    upstream_timeout_s: float = float(os.environ.get("UPSTREAM_TIMEOUT_S", "60.0"))
    upstream_connect_timeout_s: float = float(
        os.environ.get("UPSTREAM_CONNECT_TIMEOUT_S", "5.0")
    )
    host: str = os.environ.get("SERVER_HOST", "0.0.0.0")
    port: int = int(os.environ.get("SERVER_PORT", "3000"))
    log_level: str = os.environ.get("LOG_LEVEL", "INFO").upper()

    def __post_init__(self) -> None:
        if self.upstream_timeout_s <= 0.0:
            raise ValueError("UPSTREAM_TIMEOUT_S must be > 0")
        if self.upstream_connect_timeout_s <= 0.0:
            raise ValueError("UPSTREAM_CONNECT_TIMEOUT_S must be > 0")
        if not (1 <= self.port <= 65535):
            raise ValueError("SERVER_PORT must be in [1, 65535]")
        if not self.gemini_tts_url:
            raise ValueError("GEMINI_TTS_URL must not be empty")
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of: {', '.join(_LOG_LEVELS)}")


settings = Settings()
