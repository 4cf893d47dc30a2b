"""Configuration validation tests."""

from __future__ import annotations

import dataclasses

import pytest

from voice_proxy.config import DEFAULT_GEMINI_TTS_URL, Settings


def test_settings_reject_non_positive_timeout() -> None:
    with pytest.raises(ValueError, match="UPSTREAM_TIMEOUT_S must be > 0"):
        Settings(upstream_timeout_s=0.0)


def test_settings_reject_non_positive_connect_timeout() -> None:
    with pytest.raises(ValueError, match="UPSTREAM_CONNECT_TIMEOUT_S must be > 0"):
        Settings(upstream_connect_timeout_s=-1.0)


def test_settings_reject_bad_port() -> None:
    with pytest.raises(ValueError, match="SERVER_PORT"):
        Settings(port=70000)


def test_settings_reject_unknown_log_level() -> None:
    with pytest.raises(ValueError, match="LOG_LEVEL"):
        Settings(log_level="CHATTY")


def test_settings_reject_empty_gemini_url() -> None:
    with pytest.raises(ValueError, match="GEMINI_TTS_URL must not be empty"):
        Settings(gemini_tts_url="")


def test_default_gemini_url() -> None:
    assert DEFAULT_GEMINI_TTS_URL == (
        "https://api.generativeai.googleapis.com/v1beta2/speech:generate"
    )


def test_settings_are_immutable() -> None:
    settings = Settings(rvc_server_url="http://rvc.local")
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.rvc_server_url = "http://other.local"  # type: ignore[misc]
