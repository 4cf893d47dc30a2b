"""Tests for VoiceProxy upstream wiring and destination lookup."""

from __future__ import annotations

from voice_proxy.config import Settings
from voice_proxy.proxy import VoiceProxy
from voice_proxy.routing import Destination


def test_blank_settings_disable_both_upstreams():
    proxy = VoiceProxy(Settings(rvc_server_url="  ", gemini_api_key=" "))
    assert proxy.debug_snapshot() == {
        "rvc_configured": False,
        "gemini_configured": False,
    }
    assert proxy.destination_for("cloned") is Destination.NONE
    assert proxy.audio_destination() is Destination.NONE


def test_configured_flags_follow_settings():
    proxy = VoiceProxy(Settings(rvc_server_url="http://rvc.local/", gemini_api_key="k"))
    assert proxy.rvc.configured
    assert proxy.gemini.configured
    assert proxy.rvc.synthesize_url == "http://rvc.local/synthesize"
    assert proxy.destination_for("cloned") is Destination.RVC
    assert proxy.destination_for("normal") is Destination.GEMINI
    assert proxy.audio_destination() is Destination.RVC


def test_non_string_mode_is_not_cloned():
    proxy = VoiceProxy(Settings(rvc_server_url="http://rvc.local", gemini_api_key="k"))
    assert proxy.destination_for(1) is Destination.GEMINI
    assert proxy.destination_for(None) is Destination.GEMINI
