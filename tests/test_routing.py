"""Tests for destination selection."""

from __future__ import annotations

import pytest

from voice_proxy.routing import Destination, select_audio_destination, select_destination


@pytest.mark.parametrize(
    ("mode", "rvc", "gemini", "expected"),
    [
        ("cloned", True, True, Destination.RVC),
        ("cloned", True, False, Destination.RVC),
        ("cloned", False, True, Destination.GEMINI),
        ("cloned", False, False, Destination.NONE),
        ("normal", True, True, Destination.GEMINI),
        ("normal", True, False, Destination.NONE),
        ("normal", False, True, Destination.GEMINI),
        ("normal", False, False, Destination.NONE),
    ],
)
def test_select_destination_table(mode, rvc, gemini, expected):
    assert (
        select_destination(mode, rvc_configured=rvc, gemini_configured=gemini)
        is expected
    )


def test_mode_match_is_exact():
    # Only the literal "cloned" selects the RVC server.
    assert (
        select_destination("Cloned", rvc_configured=True, gemini_configured=True)
        is Destination.GEMINI
    )
    assert (
        select_destination(None, rvc_configured=True, gemini_configured=False)
        is Destination.NONE
    )


def test_audio_has_no_gemini_fallback():
    assert select_audio_destination(rvc_configured=True) is Destination.RVC
    assert select_audio_destination(rvc_configured=False) is Destination.NONE
