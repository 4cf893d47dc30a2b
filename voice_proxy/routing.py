"""Destination selection for synthesis requests.

Every combination of (cloned mode, RVC configured, Gemini configured) is
listed explicitly so the fallback order is readable from the table alone.
"""

from __future__ import annotations

from enum import Enum

CLONED_MODE = "cloned"


class Destination(str, Enum):
    RVC = "rvc"
    GEMINI = "gemini"
    NONE = "none"


# (mode == "cloned", rvc_configured, gemini_configured) -> destination
_TEXT_ROUTES: dict[tuple[bool, bool, bool], Destination] = {
    (True, True, True): Destination.RVC,
    (True, True, False): Destination.RVC,
    (True, False, True): Destination.GEMINI,
    (True, False, False): Destination.NONE,
    (False, True, True): Destination.GEMINI,
    (False, True, False): Destination.NONE,
    (False, False, True): Destination.GEMINI,
    (False, False, False): Destination.NONE,
}


def select_destination(
    mode: object, *, rvc_configured: bool, gemini_configured: bool
) -> Destination:
    """Pick the upstream for a JSON text request."""
    key = (mode == CLONED_MODE, bool(rvc_configured), bool(gemini_configured))
    return _TEXT_ROUTES[key]


def select_audio_destination(*, rvc_configured: bool) -> Destination:
    """Audio uploads can only go to the RVC server; there is no fallback."""
    return Destination.RVC if rvc_configured else Destination.NONE
