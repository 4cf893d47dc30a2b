"""POST /api/voice — route a synthesis request to the RVC server or Gemini TTS."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from voice_proxy.proxy import VoiceProxy
from voice_proxy.routing import Destination
from voice_proxy.schemas import ErrorBody, SynthesisRequest
from voice_proxy.upstream import UpstreamError

log = logging.getLogger(__name__)

router = APIRouter()

VOICE_PATH = "/api/voice"
AUDIO_MEDIA_TYPE = "audio/wav"

RVC_DETAILS_LIMIT = 200
GEMINI_DETAILS_LIMIT = 300
INTERNAL_DETAILS_LIMIT = 300

NO_AUDIO_UPSTREAM = (
    "This endpoint received audio, but RVC_SERVER_URL is not set. "
    "Set RVC_SERVER_URL to forward audio."
)


def _error(
    status_code: int,
    error: str,
    details: str | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        ErrorBody(error=error, details=details).as_content(),
        status_code=status_code,
        headers=headers,
    )


def _audio(data: bytes) -> Response:
    return Response(content=data, media_type=AUDIO_MEDIA_TYPE, status_code=200)


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> Response:
    """Turn any non-POST method on the voice path into the JSON 405 body."""
    if exc.status_code == 405 and request.url.path == VOICE_PATH:
        return _error(405, "Only POST allowed", headers=exc.headers)
    return await http_exception_handler(request, exc)


@router.post(VOICE_PATH)
async def voice(request: Request) -> Response:
    """Synthesize speech from JSON text, or forward an audio upload.

    ``application/json`` bodies carry ``{text, language, mode}``; anything
    else is treated as audio (raw or multipart) and sent to the RVC server
    byte-for-byte.
    """
    try:
        proxy: VoiceProxy = request.app.state.proxy
        content_type = request.headers.get("content-type") or ""
        raw = await request.body()

        if "application/json" in content_type.lower():
            return await _synthesize_text(proxy, raw)
        return await _forward_audio(proxy, raw, content_type)
    except Exception as exc:
        log.exception("Voice request failed")
        return _error(
            500, "Internal server error", details=str(exc)[:INTERNAL_DETAILS_LIMIT]
        )


async def _synthesize_text(proxy: VoiceProxy, raw: bytes) -> Response:
    # Invalid UTF-8 becomes U+FFFD instead of failing the request.
    body = json.loads(raw.decode("utf-8", errors="replace") or "{}")
    req = SynthesisRequest.from_json(body)

    if not req.text:
        return _error(400, "Missing text field in JSON body")

    destination = proxy.destination_for(req.mode)

    if destination is Destination.RVC:
        try:
            audio = await proxy.rvc.synthesize_text(req.text, req.language)
        except UpstreamError as exc:
            return _error(502, "RVC synth failed", details=exc.text[:RVC_DETAILS_LIMIT])
        return _audio(audio)

    if destination is Destination.GEMINI:
        try:
            audio = await proxy.gemini.synthesize(req.text)
        except UpstreamError as exc:
            return _error(
                502, "Gemini TTS failed", details=exc.text[:GEMINI_DETAILS_LIMIT]
            )
        return _audio(audio)

    return _error(500, "No RVC_SERVER_URL or GEMINI_API_KEY configured")


async def _forward_audio(proxy: VoiceProxy, raw: bytes, content_type: str) -> Response:
    if proxy.audio_destination() is Destination.NONE:
        return _error(400, NO_AUDIO_UPSTREAM)

    try:
        audio = await proxy.rvc.forward_audio(raw, content_type or None)
    except UpstreamError as exc:
        return _error(
            502, "RVC audio processing failed", details=exc.text[:RVC_DETAILS_LIMIT]
        )
    return _audio(audio)
