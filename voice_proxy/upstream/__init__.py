"""Upstream synthesis clients."""

from voice_proxy.upstream.base import UpstreamClient, UpstreamError
from voice_proxy.upstream.gemini import GeminiTTSClient
from voice_proxy.upstream.rvc import RVCClient

__all__ = [
    "GeminiTTSClient",
    "RVCClient",
    "UpstreamClient",
    "UpstreamError",
]
