"""Voice proxy server entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from voice_proxy import __version__
from voice_proxy.config import settings
from voice_proxy.proxy import VoiceProxy
from voice_proxy.routers.voice import http_error_handler
from voice_proxy.routers.voice import router as voice_router

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open/close the upstream HTTP clients."""
    proxy = VoiceProxy(settings)
    await proxy.start()
    app.state.proxy = proxy

    if not (proxy.rvc.configured or proxy.gemini.configured):
        log.warning(
            "Neither RVC_SERVER_URL nor GEMINI_API_KEY is set; "
            "every synthesis request will fail"
        )

    yield

    await proxy.close()


app = FastAPI(
    title="Voice Proxy",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(voice_router)
app.add_exception_handler(StarletteHTTPException, http_error_handler)


@app.get("/health")
async def health():
    """Liveness check plus which upstreams are configured."""
    proxy: VoiceProxy | None = getattr(app.state, "proxy", None)
    if proxy is None:
        return JSONResponse({"status": "starting"}, status_code=503)
    return JSONResponse({"status": "ok", **proxy.debug_snapshot()})


def main() -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)-8s %(name)s  %(message)s",
    )
    uvicorn.run(
        "voice_proxy.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
