"""
vidinfo - FastAPI application entry point.

Serves YouTube video metadata, deciphered media stream URLs and closed
caption tracks.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .client import YoutubeClient
from .config import get_settings
from .routes.api import router

logging.basicConfig(
    level=logging.DEBUG if get_settings().debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: one YoutubeClient shared by all requests."""
    logger.info("vidinfo starting up...")

    settings = get_settings()
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"Resolve timeout: {settings.resolve_timeout}")

    app.state.client = YoutubeClient(settings=settings)

    yield

    logger.info("vidinfo shutting down...")
    await app.state.client.close()


app = FastAPI(
    title="vidinfo",
    description=(
        "Resolves YouTube video metadata, media streams with deciphered "
        "signatures, and closed caption tracks."
    ),
    version="1.0.0",
    lifespan=lifespan,
)

_origins = [o.strip() for o in get_settings().cors_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins if _origins else ["*"],
    allow_credentials=bool(_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api")


@app.get("/", tags=["root"])
async def root():
    return {
        "name": "vidinfo",
        "version": "1.0.0",
        "docs": "/docs",
        "endpoints": {
            "video": "/api/videos/{video_id}",
            "streams": "/api/videos/{video_id}/streams",
            "captions": "/api/videos/{video_id}/captions",
            "channel": "/api/videos/{video_id}/channel",
            "parse": "/api/parse",
            "health": "/api/health",
        },
    }


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "vidinfo.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
