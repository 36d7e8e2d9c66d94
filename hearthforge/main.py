import logging
from importlib.metadata import version as pkg_version

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from hearthforge.api import decks_router, health_router
from hearthforge.config import settings
from hearthforge.models.failure import ApiResponse, KnownError

logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    version=pkg_version("hearthforge"),
    debug=settings.debug,
)

app.include_router(decks_router)
app.include_router(health_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(KnownError)
async def known_error_handler(_request: Request, exc: KnownError) -> JSONResponse:
    """Turn a KnownError into a known_failure envelope."""
    logger.info("Request failed: %s (%s)", exc.message, exc.kind.value)
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response().model_dump(mode="json"),
    )


@app.exception_handler(Exception)
async def unknown_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Turn any unclassified error into an unknown_failure envelope."""
    logger.exception("Unhandled error: %s", exc)
    return JSONResponse(
        status_code=500,
        content=ApiResponse.unknown_failure(type(exc).__name__).model_dump(mode="json"),
    )
