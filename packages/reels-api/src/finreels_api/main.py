"""FastAPI app: JSON API to feature (publish), list and like reels."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from finreels_shared import ReelsError, configure_logging

from .config import bootstrap_env, get_settings
from .constants import DEFAULT_HOST
from .routers import reels_router

# Load .env from FINREELS_ENV_FILE if set (local runs). Unset in deployed environments.
bootstrap_env()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build settings once at startup (unless already injected) and configure logging."""
    settings = getattr(app.state, "settings", None)
    if settings is None:
        settings = get_settings()
        app.state.settings = settings
    configure_logging(settings.log_level)
    logger.info(
        "reels-api starting bucket=%s table=%s transcode=%s",
        settings.s3_bucket,
        settings.reels_table_name,
        settings.transcode_enabled,
    )
    yield
    logger.info("reels-api stopped")


app = FastAPI(title="FinReels API", version="0.1.0", lifespan=lifespan)


@app.exception_handler(ReelsError)
async def reels_error_handler(request: Request, exc: ReelsError) -> JSONResponse:
    """Render every service error as {"error": message} with its status code."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed requests are client errors (400) with the same {"error": ...} shape."""
    return JSONResponse(status_code=400, content={"error": _first_validation_message(exc)})


@app.get("/health")
async def health() -> dict:
    """Liveness probe; does not touch any collaborator."""
    return {"status": "ok"}


app.include_router(reels_router)


def run() -> None:
    """Console entrypoint: serve the app with uvicorn on PORT (default 3000)."""
    import uvicorn

    settings = get_settings()
    app.state.settings = settings
    uvicorn.run(app, host=DEFAULT_HOST, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
