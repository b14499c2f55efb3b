"""Main FastAPI application for the Riot match gateway."""

from contextlib import asynccontextmanager
from typing import Annotated, Any, Dict

import structlog
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from riot_kernel import __version__
from riot_kernel.core import GatewayError, PlatformRegistry, get_global_settings
from riot_kernel.core.dependencies import get_platform_registry
from riot_kernel.core.logging import setup_logging
from riot_kernel.core.riot_api import RiotAPIClient, RiotAPIError, RiotAPIPipeline
from riot_kernel.core.riot_api.cache import TTLCache
from riot_kernel.features.matches import router as matches_router
from riot_kernel.middleware import RequestLoggingMiddleware

settings = get_global_settings()
setup_logging(settings.log_level, json_logs=settings.log_json)
logger = structlog.get_logger(__name__)


def error_response(status_code: int, error: Exception, message: str) -> JSONResponse:
    """Single structured error body: error class plus message."""
    return JSONResponse(
        status_code=status_code,
        content={"error": type(error).__name__, "message": message},
    )


async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    logger.info(
        "Rejected match request",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=exc.message,
    )
    return error_response(exc.status_code, exc, exc.message)


async def riot_api_error_handler(request: Request, exc: RiotAPIError) -> JSONResponse:
    logger.warning(
        "Riot API request failed",
        path=request.url.path,
        error_type=type(exc).__name__,
        status_code=exc.status_code,
        error=exc.message,
    )
    response = error_response(exc.status_code or 502, exc, exc.message)
    if exc.retry_after:
        response.headers["Retry-After"] = str(int(exc.retry_after))
    return response


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    return error_response(400, exc, message)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Starting up Riot match gateway",
        default_platform=settings.default_platform,
    )
    if not settings.riot_api_key:
        logger.warning(
            "RIOT_API_KEY not configured! Requests to Riot will be rejected.",
            hint="Get your key from https://developer.riotgames.com",
        )

    client = RiotAPIClient(
        api_key=settings.riot_api_key,
        timeout=settings.request_timeout,
        max_retries=settings.max_retries,
    )
    cache = TTLCache(maxsize=settings.cache_maxsize, ttl=settings.cache_ttl)
    app.state.pipeline = RiotAPIPipeline(client, cache=cache)
    await client.start_session()
    try:
        yield
    finally:
        logger.info("Shutting down Riot match gateway")
        await client.close()
        app.state.pipeline = None


def create_app() -> FastAPI:
    """Create the FastAPI application."""
    app = FastAPI(
        title="Riot Match API Proxy",
        description="""
    Read-only proxy for the Riot match-v4 API.

    Every endpoint accepts an optional `platform` tag (e.g. `NA1`). When it is
    omitted the configured default platform (`DEFAULT_PLATFORM`) is used.

    Errors are returned as `{"error": <class>, "message": <text>}`. Errors
    from the Riot API keep their status code.
    """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        openapi_tags=[
            {"name": "match", "description": "Match API (match-v4)."},
            {"name": "health", "description": "Health check endpoint."},
        ],
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_exception_handler(GatewayError, gateway_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RiotAPIError, riot_api_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]

    app.add_middleware(GZipMiddleware, minimum_size=settings.gzip_minimum_size)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(matches_router)

    @app.get("/health", tags=["health"])
    async def health_check(
        registry: Annotated[PlatformRegistry, Depends(get_platform_registry)],
    ) -> Dict[str, Any]:
        """
        Health check endpoint.

        Returns service status, version, the configured default platform and
        response cache statistics.
        """
        default = registry.default_platform()
        pipeline = getattr(app.state, "pipeline", None)
        return {
            "status": "healthy",
            "version": __version__,
            "default_platform": default.tag if default else None,
            "cache": pipeline.cache.stats() if pipeline is not None else None,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "riot_kernel.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
