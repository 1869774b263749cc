from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from release_sync import __version__
from release_sync.core.config import Settings, get_settings
from release_sync.core.container import ApplicationContainer
from release_sync.core.logging import configure_logging
from release_sync.domain.releases import (
    AssetNotFoundError,
    InvalidSignatureError,
    ReleaseNotFoundError,
)
from release_sync.interfaces.http.routers import create_api_router, health, webhooks

logger = logging.getLogger(__name__)

RELEASES_PATH = "/releases"


@asynccontextmanager
async def lifespan(app: FastAPI):
    container: ApplicationContainer = app.state.container
    await container.startup()
    try:
        yield
    finally:
        await container.shutdown()


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ReleaseNotFoundError)
    @app.exception_handler(AssetNotFoundError)
    async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(status_code=404, content={"error": str(exc)})

    @app.exception_handler(InvalidSignatureError)
    async def signature_handler(request: Request, exc: InvalidSignatureError) -> JSONResponse:
        return JSONResponse(status_code=401, content={"success": False, "error": str(exc)})

    @app.exception_handler(Exception)
    async def unhandled_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error serving %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.project_name,
        description="Mirrors GitHub release assets and serves them back through a read API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = ApplicationContainer(settings=settings)
    if settings is not get_settings():
        app.dependency_overrides[get_settings] = lambda: settings

    _register_exception_handlers(app)

    app.include_router(webhooks.router, tags=["webhooks"])
    app.include_router(health.router, tags=["health"])
    app.include_router(create_api_router(settings.api_prefix))

    releases_root = settings.api_prefix.rstrip("/") + RELEASES_PATH

    @app.api_route(
        "/{full_path:path}",
        methods=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD"],
        include_in_schema=False,
    )
    async def fallback(full_path: str) -> PlainTextResponse:
        path = "/" + full_path
        if path == releases_root or path.startswith(releases_root + "/"):
            return PlainTextResponse("Invalid API endpoint", status_code=404)
        return PlainTextResponse(settings.project_name)

    return app


app = create_app()
