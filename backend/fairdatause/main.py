from __future__ import annotations

import logging
import time
import traceback

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from fairdatause.api import contractors, intake, ping
from fairdatause.config import Settings
from fairdatause.config import settings as default_settings
from fairdatause.database import Database
from fairdatause.errors import FairDataUseError
from fairdatause.services.reddit_verifier import RedditVerifier


logger = logging.getLogger("fairdatause")


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _log_startup(settings: Settings) -> None:
    def status(value: object) -> str:
        return "configured" if value else "NOT SET"

    logger.info("Starting %s (ENV=%s)", settings.app_name, settings.environment)
    logger.info("- %s: %s", settings.database_url_env_var, status(settings.active_database_url))
    logger.info("- REDDIT_CLIENT_ID: %s", status(settings.reddit_client_id))
    logger.info("- REDDIT_CLIENT_SECRET: %s", status(settings.reddit_client_secret))


def _register_error_handlers(app: FastAPI, settings: Settings) -> None:
    @app.exception_handler(FairDataUseError)
    async def handle_known_error(request: Request, exc: FairDataUseError) -> JSONResponse:
        log = logger.error if exc.status_code >= 500 else logger.info
        log("%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        content = {"success": False, "message": f"Internal server error: {exc}"}
        if settings.development_mode:
            content["error"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        return JSONResponse(status_code=500, content=content)


def create_app(settings: Settings | None = None, verifier: RedditVerifier | None = None) -> FastAPI:
    settings = settings or default_settings
    _configure_logging(settings)

    app = FastAPI(title=settings.app_name)
    app.state.settings = settings
    app.state.database = Database(settings)
    app.state.verifier = verifier or RedditVerifier(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("%s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
        return response

    @app.on_event("startup")
    def on_startup() -> None:
        _log_startup(settings)

    @app.on_event("shutdown")
    def on_shutdown() -> None:
        app.state.database.dispose()

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    _register_error_handlers(app, settings)

    app.include_router(intake.router, prefix="/api", tags=["intake"])
    app.include_router(contractors.router, prefix="/api", tags=["contractors"])
    app.include_router(ping.router, prefix="/api", tags=["ping"])
    return app


app = create_app()
