"""FastAPI application factory for the options responder."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse

from octocatalog import __version__
from octocatalog.catalog import Catalog, load_catalog
from octocatalog.config import Settings
from octocatalog.errors import RequestError
from octocatalog.pipeline import RequestPipeline

logger = logging.getLogger(__name__)

# Consistent JSON error shape: {"error": "<code>", "detail": "<message>"}
_STATUS_TO_ERROR = {
    400: "bad_request",
    401: "unauthorized",
    404: "not_found",
    405: "method_not_allowed",
    415: "unsupported_media_type",
    500: "internal_error",
}


def create_app(
    settings: Settings | None = None, catalog: Catalog | None = None
) -> FastAPI:
    """Create and configure the options responder application.

    *settings* defaults to :class:`Settings` read from the environment and
    *catalog* to the file named by ``settings.config_file``.  Either failing
    raises :class:`~octocatalog.errors.ConfigError` before any route is
    served.
    """
    if settings is None:
        settings = Settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if settings.debug:
        logging.getLogger("octocatalog").setLevel(logging.DEBUG)

    if catalog is None:
        catalog = load_catalog(settings.config_file)

    app = FastAPI(title="octocatalog", version=__version__)

    # Read-only after this point; handlers never write app.state
    app.state.settings = settings
    app.state.catalog = catalog
    app.state.pipeline = RequestPipeline(
        signing_secret=settings.signing_secret,
        catalog=catalog,
        tolerance=settings.signature_tolerance,
    )

    @app.exception_handler(RequestError)
    async def request_error_handler(request: Request, exc: RequestError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(
                "%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc
            )
        else:
            logger.warning(
                "%s %s rejected (%d): %s",
                request.method,
                request.url.path,
                exc.status_code,
                exc,
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.error, "detail": exc.detail},
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        logger.warning(
            "%s %s rejected (%d)", request.method, request.url.path, exc.status_code
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": _STATUS_TO_ERROR.get(exc.status_code, "error"),
                "detail": exc.detail,
            },
            headers=getattr(exc, "headers", None),
        )

    from octocatalog.routes.health import router as health_router
    from octocatalog.routes.options import router as options_router

    app.include_router(health_router)
    app.include_router(options_router)

    return app
