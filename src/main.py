"""FastAPI application entry point.

Run with: uvicorn src.main:app --port 8000
      or: python -m src.main
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config.settings import Settings, settings
from src.cb_account.api.router import router as account_router
from src.cb_account.domain.repository import CoinStoreProtocol, store_errors
from src.cb_account.infrastructure.registry import build_store
from src.cb_common.errors import AppError, InternalError
from src.cb_common.logging_config import configure_logging
from src.cb_common.response import error_json, error_response
from src.cb_gateway.middleware.request_log import RequestLogMiddleware
from src.cb_gateway.middleware.strip_slashes import StripSlashesMiddleware

logger = logging.getLogger("cb.app")

BANNER = r"""
   ___  ___ ___  _  _   ___   _   _
  / __|/ _ \_ _|| \| | | _ ) /_\ | |
 | (__| (_) | | | .` | | _ \/ _ \| |__
  \___|\___/___||_|\_| |___/_/ \_\____|
"""


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: prepare the store. StoreUnavailableError aborts startup."""
    with store_errors("initialize"):
        await app.state.store.initialize()
    logger.info("store initialized: %s", type(app.state.store).__name__)
    yield


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.http_status >= 500:
        logger.error(
            "internal error code=%d path=%s detail=%s",
            exc.code,
            request.url.path,
            exc.detail,
            exc_info=exc.__cause__ or exc,
        )
    return error_json(exc)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework errors (unknown route, wrong method) in the same envelope."""
    resp = error_response(exc.status_code, str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=resp.model_dump(),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled error path=%s", request.url.path, exc_info=exc)
    return error_json(InternalError(repr(exc)))


def create_app(
    store: CoinStoreProtocol | None = None,
    app_settings: Settings = settings,
) -> FastAPI:
    """Build the application.

    The store is picked here, once, from STORE_BACKEND unless one is passed
    in. Middleware is listed innermost first: the slash stripper runs before
    the request logger so logged paths are already normalized.
    """
    configure_logging(app_settings.LOG_LEVEL)

    app = FastAPI(
        title=app_settings.APP_NAME,
        version=app_settings.APP_VERSION,
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else build_store(app_settings)

    app.add_middleware(RequestLogMiddleware)
    app.add_middleware(StripSlashesMiddleware)

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(account_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok", "version": app_settings.APP_VERSION}

    return app


app = create_app()


def run() -> None:
    """Serve ``app`` on HOST:PORT using the uvloop event loop."""
    configure_logging(settings.LOG_LEVEL)
    logger.info("Starting %s....%s", settings.APP_NAME, BANNER)
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        loop="uvloop",
        log_config=None,
    )


if __name__ == "__main__":
    run()
