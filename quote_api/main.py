# This project was developed with assistance from AI tools.
"""FastAPI application entry point."""

import logging
import uuid
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import Settings, settings
from .core.logging import setup_logging
from .routes import health, products, quote, terms
from .schemas.error import ErrorResponse
from .services.store import init_store

logger = logging.getLogger(__name__)


def _request_id(request: Request) -> str:
    return request.headers.get("x-request-id", str(uuid.uuid4()))


def _error_response(request: Request, status_code: int, detail: str) -> JSONResponse:
    body = ErrorResponse.for_status(
        status_code, detail, _request_id(request), instance=request.url.path
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as RFC 7807 Problem Details."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error_response(request, exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Unparseable bodies are client errors, same as missing fields."""
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        return _error_response(request, 400, str(exc.errors()))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        """Catch-all for unhandled exceptions -- log and return 500."""
        logger.exception("Unhandled exception on %s", request.url.path)
        return _error_response(request, 500, "An unexpected error occurred.")


def create_app(cfg: Settings | None = None) -> FastAPI:
    """Build the application from an explicit Settings object."""
    cfg = cfg or settings

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        """Application startup/shutdown lifecycle."""
        setup_logging(cfg.LOG_LEVEL)
        init_store(cfg)
        logger.info("%s listening on port %s", cfg.APP_NAME, cfg.PORT)
        yield
        logger.info("%s shutting down", cfg.APP_NAME)

    app = FastAPI(
        title="Credit Quote API",
        description="Products, financing terms and weekly payment quotes",
        version="0.1.0",
        debug=cfg.DEBUG,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.ALLOWED_HOSTS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health.router, prefix="/health", tags=["health"])
    app.include_router(products.router, prefix="/api", tags=["products"])
    app.include_router(terms.router, prefix="/api", tags=["terms"])
    app.include_router(quote.router, prefix="/api", tags=["quote"])

    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint"""
        return {"message": f"Welcome to {cfg.APP_NAME} API"}

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve ``app`` with uvicorn on HOST:PORT."""
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
