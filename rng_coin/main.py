"""
RNG Coin Main Application Entry Point
FastAPI-based coin flipping service.
"""

import sys
from http import HTTPStatus
from pathlib import Path
from urllib.parse import unquote

# Add parent directory to path so imports work when running directly
if __name__ == "__main__":
    sys.path.insert(0, str(Path(__file__).parent.parent))

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.background import BackgroundTask
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
import uvicorn

from rng_coin.core.logger import init_logging, get_logger
from rng_coin.core.exceptions import RequestError, InternalError, error_body
from rng_coin.config import settings
from rng_coin.routers import pages, rng

# Initialize logging first
init_logging(
    level=settings.logging.level,
    log_to_file=settings.logging.log_to_file,
    formatter=settings.logging.formatter,
    log_file_path=settings.logging.get_log_path(),
)
logger = get_logger("main")
access_logger = get_logger("access")


def status_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""


# ==================== Request Logging Middleware ====================


def log_request(request: Request, status_code: int):
    """Write one access record for a finished request."""
    client = request.client.host if request.client else "-"
    # ASGI already hands us the percent-decoded path
    path = request.scope["path"]
    if request.url.query:
        path = f"{path}?{unquote(request.url.query)}"
    phrase = status_phrase(status_code)

    access_logger.info(
        f"{client} {request.method} {path} {status_code} {phrase}",
        extra={
            "client": client,
            "method": request.method,
            "path": path,
            "status_code": status_code,
            "status_text": phrase,
        },
    )


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Log every request once its response has been sent."""

    async def dispatch(self, request: Request, call_next):
        try:
            response = await call_next(request)
        except Exception:
            # The server error handler answers with a 500 after we re-raise
            log_request(request, 500)
            raise

        response.background = BackgroundTask(
            log_request, request, response.status_code
        )
        return response


# ==================== Exception Handlers ====================


async def request_error_handler(request: Request, exc: RequestError):
    """Format a typed request error as the JSON error body."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Format framework errors (unmatched route, wrong method) the same way."""
    name = status_phrase(exc.status_code).replace(" ", "") or "HTTPError"
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(name, exc.status_code, str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def global_exception_handler(request: Request, exc: Exception):
    """Handle unhandled exceptions without leaking their details."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


# ==================== Application Setup ====================


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.server.name,
        docs_url="/docs" if settings.server.debug else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.server.debug else None,
    )

    app.add_middleware(RequestLogMiddleware)

    app.add_exception_handler(RequestError, request_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.include_router(pages.router)
    app.include_router(rng.router)

    return app


app = create_app()

logger.info(f"Application '{settings.server.name}' initialized")
logger.info(f"Debug mode: {settings.server.debug}")


# ==================== Main Entry Point ====================


def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="RNG Coin Server")
    parser.add_argument("--host", default=settings.server.host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.server.port, help="Port to listen on")
    parser.add_argument(
        "--reload",
        action="store_true",
        default=settings.server.debug,
        help="Reload on code changes (defaults to debug mode)",
    )
    args = parser.parse_args(argv)

    logger.info(f"Listening on {args.host}:{args.port}")
    uvicorn.run(
        "rng_coin.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
