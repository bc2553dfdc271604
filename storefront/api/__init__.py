# storefront/api/__init__.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from storefront.api.responses import failure
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def register_exception_handlers(app: FastAPI):
    # zly typ w body (np. price="abc") -> 400 w kopercie zamiast 422
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        details = "; ".join(
            f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg')}"
            for err in exc.errors()
        )
        return failure(400, "Invalid request payload", details)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return failure(500, "Internal server error", str(exc))
