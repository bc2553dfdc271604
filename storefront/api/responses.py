# storefront/api/responses.py
from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from storefront.domain.errors import StorefrontError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def success(message: str, data: Any = None, status_code: int = 200, count: int | None = None) -> JSONResponse:
    body = {"success": True, "message": message}
    if data is not None:
        body["data"] = data
    if count is not None:
        body["count"] = count
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def failure(status_code: int, message: str, error: str | None = None, code: str | None = None) -> JSONResponse:
    body = {"success": False, "message": message}
    if error is not None:
        body["error"] = error
    if code is not None:
        body["code"] = code
    return JSONResponse(status_code=status_code, content=body)


def error_response(exc: Exception, failure_message: str) -> JSONResponse:
    """
    Bledy domeny -> ich kod HTTP i komunikat,
    reszta -> 500 z komunikatem operacji i tekstem wyjatku.
    """
    if isinstance(exc, StorefrontError) and exc.status_code < 500:
        return failure(exc.status_code, exc.message, exc.message, exc.error_code)

    logger.error(f"{failure_message}: {exc}")
    return failure(500, failure_message, str(exc) or type(exc).__name__)
