"""
Global exception handlers.

Every client-visible error is a JSON object with a single ``message`` field.
Unexpected exceptions never leak their details.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from internal.domain.errors import DomainValidationError, ProductNotFoundError
from internal.domain.product import MISSING_FIELDS_MESSAGE
from pkg.logger.logger import get_logger, get_request_id

logger = get_logger(__name__)


NOT_FOUND_MESSAGE = "Product not found"
INVALID_REQUEST_MESSAGE = "Invalid request"
INTERNAL_ERROR_MESSAGE = "Internal Server Error"
REQUEST_ID_HEADER = "X-Request-ID"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            "Request validation failed",
            path=request.url.path,
            errors=exc.errors(),
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": INVALID_REQUEST_MESSAGE},
        )

    @app.exception_handler(ProductNotFoundError)
    async def not_found_handler(request: Request, exc: ProductNotFoundError):
        logger.info("Product not found", product_id=exc.product_id)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": NOT_FOUND_MESSAGE},
        )

    @app.exception_handler(DomainValidationError)
    async def domain_validation_handler(
        request: Request, exc: DomainValidationError,
    ):
        logger.warning(
            "Product failed validation",
            path=request.url.path,
            missing_fields=exc.fields,
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": MISSING_FIELDS_MESSAGE},
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            method=request.method,
            path=request.url.path,
            error=repr(exc),
            exc_info=exc,
        )
        # Rendered outside the request middleware, so the ID is set here
        request_id = getattr(request.state, "request_id", None) or get_request_id()
        return JSONResponse(
            status_code=error_status(exc),
            content={"message": INTERNAL_ERROR_MESSAGE},
            headers={REQUEST_ID_HEADER: request_id} if request_id else None,
        )


def error_status(exc: Exception) -> int:
    """
    HTTP status carried by an arbitrary exception.

    Uses ``status_code`` or ``status`` when it is an int in the 4xx/5xx
    range, 500 otherwise.
    """
    for attr in ("status_code", "status"):
        value = getattr(exc, attr, None)
        if isinstance(value, int) and not isinstance(value, bool) and 400 <= value <= 599:
            return value
    return status.HTTP_500_INTERNAL_SERVER_ERROR
