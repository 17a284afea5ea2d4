"""
Request gates for mutating product routes.

Each gate is a FastAPI dependency that either returns normally or raises an
``HTTPException`` that ends the request. Routes list them in order:
authentication first, then field validation.
"""

import hmac
import json
from typing import Any, Dict, Optional

from fastapi import Depends, Header, HTTPException, Request, status

from config.settings import Settings
from internal.domain.product import MISSING_FIELDS_MESSAGE, missing_required_fields
from pkg.logger.logger import get_logger

logger = get_logger(__name__)


API_KEY_HEADER = "x-api-key"
UNAUTHORIZED_MESSAGE = "Unauthorized: Invalid API key"
MALFORMED_JSON_MESSAGE = "Malformed JSON body"


def get_settings(request: Request) -> Settings:
    """Settings attached to the application."""
    return request.app.state.settings


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not valid JSON
    raise ValueError(f"Invalid JSON constant: {name}")


async def get_json_payload(request: Request) -> Dict[str, Any]:
    """
    Decode the request body as a JSON object.

    An empty body or a JSON value that is not an object decodes to ``{}``.

    Raises:
        HTTPException: 400 if the body is not valid JSON.
    """
    body = await request.body()
    if not body.strip():
        return {}
    try:
        payload = json.loads(body, parse_constant=_reject_constant)
    except ValueError:
        logger.warning("Malformed JSON body", path=request.url.path)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=MALFORMED_JSON_MESSAGE,
        )
    return payload if isinstance(payload, dict) else {}


async def require_api_key(
    request: Request,
    x_api_key: Optional[str] = Header(None, alias=API_KEY_HEADER),
    settings: Settings = Depends(get_settings),
) -> None:
    """
    Reject the request unless ``x-api-key`` equals the configured secret.

    With no secret configured every request is rejected.

    Raises:
        HTTPException: 401 on a missing or wrong key.
    """
    expected = settings.API_KEY
    if (
        not x_api_key
        or not expected
        or not hmac.compare_digest(x_api_key.encode(), expected.encode())
    ):
        logger.warning(
            "Rejected request with invalid API key",
            method=request.method,
            path=request.url.path,
            key_present=bool(x_api_key),
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=UNAUTHORIZED_MESSAGE,
        )


async def require_product_fields(
    request: Request,
    payload: Dict[str, Any] = Depends(get_json_payload),
) -> None:
    """
    Reject the request unless name, price, category and inStock are present.

    Raises:
        HTTPException: 400 when a required field is missing.
    """
    missing = missing_required_fields(payload)
    if missing:
        logger.warning(
            "Rejected product payload",
            path=request.url.path,
            missing_fields=missing,
        )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=MISSING_FIELDS_MESSAGE,
        )
