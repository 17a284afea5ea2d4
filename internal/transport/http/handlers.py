"""
FastAPI HTTP Handlers for Product Registry API.

Implements REST endpoints for product CRUD operations.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Path, Query, Request, status
from fastapi.responses import PlainTextResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from config.settings import Settings
from internal.transport.http.dto import (
    MessageResponse,
    ProductListResponse,
    ProductPayload,
    ProductResponse,
)
from internal.transport.http.gates import (
    get_json_payload,
    get_settings,
    require_api_key,
    require_product_fields,
)
from internal.usecase.create_product import (
    CreateProductInput,
    CreateProductUseCase,
    ProductRepository,
)
from internal.usecase.delete_product import DeleteProductUseCase
from internal.usecase.get_product import GetProductUseCase
from internal.usecase.list_products import (
    DEFAULT_PAGE,
    ListProductsInput,
    ListProductsUseCase,
)
from internal.usecase.update_product import (
    UpdateProductInput,
    UpdateProductUseCase,
)
from pkg.logger.logger import get_logger

logger = get_logger(__name__)


router = APIRouter(prefix="/api", tags=["products"])
system_router = APIRouter(tags=["system"])

WELCOME_MESSAGE = "Welcome to the Product API! Go to /api/products to see all products."

ERROR_RESPONSES = {
    401: {"model": MessageResponse, "description": "Invalid API key"},
    400: {"model": MessageResponse, "description": "Missing required product fields"},
    404: {"model": MessageResponse, "description": "Product not found"},
}


class Dependencies:
    """Container for handler dependencies, stored on ``app.state``."""

    def __init__(self, repository: ProductRepository) -> None:
        self.repository = repository
        self.list_use_case = ListProductsUseCase(repository)
        self.get_use_case = GetProductUseCase(repository)
        self.create_use_case = CreateProductUseCase(repository)
        self.update_use_case = UpdateProductUseCase(repository)
        self.delete_use_case = DeleteProductUseCase(repository)


def set_dependencies(app: FastAPI, repository: ProductRepository) -> Dependencies:
    """
    Wire use cases around ``repository`` and attach them to ``app``.

    Called once by the application factory.
    """
    deps = Dependencies(repository)
    app.state.deps = deps
    return deps


def get_dependencies(request: Request) -> Dependencies:
    """Get the dependency container of the running app."""
    deps = getattr(request.app.state, "deps", None)
    if deps is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service not initialized",
        )
    return deps


def parse_positive_int(value: Optional[str], default: int) -> int:
    """
    Parse a query value as a positive integer.

    Missing, non-numeric and non-positive values fall back to ``default``.
    """
    if value is None:
        return default
    try:
        number = int(value.strip())
    except ValueError:
        return default
    return number if number > 0 else default


def _to_response(product) -> ProductResponse:
    return ProductResponse.model_validate(product.to_dict())


# Handlers
@system_router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    """Welcome text."""
    return WELCOME_MESSAGE


@system_router.get("/health")
async def health_check(settings: Settings = Depends(get_settings)) -> dict:
    """Health check endpoint."""
    return {"status": "healthy", "service": settings.APP_NAME}


@system_router.get("/metrics")
async def metrics():
    """Prometheus metrics in text format."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )


@router.get(
    "/products",
    response_model=ProductListResponse,
    response_model_exclude_unset=True,
)
async def list_products(
    category: Optional[str] = Query(None, description="Filter by category (case-insensitive)"),
    search: Optional[str] = Query(None, description="Substring of the product name"),
    page: Optional[str] = Query(None, description="Page number, default 1"),
    limit: Optional[str] = Query(None, description="Items per page"),
    deps: Dependencies = Depends(get_dependencies),
    settings: Settings = Depends(get_settings),
) -> ProductListResponse:
    """
    Get list of products with filters and pagination.

    Malformed ``page`` and ``limit`` values fall back to the defaults.
    """
    result = await deps.list_use_case.execute(
        ListProductsInput(
            category=category,
            search=search,
            page=parse_positive_int(page, DEFAULT_PAGE),
            limit=parse_positive_int(limit, settings.DEFAULT_PAGE_LIMIT),
        )
    )

    return ProductListResponse(
        total=result.total,
        page=result.page,
        limit=result.limit,
        data=[_to_response(p) for p in result.products],
    )


@router.get(
    "/products/{product_id}",
    response_model=ProductResponse,
    response_model_exclude_unset=True,
    responses={404: ERROR_RESPONSES[404]},
)
async def get_product(
    product_id: str = Path(..., description="Product ID"),
    deps: Dependencies = Depends(get_dependencies),
) -> ProductResponse:
    """Get a single product."""
    product = await deps.get_use_case.execute(product_id)
    return _to_response(product)


@router.post(
    "/products",
    response_model=ProductResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_api_key), Depends(require_product_fields)],
    responses={401: ERROR_RESPONSES[401], 400: ERROR_RESPONSES[400]},
)
async def create_product(
    payload: Dict[str, Any] = Depends(get_json_payload),
    deps: Dependencies = Depends(get_dependencies),
) -> ProductResponse:
    """
    Create a new product.

    Unknown body fields are dropped; the ID is generated by the registry.
    """
    body = ProductPayload.model_validate(payload)

    result = await deps.create_use_case.execute(
        CreateProductInput(
            name=body.name,
            description=body.description,
            price=body.price,
            category=body.category,
            in_stock=body.in_stock,
        )
    )

    return _to_response(result.product)


@router.put(
    "/products/{product_id}",
    response_model=ProductResponse,
    response_model_exclude_unset=True,
    dependencies=[Depends(require_api_key), Depends(require_product_fields)],
    responses=ERROR_RESPONSES,
)
async def update_product(
    product_id: str = Path(..., description="Product ID"),
    payload: Dict[str, Any] = Depends(get_json_payload),
    deps: Dependencies = Depends(get_dependencies),
) -> ProductResponse:
    """
    Update a product.

    Known fields present in the body overwrite the stored values; the ID
    cannot be changed.
    """
    changes = ProductPayload.model_validate(payload).model_dump(exclude_unset=True)

    product = await deps.update_use_case.execute(
        UpdateProductInput(product_id=product_id, changes=changes)
    )

    return _to_response(product)


@router.delete(
    "/products/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[Depends(require_api_key)],
    responses={401: ERROR_RESPONSES[401], 404: ERROR_RESPONSES[404]},
)
async def delete_product(
    product_id: str = Path(..., description="Product ID"),
    deps: Dependencies = Depends(get_dependencies),
) -> Response:
    """Delete a product."""
    await deps.delete_use_case.execute(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
