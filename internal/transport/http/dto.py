"""
Data Transfer Objects for Product Registry API.

Contains Pydantic models for request/response shapes. Field types are
deliberately loose: validation is presence-only and happens in the gates.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProductPayload(BaseModel):
    """
    Known product fields of a create/update body.

    Unknown keys (``id`` included) are dropped. ``model_dump(exclude_unset=True)``
    yields only the fields the client actually sent.
    """

    name: Any = Field(None, description="Product name")
    description: Any = Field(None, description="Product description")
    price: Any = Field(None, description="Product price")
    category: Any = Field(None, description="Category name")
    in_stock: Any = Field(None, alias="inStock", description="Is product in stock")

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "name": "Laptop",
                "description": "High-performance laptop with 16GB RAM",
                "price": 1200,
                "category": "electronics",
                "inStock": True,
            }
        },
    )


class ProductResponse(BaseModel):
    """Product as returned by the API."""

    id: str = Field(..., description="Product ID")
    name: Any = Field(..., description="Product name")
    description: Optional[Any] = Field(None, description="Product description")
    price: Any = Field(..., description="Product price")
    category: Any = Field(..., description="Category name")
    in_stock: Any = Field(..., alias="inStock", description="Is product in stock")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "1",
                "name": "Laptop",
                "description": "High-performance laptop with 16GB RAM",
                "price": 1200,
                "category": "electronics",
                "inStock": True,
            }
        },
    )


class ProductListResponse(BaseModel):
    """Page of products with the filtered total."""

    total: int = Field(..., description="Number of products matching the filters")
    page: int = Field(..., description="Current page number")
    limit: int = Field(..., description="Items per page")
    data: List[ProductResponse] = Field(..., description="Products on this page")


class MessageResponse(BaseModel):
    """Error response body."""

    message: str
