"""
Domain model for Product.

A product is the only entity held by the registry. The required-field rule is
presence-only: ``name`` and ``category`` must be non-empty, ``price`` and
``inStock`` must merely be supplied. Types are not checked.
"""
from dataclasses import dataclass, field, replace
from typing import Any, List, Mapping, Optional
from uuid import uuid4

from .errors import DomainValidationError


# Wire names of the fields every write must carry
REQUIRED_FIELDS = ("name", "price", "category", "inStock")

# Fields that must be truthy, not merely present
_NON_EMPTY_FIELDS = ("name", "category")

# Attributes an update is allowed to overwrite; ``id`` is never among them
MUTABLE_FIELDS = ("name", "description", "price", "category", "in_stock")

MISSING_FIELDS_MESSAGE = "Missing required product fields"


def new_product_id() -> str:
    """Generate a collision-resistant product identifier."""
    return str(uuid4())


def missing_required_fields(payload: Mapping[str, Any]) -> List[str]:
    """
    Return the required fields absent from a wire payload.

    Args:
        payload: Decoded JSON request body.

    Returns:
        Names of the missing fields, in declaration order. Empty if valid.
    """
    missing = []
    for name in REQUIRED_FIELDS:
        if name in _NON_EMPTY_FIELDS:
            if not payload.get(name):
                missing.append(name)
        elif name not in payload:
            missing.append(name)
    return missing


@dataclass
class Product:
    """
    Product record.

    Attributes:
        name: Display name, non-empty.
        price: Price as supplied by the client.
        category: Category name, non-empty; matched case-insensitively.
        in_stock: Stock flag (``inStock`` on the wire).
        description: Optional free text.
        id: Opaque identifier, immutable after creation.
    """
    name: str
    price: Any
    category: str
    in_stock: Any
    description: Optional[str] = None
    id: str = field(default_factory=new_product_id)

    def __post_init__(self) -> None:
        """Validate domain invariants after initialization."""
        missing = [
            wire for wire, attr in (("name", self.name), ("category", self.category))
            if not attr
        ]
        if missing:
            raise DomainValidationError(MISSING_FIELDS_MESSAGE, fields=missing)

    def merge(self, changes: Mapping[str, Any]) -> "Product":
        """
        Return a copy with the allow-listed fields in ``changes`` applied.

        Unknown keys, including ``id``, are ignored.

        Args:
            changes: Attribute names (snake_case) mapped to new values.

        Raises:
            DomainValidationError: If the result breaks the required-field rule.
        """
        allowed = {k: v for k, v in changes.items() if k in MUTABLE_FIELDS}
        return replace(self, **allowed)

    def to_dict(self) -> dict:
        """
        Convert to wire representation.

        ``description`` is omitted when unset.
        """
        data = {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "category": self.category,
            "inStock": self.in_stock,
        }
        if self.description is not None:
            data["description"] = self.description
        return data
