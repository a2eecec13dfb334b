"""
Data Transfer Objects (DTOs) and validation schemas.

DTOs are what crosses the service boundary. Controllers build them from
request payloads and call ``validate()`` before handing them to a service.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from beerstock.domain.entities import BeerType

NAME_MAX_LENGTH = 200
BRAND_MAX_LENGTH = 200
MAX_STOCK_LIMIT = 500
QUANTITY_LIMIT = 100


def _require_int(payload: Mapping[str, Any], field: str) -> int:
    value = payload.get(field)
    if value is None:
        raise ValueError(f"{field} is required")
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field} must be an integer")
    return value


def _require_text(value: Optional[str], field: str, max_length: int) -> None:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError(f"{field} is required")
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    if len(value) > max_length:
        raise ValueError(f"{field} must be at most {max_length} characters")


@dataclass
class BeerDTO:
    """DTO for beer requests and responses."""

    name: str
    brand: str
    max: int
    quantity: int
    type: BeerType
    id: Optional[int] = None

    def validate(self) -> None:
        """Validate the request data."""
        _require_text(self.name, "name", NAME_MAX_LENGTH)
        _require_text(self.brand, "brand", BRAND_MAX_LENGTH)
        if not 1 <= self.max <= MAX_STOCK_LIMIT:
            raise ValueError(f"max must be between 1 and {MAX_STOCK_LIMIT}")
        if not 0 <= self.quantity <= QUANTITY_LIMIT:
            raise ValueError(f"quantity must be between 0 and {QUANTITY_LIMIT}")
        if self.quantity > self.max:
            raise ValueError("quantity cannot be greater than max")
        if not isinstance(self.type, BeerType):
            raise ValueError(f"Invalid beer type: {self.type!r}")

    @classmethod
    def from_dict(cls, payload: Optional[Mapping[str, Any]]) -> "BeerDTO":
        """Parse a JSON payload. Raises ValueError on missing or mistyped fields."""
        if not isinstance(payload, Mapping):
            raise ValueError("Request body must be a JSON object")
        if payload.get("type") is None:
            raise ValueError("type is required")
        beer_id = payload.get("id")
        if beer_id is not None and (isinstance(beer_id, bool) or not isinstance(beer_id, int)):
            raise ValueError("id must be an integer")
        return cls(
            id=beer_id,
            name=payload.get("name"),
            brand=payload.get("brand"),
            max=_require_int(payload, "max"),
            quantity=_require_int(payload, "quantity"),
            type=BeerType.parse(payload["type"]),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "brand": self.brand,
            "max": self.max,
            "quantity": self.quantity,
            "type": self.type.name,
        }


@dataclass
class QuantityDTO:
    """DTO for stock increment/decrement requests."""

    quantity: int

    def validate(self) -> None:
        if not 1 <= self.quantity <= QUANTITY_LIMIT:
            raise ValueError(f"quantity must be between 1 and {QUANTITY_LIMIT}")

    @classmethod
    def from_dict(cls, payload: Optional[Mapping[str, Any]]) -> "QuantityDTO":
        if not isinstance(payload, Mapping):
            raise ValueError("Request body must be a JSON object")
        return cls(quantity=_require_int(payload, "quantity"))
