"""
Domain entities - Pure business logic, no framework dependencies.

Entities here are the shapes the service layer reasons about. They know
nothing about SQLAlchemy rows or HTTP payloads; repositories and mappers
convert to and from them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class BeerType(str, Enum):
    """Beer style tag."""

    LAGER = "LAGER"
    MALZBIER = "MALZBIER"
    WITBIER = "WITBIER"
    WEISS = "WEISS"
    ALE = "ALE"
    IPA = "IPA"
    STOUT = "STOUT"

    @classmethod
    def parse(cls, value) -> "BeerType":
        """Accept an enum member or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Invalid beer type: {value!r}")
        try:
            return cls[value.strip().upper()]
        except KeyError:
            allowed = ", ".join(member.name for member in cls)
            raise ValueError(
                f"Invalid beer type: {value!r}. Allowed values: {allowed}"
            ) from None


@dataclass
class Beer:
    """Domain entity for a beer kept in stock.

    ``quantity`` is the current stock and ``max`` the most the catalog
    allows for this beer. Only the quantity changes after creation.
    """

    name: str = ""
    brand: str = ""
    max: int = 0
    quantity: int = 0
    type: BeerType = BeerType.LAGER
    id: Optional[int] = None

    def __post_init__(self):
        """Validate business rules."""
        if self.quantity < 0:
            raise ValueError("Quantity cannot be negative")
        if self.quantity > self.max:
            raise ValueError(
                f"Quantity {self.quantity} exceeds the max stock capacity {self.max}"
            )
