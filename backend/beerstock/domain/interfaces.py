"""
Abstract interfaces for beer persistence and mapping.

These interfaces define contracts without implementation details,
enabling dependency injection and substitutable test doubles.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional

from .entities import Beer

if TYPE_CHECKING:
    from beerstock.schemas.dtos import BeerDTO


class IBeerReader(ABC):
    """Interface for beer read operations."""

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[Beer]:
        """Get beer by its unique name."""
        pass

    @abstractmethod
    def find_by_id(self, beer_id: int) -> Optional[Beer]:
        """Get beer by ID."""
        pass

    @abstractmethod
    def find_all(self) -> List[Beer]:
        """Get all beers ordered by ID."""
        pass


class IBeerWriter(ABC):
    """Interface for beer write operations."""

    @abstractmethod
    def save(self, beer: Beer) -> Beer:
        """Insert a new beer (no ID) or update an existing one."""
        pass

    @abstractmethod
    def delete_by_id(self, beer_id: int) -> None:
        """Delete a beer."""
        pass


class IBeerRepository(IBeerReader, IBeerWriter):
    """Complete beer repository interface combining read/write operations."""

    pass


class IBeerMapper(ABC):
    """Interface for converting between domain entities and transfer objects."""

    @abstractmethod
    def to_model(self, beer_dto: "BeerDTO") -> Beer:
        """Convert a transfer object into a domain entity."""
        pass

    @abstractmethod
    def to_dto(self, beer: Beer) -> "BeerDTO":
        """Convert a domain entity into a transfer object."""
        pass
