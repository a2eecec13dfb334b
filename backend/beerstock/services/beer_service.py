"""
Beer stock service for business logic.

This service:
- Keeps business rules separate from controllers and repositories
- Depends on abstractions (IBeerRepository, IBeerMapper), not concrete implementations
- Holds no state between calls; each operation is one lookup and at most one write

Business Rules:
- Beer names are unique
- Stock stays within [0, max] on every increment and decrement
"""

import logging
from typing import List, Optional

from beerstock.core.exceptions import (
    BeerAlreadyRegisteredError,
    BeerNotFoundError,
    BeerStockExceededError,
    BeerStockInsufficientError,
)
from beerstock.core.interfaces.service_interface import BeerServiceInterface
from beerstock.domain.entities import Beer
from beerstock.domain.interfaces import IBeerMapper, IBeerRepository
from beerstock.schemas.beer_mapper import BeerMapper
from beerstock.schemas.dtos import BeerDTO

logger = logging.getLogger(__name__)


class BeerService(BeerServiceInterface):
    def __init__(self, repository: IBeerRepository, mapper: Optional[IBeerMapper] = None):
        self.repository = repository
        self.mapper = mapper or BeerMapper()

    def create_beer(self, beer_dto: BeerDTO) -> BeerDTO:
        """Register a new beer. Raises BeerAlreadyRegisteredError on a duplicate name."""
        self._verify_if_is_already_registered(beer_dto.name)
        beer = self.mapper.to_model(beer_dto)
        beer.id = None  # ids are assigned by the repository
        saved = self.repository.save(beer)
        logger.info(
            "Beer created",
            extra={"context": {"beer_id": saved.id, "name": saved.name}},
        )
        return self.mapper.to_dto(saved)

    def find_by_name(self, name: str) -> BeerDTO:
        found = self.repository.find_by_name(name)
        if found is None:
            raise BeerNotFoundError(name)
        return self.mapper.to_dto(found)

    def list_all(self) -> List[BeerDTO]:
        return [self.mapper.to_dto(beer) for beer in self.repository.find_all()]

    def delete_by_id(self, beer_id: int) -> None:
        self._verify_if_exists(beer_id)
        self.repository.delete_by_id(beer_id)
        logger.info("Beer deleted", extra={"context": {"beer_id": beer_id}})

    def increment(self, beer_id: int, quantity_to_increment: int) -> BeerDTO:
        """Add stock. The max is inclusive: reaching it exactly is allowed."""
        self._require_positive(quantity_to_increment)
        beer = self._verify_if_exists(beer_id)
        new_quantity = beer.quantity + quantity_to_increment
        if new_quantity > beer.max:
            logger.warning(
                "Stock increment rejected",
                extra={
                    "context": {
                        "beer_id": beer_id,
                        "current": beer.quantity,
                        "requested": quantity_to_increment,
                        "max": beer.max,
                    }
                },
            )
            raise BeerStockExceededError(beer_id, quantity_to_increment)
        return self._store_quantity(beer, new_quantity)

    def decrement(self, beer_id: int, quantity_to_decrement: int) -> BeerDTO:
        """Remove stock. Zero is an allowed floor."""
        self._require_positive(quantity_to_decrement)
        beer = self._verify_if_exists(beer_id)
        new_quantity = beer.quantity - quantity_to_decrement
        if new_quantity < 0:
            logger.warning(
                "Stock decrement rejected",
                extra={
                    "context": {
                        "beer_id": beer_id,
                        "current": beer.quantity,
                        "requested": quantity_to_decrement,
                    }
                },
            )
            raise BeerStockInsufficientError(beer_id, quantity_to_decrement)
        return self._store_quantity(beer, new_quantity)

    def _store_quantity(self, beer: Beer, new_quantity: int) -> BeerDTO:
        previous = beer.quantity
        beer.quantity = new_quantity
        saved = self.repository.save(beer)
        logger.info(
            "Beer stock updated",
            extra={
                "context": {
                    "beer_id": saved.id,
                    "previous": previous,
                    "quantity": saved.quantity,
                }
            },
        )
        return self.mapper.to_dto(saved)

    def _verify_if_is_already_registered(self, name: str) -> None:
        if self.repository.find_by_name(name) is not None:
            logger.warning(
                "Duplicate beer name rejected", extra={"context": {"name": name}}
            )
            raise BeerAlreadyRegisteredError(name)

    def _verify_if_exists(self, beer_id: int) -> Beer:
        beer = self.repository.find_by_id(beer_id)
        if beer is None:
            raise BeerNotFoundError(beer_id)
        return beer

    @staticmethod
    def _require_positive(quantity: int) -> None:
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise ValueError("Quantity must be a positive integer")
