"""
Database seeding functions.

Seeding is idempotent: beers whose name is already registered are skipped.
"""

from typing import List

from beerstock.core.exceptions import BeerAlreadyRegisteredError
from beerstock.core.logging_config import get_logger
from beerstock.domain.entities import BeerType
from beerstock.schemas.dtos import BeerDTO
from beerstock.services.beer_service import BeerService

logger = get_logger(__name__)

DEMO_BEERS = [
    BeerDTO(name="Brahma", brand="Ambev", max=50, quantity=10, type=BeerType.LAGER),
    BeerDTO(name="Colorado Indica", brand="Colorado", max=40, quantity=12, type=BeerType.IPA),
    BeerDTO(name="Erdinger Weissbier", brand="Erdinger", max=30, quantity=6, type=BeerType.WEISS),
    BeerDTO(name="Hoegaarden", brand="AB InBev", max=30, quantity=8, type=BeerType.WITBIER),
    BeerDTO(name="Guinness Draught", brand="Diageo", max=25, quantity=5, type=BeerType.STOUT),
]


def seed_beers(service: BeerService) -> List[BeerDTO]:
    """Insert the demo catalog. Returns the beers actually created."""
    created = []
    for beer_dto in DEMO_BEERS:
        try:
            created.append(service.create_beer(beer_dto))
        except BeerAlreadyRegisteredError:
            logger.info(
                "Seed beer already registered, skipping",
                extra={"context": {"name": beer_dto.name}},
            )
    return created
