from beerstock.domain.entities import Beer
from beerstock.domain.interfaces import IBeerMapper

from .dtos import BeerDTO


class BeerMapper(IBeerMapper):
    """Field-for-field conversion between Beer entities and BeerDTOs."""

    def to_model(self, beer_dto: BeerDTO) -> Beer:
        return Beer(
            id=beer_dto.id,
            name=beer_dto.name,
            brand=beer_dto.brand,
            max=beer_dto.max,
            quantity=beer_dto.quantity,
            type=beer_dto.type,
        )

    def to_dto(self, beer: Beer) -> BeerDTO:
        return BeerDTO(
            id=beer.id,
            name=beer.name,
            brand=beer.brand,
            max=beer.max,
            quantity=beer.quantity,
            type=beer.type,
        )
