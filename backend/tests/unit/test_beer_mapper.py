import pytest

from beerstock.domain.entities import Beer, BeerType
from beerstock.schemas.beer_mapper import BeerMapper
from beerstock.schemas.dtos import BeerDTO
from tests.fixtures.domain_fixtures import make_beer, make_beer_dto


@pytest.fixture
def mapper() -> BeerMapper:
    return BeerMapper()


def test_to_model_copies_every_field(mapper):
    beer = mapper.to_model(make_beer_dto(type=BeerType.STOUT))

    assert isinstance(beer, Beer)
    assert beer == make_beer(type=BeerType.STOUT)


def test_to_dto_copies_every_field(mapper):
    beer_dto = mapper.to_dto(make_beer(id=7, quantity=0))

    assert isinstance(beer_dto, BeerDTO)
    assert beer_dto == make_beer_dto(id=7, quantity=0)


@pytest.mark.parametrize(
    "beer",
    [
        make_beer(),
        make_beer(id=None),
        make_beer(id=42, name="Guinness", brand="Diageo", max=5, quantity=5, type=BeerType.STOUT),
    ],
)
def test_entity_round_trip_is_lossless(mapper, beer):
    assert mapper.to_model(mapper.to_dto(beer)) == beer


def test_to_model_rejects_dto_violating_stock_bound(mapper):
    with pytest.raises(ValueError):
        mapper.to_model(make_beer_dto(quantity=60, max=50))
