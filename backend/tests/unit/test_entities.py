import pytest

from beerstock.domain.entities import Beer, BeerType


class TestBeer:
    def test_quantity_equal_to_max_is_valid(self):
        beer = Beer(name="Brahma", brand="Ambev", max=10, quantity=10)

        assert beer.quantity == beer.max
        assert beer.type is BeerType.LAGER
        assert beer.id is None

    def test_negative_quantity_is_rejected(self):
        with pytest.raises(ValueError, match="negative"):
            Beer(name="Brahma", brand="Ambev", max=10, quantity=-1)

    def test_quantity_above_max_is_rejected(self):
        with pytest.raises(ValueError, match="max stock capacity"):
            Beer(name="Brahma", brand="Ambev", max=10, quantity=11)


class TestBeerType:
    @pytest.mark.parametrize("raw", ["IPA", "ipa", " Ipa ", BeerType.IPA])
    def test_parse_accepts_names_case_insensitively(self, raw):
        assert BeerType.parse(raw) is BeerType.IPA

    @pytest.mark.parametrize("raw", ["PILSEN", "", 3, None])
    def test_parse_rejects_unknown_values(self, raw):
        with pytest.raises(ValueError, match="Invalid beer type"):
            BeerType.parse(raw)
