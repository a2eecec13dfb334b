from .beer_mapper import BeerMapper
from .dtos import BeerDTO, QuantityDTO

__all__ = ["BeerDTO", "QuantityDTO", "BeerMapper"]
