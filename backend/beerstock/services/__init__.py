from .beer_service import BeerService

__all__ = ["BeerService"]
