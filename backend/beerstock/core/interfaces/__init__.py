from .service_interface import BeerServiceInterface

__all__ = ["BeerServiceInterface"]
