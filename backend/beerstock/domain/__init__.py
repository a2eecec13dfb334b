"""
Domain package - Pure business logic layer.

This package contains:
- entities.py: Domain entities with business rules
- interfaces.py: Repository and mapper contracts
"""

from .entities import Beer, BeerType
from .interfaces import IBeerMapper, IBeerReader, IBeerRepository, IBeerWriter

__all__ = [
    # Domain entities
    "Beer",
    "BeerType",
    # Repository interfaces
    "IBeerRepository",
    # Segregated interfaces
    "IBeerReader",
    "IBeerWriter",
    "IBeerMapper",
]
