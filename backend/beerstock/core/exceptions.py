"""
Custom exceptions for the application.

Every domain error carries the key (name or id) that caused it so the
HTTP and CLI layers can render a precise message.
"""

from typing import Union


class BeerStockError(Exception):
    """Base class for beer stock business rule violations."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class BeerAlreadyRegisteredError(BeerStockError):
    """Raised when creating a beer whose name is already in use."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Beer with name {name} already registered in the system.")


class BeerNotFoundError(BeerStockError):
    """Raised when no beer matches the given name or id."""

    def __init__(self, key: Union[str, int]) -> None:
        self.key = key
        if isinstance(key, str):
            message = f"Beer with name {key} not found in the system."
        else:
            message = f"Beer with id {key} not found in the system."
        super().__init__(message)


class BeerStockExceededError(BeerStockError):
    """Raised when an increment would push stock above the beer's max."""

    def __init__(self, beer_id: int, quantity: int, message: str = "") -> None:
        self.beer_id = beer_id
        self.quantity = quantity
        super().__init__(
            message
            or f"Beer with id {beer_id} to increment informed exceeds the max stock capacity: {quantity}"
        )


class BeerStockInsufficientError(BeerStockExceededError):
    """Raised when a decrement would push stock below zero."""

    def __init__(self, beer_id: int, quantity: int) -> None:
        super().__init__(
            beer_id,
            quantity,
            f"Beer with id {beer_id} to decrement informed exceeds the available stock: {quantity}",
        )
