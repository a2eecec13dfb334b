import pytest

from beerstock.core.exceptions import (
    BeerAlreadyRegisteredError,
    BeerNotFoundError,
    BeerStockError,
    BeerStockExceededError,
    BeerStockInsufficientError,
)


def test_already_registered_message_names_the_beer():
    error = BeerAlreadyRegisteredError("Brahma")

    assert error.message == "Beer with name Brahma already registered in the system."
    assert str(error) == error.message


@pytest.mark.parametrize(
    "key, expected",
    [
        ("Brahma", "Beer with name Brahma not found in the system."),
        (7, "Beer with id 7 not found in the system."),
    ],
)
def test_not_found_message_depends_on_key_kind(key, expected):
    error = BeerNotFoundError(key)

    assert error.key == key
    assert error.message == expected


def test_stock_exceeded_message_reports_requested_quantity():
    error = BeerStockExceededError(1, 45)

    assert error.beer_id == 1
    assert error.quantity == 45
    assert error.message == (
        "Beer with id 1 to increment informed exceeds the max stock capacity: 45"
    )


def test_stock_insufficient_is_a_stock_exceeded_error():
    error = BeerStockInsufficientError(2, 11)

    assert isinstance(error, BeerStockExceededError)
    assert isinstance(error, BeerStockError)
    assert error.quantity == 11
    assert "to decrement informed exceeds the available stock: 11" in error.message
