"""Management commands for the beer stock backend."""

from __future__ import annotations

import logging

import click

from beerstock.core.exceptions import BeerStockError
from beerstock.db.seed import seed_beers
from beerstock.db.session import SessionLocal, create_tables
from beerstock.repositories.beer_repository import BeerRepository
from beerstock.services.beer_service import BeerService

logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


def _with_service(callback):
    session = SessionLocal()
    try:
        return callback(BeerService(BeerRepository(session)))
    finally:
        session.close()


@click.group()
def cli() -> None:
    """Entry point for management commands."""


@cli.command("create-tables")
def create_tables_command() -> None:
    """Create the database schema."""
    create_tables()
    click.echo("Tables created.")


@cli.command("seed")
def seed_command() -> None:
    """Insert the demo beer catalog, skipping names already registered."""
    create_tables()
    created = _with_service(seed_beers)
    click.echo(f"Seeded {len(created)} beer(s).")


@cli.command("list")
def list_command() -> None:
    """Print every beer, one per line."""
    beers = _with_service(lambda service: service.list_all())
    if not beers:
        click.echo("No beers registered.")
        return
    for beer in beers:
        click.echo(
            f"{beer.id}\t{beer.name}\t{beer.brand}\t{beer.type.name}\t{beer.quantity}/{beer.max}"
        )


def _adjust(operation: str, beer_id: int, quantity: int) -> None:
    try:
        beer = _with_service(lambda service: getattr(service, operation)(beer_id, quantity))
    except (BeerStockError, ValueError) as e:
        raise click.ClickException(str(e))
    click.echo(f"{beer.name}: {beer.quantity}/{beer.max}")


@cli.command("increment")
@click.argument("beer_id", type=int)
@click.argument("quantity", type=click.IntRange(min=1))
def increment_command(beer_id: int, quantity: int) -> None:
    """Add QUANTITY units to the stock of BEER_ID."""
    _adjust("increment", beer_id, quantity)


@cli.command("decrement")
@click.argument("beer_id", type=int)
@click.argument("quantity", type=click.IntRange(min=1))
def decrement_command(beer_id: int, quantity: int) -> None:
    """Remove QUANTITY units from the stock of BEER_ID."""
    _adjust("decrement", beer_id, quantity)


if __name__ == "__main__":
    cli()
