"""Management CLI commands, driven through click's CliRunner."""

import pytest
from click.testing import CliRunner

from beerstock.db.seed import DEMO_BEERS
from beerstock.manage import cli
from beerstock.repositories.beer_repository import BeerRepository
from tests.fixtures.domain_fixtures import make_beer


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def stored_beer(db_session):
    return BeerRepository(db_session).save(make_beer(id=None, quantity=10, max=50))


def test_create_tables_command(runner, db_session):
    result = runner.invoke(cli, ["create-tables"])

    assert result.exit_code == 0
    assert "Tables created." in result.output


def test_seed_inserts_demo_catalog_once(runner, db_session):
    first = runner.invoke(cli, ["seed"])
    second = runner.invoke(cli, ["seed"])

    assert first.exit_code == 0
    assert f"Seeded {len(DEMO_BEERS)} beer(s)." in first.output
    assert "Seeded 0 beer(s)." in second.output
    assert len(BeerRepository(db_session).find_all()) == len(DEMO_BEERS)


def test_list_with_empty_catalog(runner, db_session):
    result = runner.invoke(cli, ["list"])

    assert result.exit_code == 0
    assert "No beers registered." in result.output


def test_list_prints_one_line_per_beer(runner, stored_beer):
    result = runner.invoke(cli, ["list"])

    assert result.exit_code == 0
    assert f"{stored_beer.id}\tBrahma\tAmbev\tLAGER\t10/50" in result.output


def test_increment_updates_stock(runner, stored_beer):
    result = runner.invoke(cli, ["increment", str(stored_beer.id), "15"])

    assert result.exit_code == 0
    assert "Brahma: 25/50" in result.output


def test_increment_above_max_fails_with_message(runner, stored_beer):
    result = runner.invoke(cli, ["increment", str(stored_beer.id), "41"])

    assert result.exit_code == 1
    assert "exceeds the max stock capacity: 41" in result.output


def test_decrement_below_zero_fails_with_message(runner, stored_beer):
    result = runner.invoke(cli, ["decrement", str(stored_beer.id), "11"])

    assert result.exit_code == 1
    assert "exceeds the available stock: 11" in result.output


def test_decrement_unknown_beer_fails(runner, db_session):
    result = runner.invoke(cli, ["decrement", "99", "1"])

    assert result.exit_code == 1
    assert "Beer with id 99 not found in the system." in result.output


def test_quantity_must_be_positive(runner, stored_beer):
    result = runner.invoke(cli, ["increment", str(stored_beer.id), "0"])

    assert result.exit_code == 2
