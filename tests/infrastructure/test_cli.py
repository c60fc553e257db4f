"""End-to-end tests for the click CLI against a SQLite file."""

import pytest
from click.testing import CliRunner

from catalog.infrastructure.cli.main import cli


@pytest.fixture
def runner(tmp_path, monkeypatch) -> CliRunner:
    monkeypatch.setenv("CATALOG_DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}")
    monkeypatch.delenv("CATALOG_SQL_ECHO", raising=False)
    monkeypatch.delenv("CATALOG_LOG_LEVEL", raising=False)
    runner = CliRunner()
    result = runner.invoke(cli, ["db", "init"])
    assert result.exit_code == 0, result.output
    return runner


def _add(runner, code="AB12C", country="Bulgaria", price="1.25"):
    return runner.invoke(cli, [
        "product", "add",
        "--code", code,
        "--name", "TestProduct",
        "--country", country,
        "--price", price,
        "--quantity", "100",
        "--description", "Anything for description",
    ])


def test_add_then_show(runner):
    result = _add(runner)
    assert result.exit_code == 0, result.output
    assert "Product 'AB12C' added." in result.output

    result = runner.invoke(cli, ["product", "show", "--code", "AB12C"])
    assert result.exit_code == 0, result.output
    assert "TestProduct" in result.output
    assert "1.25" in result.output


def test_add_invalid_price_lists_violations(runner):
    result = _add(runner, price="-1")
    assert result.exit_code == 1
    assert "Invalid product!" in result.output
    assert "price must be greater than zero" in result.output


def test_add_non_numeric_price(runner):
    result = _add(runner, price="cheap")
    assert result.exit_code == 2
    assert "not a decimal number" in result.output


def test_list_empty_catalog(runner):
    result = runner.invoke(cli, ["product", "list"])
    assert result.exit_code == 1
    assert "No product found." in result.output


def test_search_by_country(runner):
    _add(runner, code="A1", country="Bulgaria")
    _add(runner, code="G1", country="Greece")

    result = runner.invoke(cli, ["product", "search", "--country", "Greece"])

    assert result.exit_code == 0, result.output
    assert "G1" in result.output
    assert "A1" not in result.output


def test_update_keeps_unspecified_fields(runner):
    _add(runner)

    result = runner.invoke(cli, ["product", "update", "--code", "AB12C", "--name", "UPDATED"])
    assert result.exit_code == 0, result.output

    result = runner.invoke(cli, ["product", "show", "--code", "AB12C"])
    assert "UPDATED" in result.output
    assert "Bulgaria" in result.output


def test_delete(runner):
    _add(runner)

    result = runner.invoke(cli, ["product", "delete", "--code", "AB12C"])
    assert result.exit_code == 0, result.output

    result = runner.invoke(cli, ["product", "show", "--code", "AB12C"])
    assert result.exit_code == 1
    assert "No product found with product code: AB12C" in result.output


def test_delete_blank_code(runner):
    result = runner.invoke(cli, ["product", "delete", "--code", "  "])
    assert result.exit_code == 1
    assert "Product code cannot be empty." in result.output


def test_drop_schema(runner):
    result = runner.invoke(cli, ["db", "drop", "--yes"])
    assert result.exit_code == 0, result.output
    assert "Catalog schema dropped." in result.output
