"""Tests for the click command line, on a throwaway SQLite file."""

import pytest
from click.testing import CliRunner

from warehouse.infrastructure.cli.main import cli

GTIN = "1300000000000"


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("WAREHOUSE_DATABASE_URL", f"sqlite:///{tmp_path / 'cli.db'}")
    return CliRunner()


def _invoke(runner, *args):
    result = runner.invoke(cli, list(args))
    assert result.exit_code == 0, result.output
    return result.output


class TestCli:

    def test_order_flow(self, runner):
        assert "Location #1 'A-01' added" in _invoke(runner, "location", "add", "--name", "A-01")
        assert "Inventory #1" in _invoke(runner, "inventory", "add", "--location", "1", "--gtin", GTIN)
        assert "created" in _invoke(runner, "order", "create")
        assert "Line #1" in _invoke(runner, "order", "add-line", "--id", "1", "--gtin", GTIN)
        assert "status open" in _invoke(runner, "order", "process", "--id", "1")

        shown = _invoke(runner, "order", "show", "--id", "1")
        assert "status=open" in shown
        assert "A-01" in shown

        assert "fulfilled" in _invoke(runner, "order", "fulfill", "--id", "1")

    def test_domain_errors_become_usage_errors(self, runner):
        _invoke(runner, "order", "create")
        result = runner.invoke(cli, ["order", "add-line", "--id", "1", "--gtin", "123"])

        assert result.exit_code == 1
        assert "The given data was invalid." in result.output

    def test_replace_and_inventory_listing(self, runner):
        _invoke(runner, "location", "add", "--name", "A-01")
        _invoke(runner, "inventory", "add", "--location", "1", "--gtin", GTIN)
        _invoke(runner, "inventory", "add", "--location", "1", "--gtin", GTIN)
        _invoke(runner, "order", "create")
        _invoke(runner, "order", "add-line", "--id", "1", "--gtin", GTIN)

        assert "replaced by line #2" in _invoke(runner, "line", "replace", "--id", "1")

        listing = _invoke(runner, "inventory", "show")
        assert listing.count(GTIN) == 1
        assert _invoke(runner, "inventory", "show", "--all").count(GTIN) == 2

    def test_unreplaceable_line(self, runner):
        _invoke(runner, "order", "create")
        _invoke(runner, "order", "add-line", "--id", "1", "--gtin", GTIN)
        result = runner.invoke(cli, ["line", "replace", "--id", "1"])

        assert result.exit_code == 1
        assert "This order line can not be replaced." in result.output

    def test_worker_run_pairs_waiting_demand(self, runner):
        _invoke(runner, "order", "create")
        _invoke(runner, "order", "add-line", "--id", "1", "--gtin", GTIN)

        assert "Processed 0" in _invoke(runner, "worker", "run", "--workers", "1")
