"""End-to-end tests for the click command line."""

import pytest
from click.testing import CliRunner

from stockroom.infrastructure.cli.main import cli
from stockroom.infrastructure.config import Config


@pytest.fixture
def run(tmp_path, monkeypatch):
    monkeypatch.setattr(Config, "DATA_DIR", tmp_path)
    runner = CliRunner()

    def _run(*args: str):
        return runner.invoke(cli, ["product", *args])

    return _run


class TestProductCommands:

    def test_add_and_show(self, run):
        result = run("add", "--name", "Choc Cake", "--quantity", "5", "--category", "cake")
        assert result.exit_code == 0
        assert "Product #1 'Choc Cake' added with quantity 5" in result.output

        result = run("show", "--id", "1")
        assert result.exit_code == 0
        assert "Category: Cake" in result.output
        assert "Quantity: 5" in result.output
        assert "Updated:  -" in result.output

    def test_add_invalid_product_fails(self, run):
        result = run("add", "--name", "Bun", "--quantity", "0")
        assert result.exit_code == 1
        assert "could not be added" in result.output

    def test_restock_offload_and_stock(self, run):
        run("add", "--name", "Oat Cookies", "--quantity", "5", "--category", "Cookies")

        assert "quantity now 8" in run("restock", "--id", "1", "--amount", "3").output
        assert "quantity now 6" in run("offload", "--id", "1", "--amount", "2").output

        result = run("stock", "--id", "1")
        assert result.exit_code == 0
        assert result.output.strip() == "6"

    def test_offload_too_much_fails(self, run):
        run("add", "--name", "Rye Loaf", "--quantity", "2")
        result = run("offload", "--id", "1", "--amount", "10")
        assert result.exit_code == 1
        assert "Cannot offload more than available quantity" in result.output

    def test_update(self, run):
        run("add", "--name", "Rye Loaf", "--quantity", "2")
        result = run(
            "update", "--id", "1", "--name", "Spelt Loaf", "--quantity", "9",
            "--category", "Bakery",
        )
        assert result.exit_code == 0
        assert "'Spelt Loaf'" in result.output
        assert "Quantity: 9" in result.output

    def test_update_requires_category(self, run):
        run("add", "--name", "Choc Cake", "--quantity", "5", "--category", "Cake")

        result = run("update", "--id", "1", "--name", "Choc Cake", "--quantity", "9")

        assert result.exit_code == 2
        assert "--category" in result.output
        assert "Category: Cake" in run("show", "--id", "1").output

    def test_update_keeps_given_category(self, run):
        run("add", "--name", "Choc Cake", "--quantity", "5", "--category", "Cake")
        result = run(
            "update", "--id", "1", "--name", "Choc Cake", "--quantity", "9",
            "--category", "Cake",
        )
        assert "Category: Cake" in result.output

    def test_remove_then_show_not_found(self, run):
        run("add", "--name", "Scone", "--quantity", "4")
        assert run("remove", "--id", "1").exit_code == 0

        result = run("show", "--id", "1")
        assert result.exit_code == 1
        assert "A product with id=1 was not found" in result.output

    def test_list(self, run):
        assert "No products found." in run("list").output
        run("add", "--name", "Scone", "--quantity", "4")
        run("add", "--name", "Brownie", "--quantity", "6", "--category", "Cake")
        output = run("list").output
        assert "Scone" in output
        assert "Brownie" in output

    def test_unknown_category_rejected(self, run):
        result = run("add", "--name", "Bagel", "--quantity", "1", "--category", "Bread")
        assert result.exit_code == 2


class TestLogLevel:

    def test_unknown_log_level_rejected(self, run, monkeypatch):
        monkeypatch.setattr(Config, "LOG_LEVEL", "LOUD")
        result = run("list")
        assert result.exit_code == 2
        assert "Unknown log level 'LOUD'" in result.output

    def test_lowercase_log_level_accepted(self, run, monkeypatch):
        monkeypatch.setattr(Config, "LOG_LEVEL", "debug")
        result = run("list")
        assert result.exit_code == 0
        assert "No products found." in result.output
