"""End-to-end tests for the command-line front end."""

import pytest
from click.testing import CliRunner

from storefront.infrastructure.cli import shop_commands
from storefront.infrastructure.cli.main import cli
from tests.fakes import RecordingLogger


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    (tmp_path / "catalogue.csv").write_text(
        "Name,Price,Description\n"
        "Tea,3.00,Loose leaf\n"
        "Cake,5.50,Chocolate sponge\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("STOREFRONT_CATALOGUE_FILE", raising=False)
    monkeypatch.delenv("STOREFRONT_REQUIRE_DESCRIPTIONS", raising=False)
    monkeypatch.delenv("STOREFRONT_REQUIRE_PAYMENT_DETAILS", raising=False)
    return tmp_path


def _run(args, input=None):
    return CliRunner().invoke(cli, args, input=input)


class TestCatalogueCommands:

    def test_list(self, data_dir):
        result = _run(["catalogue", "list"])
        assert result.exit_code == 0
        assert "MENU" in result.output
        assert "1. Tea..... Loose leaf.......... $3.00" in result.output
        assert "2. Cake..... Chocolate sponge.......... $5.50" in result.output

    def test_show(self, data_dir):
        result = _run(["catalogue", "show", "cake"])
        assert result.exit_code == 0
        assert "Price: $5.50" in result.output
        assert "Description: Chocolate sponge" in result.output

    def test_show_unknown_item(self, data_dir):
        result = _run(["catalogue", "show", "Coffee"])
        assert result.exit_code != 0
        assert "No such item 'Coffee'" in result.output

    def test_missing_catalogue_file(self, data_dir, monkeypatch):
        monkeypatch.setenv("STOREFRONT_CATALOGUE_FILE", "missing.csv")
        result = _run(["catalogue", "list"])
        assert result.exit_code != 0
        assert "Catalogue file not found" in result.output

    def test_description_variant_rejects_plain_items(self, data_dir, monkeypatch):
        (data_dir / "plain.csv").write_text("name,price\nTea,3.00\n", encoding="utf-8")
        monkeypatch.setenv("STOREFRONT_CATALOGUE_FILE", "plain.csv")
        monkeypatch.setenv("STOREFRONT_REQUIRE_DESCRIPTIONS", "true")
        result = _run(["catalogue", "list"])
        assert result.exit_code != 0
        assert "requires a description" in result.output


class TestShopCommand:

    def test_add_and_order(self, data_dir):
        result = _run(["shop"], input="add tea\nadd Cake\norder\nhistory\nquit\n")
        assert result.exit_code == 0
        assert "Added tea!" in result.output
        assert "TOTAL: $8.50" in result.output
        assert "Order #1 placed." in result.output
        assert "ORDERS" in result.output

    def test_errors_do_not_end_the_session(self, data_dir):
        result = _run(["shop"], input="order\nadd Coffee\nremove Tea\nadd\nadd Tea\ncart\n")
        assert result.exit_code == 0
        assert "Error: Orders cannot be empty" in result.output
        assert "Error: No such item 'Coffee' found in catalogue" in result.output
        assert "Error: No such item 'Tea' found in cart" in result.output
        assert "Error: 'add' needs an item name" in result.output
        assert "1. Tea..... Loose leaf.......... $3.00" in result.output

    def test_rejected_commands_are_logged(self, data_dir, monkeypatch):
        recorder = RecordingLogger()
        monkeypatch.setattr(shop_commands, "logger", recorder)
        _run(["shop"], input="add Coffee\nquit\n")
        assert (
            "info",
            "shop.command_rejected",
            {"command": "add", "error": "No such item 'Coffee' found in catalogue"},
        ) in recorder.events

    def test_full_cart(self, data_dir):
        result = _run(["shop"], input="add Tea\n" * 6 + "add Coffee\n")
        assert result.output.count("Error: Cart is full") == 2

    def test_history_when_empty(self, data_dir):
        result = _run(["shop"], input="history\n")
        assert "No orders have been placed yet." in result.output

    def test_collects_customer_details(self, data_dir):
        result = _run(
            ["shop", "--collect-customer"],
            input="add Tea\norder\nAna\n1 Queen St\nana@example.com\n4111\nquit\n",
        )
        assert result.exit_code == 0
        assert "Order #1 placed." in result.output
        stored = (data_dir / "customer_info.txt").read_text(encoding="utf-8")
        assert stored.splitlines()[1] == "Ana,1 Queen St,ana@example.com,4111"

    def test_invalid_customer_keeps_cart(self, data_dir):
        result = _run(
            ["shop", "--collect-customer"],
            input="add Tea\norder\nAna\n\nana@example.com\n\ncart\n",
        )
        assert "Error: Shipping address is required" in result.output
        assert "Order #1 placed." not in result.output
        # Printed once after "add" and once for "cart"
        assert result.output.count("TOTAL: $3.00") == 2
        assert "TOTAL: $0.00" not in result.output
        assert not (data_dir / "customer_info.txt").exists()


class TestCustomerCommands:

    def test_add_then_list(self, data_dir):
        added = _run([
            "customer", "add",
            "--name", "Ana",
            "--address", "1 Queen St, Auckland",
            "--email", "ana@example.com",
        ])
        assert added.exit_code == 0
        assert "Customer 'Ana' recorded." in added.output

        listed = _run(["customer", "list"])
        assert listed.exit_code == 0
        assert "Customer Name: Ana" in listed.output
        assert "Shipping Address: 1 Queen St, Auckland" in listed.output

    def test_list_when_empty(self, data_dir):
        result = _run(["customer", "list"])
        assert "No customer information recorded." in result.output

    def test_payment_variant(self, data_dir, monkeypatch):
        monkeypatch.setenv("STOREFRONT_REQUIRE_PAYMENT_DETAILS", "true")
        result = _run([
            "customer", "add",
            "--name", "Ana",
            "--address", "1 Queen St",
            "--email", "ana@example.com",
        ])
        assert result.exit_code != 0
        assert "Payment details are required" in result.output
