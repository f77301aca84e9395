"""Unit tests for the nekoshop-cache CLI."""

import json

import pytest
from click.testing import CliRunner

from nekoshop_cache.cli import main
from nekoshop_cache.core.shop import ShopCaches
from nekoshop_cache.utils.config import ORDER_CACHE_KEY


@pytest.fixture
def caches(storage, clock):
    return ShopCaches.from_config(storage=storage, clock=clock)


@pytest.fixture
def runner():
    return CliRunner()


class TestCli:
    """Test list/stats/remove/clear commands against an injected cache."""

    def test_list_empty(self, runner, caches):
        result = runner.invoke(main, ["list", "orders"], obj=caches)
        assert result.exit_code == 0
        assert "No cached orders." in result.output

        result = runner.invoke(main, ["list", "purchases"], obj=caches)
        assert "No purchase records." in result.output

    def test_list_orders(self, runner, caches, sample_order):
        caches.orders.add(sample_order, "pw")
        result = runner.invoke(main, ["list", "orders"], obj=caches)

        assert result.exit_code == 0
        assert "ORD001" in result.output
        assert "status=pending" in result.output

    def test_list_purchases(self, runner, caches, sample_purchase):
        caches.purchases.add(sample_purchase)
        result = runner.invoke(main, ["list", "purchases"], obj=caches)

        assert result.exit_code == 0
        assert "ORD001" in result.output
        assert "Neko Key" in result.output

    def test_stats(self, runner, caches, sample_order, sample_purchase):
        caches.orders.add(sample_order, "pw")
        caches.purchases.add(sample_purchase)
        result = runner.invoke(main, ["stats"], obj=caches)

        assert result.exit_code == 0
        assert "orders:    count=1" in result.output
        assert "purchases: count=1  total=10.0" in result.output

    def test_remove(self, runner, caches, sample_order):
        caches.orders.add(sample_order, "pw")
        result = runner.invoke(main, ["remove", "orders", "ORD001"], obj=caches)

        assert result.exit_code == 0
        assert caches.orders.list() == []

    def test_clear_requires_confirmation(self, runner, caches, sample_order):
        caches.orders.add(sample_order, "pw")
        result = runner.invoke(main, ["clear", "orders"], obj=caches, input="n\n")

        assert result.exit_code != 0
        assert len(caches.orders.list()) == 1

    def test_clear_confirmed(self, runner, caches, storage, sample_order):
        caches.orders.add(sample_order, "pw")
        result = runner.invoke(main, ["clear", "orders"], obj=caches, input="y\n")

        assert result.exit_code == 0
        assert storage.get(ORDER_CACHE_KEY) is None

    def test_clear_all_with_yes(self, runner, caches, storage, sample_order, sample_purchase):
        caches.orders.add(sample_order, "pw")
        caches.purchases.add(sample_purchase)
        result = runner.invoke(main, ["clear", "all", "--yes"], obj=caches)

        assert result.exit_code == 0
        assert storage.keys() == []

    def test_file_storage_option(self, runner, tmp_path):
        (tmp_path / f"{ORDER_CACHE_KEY}.json").write_text(json.dumps([]), encoding="utf-8")
        result = runner.invoke(main, ["--storage", "file", "--path", str(tmp_path), "stats"])

        assert result.exit_code == 0
        assert "orders:    count=0" in result.output

    def test_unknown_store_rejected(self, runner, caches):
        result = runner.invoke(main, ["list", "carts"], obj=caches)
        assert result.exit_code == 2
