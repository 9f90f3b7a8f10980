"""
Integration Tests for collection workflows.

Test Aspects Covered:
    ✅ Integration: Map over list, query chains, YAML-configured containers
    ✅ Business Logic: Operators composed across variants
    ✅ State: Shared backing lists seen by every holder
"""

from __future__ import annotations

import math
from pathlib import Path

import pytest

import querykit
from querykit import (
    KeyedMap,
    OperationStatus,
    OrderedList,
    Queue,
    SortDirection,
    Stack,
    load_config,
)
from querykit.validation import StringProver


class TestInventoryWorkflow:
    """A small inventory: products keyed by SKU, queried by price."""

    @pytest.fixture
    def inventory(self) -> KeyedMap[str, dict]:
        return KeyedMap(
            [
                ("A-1", {"sku": "A-1", "price": 12.5, "stock": 0}),
                ("B-2", {"sku": "B-2", "price": 4.0, "stock": 9}),
                ("C-3", {"sku": "C-3", "price": 30.0, "stock": 2}),
                ("D-4", {"sku": "D-4", "price": None, "stock": 5}),
            ]
        )

    def test_value_projection_supports_full_query_surface(self, inventory) -> None:
        """
        SCENARIO: Values projected from the map, then sorted and reduced
        EXPECTED: Reductions skip the unpriced product, ordering by price
        """
        products = inventory.get_values()

        assert products.sum("price") == pytest.approx(46.5)
        assert products.min("stock") == 0
        assert products.max("price") == 30.0

        in_stock = products.where(lambda p: p["stock"] > 0)
        in_stock.order_by("stock", SortDirection.DESCENDING)

        assert in_stock.convert(lambda p: p["sku"]).to_array() == ["B-2", "D-4", "C-3"]

    def test_restock_through_for_each_alter(self, inventory) -> None:
        products = inventory.get_values()

        products.for_each_alter(lambda p, i: {**p, "stock": p["stock"] + 1})

        assert products.all(lambda p: p["stock"] >= 1)
        # The map still holds the original dicts
        assert inventory.get_by_key("A-1")["stock"] == 0

    def test_rejected_insert_reported_in_batch(self, inventory) -> None:
        incoming = [("E-5", {"sku": "E-5"}), ("B-2", {"sku": "B-2"})]

        statuses = [inventory.add_item(k, v).status for k, v in incoming]

        assert statuses == [OperationStatus.OK, OperationStatus.DUPLICATE_KEY]
        assert inventory.count == 5

    def test_validated_keys(self, inventory) -> None:
        bad = [k for k in inventory.get_keys() if not StringProver(k).max_length(3).is_valid]
        assert bad == []


class TestVariantsSharingData:
    """Containers built over the same list observe each other's changes."""

    def test_list_and_stack_share_backing_list(self) -> None:
        items = [3, 1, 2]
        listing = OrderedList(items)
        stack = Stack(items)

        listing.order_by(lambda x: x)

        assert stack.pop() == 3
        assert listing.to_array() == [1, 2]

    def test_queue_drains_in_order_after_sort(self) -> None:
        queue = Queue([{"p": 2}, {"p": 1}, {"p": 3}])
        queue.order_by("p")

        drained = [queue.dequeue()["p"] for _ in range(queue.count)]

        assert drained == [1, 2, 3]
        assert queue.none()


class TestConfiguredContainers:
    """Containers driven by a YAML configuration."""

    def test_sample_config_changes_average_and_sorting(
        self, sample_config_path: Path
    ) -> None:
        config = load_config(sample_config_path)
        listing = OrderedList([{"v": 4}, {}, {"v": 2}], config=config)

        assert listing.avg("v") == 3
        listing.order_by("v")
        assert listing.to_array() == [{}, {"v": 2}, {"v": 4}]

    def test_default_config_average(self) -> None:
        listing = OrderedList([{"v": 4}, {}, {"v": 2}])
        assert listing.avg("v") == 2

    def test_empty_average_is_nan_under_any_config(
        self, sample_config_path: Path
    ) -> None:
        config = load_config(sample_config_path)
        assert math.isnan(Stack(config=config).avg("v"))


class TestPackageSurface:
    """Top-level exports."""

    def test_version(self) -> None:
        assert querykit.__version__

    def test_configure_logging(self) -> None:
        import logging

        querykit.configure_logging(logging.DEBUG)

        assert logging.getLogger("querykit").level == logging.DEBUG
        querykit.configure_logging(logging.WARNING)
