"""Tests for filtering, sorting and statistics."""

import pytest

from inventory_tracker.config import StockConfig
from inventory_tracker.engine import (
    CRITICAL,
    GOOD,
    LOW,
    Criteria,
    InventoryView,
    SortState,
    SupplierView,
    distinct_values,
    filter_records,
    inventory_stats,
    sort_records,
    stock_level_percent,
    stock_status,
    supplier_stats,
)
from inventory_tracker.models import InventoryItem, Supplier


# ============================================================================
# Filtering
# ============================================================================


class TestFilterRecords:
    """Tests for filter_records."""

    def test_empty_criteria_returns_input_unchanged(self, sample_items) -> None:
        """No search and empty equality filters pass every record through in order."""
        crit = Criteria(search="", equals={"category": "", "supplier": ""})
        assert filter_records(sample_items, crit) == sample_items

    @pytest.mark.parametrize("term", ["widget", "WIDGET", "Wid", "e", "x"])
    def test_search_is_case_insensitive_substring_on_name(self, sample_items, term: str) -> None:
        """Kept records contain the term; excluded records do not."""
        kept = filter_records(sample_items, Criteria(search=term))
        for item in kept:
            assert term.lower() in item.name.lower()
        for item in sample_items:
            if item not in kept:
                assert term.lower() not in item.name.lower()

    def test_equality_filters_compose_with_search(self, sample_items) -> None:
        crit = Criteria(search="widget", equals={"supplier": "Bolt"})
        assert [i.id for i in filter_records(sample_items, crit)] == [2]

    def test_equality_filter_is_exact(self, sample_items) -> None:
        crit = Criteria(equals={"category": "hardware"})
        assert filter_records(sample_items, crit) == []

    def test_search_over_several_fields(self, sample_suppliers) -> None:
        """A supplier matches on name or email."""
        crit = Criteria(search="SALES@", search_fields=("name", "email"))
        assert [s.id for s in filter_records(sample_suppliers, crit)] == ["b"]

    def test_distinct_values_first_seen_order(self, sample_items) -> None:
        assert distinct_values(sample_items, "category") == ["Hardware", "Tools", "Safety"]
        assert distinct_values(sample_items, "supplier") == ["Acme", "Bolt"]

    def test_distinct_values_skips_empty(self) -> None:
        items = [InventoryItem(category=""), InventoryItem(category="Tools")]
        assert distinct_values(items, "category") == ["Tools"]


# ============================================================================
# Sorting
# ============================================================================


class TestSortRecords:
    """Tests for sort_records and SortState."""

    def test_rating_ascending_then_descending(self) -> None:
        records = [Supplier(id=i, rating=r) for i, r in enumerate([3, 5, 1])]
        assert [s.rating for s in sort_records(records, "rating", True)] == [1, 3, 5]
        assert [s.rating for s in sort_records(records, "rating", False)] == [5, 3, 1]

    def test_text_sort_ignores_case(self, sample_suppliers) -> None:
        names = [s.name for s in sort_records(sample_suppliers, "name")]
        assert names == ["Alpha", "bravo", "charlie"]

    def test_text_sort_ignores_accents(self) -> None:
        records = [Supplier(name="zeta"), Supplier(name="Émile"), Supplier(name="alpha"), Supplier(name="Ökotech")]
        assert [s.name for s in sort_records(records, "name")] == ["alpha", "Émile", "Ökotech", "zeta"]
        assert [s.name for s in sort_records(records, "name", False)] == ["zeta", "Ökotech", "Émile", "alpha"]

    def test_sort_is_stable_in_both_directions(self) -> None:
        records = [Supplier(id=i, status=st) for i, st in enumerate(["active", "pending", "active", "pending"])]
        asc = sort_records(records, "status", True)
        desc = sort_records(records, "status", False)
        assert [s.id for s in asc] == [0, 2, 1, 3]
        assert [s.id for s in desc] == [1, 3, 0, 2]

    def test_missing_values_go_last(self) -> None:
        records = [Supplier(id="x", rating=None), Supplier(id="y", rating=2), Supplier(id="z", rating=4)]
        assert [s.id for s in sort_records(records, "rating", True)] == ["y", "z", "x"]
        assert [s.id for s in sort_records(records, "rating", False)] == ["z", "y", "x"]

    def test_toggle_same_field_flips_direction(self) -> None:
        state = SortState("name", True)
        assert state.toggle("name") == SortState("name", False)
        assert state.toggle("name").toggle("name") == SortState("name", True)

    def test_toggle_new_field_resets_to_ascending(self) -> None:
        state = SortState("name", False)
        assert state.toggle("rating") == SortState("rating", True)

    def test_indicator(self) -> None:
        state = SortState("rating", False)
        assert state.indicator("rating") == "↓"
        assert state.toggle("rating").indicator("rating") == "↑"
        assert state.indicator("name") == ""


# ============================================================================
# Statistics
# ============================================================================


class TestStatistics:
    """Tests for stock classification and summary counts."""

    @pytest.mark.parametrize(
        "quantity,expected",
        [(0, CRITICAL), (5, CRITICAL), (6, LOW), (10, LOW), (11, GOOD), (500, GOOD)],
    )
    def test_stock_status_bands(self, quantity: int, expected: str) -> None:
        assert stock_status(quantity) == expected

    def test_stock_status_uses_configured_thresholds(self) -> None:
        cfg = StockConfig(critical_max=2, low_max=4)
        assert stock_status(3, cfg) == LOW
        assert stock_status(5, cfg) == GOOD

    def test_default_thresholds_ignore_other_configs(self) -> None:
        tuned = StockConfig()
        tuned.critical_max = 50
        assert stock_status(20, tuned) == CRITICAL
        assert stock_status(20) == GOOD
        assert inventory_stats([InventoryItem(quantity=20)]).good == 1

    def test_stock_level_percent_is_capped(self) -> None:
        assert stock_level_percent(5) == 25.0
        assert stock_level_percent(20) == 100.0
        assert stock_level_percent(45) == 100.0

    def test_inventory_stats(self, sample_items) -> None:
        stats = inventory_stats(sample_items)
        assert stats.total == 4
        assert stats.critical == 2
        assert stats.low == 1
        assert stats.good == 1
        assert stats.categories == 3

    def test_supplier_stats(self, sample_suppliers) -> None:
        stats = supplier_stats(sample_suppliers + [Supplier(id="d", status="active"), Supplier(id="e")])
        assert (stats.total, stats.active, stats.inactive, stats.pending) == (5, 2, 1, 1)

    def test_stats_of_empty_list(self) -> None:
        assert inventory_stats([]).total == 0
        assert supplier_stats([]).total == 0


# ============================================================================
# Views
# ============================================================================


class TestViews:
    """Tests for the inventory and supplier view state."""

    def test_inventory_view_filters_but_stats_use_full_list(self, sample_items) -> None:
        view = InventoryView(category="Tools")
        assert [i.name for i in view.rows(sample_items)] == ["Drill"]
        assert view.stats(sample_items).total == 4

    def test_supplier_view_searches_then_sorts(self, sample_suppliers) -> None:
        view = SupplierView(search=".io")
        view.toggle_sort("rating")
        assert [s.rating for s in view.rows(sample_suppliers)] == [1, 3, 5]
        view.toggle_sort("rating")
        assert [s.rating for s in view.rows(sample_suppliers)] == [5, 3, 1]

    def test_supplier_view_rejects_unknown_sort_field(self) -> None:
        with pytest.raises(ValueError, match="Cannot sort"):
            SupplierView().toggle_sort("address")
