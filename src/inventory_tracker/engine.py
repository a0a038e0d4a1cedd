"""Derivation engine: filtering, sorting and summary statistics.

Everything here is a pure function of the record list and the view state.
Statistics are always computed over the full, unfiltered list.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from .config import StockConfig

CRITICAL = "Critical"
LOW = "Low"
GOOD = "Good"

ITEM_SEARCH_FIELDS: Tuple[str, ...] = ("name",)
SUPPLIER_SEARCH_FIELDS: Tuple[str, ...] = ("name", "email")
SUPPLIER_SORT_FIELDS: Tuple[str, ...] = ("name", "rating", "status")


# ---------- Filtering ----------

@dataclass
class Criteria:
    search: str = ""
    search_fields: Tuple[str, ...] = ITEM_SEARCH_FIELDS
    # field -> required value; empty values mean "no constraint"
    equals: Dict[str, Any] = field(default_factory=dict)


def _matches_search(record: Any, term: str, search_fields: Sequence[str]) -> bool:
    for f in search_fields:
        value = getattr(record, f, None)
        if value is not None and term in str(value).lower():
            return True
    return False


def filter_records(records: Iterable[Any], criteria: Criteria) -> List[Any]:
    """Apply text search, then equality filters, keeping input order."""
    out = list(records)
    if criteria.search:
        term = criteria.search.lower()
        out = [r for r in out if _matches_search(r, term, criteria.search_fields)]
    for f, wanted in criteria.equals.items():
        if wanted is None or wanted == "":
            continue
        out = [r for r in out if getattr(r, f, None) == wanted]
    return out


def distinct_values(records: Iterable[Any], field_name: str) -> List[Any]:
    """Unique non-empty values of a field, in first-seen order."""
    seen: Dict[Any, None] = {}
    for r in records:
        v = getattr(r, field_name, None)
        if v is None or v == "":
            continue
        seen.setdefault(v, None)
    return list(seen)


# ---------- Sorting ----------

def _text_key(value: Any) -> Tuple[str, str]:
    """Case- and accent-insensitive key; ties fall back to the folded text."""
    folded = str(value).casefold()
    base = "".join(c for c in unicodedata.normalize("NFKD", folded) if not unicodedata.combining(c))
    return base, folded


def sort_records(records: Iterable[Any], field_name: str, ascending: bool = True) -> List[Any]:
    """Sort by one field; text compares ignoring case and accents, everything else numerically.

    Stable in both directions. Records missing the field go last.
    """
    present, missing = [], []
    for r in records:
        (missing if getattr(r, field_name, None) is None else present).append(r)
    textual = any(isinstance(getattr(r, field_name), str) for r in present)
    if textual:
        def key(r):
            return _text_key(getattr(r, field_name))
    else:
        def key(r):
            return getattr(r, field_name)
    return sorted(present, key=key, reverse=not ascending) + missing


@dataclass(frozen=True)
class SortState:
    field: str = "name"
    ascending: bool = True

    def toggle(self, field_name: str) -> "SortState":
        """Same field flips direction; a new field starts ascending."""
        if field_name == self.field:
            return SortState(self.field, not self.ascending)
        return SortState(field_name, True)

    def indicator(self, field_name: str) -> str:
        if field_name != self.field:
            return ""
        return "↑" if self.ascending else "↓"

    def apply(self, records: Iterable[Any]) -> List[Any]:
        return sort_records(records, self.field, self.ascending)


# ---------- Statistics ----------

def stock_status(quantity: int, cfg: Optional[StockConfig] = None) -> str:
    cfg = cfg or StockConfig()
    if quantity <= cfg.critical_max:
        return CRITICAL
    if quantity <= cfg.low_max:
        return LOW
    return GOOD


def stock_level_percent(quantity: int, cfg: Optional[StockConfig] = None) -> float:
    """Fill of the stock bar, capped at 100."""
    cfg = cfg or StockConfig()
    if cfg.full_bar_quantity <= 0:
        return 100.0
    return max(0.0, min(quantity / cfg.full_bar_quantity * 100, 100.0))


@dataclass(frozen=True)
class InventoryStats:
    total: int = 0
    low: int = 0
    critical: int = 0
    good: int = 0
    categories: int = 0


def inventory_stats(items: Iterable[Any], cfg: Optional[StockConfig] = None) -> InventoryStats:
    cfg = cfg or StockConfig()
    items = list(items)
    counts = {CRITICAL: 0, LOW: 0, GOOD: 0}
    for item in items:
        counts[stock_status(item.quantity, cfg)] += 1
    return InventoryStats(
        total=len(items),
        low=counts[LOW],
        critical=counts[CRITICAL],
        good=counts[GOOD],
        categories=len(distinct_values(items, "category")),
    )


@dataclass(frozen=True)
class SupplierStats:
    total: int = 0
    active: int = 0
    inactive: int = 0
    pending: int = 0


def supplier_stats(suppliers: Iterable[Any]) -> SupplierStats:
    """Count suppliers per status; a supplier without status only counts in total."""
    suppliers = list(suppliers)
    counts = {"active": 0, "inactive": 0, "pending": 0}
    for s in suppliers:
        if s.status in counts:
            counts[s.status] += 1
    return SupplierStats(total=len(suppliers), **counts)


# ---------- View state ----------

@dataclass
class InventoryView:
    """Filter state of the inventory grid."""

    search: str = ""
    category: str = ""
    supplier: str = ""
    stock: StockConfig = field(default_factory=StockConfig)

    def criteria(self) -> Criteria:
        return Criteria(
            search=self.search,
            search_fields=ITEM_SEARCH_FIELDS,
            equals={"category": self.category, "supplier": self.supplier},
        )

    def rows(self, items: Iterable[Any]) -> List[Any]:
        return filter_records(items, self.criteria())

    def stats(self, items: Iterable[Any]) -> InventoryStats:
        return inventory_stats(items, self.stock)


@dataclass
class SupplierView:
    """Search and sort state of the supplier grid."""

    search: str = ""
    sort: SortState = field(default_factory=SortState)

    def toggle_sort(self, field_name: str):
        if field_name not in SUPPLIER_SORT_FIELDS:
            raise ValueError(f"Cannot sort suppliers by {field_name!r}")
        self.sort = self.sort.toggle(field_name)

    def rows(self, suppliers: Iterable[Any]) -> List[Any]:
        crit = Criteria(search=self.search, search_fields=SUPPLIER_SEARCH_FIELDS)
        return self.sort.apply(filter_records(suppliers, crit))

    def stats(self, suppliers: Iterable[Any]) -> SupplierStats:
        return supplier_stats(suppliers)
