"""Pandas views of the record stores: grid frames, breakdowns and CSV I/O."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Type

import pandas as pd

from .config import StockConfig
from .engine import CRITICAL, GOOD, LOW, stock_level_percent, stock_status
from .models import InventoryItem, Supplier, field_names

ITEM_COLUMNS = ["id", "name", "quantity", "category", "supplier", "status", "stock_pct"]
SUPPLIER_COLUMNS = [
    "id", "name", "status", "contact", "email", "address",
    "payment_terms", "rating", "items", "updated_at",
]


def items_frame(items: Iterable[InventoryItem], cfg: Optional[StockConfig] = None) -> pd.DataFrame:
    """Grid rows for inventory items with stock status and bar percent."""
    cfg = cfg or StockConfig()
    rows = [
        {
            "id": it.id,
            "name": it.name,
            "quantity": it.quantity,
            "category": it.category,
            "supplier": it.supplier,
            "status": stock_status(it.quantity, cfg),
            "stock_pct": round(stock_level_percent(it.quantity, cfg), 1),
        }
        for it in items
    ]
    return pd.DataFrame(rows, columns=ITEM_COLUMNS)


def suppliers_frame(suppliers: Iterable[Supplier]) -> pd.DataFrame:
    rows = [{c: getattr(s, c) for c in SUPPLIER_COLUMNS} for s in suppliers]
    df = pd.DataFrame(rows, columns=SUPPLIER_COLUMNS)
    df["rating"] = pd.to_numeric(df["rating"], errors="coerce").astype("Int64")
    return df


def category_breakdown(items: Iterable[InventoryItem], cfg: Optional[StockConfig] = None) -> pd.DataFrame:
    """Per-category totals: item count, units on hand and count per stock status."""
    cfg = cfg or StockConfig()
    df = items_frame(items, cfg)
    cols = ["category", "items", "units", CRITICAL, LOW, GOOD]
    if df.empty:
        return pd.DataFrame(columns=cols)
    counts = pd.crosstab(df["category"], df["status"])
    for status in (CRITICAL, LOW, GOOD):
        if status not in counts.columns:
            counts[status] = 0
    out = df.groupby("category", sort=True).agg(items=("id", "count"), units=("quantity", "sum"))
    out = out.join(counts[[CRITICAL, LOW, GOOD]]).reset_index()
    return out[cols]


def export_csv(records: Iterable[Any], path: str, record_type: Type) -> int:
    """Write records to CSV using their dataclass field names; returns the row count."""
    cols = field_names(record_type)
    df = pd.DataFrame([{c: getattr(r, c) for c in cols} for r in records], columns=cols)
    df.to_csv(path, index=False)
    return len(df)


def read_csv_rows(path: str, record_type: Type) -> List[Dict[str, Any]]:
    """Read a CSV into per-row dicts restricted to the record's fields.

    Missing cells become ``None``; the ``id`` column, if present, is dropped so
    imported rows get fresh identities.
    """
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    wanted = [c for c in field_names(record_type) if c != "id" and c in df.columns]
    rows = []
    for rec in df[wanted].to_dict(orient="records"):
        rows.append({k: (None if v == "" else v) for k, v in rec.items()})
    return rows
