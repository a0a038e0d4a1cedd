"""Record types for inventory items and suppliers.

Records serialize to the camelCase JSON layout that the storage slots hold,
e.g. ``{"id": ..., "name": ..., "paymentTerms": ..., "updatedAt": ...}``.
Optional supplier fields are omitted from the JSON when unset.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, ClassVar, Dict, Optional

SUPPLIER_STATUSES = ("active", "inactive", "pending")


def _text(v: Any) -> str:
    return "" if v is None else str(v)


def whole_number(v: Any) -> int:
    """Coerce ints, integral floats and numeric text like ``"12.0"`` to int.

    Raises ``ValueError`` for anything else, including ``2.5`` and booleans.
    """
    if isinstance(v, bool):
        raise ValueError(f"not a whole number: {v!r}")
    if isinstance(v, int):
        return v
    if isinstance(v, str):
        v = v.strip()
        try:
            return int(v)
        except ValueError:
            pass
    try:
        f = float(v)
    except (TypeError, ValueError):
        raise ValueError(f"not a whole number: {v!r}") from None
    if not f.is_integer():
        raise ValueError(f"not a whole number: {v!r}")
    return int(f)


def _opt_int(v: Any) -> Optional[int]:
    if v is None or v == "":
        return None
    return whole_number(v)


@dataclass
class InventoryItem:
    name: str = ""
    quantity: int = 0
    category: str = ""
    supplier: str = ""
    id: Any = None

    label_field: ClassVar[str] = "name"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "category": self.category,
            "supplier": self.supplier,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "InventoryItem":
        return cls(
            id=d.get("id"),
            name=_text(d.get("name")),
            quantity=_opt_int(d.get("quantity")) or 0,
            category=_text(d.get("category")),
            supplier=_text(d.get("supplier")),
        )


# python attribute -> persisted JSON key
_SUPPLIER_KEYS = {
    "payment_terms": "paymentTerms",
    "updated_at": "updatedAt",
}
_SUPPLIER_OPTIONAL = ("status", "payment_terms", "rating", "updated_at")


@dataclass
class Supplier:
    name: str = ""
    contact: str = ""
    email: str = ""
    address: str = ""
    items: str = ""
    status: Optional[str] = None
    payment_terms: Optional[str] = None
    rating: Optional[int] = None
    updated_at: Optional[str] = None
    id: Any = None

    label_field: ClassVar[str] = "name"

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"id": self.id}
        for name, value in asdict(self).items():
            if name == "id":
                continue
            if name in _SUPPLIER_OPTIONAL and value is None:
                continue
            out[_SUPPLIER_KEYS.get(name, name)] = value
        return out

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Supplier":
        return cls(
            id=d.get("id"),
            name=_text(d.get("name")),
            contact=_text(d.get("contact")),
            email=_text(d.get("email")),
            address=_text(d.get("address")),
            items=_text(d.get("items")),
            status=d.get("status"),
            payment_terms=d.get("paymentTerms"),
            rating=_opt_int(d.get("rating")),
            updated_at=d.get("updatedAt"),
        )


def field_names(record_type) -> list[str]:
    """Return the dataclass field names of a record type, ``id`` first."""
    names = [f.name for f in fields(record_type)]
    return ["id"] + [n for n in names if n != "id"]
