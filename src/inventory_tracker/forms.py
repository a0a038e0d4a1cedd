"""Form controllers: draft records, validation and submit-as-upsert."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from .config import SupplierConfig
from .models import SUPPLIER_STATUSES, InventoryItem, Supplier, whole_number
from .store import RecordStore

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class ValidationError(ValueError):
    """One or more draft fields are invalid; ``errors`` lists the messages."""

    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = list(errors)


@dataclass
class SubmitResult:
    ok: bool
    record: Any = None
    errors: List[str] = field(default_factory=list)


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_RE.match(value or ""))


def _blank(value: Any) -> bool:
    return value is None or not str(value).strip()


def parse_quantity(value: Any) -> int:
    """Turn form input into a non-negative integer quantity."""
    try:
        qty = whole_number(value)
    except ValueError:
        raise ValueError("Quantity must be a whole number") from None
    if qty < 0:
        raise ValueError("Quantity cannot be negative")
    return qty


def validate_item(item: InventoryItem) -> InventoryItem:
    """Return a cleaned copy of ``item`` or raise ``ValidationError``."""
    errors = []
    for name in ("name", "category", "supplier"):
        if _blank(getattr(item, name)):
            errors.append(f"{name.capitalize()} is required")
    qty = 0
    try:
        qty = parse_quantity(item.quantity)
    except ValueError as e:
        errors.append(str(e))
    if errors:
        raise ValidationError(errors)
    return replace(
        item,
        name=item.name.strip(),
        category=item.category.strip(),
        supplier=item.supplier.strip(),
        quantity=qty,
    )


def validate_supplier(supplier: Supplier, detailed: bool = True) -> Supplier:
    """Return a cleaned copy of ``supplier`` or raise ``ValidationError``.

    Name, contact and email are required; the email must look like
    ``local@domain.tld``. The detailed form also checks the status value.
    """
    if _blank(supplier.name) or _blank(supplier.contact) or _blank(supplier.email):
        raise ValidationError(["Please fill in all required fields"])
    errors = []
    if not is_valid_email(supplier.email.strip()):
        errors.append("Please enter a valid email address")
    rating = supplier.rating
    if detailed:
        if supplier.status not in SUPPLIER_STATUSES:
            errors.append(f"Status must be one of: {', '.join(SUPPLIER_STATUSES)}")
        if rating is not None and rating != "":
            try:
                rating = int(rating)
            except (TypeError, ValueError):
                errors.append("Rating must be a whole number")
    if errors:
        raise ValidationError(errors)
    return replace(
        supplier,
        name=supplier.name.strip(),
        contact=supplier.contact.strip(),
        email=supplier.email.strip(),
        rating=rating if rating != "" else None,
    )


class FormController:
    """Holds a draft and the identity being edited, and submits to a store."""

    def __init__(self, store: RecordStore):
        self.store = store
        self.editing_id: Any = None
        self.draft = self.blank()

    def blank(self):
        raise NotImplementedError

    def validate(self, draft):
        raise NotImplementedError

    @property
    def editing(self) -> bool:
        return self.editing_id is not None

    def update(self, **values):
        self.draft = replace(self.draft, **values)

    def edit(self, record):
        self.editing_id = record.id
        self.draft = replace(record)

    def cancel(self):
        self.editing_id = None
        self.draft = self.blank()

    def prepare(self, record):
        """Hook applied to a validated record right before it is stored."""
        return record

    def submit(self) -> SubmitResult:
        try:
            record = self.validate(self.draft)
        except ValidationError as e:
            logger.info("Rejected %s form: %s", self.store.noun, e)
            return SubmitResult(ok=False, errors=e.errors)
        try:
            stored = self.store.upsert(self.prepare(record), self.editing_id)
        except KeyError:
            logger.warning("Edited %s %r no longer exists", self.store.noun, self.editing_id)
            self.cancel()
            return SubmitResult(ok=False, errors=[f"This {self.store.noun} no longer exists"])
        self.cancel()
        return SubmitResult(ok=True, record=stored)


class ItemForm(FormController):
    def blank(self) -> InventoryItem:
        return InventoryItem()

    def validate(self, draft: InventoryItem) -> InventoryItem:
        return validate_item(draft)


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


class SupplierForm(FormController):
    """Supplier form in its detailed or minimal variant.

    The detailed variant carries status, payment terms and rating and stamps
    ``updated_at`` on every submit; the minimal variant has only the contact
    fields.
    """

    def __init__(self, store: RecordStore, detailed: bool = True,
                 cfg: Optional[SupplierConfig] = None,
                 clock: Callable[[], str] = _utc_now):
        self.detailed = detailed
        self.cfg = cfg or SupplierConfig()
        self.clock = clock
        super().__init__(store)

    def blank(self) -> Supplier:
        if not self.detailed:
            return Supplier()
        return Supplier(status=self.cfg.default_status, payment_terms="", rating=self.cfg.default_rating)

    def edit(self, record: Supplier):
        super().edit(record)
        # records saved by the minimal form have no status or rating yet
        if self.detailed and self.draft.status is None:
            self.update(status=self.cfg.default_status)
        if self.detailed and self.draft.rating is None:
            self.update(rating=self.cfg.default_rating)

    def validate(self, draft: Supplier) -> Supplier:
        return validate_supplier(draft, detailed=self.detailed)

    def prepare(self, record: Supplier) -> Supplier:
        if self.detailed:
            return replace(record, updated_at=self.clock())
        return record


def submit_rows(form: FormController, rows: Iterable[Dict[str, Any]]) -> Tuple[List[Any], List[Dict[str, Any]]]:
    """Submit each row as a fresh draft through ``form``.

    Returns the ids of the stored records and, for rejected rows, their
    1-based row number with the validation errors. ``None`` values keep the
    form's defaults.
    """
    added, rejected = [], []
    for i, row in enumerate(rows, start=1):
        form.cancel()
        form.update(**{k: v for k, v in row.items() if v is not None})
        result = form.submit()
        if result.ok:
            added.append(result.record.id)
        else:
            rejected.append({"row": i, "errors": result.errors})
    return added, rejected
