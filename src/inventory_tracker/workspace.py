"""Wiring of storage, stores and forms for one app session."""

import logging
from dataclasses import dataclass
from typing import Optional

from .config import AppConfig
from .forms import ItemForm, SupplierForm
from .models import InventoryItem, Supplier
from .storage import make_storage
from .store import RecordStore

logger = logging.getLogger(__name__)


@dataclass
class Workspace:
    cfg: AppConfig
    items: RecordStore
    suppliers: RecordStore

    def item_form(self) -> ItemForm:
        return ItemForm(self.items)

    def supplier_form(self, detailed: bool = True) -> SupplierForm:
        return SupplierForm(self.suppliers, detailed=detailed, cfg=self.cfg.suppliers)


def open_workspace(cfg: AppConfig, storage=None) -> Workspace:
    """Open both stores on ``storage`` (or the backend named in ``cfg``)."""
    storage = storage if storage is not None else make_storage(cfg.storage)
    items = RecordStore(storage, cfg.storage.items_key, InventoryItem, noun="item")
    suppliers = RecordStore(storage, cfg.storage.suppliers_key, Supplier, noun="supplier")
    logger.info("Opened workspace on %s: %d items, %d suppliers",
                type(storage).__name__, len(items), len(suppliers))
    return Workspace(cfg=cfg, items=items, suppliers=suppliers)
