"""Shared fixtures for the inventory tracker tests."""

import itertools
from typing import Callable

import pytest

from inventory_tracker.config import AppConfig
from inventory_tracker.models import InventoryItem, Supplier
from inventory_tracker.storage import MemoryStorage
from inventory_tracker.store import RecordStore
from inventory_tracker.workspace import Workspace, open_workspace


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def counter_ids() -> Callable[[], str]:
    """Deterministic id factory: id-1, id-2, ..."""
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def item_store(storage: MemoryStorage, counter_ids) -> RecordStore:
    return RecordStore(storage, "inventoryItems", InventoryItem, id_factory=counter_ids, noun="item")


@pytest.fixture
def supplier_store(storage: MemoryStorage, counter_ids) -> RecordStore:
    return RecordStore(storage, "suppliers", Supplier, id_factory=counter_ids, noun="supplier")


@pytest.fixture
def workspace(storage: MemoryStorage) -> Workspace:
    return open_workspace(AppConfig(), storage=storage)


@pytest.fixture
def sample_items():
    return [
        InventoryItem(id=1, name="Widget", quantity=3, category="Hardware", supplier="Acme"),
        InventoryItem(id=2, name="Blue Widget", quantity=8, category="Hardware", supplier="Bolt"),
        InventoryItem(id=3, name="Drill", quantity=15, category="Tools", supplier="Bolt"),
        InventoryItem(id=4, name="Gloves", quantity=0, category="Safety", supplier="Acme"),
    ]


@pytest.fixture
def sample_suppliers():
    return [
        Supplier(id="a", name="bravo", email="b@bravo.io", status="active", rating=3),
        Supplier(id="b", name="Alpha", email="sales@alpha.io", status="pending", rating=5),
        Supplier(id="c", name="charlie", email="c@charlie.io", status="inactive", rating=1),
    ]
