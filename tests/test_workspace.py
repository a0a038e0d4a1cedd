"""End-to-end tests across workspace, forms, stores and views."""

from inventory_tracker.config import AppConfig
from inventory_tracker.engine import InventoryView, SupplierView
from inventory_tracker.storage import FileStorage
from inventory_tracker.workspace import open_workspace


class TestWorkspace:
    def test_item_and_supplier_slots_are_independent(self, storage, workspace) -> None:
        form = workspace.item_form()
        form.update(name="Widget", quantity=3, category="Hardware", supplier="Acme")
        assert form.submit().ok
        assert storage.get("suppliers") is None
        assert len(workspace.suppliers) == 0

    def test_detailed_and_minimal_forms_share_suppliers(self, workspace) -> None:
        detailed = workspace.supplier_form(detailed=True)
        detailed.update(name="Acme", contact="Dana", email="d@acme.io")
        assert detailed.submit().ok
        minimal = workspace.supplier_form(detailed=False)
        minimal.update(name="Bolt", contact="Sam", email="s@bolt.io")
        assert minimal.submit().ok
        stats = SupplierView().stats(workspace.suppliers)
        assert (stats.total, stats.active) == (2, 1)

    def test_persists_across_sessions_on_file_storage(self, tmp_path) -> None:
        path = str(tmp_path / "store.json")
        first = open_workspace(AppConfig(), storage=FileStorage(path))
        form = first.item_form()
        form.update(name="Widget", quantity=3, category="Hardware", supplier="Acme")
        assert form.submit().ok

        second = open_workspace(AppConfig(), storage=FileStorage(path))
        view = InventoryView(category="Hardware")
        assert [i.name for i in view.rows(second.items)] == ["Widget"]
        assert view.stats(second.items).critical == 1
        view.category = "Tools"
        assert view.rows(second.items) == []

    def test_opens_backend_from_config(self, tmp_path) -> None:
        cfg = AppConfig()
        cfg.storage.path = str(tmp_path / "data" / "store.json")
        ws = open_workspace(cfg)
        assert isinstance(ws.items.storage, FileStorage)
        assert len(ws.items) == 0
