"""Tests for configuration loading."""

import json
from pathlib import Path

import pytest

from inventory_tracker.config import AppConfig, config_from_env, load_config, setup_logging


class TestLoadConfig:
    def test_missing_sections_get_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "app.json"
        path.write_text(json.dumps({"stock": {"critical_max": 2, "low_max": 4}}), encoding="utf-8")
        cfg = load_config(str(path))
        assert cfg.stock.critical_max == 2
        assert cfg.stock.full_bar_quantity == 20
        assert cfg.storage.items_key == "inventoryItems"
        assert cfg.suppliers.default_status == "active"

    def test_unknown_keys_are_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "app.json"
        path.write_text(json.dumps({"storage": {"engine": "file"}}), encoding="utf-8")
        with pytest.raises(TypeError):
            load_config(str(path))

    def test_example_config_loads(self) -> None:
        example = Path(__file__).resolve().parent.parent / "configs" / "app.example.json"
        cfg = load_config(str(example))
        assert cfg.storage.backend == "file"
        assert cfg.stock.low_max == 10


class TestConfigFromEnv:
    def test_defaults_without_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("INVENTORY_TRACKER_CONFIG", raising=False)
        monkeypatch.delenv("POSTGRES_DSN", raising=False)
        cfg = config_from_env()
        assert cfg == AppConfig()

    def test_reads_path_and_dsn(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "app.json"
        path.write_text(json.dumps({"storage": {"backend": "postgres"}}), encoding="utf-8")
        monkeypatch.setenv("INVENTORY_TRACKER_CONFIG", str(path))
        monkeypatch.setenv("POSTGRES_DSN", "dbname=envdb")
        cfg = config_from_env()
        assert cfg.storage.backend == "postgres"
        assert cfg.storage.dsn == "dbname=envdb"


class TestSetupLogging:
    def test_unknown_level(self) -> None:
        cfg = AppConfig()
        cfg.logging.level = "LOUD"
        with pytest.raises(ValueError, match="Unknown log level"):
            setup_logging(cfg)
