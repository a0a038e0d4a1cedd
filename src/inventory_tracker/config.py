"""JSON-backed configuration models for the inventory tracker."""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Optional

CONFIG_ENV_VAR = "INVENTORY_TRACKER_CONFIG"


@dataclass
class StorageConfig:
    # backends: "memory" | "file" | "postgres"
    backend: str = "file"
    path: str = "data/inventory_tracker.json"
    # Postgres DSN; falls back to the POSTGRES_DSN environment variable
    dsn: Optional[str] = None
    table: str = "kv_store"
    items_key: str = "inventoryItems"
    suppliers_key: str = "suppliers"


@dataclass
class StockConfig:
    # quantity <= critical_max is Critical, <= low_max is Low, above is Good
    critical_max: int = 5
    low_max: int = 10
    # quantity that fills the stock bar to 100%
    full_bar_quantity: int = 20


@dataclass
class SupplierConfig:
    default_status: str = "active"
    default_rating: int = 5


@dataclass
class LoggingConfig:
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class AppConfig:
    storage: StorageConfig = field(default_factory=StorageConfig)
    stock: StockConfig = field(default_factory=StockConfig)
    suppliers: SupplierConfig = field(default_factory=SupplierConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str) -> AppConfig:
    """Load the app configuration from a JSON file.

    Returns a fully-populated ``AppConfig`` with defaults for any missing
    sections.
    """
    with open(path, "r", encoding="utf-8") as f:
        cfg = json.load(f)

    def to_storage(d: dict) -> StorageConfig:
        return StorageConfig(**d) if d else StorageConfig()

    def to_stock(d: dict) -> StockConfig:
        return StockConfig(**d) if d else StockConfig()

    def to_suppliers(d: dict) -> SupplierConfig:
        return SupplierConfig(**d) if d else SupplierConfig()

    def to_logging(d: dict) -> LoggingConfig:
        return LoggingConfig(**d) if d else LoggingConfig()

    return AppConfig(
        storage=to_storage(cfg.get("storage")),
        stock=to_stock(cfg.get("stock")),
        suppliers=to_suppliers(cfg.get("suppliers")),
        logging=to_logging(cfg.get("logging")),
    )


def config_from_env() -> AppConfig:
    """Load the config named by ``INVENTORY_TRACKER_CONFIG``, or defaults."""
    path = os.environ.get(CONFIG_ENV_VAR)
    cfg = load_config(path) if path else AppConfig()
    if not cfg.storage.dsn:
        cfg.storage.dsn = os.environ.get("POSTGRES_DSN")
    return cfg


def setup_logging(cfg: AppConfig):
    """Apply the configured log level and format to the root logger."""
    level = getattr(logging, cfg.logging.level.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {cfg.logging.level}")
    logging.basicConfig(level=level, format=cfg.logging.format)
