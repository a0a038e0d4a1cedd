"""Create the Postgres key-value table that backs the record stores."""

import os
import sys

# Ensure src/ importable
_ROOT = os.path.dirname(os.path.dirname(__file__))
_SRC = os.path.join(_ROOT, "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

from inventory_tracker.config import config_from_env, setup_logging
from inventory_tracker.storage import PostgresStorage


def main():
    """Create the configured kv table (default ``kv_store``) if missing."""
    cfg = config_from_env()
    setup_logging(cfg)
    storage = PostgresStorage(cfg.storage.dsn, cfg.storage.table)
    storage.init_schema()
    print(f"Initialized Postgres key-value table '{storage.table}'.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
