"""Export inventory items or suppliers from the configured storage to CSV."""

import argparse
import os
import sys

# Make src/ importable when running directly
_ROOT = os.path.dirname(os.path.dirname(__file__))
_SRC = os.path.join(_ROOT, "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

from inventory_tracker.config import config_from_env, load_config, setup_logging
from inventory_tracker.frames import export_csv
from inventory_tracker.models import InventoryItem, Supplier
from inventory_tracker.workspace import open_workspace


def main():
    """CLI entrypoint: write one store to a CSV file."""
    ap = argparse.ArgumentParser(description="Export records to CSV.")
    ap.add_argument("kind", choices=["items", "suppliers"], help="Which store to export")
    ap.add_argument("--output", required=True, help="Output CSV path")
    ap.add_argument("--config", help="App config JSON (default: $INVENTORY_TRACKER_CONFIG or built-in defaults)")
    args = ap.parse_args()

    cfg = load_config(args.config) if args.config else config_from_env()
    setup_logging(cfg)
    ws = open_workspace(cfg)

    if args.kind == "items":
        n = export_csv(ws.items, args.output, InventoryItem)
    else:
        n = export_csv(ws.suppliers, args.output, Supplier)
    print(f"Exported {n} {args.kind} to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
