"""Bulk-import inventory items or suppliers from CSV.

Each row goes through the same form controller the UI uses, so rows that
fail validation are reported and skipped instead of being stored. Imported
rows always get fresh identities.
"""

import argparse
import json
import os
import sys

# Make src/ importable when running directly
_ROOT = os.path.dirname(os.path.dirname(__file__))
_SRC = os.path.join(_ROOT, "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

from inventory_tracker.config import config_from_env, load_config, setup_logging
from inventory_tracker.forms import submit_rows
from inventory_tracker.frames import read_csv_rows
from inventory_tracker.models import InventoryItem, Supplier
from inventory_tracker.workspace import open_workspace


def main():
    """CLI entrypoint: validate and append CSV rows to a store."""
    ap = argparse.ArgumentParser(description="Import records from CSV.")
    ap.add_argument("kind", choices=["items", "suppliers"], help="Which store to import into")
    ap.add_argument("--input", required=True, help="Input CSV")
    ap.add_argument("--config", help="App config JSON (default: $INVENTORY_TRACKER_CONFIG or built-in defaults)")
    args = ap.parse_args()

    cfg = load_config(args.config) if args.config else config_from_env()
    setup_logging(cfg)
    ws = open_workspace(cfg)

    if args.kind == "items":
        rows = read_csv_rows(args.input, InventoryItem)
        form = ws.item_form()
    else:
        rows = read_csv_rows(args.input, Supplier)
        form = ws.supplier_form(detailed=True)

    added, rejected = submit_rows(form, rows)
    print(f"Imported {len(added)} of {len(rows)} {args.kind} from {os.path.basename(args.input)}")
    if rejected:
        print(json.dumps(rejected, indent=2, ensure_ascii=False))
    return 0 if not rejected else 1


if __name__ == "__main__":
    raise SystemExit(main())
