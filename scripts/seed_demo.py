"""Populate the configured storage with a small demo inventory and supplier list."""

import argparse
import json
import os
import sys

# Ensure src/ importable
_ROOT = os.path.dirname(os.path.dirname(__file__))
_SRC = os.path.join(_ROOT, "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

from inventory_tracker.config import config_from_env, load_config, setup_logging
from inventory_tracker.forms import submit_rows
from inventory_tracker.workspace import open_workspace

DEMO_ITEMS = [
    {"name": "Widget", "quantity": 3, "category": "Hardware", "supplier": "Acme"},
    {"name": "Hex Bolt M8", "quantity": 240, "category": "Hardware", "supplier": "Acme"},
    {"name": "Cordless Drill", "quantity": 8, "category": "Tools", "supplier": "Bolt & Co"},
    {"name": "Tape Measure", "quantity": 14, "category": "Tools", "supplier": "Bolt & Co"},
    {"name": "Safety Gloves", "quantity": 5, "category": "Safety", "supplier": "Guardline"},
]

DEMO_SUPPLIERS = [
    {"name": "Acme", "contact": "Dana Reyes", "email": "orders@acme.example", "address": "12 Foundry Rd",
     "items": "Fasteners, widgets", "status": "active", "payment_terms": "Net 30", "rating": 4},
    {"name": "Bolt & Co", "contact": "Sam Patel", "email": "sales@boltco.example", "address": "4 Mill Lane",
     "items": "Power tools, hand tools", "status": "pending", "payment_terms": "Net 15", "rating": 3},
    {"name": "Guardline", "contact": "Lee Wong", "email": "hello@guardline.example", "address": "88 Harbor St",
     "items": "PPE", "status": "inactive", "payment_terms": "Prepaid", "rating": 5},
]


def main():
    """Add the demo records unless the stores already hold data (or --force)."""
    ap = argparse.ArgumentParser(description="Seed demo items and suppliers.")
    ap.add_argument("--config", help="App config JSON")
    ap.add_argument("--force", action="store_true", help="Seed even if the stores are not empty")
    args = ap.parse_args()

    cfg = load_config(args.config) if args.config else config_from_env()
    setup_logging(cfg)
    ws = open_workspace(cfg)
    if (len(ws.items) or len(ws.suppliers)) and not args.force:
        print("Stores already hold data; pass --force to add the demo records anyway.")
        return 1

    item_ids, bad_items = submit_rows(ws.item_form(), DEMO_ITEMS)
    supplier_ids, bad_suppliers = submit_rows(ws.supplier_form(detailed=True), DEMO_SUPPLIERS)
    print(f"Seeded {len(item_ids)} items and {len(supplier_ids)} suppliers ({cfg.storage.backend} storage).")
    rejected = {"items": bad_items, "suppliers": bad_suppliers}
    if bad_items or bad_suppliers:
        print(json.dumps({k: v for k, v in rejected.items() if v}, indent=2, ensure_ascii=False))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
