#!/usr/bin/env python3
"""
Seed the campus SQLite DB for demos or tests.

Creates data/campus.db (or CAMPUS_DB_PATH) if missing, ensures the five
campus tables exist, and inserts the sample rows. Use --reset to clear
existing rows first.

Run from project root:

    python scripts/seed_campus_db.py
    python scripts/seed_campus_db.py --reset
    python scripts/seed_campus_db.py --db /tmp/campus.db

Edit campus_assistant/core/seed.py to add or change demo rows.
"""

import argparse
import sys
from pathlib import Path

# Project root on path so "campus_assistant" resolves
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from campus_assistant.core.campus_db import COLLECTIONS, CampusStore
from campus_assistant.core.config import CAMPUS_DB_PATH


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed campus DB for demos/tests.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear all existing rows before inserting seed rows.",
    )
    parser.add_argument(
        "--db",
        default=str(CAMPUS_DB_PATH),
        help="Path to the SQLite file (default: %(default)s).",
    )
    args = parser.parse_args()

    store = CampusStore(args.db)
    store.init(seed=False)
    if args.reset:
        store.clear_all()
        print("Cleared existing campus records.")

    added = store.load_seed()
    for collection in COLLECTIONS:
        print(f"  {collection}: {store.count(collection)} rows")
    print(f"Done. Seeded {added} rows into {store.db_path}.")


if __name__ == "__main__":
    main()
