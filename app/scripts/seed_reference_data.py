"""Seed the reloading reference taxonomy into the database.

Usage:
    python -m app.scripts.seed_reference_data [--path reference_data.yaml]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from app.db.session import SessionLocal
from app.reference_data import (
    ReferenceDataValidationError,
    get_reference_data_version,
    load_reference_data,
    parse_reference_data,
)
from app.services.reference_data_seeder import seed_reference_data


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    parser = argparse.ArgumentParser(description="Seed ReloadLog reference data")
    parser.add_argument(
        "--path",
        default=None,
        help="Reference data YAML (default: REFERENCE_DATA_PATH or the packaged file)",
    )
    args = parser.parse_args()

    try:
        if args.path:
            data = parse_reference_data(Path(args.path))
            version = data.get("version") or args.path
        else:
            data = load_reference_data()
            version = get_reference_data_version()
    except (FileNotFoundError, ReferenceDataValidationError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    db = SessionLocal()
    try:
        created = seed_reference_data(db, data)
    finally:
        db.close()

    print(f"Reference data {version} seeded successfully.")
    for table, count in sorted(created.items()):
        print(f"  - {count} {table}")


if __name__ == "__main__":
    main()
