#!/usr/bin/env python3
"""Seed a camp data directory with stands and an admin hunter.

Usage:
    python scripts/seed_camp.py --admin Boss --pin 1234 "North Ridge" "Creek Bottom"
"""

import argparse
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from logic.admin import CampAdmin  # noqa: E402
from logic.config import DATA_DIR  # noqa: E402
from logic.models import Hunter, Stand  # noqa: E402
from logic.repository import Repository  # noqa: E402
from logic.store import EntitySet, JsonStore  # noqa: E402


def seed(data_dir: str, stand_names, admin_name=None, admin_pin=None):
    """Add the named stands and admin hunter unless they already exist.

    Args:
        data_dir: Camp data directory.
        stand_names: Display names of the stands to create.
        admin_name: Name of the admin hunter, or None to skip.
        admin_pin: PIN for the admin hunter.
    """
    store = JsonStore(data_dir)
    store.ensure_files()
    admin = CampAdmin(store)

    stands: Repository[Stand] = Repository(store.load(EntitySet.STANDS))
    for name in stand_names:
        if stands.find_by_name(name):
            print(f"Stand '{name}' already exists, skipping")
            continue
        stand = admin.add_stand(name)
        print(f"Added stand {stand.id}: {stand.name}")

    if admin_name:
        hunters: Repository[Hunter] = Repository(store.load(EntitySet.HUNTERS))
        if hunters.find_by_name(admin_name):
            print(f"Hunter '{admin_name}' already exists, skipping")
        else:
            hunter = admin.add_hunter(admin_name, admin_pin, is_admin=True)
            print(f"Added admin {hunter.id}: {hunter.name}")


def main():
    parser = argparse.ArgumentParser(description="Seed camp stands and an admin hunter")
    parser.add_argument("stands", nargs="*", help="Stand names to create")
    parser.add_argument("--admin", help="Name of an admin hunter to create")
    parser.add_argument("--pin", help="PIN for the admin hunter")
    parser.add_argument("--data-dir", default=DATA_DIR, help="Camp data directory")
    args = parser.parse_args()

    seed(args.data_dir, args.stands, args.admin, args.pin)


if __name__ == "__main__":
    main()
