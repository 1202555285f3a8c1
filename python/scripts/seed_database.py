#!/usr/bin/env python3
"""
Seed the department document store from the JSON fixtures.

Every record goes through the same pydantic validation as the API, so the
collections only ever hold what the gateway itself would accept.

    python python/scripts/seed_database.py            # MONGODB_URI or local default
    python python/scripts/seed_database.py --dry-run  # validate and count only
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict

from pymongo import ASCENDING, MongoClient

# Add the parent directory to the path so we can import the gateway package
sys.path.append(str(Path(__file__).parent.parent))

from aiml_gateway.config import DEFAULT_DATA_DIR, load_mongodb_uri
from aiml_gateway.services.content_store import ContentStore, load_content

logger = logging.getLogger(__name__)

DEFAULT_DB_NAME = "aiml_department"

# collection -> (ContentStore attribute, unique key)
COLLECTIONS = {
    "faculty": ("faculty", "id"),
    "courses": ("courses", "code"),
    "academic_calendar": ("calendars", "academicYear"),
    "infrastructure": ("infrastructure", "department"),
}


def record_counts(store: ContentStore) -> Dict[str, int]:
    return {name: len(getattr(store, attr)) for name, (attr, _) in COLLECTIONS.items()}


def seed_database(db, store: ContentStore) -> Dict[str, int]:
    """Replace each collection's contents and ensure its unique index"""
    counts = {}
    for name, (attr, key) in COLLECTIONS.items():
        collection = db[name]
        collection.delete_many({})
        documents = [record.model_dump(by_alias=True) for record in getattr(store, attr)]
        if documents:
            collection.insert_many(documents)
        collection.create_index([(key, ASCENDING)], unique=True)
        counts[name] = len(documents)
        logger.info(f"Seeded {len(documents)} documents into '{name}' (unique on {key})")
    return counts


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Seed MongoDB with the AIML department fixtures")
    parser.add_argument("--data-dir", type=Path, default=DEFAULT_DATA_DIR, help="Fixture directory")
    parser.add_argument("--mongodb-uri", default=None, help="Overrides MONGODB_URI")
    parser.add_argument("--dry-run", action="store_true", help="Validate fixtures and print counts without connecting")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    store = load_content(args.data_dir)
    if args.dry_run:
        for name, count in record_counts(store).items():
            print(f"{name}: {count}")
        return 0

    uri = args.mongodb_uri or load_mongodb_uri()
    client = MongoClient(uri)
    try:
        db = client.get_default_database(DEFAULT_DB_NAME)
        counts = seed_database(db, store)
    finally:
        client.close()

    print(f"Seeded database '{db.name}': {counts}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
