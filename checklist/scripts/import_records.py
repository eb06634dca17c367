#!/usr/bin/env python3
"""
Script to import checklist records from a JSON export of the old PHP API.
Usage: python -m checklist.scripts.import_records export.json

The export is an object with optional "tasks", "artists" and "guests" lists,
each holding the records exactly as the old API returned them.
"""

import argparse
import json
from typing import Dict, List

from pydantic import ValidationError
from sqlmodel import Session

from checklist.app.db.session import engine, create_db_and_tables
from checklist.app.db.models import Artist, Guest, Task
from checklist.app.schemas.records import ArtistCreate, GuestCreate, TaskCreate
from checklist.app.utils.time_format import month_from_date

IMPORTERS = {
    "tasks": (TaskCreate, Task),
    "artists": (ArtistCreate, Artist),
    "guests": (GuestCreate, Guest),
}

def import_records(data: Dict[str, List[dict]], session: Session) -> Dict[str, Dict[str, int]]:
    """Validate and insert records. Invalid rows are skipped and counted."""
    stats = {kind: {"imported": 0, "skipped": 0} for kind in IMPORTERS}

    for kind, (schema, model) in IMPORTERS.items():
        for row in data.get(kind) or []:
            try:
                payload = schema(**row).model_dump()
            except ValidationError as e:
                stats[kind]["skipped"] += 1
                print(f"  ⚠️  Skipped {kind[:-1]} {row.get('id', '?')}: {e.errors()[0]['msg']}")
                continue

            if kind == "tasks":
                payload["complete"] = row.get("complete") in (True, 1, "1", "true")
                payload["month"] = payload["month"] or month_from_date(payload["due_date"])
            if kind == "artists":
                payload["name"] = payload["name"] or ""

            session.add(model(**payload))
            stats[kind]["imported"] += 1

    session.commit()
    return stats

def main():
    arg_parser = argparse.ArgumentParser(description="Import checklist records from a JSON export.")
    arg_parser.add_argument("path", help="Path to the JSON export")
    args = arg_parser.parse_args()

    create_db_and_tables()

    with open(args.path, encoding="utf-8") as f:
        data = json.load(f)

    print(f"📂 Importing from {args.path}...")
    with Session(engine) as session:
        stats = import_records(data, session)

    print("\n" + "="*40)
    print("✅ Import Complete")
    for kind, counts in stats.items():
        print(f"  {kind.title()}: {counts['imported']} imported, {counts['skipped']} skipped")
    print("="*40)

if __name__ == "__main__":
    main()
