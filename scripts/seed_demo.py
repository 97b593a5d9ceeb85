#!/usr/bin/env python3
"""Seed a demo scoreboard database.

Usage:
    python scripts/seed_demo.py

This script:
1. Initializes the demo database (clearing any previous demo data)
2. Creates colleges for two streams
3. Creates competition items (with categories for Shareea)
4. Saves points for every college on every item
5. Prints the resulting tables
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from scoreboard.admin.colleges import CollegeInput, create_college  # noqa: E402
from scoreboard.admin.items import ItemInput, create_item  # noqa: E402
from scoreboard.admin.points import PointsInput, save_points  # noqa: E402
from scoreboard.admin.reset import clear_all  # noqa: E402
from scoreboard.aggregation.results import build_results  # noqa: E402
from scoreboard.db.session import get_session, init_db  # noqa: E402

DEMO_DB_PATH = PROJECT_ROOT / "demo.db"

DEMO_COLLEGES = {
    "Shareea": ["Al Noor College", "Darul Huda", "Markaz Academy"],
    "Life": ["Green Valley", "Hill Top Campus"],
}

# (name, stream, category)
DEMO_ITEMS = [
    ("Qiraath", "Shareea", "Sanaviyya"),
    ("Essay Writing", "Shareea", "Sanaviyya"),
    ("Elocution", "Shareea", "Bakalooriyya"),
    ("Quiz", "Life", None),
    ("Poster Design", "Life", None),
]

# Points cycle through this table so the demo is reproducible
DEMO_POINTS = [10, 7, 5, 3, 1]

# Tables printed after seeding
DEMO_TABLES = [("Shareea", "Sanaviyya"), ("Shareea", "Bakalooriyya"), ("Life", None)]


def seed_database() -> None:
    """Create demo colleges, items and points."""
    init_db(DEMO_DB_PATH)
    session = get_session(DEMO_DB_PATH)

    try:
        clear_all(session)

        print("Creating colleges...")
        colleges = {}
        for stream, names in DEMO_COLLEGES.items():
            colleges[stream] = [
                create_college(session, CollegeInput(name=name, stream=stream))
                for name in names
            ]
            print(f"  {stream}: {len(names)} colleges")

        print("Creating items...")
        items = [
            create_item(session, ItemInput(name=name, stream=stream, category=category))
            for name, stream, category in DEMO_ITEMS
        ]
        print(f"  {len(items)} items")

        print("Saving points...")
        batch = []
        for i, item in enumerate(items):
            for j, college in enumerate(colleges[item.stream]):
                points = DEMO_POINTS[(i + j) % len(DEMO_POINTS)]
                batch.append(
                    PointsInput(college_id=college.college_id, item_id=item.item_id, points=points)
                )
        saved = save_points(session, batch)
        print(f"  {len(saved)} entries")

    finally:
        session.close()


def print_results() -> None:
    """Print the demo results tables."""
    session = get_session(DEMO_DB_PATH)

    try:
        for stream, category in DEMO_TABLES:
            table = build_results(session, stream, category)
            title = f"{stream} / {category}" if category else stream
            print(f"\n{title}")
            if table.empty:
                print("  (no results)")
                continue
            for row in table.colleges:
                cells = ", ".join(f"{name}={row.points.get(name, 0)}" for name in table.items)
                print(f"  #{row.rank} {row.name}: {row.total} ({cells})")
    finally:
        session.close()


def main() -> int:
    """Main entry point."""
    print("=" * 60)
    print("Scoreboard Demo Seeding Script")
    print("=" * 60)

    print("\n[1/2] Seeding database...")
    seed_database()

    print("\n[2/2] Results...")
    print_results()

    print("\n" + "=" * 60)
    print("Demo seeding complete!")
    print(f"Database: {DEMO_DB_PATH}")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
