#!/usr/bin/env python3
"""
Database Seed Script

Populates the books table with the 50 sample books.

USAGE:
    # From the project root with venv activated
    alembic upgrade head
    python scripts/seed_data.py

    # Options:
    python scripts/seed_data.py --create-tables   # Create the table without Alembic

Running it again is safe: books already present (same title and author)
are skipped.

On MySQL the sample books published before 1901 cannot be stored in the
YEAR column. They are reported as failed and the script exits with 1.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from catalog.database import create_tables, get_connection_provider
from catalog.exceptions import CatalogConnectionError
from catalog.services.repository import BookRepository
from catalog.services.seeder import MYSQL_YEAR_RANGE, seed, years_outside_mysql_range

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def seed_database(create: bool = False) -> int:
    """
    Seed the configured database.

    Args:
        create: Create the books table first if it does not exist.

    Returns:
        Process exit code.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    provider = get_connection_provider()
    try:
        if create:
            create_tables(provider.get_instance())
        report = seed(BookRepository(provider))
    except CatalogConnectionError as exc:
        print(f"Error seeding database: {exc}")
        print("Make sure that:")
        print("  - MySQL is running (port 3306 by default)")
        print("  - the 'library' database exists")
        print("  - the books table exists (run `alembic upgrade head` first)")
        return 1

    print("=" * 60)
    print("Database seeding completed!")
    print("=" * 60)
    print("\nSummary:")
    print(f"  - Added: {len(report.inserted)}")
    print(f"  - Already present: {len(report.skipped)}")
    print(f"  - Failed: {len(report.failed)}")
    for title, reason in report.failed.items():
        print(f"      {title}: {reason}")

    too_old = [title for title in years_outside_mysql_range() if title in report.failed]
    if too_old:
        low, high = MYSQL_YEAR_RANGE
        print(
            f"\nNote: MySQL YEAR columns only hold {low}-{high}. "
            f"{len(too_old)} sample book(s) are older and fail on every run."
        )
    return 1 if report.failed else 0


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Insert the sample books into the catalog"
    )
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create the books table if it does not exist",
    )
    args = parser.parse_args()
    return seed_database(create=args.create_tables)


if __name__ == "__main__":
    sys.exit(main())
