"""Seed the geo_data table from a zip-code CSV file.

Usage:
    python -m app.tools.seed_db
    python -m app.tools.seed_db --data-dir data
    python -m app.tools.seed_db --drop  # drop existing data first
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from sqlalchemy import delete, func, select, text
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.csv_loader.loader import load_locations
from app.adapters.persistence.database import async_session_factory
from app.adapters.persistence.models import GeoDataModel

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
logger = logging.getLogger(__name__)

BATCH_SIZE = 1000
CSV_NAME_HINTS = ["uszips", "zips", "zipcodes", "zip_codes", "geo_data", "geodata", "locations"]


async def _drop_data(session: AsyncSession) -> None:
    await session.execute(delete(GeoDataModel))
    await session.commit()
    logger.info("Dropped all existing location data")


async def seed(data_dir: Path, drop: bool = False) -> dict[str, int]:
    """Main seed function. Returns counts of inserted and skipped records."""
    counts = {"locations": 0, "skipped": 0}

    location_csv = _find_csv(data_dir, CSV_NAME_HINTS)
    if not location_csv:
        raise FileNotFoundError(
            f"No location CSV found in {data_dir}. Expected something like uszips.csv"
        )

    rows = load_locations(location_csv)

    async with async_session_factory() as session:
        if drop:
            await _drop_data(session)

        existing_ids = set((await session.execute(select(GeoDataModel.id))).scalars())

        for i, row in enumerate(rows, start=1):
            if row["id"] is not None and row["id"] in existing_ids:
                counts["skipped"] += 1
                continue
            location = GeoDataModel(
                lat=row["lat"],
                lng=row["lng"],
                city=row["city"],
                county_name=row["county_name"],
                state_name=row["state_name"],
                state_id=row["state_id"],
                zip=row["zip"],
            )
            # keep dataset ids when the CSV provides them
            if row["id"] is not None:
                location.id = row["id"]
                existing_ids.add(row["id"])
            session.add(location)
            counts["locations"] += 1

            if i % BATCH_SIZE == 0:
                await session.commit()
                logger.info("Committed %d/%d rows", i, len(rows))

        await session.commit()

        if existing_ids and session.bind.dialect.name == "postgresql":
            # explicit ids bypass the serial sequence; move it past them
            await session.execute(
                text(
                    "SELECT setval(pg_get_serial_sequence('geo_data', 'id'), "
                    "(SELECT MAX(id) FROM geo_data))"
                )
            )
            await session.commit()

    logger.info(
        "Seed complete: %d locations inserted, %d already present",
        counts["locations"], counts["skipped"],
    )
    return counts


def _find_csv(data_dir: Path, name_hints: list[str]) -> Path | None:
    """Find a CSV file matching any of the name hints."""
    for f in sorted(data_dir.glob("*.csv")):
        fname_lower = f.stem.lower()
        for hint in name_hints:
            if hint in fname_lower:
                logger.info("Found CSV: %s (matched hint '%s')", f.name, hint)
                return f
    return None


async def _verify_data() -> None:
    """Print sanity checks after seeding."""
    async with async_session_factory() as session:
        total = (await session.execute(select(func.count(GeoDataModel.id)))).scalar_one()
        states = (
            await session.execute(select(func.count(func.distinct(GeoDataModel.state_id))))
        ).scalar_one()
        zips = (
            await session.execute(select(func.count(func.distinct(GeoDataModel.zip))))
        ).scalar_one()
        missing_county = (
            await session.execute(
                select(func.count(GeoDataModel.id)).where(GeoDataModel.county_name.is_(None))
            )
        ).scalar_one()

        print(f"\n{'='*50}")
        print("SEED VERIFICATION")
        print(f"{'='*50}")
        print(f"Locations:       {total}")
        print(f"Distinct states: {states}")
        print(f"Distinct zips:   {zips}")
        print(f"Missing county:  {missing_county}")
        print(f"{'='*50}\n")


def main():
    parser = argparse.ArgumentParser(description="Seed geo_data from a zip-code CSV file")
    parser.add_argument(
        "--data-dir", type=str, default="data",
        help="Directory containing the CSV file (default: data)",
    )
    parser.add_argument(
        "--drop", action="store_true",
        help="Drop existing data before seeding",
    )
    parser.add_argument(
        "--verify-only", action="store_true",
        help="Only run verification, don't seed",
    )
    args = parser.parse_args()

    data_dir = Path(args.data_dir)
    if not args.verify_only and not data_dir.exists():
        logger.error("Data directory not found: %s", data_dir)
        sys.exit(1)

    if args.verify_only:
        asyncio.run(_verify_data())
    else:
        async def run_all():
            await seed(data_dir, drop=args.drop)
            await _verify_data()
        asyncio.run(run_all())


if __name__ == "__main__":
    main()
