"""CSV loader — reads and normalizes location data files."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from app.adapters.csv_loader.normalizer import (
    clean_string,
    normalize_column_name,
    normalize_state_code,
    parse_zip,
)

logger = logging.getLogger(__name__)


def _sniff_dialect(sample: str) -> type[csv.Dialect] | csv.Dialect:
    """Detect the delimiter (comma/semicolon/tab) from the header line."""
    if not sample:
        return csv.get_dialect("excel")

    first_line = sample.splitlines()[0] if sample else ""
    delims = [",", ";", "\t"]
    counts = {d: first_line.count(d) for d in delims}
    best_delim = max(counts, key=counts.get)

    if counts[best_delim] > 0:
        class DynamicDialect(csv.excel):
            delimiter = best_delim
        return DynamicDialect

    return csv.get_dialect("excel")


def _read_csv(file_path: Path, encoding: str = "utf-8-sig") -> list[dict[str, str | None]]:
    """Read a CSV file with BOM handling and column normalization.

    Args:
        file_path: path to the CSV file.
        encoding: file encoding (utf-8-sig strips BOM automatically).

    Returns:
        List of dicts with normalized column names.
    """
    with open(file_path, encoding=encoding, newline="") as f:
        sample = f.read(4096)
        f.seek(0)
        dialect = _sniff_dialect(sample)
        reader = csv.DictReader(f, dialect=dialect)
        if reader.fieldnames is None:
            raise ValueError(f"CSV file {file_path} has no header row")

        col_map = {col: normalize_column_name(col) for col in reader.fieldnames}
        rows = []
        for raw_row in reader:
            row = {col_map[k]: clean_string(v) for k, v in raw_row.items() if k is not None}
            rows.append(row)

    logger.info("Loaded %d rows from %s (columns: %s)", len(rows), file_path.name, list(col_map.values()))
    return rows


def load_locations(file_path: Path) -> list[dict]:
    """Load and normalize a US zip-code dataset.

    Expected columns (after normalization), with common aliases:
        zip/zipcode/postal_code, lat/latitude, lng/lon/longitude, city,
        county_name/county, state_id/state_code/state, state_name, optional id
    Rows without a zip or coordinates are skipped.
    """
    rows = _read_csv(file_path)
    locations = []
    skipped = 0
    for row in rows:
        postal_code = parse_zip(row.get("zip") or row.get("zipcode") or row.get("postal_code"))
        lat = _parse_float(row.get("lat") or row.get("latitude"))
        lng = _parse_float(row.get("lng") or row.get("lon") or row.get("longitude"))
        if postal_code is None or lat is None or lng is None:
            skipped += 1
            continue

        locations.append({
            "id": _parse_id(row.get("id")),
            "lat": lat,
            "lng": lng,
            "city": clean_string(row.get("city")),
            "county_name": clean_string(row.get("county_name") or row.get("county")),
            "state_id": normalize_state_code(
                row.get("state_id") or row.get("state_code") or row.get("state")
            ),
            "state_name": clean_string(row.get("state_name")),
            "zip": postal_code,
        })
    if skipped:
        logger.warning("Skipped %d rows without zip or coordinates", skipped)
    logger.info("Parsed %d locations", len(locations))
    return locations


def _parse_float(value: str | None) -> float | None:
    """Safely parse a float from a string."""
    if not value:
        return None
    try:
        return float(value.replace(",", ".").strip())
    except (ValueError, AttributeError):
        return None


def _parse_id(value: str | None) -> int | None:
    if not value:
        return None
    try:
        return int(float(value.strip()))
    except ValueError:
        return None
