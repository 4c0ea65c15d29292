"""CSV column normalization — handles BOM, trailing spaces, encoding quirks."""

from __future__ import annotations

import re


def normalize_column_name(name: str) -> str:
    """Normalize a CSV column name.

    - Strips leading/trailing whitespace
    - Removes BOM characters (\\ufeff)
    - Replaces multiple spaces / non-breaking spaces with single underscore
    - Lowercases
    - Strips non-alphanumeric characters (except underscore)
    """
    # Remove BOM
    name = name.replace("\ufeff", "")
    # Strip whitespace
    name = name.strip()
    # Replace spaces, non-breaking spaces, tabs with underscore
    name = re.sub(r"[\s\u00a0]+", "_", name)
    # Lowercase
    name = name.lower()
    # Remove anything that's not alphanumeric or underscore
    name = re.sub(r"[^\w]", "", name, flags=re.UNICODE)
    return name


def clean_string(value: str | None) -> str | None:
    """Strip whitespace and return None for empty strings."""
    if value is None:
        return None
    value = value.strip()
    return value if value else None


def normalize_state_code(raw: str | None) -> str | None:
    """'il ' -> 'IL'."""
    value = clean_string(raw)
    return value.upper() if value else None


def parse_zip(raw: str | None) -> int | None:
    """Parse zip codes like '02134', '2134.0' or '62701-1234' to an int.

    Leading zeros are dropped, ZIP+4 suffixes ignored.
    """
    value = clean_string(raw)
    if not value:
        return None
    value = value.split("-", 1)[0].strip()
    try:
        return int(float(value)) if "." in value else int(value)
    except ValueError:
        return None
