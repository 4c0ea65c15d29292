"""Deterministic cache keys: "{Operation}_{param1}_{param2}..."."""

from __future__ import annotations

from app.domain.value_objects.enums import LookupOperation


def format_key_param(value: object) -> str:
    """Render one already-normalized parameter.

    Floats use repr() (shortest round-trip form), so equal values always
    render identically; -0.0 is folded into 0.0.
    """
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return repr(value + 0.0)
    return str(value)


def build_cache_key(operation: LookupOperation, *params: object) -> str:
    return "_".join([operation.value, *(format_key_param(p) for p in params)])
