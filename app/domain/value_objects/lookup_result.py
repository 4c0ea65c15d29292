"""LookupResult — the success/data/message envelope returned by every lookup."""

from __future__ import annotations

import json
from dataclasses import dataclass, field

from app.domain.entities.location import LocationRecord


@dataclass(frozen=True)
class LookupResult:
    """Ordered records plus a success flag.

    ``success=True`` with no data means "no matches". ``success=False`` is
    reserved for failures and always carries empty data and a message.
    """

    data: list[LocationRecord] = field(default_factory=list)
    success: bool = True
    message: str | None = None

    @classmethod
    def found(cls, records: list[LocationRecord]) -> LookupResult:
        return cls(data=list(records), success=True)

    @classmethod
    def failed(cls, message: str) -> LookupResult:
        return cls(data=[], success=False, message=message)

    def to_dict(self) -> dict:
        return {
            "data": [r.to_dict() for r in self.data],
            "success": self.success,
            "message": self.message,
        }

    @classmethod
    def from_dict(cls, payload: dict) -> LookupResult:
        return cls(
            data=[LocationRecord.from_dict(r) for r in payload.get("data") or []],
            success=bool(payload["success"]),
            message=payload.get("message"),
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_json(cls, raw: str) -> LookupResult:
        return cls.from_dict(json.loads(raw))
