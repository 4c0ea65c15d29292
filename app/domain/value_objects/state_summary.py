"""StateSummary value object — a (state code, state name) pair."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StateSummary:
    state_code: str
    state_name: str

    def to_dict(self) -> dict:
        return {"state_code": self.state_code, "state_name": self.state_name}

    @classmethod
    def from_dict(cls, data: dict) -> StateSummary:
        return cls(state_code=data["state_code"], state_name=data["state_name"])
