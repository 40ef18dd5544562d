"""A single entry of weight, repetitions and sets for an exercise."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


def _as_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


def _as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if isinstance(value, float) and not value.is_integer():
        return 0
    return int(value)


@dataclass
class SetData:
    """Weight lifted, repetitions per set and the number of sets."""

    weight: float = 0.0
    reps: int = 0
    sets: int = 1

    def validation_errors(self) -> list[str]:
        """Return the reasons this entry is invalid, in a fixed order."""
        errors = []
        if self.weight < 0.0:
            errors.append("Weight cannot be negative")
        if self.reps <= 0:
            errors.append("Reps must be greater than 0")
        if self.sets <= 0:
            errors.append("Sets must be greater than 0")
        return errors

    def is_valid(self) -> bool:
        """Return True when there are no validation errors."""
        return not self.validation_errors()

    def to_json(self) -> dict[str, Any]:
        """Return a JSON-ready mapping."""
        return {"weight": self.weight, "reps": self.reps, "sets": self.sets}

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> SetData:
        """Build an entry from a mapping; missing keys keep their defaults."""
        result = cls()
        if "weight" in data:
            result.weight = _as_float(data["weight"])
        if "reps" in data:
            result.reps = _as_int(data["reps"])
        if "sets" in data:
            result.sets = _as_int(data["sets"])
        return result