"""An exercise in the user's exercise library."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

MAX_NAME_LENGTH = 255


def _as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if isinstance(value, float) and not value.is_integer():
        return 0
    return int(value)


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_bool(value: Any) -> bool:
    return value if isinstance(value, bool) else False


def _format_datetime(value: Optional[datetime]) -> str:
    return value.isoformat(timespec="seconds") if value is not None else ""


def _parse_datetime(text: str) -> Optional[datetime]:
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


@dataclass
class Exercise:
    """A named exercise with a category; id 0 means not yet stored."""

    id: int = 0
    name: str = ""
    category: str = ""
    is_active: bool = True
    created_at: Optional[datetime] = field(default_factory=datetime.now)
    updated_at: Optional[datetime] = field(default_factory=datetime.now)

    def validation_errors(self) -> list[str]:
        """Return the reasons this exercise is invalid."""
        errors = []
        if not self.name.strip():
            errors.append("Exercise name cannot be empty")
        elif len(self.name) > MAX_NAME_LENGTH:
            errors.append("Exercise name is too long (max 255 characters)")
        if not self.category.strip():
            errors.append("Exercise category cannot be empty")
        return errors

    def is_valid(self) -> bool:
        """Return True when there are no validation errors."""
        return not self.validation_errors()

    def to_json(self) -> dict[str, Any]:
        """Return a JSON-ready mapping."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "isActive": self.is_active,
            "createdAt": _format_datetime(self.created_at),
            "updatedAt": _format_datetime(self.updated_at),
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Exercise:
        """Build an exercise from a mapping; missing timestamps become now."""
        exercise = cls()
        if "id" in data:
            exercise.id = _as_int(data["id"])
        if "name" in data:
            exercise.name = _as_str(data["name"])
        if "category" in data:
            exercise.category = _as_str(data["category"])
        if "isActive" in data:
            exercise.is_active = _as_bool(data["isActive"])
        exercise.created_at = (
            _parse_datetime(_as_str(data["createdAt"])) if "createdAt" in data else datetime.now()
        )
        exercise.updated_at = (
            _parse_datetime(_as_str(data["updatedAt"])) if "updatedAt" in data else datetime.now()
        )
        return exercise