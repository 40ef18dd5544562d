"""Workouts for a day and the exercises performed in them."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date as Date
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from .setdata import SetData


def _as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if isinstance(value, float) and not value.is_integer():
        return 0
    return int(value)


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _format_datetime(value: Optional[datetime]) -> str:
    return value.isoformat(timespec="seconds") if value is not None else ""


def _parse_datetime(text: str) -> Optional[datetime]:
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def _parse_date(text: str) -> Optional[Date]:
    try:
        return Date.fromisoformat(text)
    except ValueError:
        return None


def _timestamp_from(data: Mapping[str, Any], key: str) -> Optional[datetime]:
    if key in data:
        return _parse_datetime(_as_str(data[key]))
    return datetime.now()


class WorkoutStatus(Enum):
    """Progress of a workout; the value is its stored form."""

    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass
class WorkoutExercise:
    """One exercise within a workout, with its sets."""

    id: int = 0
    workout_id: int = 0
    exercise_id: int = 0
    exercise_name: str = ""
    sets_data: list[SetData] = field(default_factory=list)
    notes: str = ""
    created_at: Optional[datetime] = field(default_factory=datetime.now)
    updated_at: Optional[datetime] = field(default_factory=datetime.now)

    def add_set(self, set_data: SetData) -> None:
        """Append a set."""
        self.sets_data.append(set_data)

    def remove_set(self, index: int) -> None:
        """Remove the set at index; an index out of range is ignored."""
        if 0 <= index < len(self.sets_data):
            del self.sets_data[index]

    def clear_sets(self) -> None:
        """Remove all sets."""
        self.sets_data.clear()

    def validation_errors(self) -> list[str]:
        """Return the reasons this entry is invalid."""
        errors = []
        if self.exercise_id <= 0:
            errors.append("Invalid exercise ID")
        if not self.exercise_name.strip():
            errors.append("Exercise name cannot be empty")
        if not self.sets_data:
            errors.append("At least one set is required")
        else:
            errors.extend(
                f"Set {number} is invalid"
                for number, set_data in enumerate(self.sets_data, start=1)
                if not set_data.is_valid()
            )
        return errors

    def is_valid(self) -> bool:
        """Return True when there are no validation errors."""
        return not self.validation_errors()

    def to_json(self) -> dict[str, Any]:
        """Return a JSON-ready mapping."""
        return {
            "id": self.id,
            "workoutId": self.workout_id,
            "exerciseId": self.exercise_id,
            "exerciseName": self.exercise_name,
            "notes": self.notes,
            "createdAt": _format_datetime(self.created_at),
            "updatedAt": _format_datetime(self.updated_at),
            "setsData": [set_data.to_json() for set_data in self.sets_data],
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> WorkoutExercise:
        """Build an entry from a mapping; missing timestamps become now."""
        result = cls()
        if "id" in data:
            result.id = _as_int(data["id"])
        if "workoutId" in data:
            result.workout_id = _as_int(data["workoutId"])
        if "exerciseId" in data:
            result.exercise_id = _as_int(data["exerciseId"])
        if "exerciseName" in data:
            result.exercise_name = _as_str(data["exerciseName"])
        if "notes" in data:
            result.notes = _as_str(data["notes"])
        result.created_at = _timestamp_from(data, "createdAt")
        result.updated_at = _timestamp_from(data, "updatedAt")
        if "setsData" in data:
            result.sets_data.extend(
                SetData.from_json(_as_mapping(item)) for item in _as_list(data["setsData"])
            )
        return result


@dataclass
class Workout:
    """A workout on a date; id 0 means not yet stored, date None is invalid."""

    id: int = 0
    date: Optional[Date] = None
    notes: str = ""
    status: WorkoutStatus = WorkoutStatus.IN_PROGRESS
    created_at: Optional[datetime] = field(default_factory=datetime.now)
    updated_at: Optional[datetime] = field(default_factory=datetime.now)
    exercises: list[WorkoutExercise] = field(default_factory=list)

    def add_exercise(self, exercise: WorkoutExercise) -> None:
        """Append an exercise."""
        self.exercises.append(exercise)

    def remove_exercise(self, index: int) -> None:
        """Remove the exercise at index; an index out of range is ignored."""
        if 0 <= index < len(self.exercises):
            del self.exercises[index]

    def clear_exercises(self) -> None:
        """Remove all exercises."""
        self.exercises.clear()

    def validation_errors(self) -> list[str]:
        """Return the reasons this workout is invalid."""
        errors = []
        if self.date is None:
            errors.append("Invalid workout date")
        return errors

    def is_valid(self) -> bool:
        """Return True when there are no validation errors."""
        return not self.validation_errors()

    def is_empty(self) -> bool:
        """Return True when the workout holds no exercises."""
        return not self.exercises

    def status_string(self) -> str:
        """Return the stored form of the status."""
        return self.status.value

    @staticmethod
    def status_from_string(text: str) -> WorkoutStatus:
        """Parse a stored status; anything unknown means in progress."""
        if text == WorkoutStatus.COMPLETED.value:
            return WorkoutStatus.COMPLETED
        if text == WorkoutStatus.CANCELLED.value:
            return WorkoutStatus.CANCELLED
        return WorkoutStatus.IN_PROGRESS

    def to_json(self) -> dict[str, Any]:
        """Return a JSON-ready mapping."""
        return {
            "id": self.id,
            "date": self.date.isoformat() if self.date is not None else "",
            "notes": self.notes,
            "status": self.status_string(),
            "createdAt": _format_datetime(self.created_at),
            "updatedAt": _format_datetime(self.updated_at),
            "exercises": [exercise.to_json() for exercise in self.exercises],
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Workout:
        """Build a workout from a mapping; missing timestamps become now."""
        result = cls()
        if "id" in data:
            result.id = _as_int(data["id"])
        if "date" in data:
            result.date = _parse_date(_as_str(data["date"]))
        if "notes" in data:
            result.notes = _as_str(data["notes"])
        if "status" in data:
            result.status = cls.status_from_string(_as_str(data["status"]))
        result.created_at = _timestamp_from(data, "createdAt")
        result.updated_at = _timestamp_from(data, "updatedAt")
        if "exercises" in data:
            result.exercises.extend(
                WorkoutExercise.from_json(_as_mapping(item))
                for item in _as_list(data["exercises"])
            )
        return result