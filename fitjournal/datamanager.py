"""Persistent store for body composition, exercises and workouts."""

from __future__ import annotations

import copy
import json
import logging
import os
import sys
from datetime import date as Date
from pathlib import Path
from typing import Any, Optional, Union

from .bodycomposition import BodyComposition
from .datemanager import Signal
from .exercise import Exercise
from .workout import Workout

logger = logging.getLogger(__name__)

_ORGANIZATION = "Fitness Tracker"
_APPLICATION = "Fitness Tracker"


class StorageError(Exception):
    """Raised when the data file cannot be read, parsed or written."""


def default_data_path() -> Path:
    """Return the per-user location of the data file."""
    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA") or Path.home() / "AppData" / "Roaming")
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.environ.get("XDG_DATA_HOME") or Path.home() / ".local" / "share")
    return base / _ORGANIZATION / _APPLICATION / "fitness-tracker" / "data.json"


def _date_order(value: Optional[Date]) -> tuple[bool, Date]:
    return (value is not None, value or Date.min)


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _as_mapping(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


class DataManager:
    """Keeps all records in memory and writes them to one JSON file on change."""

    def __init__(self, path: Union[str, Path, None] = None) -> None:
        self.path = Path(path) if path is not None else default_data_path()
        self.data_changed = Signal()
        self._body_composition: dict[Optional[Date], BodyComposition] = {}
        self._exercises: dict[int, Exercise] = {}
        self._workouts: dict[int, Workout] = {}
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as error:
            logger.warning("Could not create data directory %s: %s", self.path.parent, error)
        try:
            self.load()
        except StorageError as error:
            logger.warning("%s", error)

    def _commit(self) -> bool:
        try:
            self.save()
        except StorageError as error:
            logger.warning("%s", error)
            return False
        return True

    # Body composition

    def save_body_composition(self, data: BodyComposition) -> bool:
        """Store the record for its date; return whether it was written."""
        self._body_composition[data.date] = copy.deepcopy(data)
        if not self._commit():
            return False
        self.data_changed.emit()
        return True

    def load_body_composition(self, date: Optional[Date]) -> BodyComposition:
        """Return the record for a date, or an empty record."""
        stored = self._body_composition.get(date)
        return copy.deepcopy(stored) if stored is not None else BodyComposition()

    def has_body_composition(self, date: Optional[Date]) -> bool:
        """Return True when a record exists for the date."""
        return date in self._body_composition

    def delete_body_composition(self, date: Optional[Date]) -> None:
        """Remove the record for a date, if any."""
        if self._body_composition.pop(date, None) is not None:
            self._commit()
            self.data_changed.emit()

    def body_composition_dates(self) -> list[Optional[Date]]:
        """Return the dates that have records, in ascending order."""
        return sorted(self._body_composition, key=_date_order)

    # Exercise library

    def save_exercise(self, exercise: Exercise) -> bool:
        """Store a valid exercise, assigning an id if it has none."""
        if not exercise.is_valid():
            return False
        to_save = copy.deepcopy(exercise)
        if to_save.id == 0:
            to_save.id = self.next_exercise_id()
        self._exercises[to_save.id] = to_save
        if not self._commit():
            return False
        self.data_changed.emit()
        return True

    def load_exercise(self, exercise_id: int) -> Exercise:
        """Return the exercise with an id, or an empty one with id 0."""
        stored = self._exercises.get(exercise_id)
        return copy.deepcopy(stored) if stored is not None else Exercise()

    def all_exercises(self) -> list[Exercise]:
        """Return every exercise, ordered by id."""
        return [copy.deepcopy(self._exercises[key]) for key in sorted(self._exercises)]

    def exercises_by_category(self, category: str) -> list[Exercise]:
        """Return the active exercises of a category, ordered by id."""
        return [
            exercise
            for exercise in self.all_exercises()
            if exercise.category == category and exercise.is_active
        ]

    def delete_exercise(self, exercise_id: int) -> bool:
        """Remove an exercise; return whether it existed."""
        if self._exercises.pop(exercise_id, None) is None:
            return False
        self._commit()
        self.data_changed.emit()
        return True

    def next_exercise_id(self) -> int:
        """Return one more than the highest exercise id."""
        return max(self._exercises, default=0) + 1

    # Workouts

    def save_workout(self, workout: Workout) -> bool:
        """Store a valid workout, assigning an id if it has none."""
        if not workout.is_valid():
            return False
        to_save = copy.deepcopy(workout)
        if to_save.id == 0:
            to_save.id = self.next_workout_id()
        self._workouts[to_save.id] = to_save
        if not self._commit():
            return False
        self.data_changed.emit()
        return True

    def load_workout(self, workout_id: int) -> Workout:
        """Return the workout with an id, or an empty one with id 0."""
        stored = self._workouts.get(workout_id)
        return copy.deepcopy(stored) if stored is not None else Workout()

    def all_workouts(self) -> list[Workout]:
        """Return every workout, ordered by id."""
        return [copy.deepcopy(self._workouts[key]) for key in sorted(self._workouts)]

    def workouts_by_date(self, date: Optional[Date]) -> list[Workout]:
        """Return the workouts on a date, ordered by id."""
        return [workout for workout in self.all_workouts() if workout.date == date]

    def delete_workout(self, workout_id: int) -> bool:
        """Remove a workout; return whether it existed."""
        if self._workouts.pop(workout_id, None) is None:
            return False
        self._commit()
        self.data_changed.emit()
        return True

    def next_workout_id(self) -> int:
        """Return one more than the highest workout id."""
        return max(self._workouts, default=0) + 1

    # Persistence

    def load(self) -> None:
        """Read the data file; a missing file is not an error."""
        if not self.path.exists():
            return
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as error:
            raise StorageError(f"Failed to open data file for reading: {self.path}") from error
        try:
            parsed = json.loads(text)
        except ValueError as error:
            raise StorageError(f"Failed to parse data file: {error}") from error
        root = _as_mapping(parsed)

        if "bodyComposition" in root:
            self._body_composition.clear()
            for item in _as_list(root["bodyComposition"]):
                record = BodyComposition.from_json(_as_mapping(item))
                if record.date is not None:
                    self._body_composition[record.date] = record

        if "exercises" in root:
            self._exercises.clear()
            for item in _as_list(root["exercises"]):
                exercise = Exercise.from_json(_as_mapping(item))
                if exercise.id > 0:
                    self._exercises[exercise.id] = exercise

        if "workouts" in root:
            self._workouts.clear()
            for item in _as_list(root["workouts"]):
                workout = Workout.from_json(_as_mapping(item))
                if workout.id > 0:
                    self._workouts[workout.id] = workout

    def save(self) -> None:
        """Write every record to the data file."""
        root = {
            "bodyComposition": [
                self._body_composition[key].to_json() for key in self.body_composition_dates()
            ],
            "exercises": [self._exercises[key].to_json() for key in sorted(self._exercises)],
            "workouts": [self._workouts[key].to_json() for key in sorted(self._workouts)],
        }
        try:
            with self.path.open("w", encoding="utf-8") as handle:
                json.dump(root, handle, indent=4, ensure_ascii=False)
        except OSError as error:
            raise StorageError(f"Failed to write data file: {self.path}") from error