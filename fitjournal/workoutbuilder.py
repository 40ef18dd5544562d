"""Entry form for the workout of a day: notes plus a fixed number of exercise rows."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date as Date
from typing import Optional, Union

from .datamanager import DataManager
from .datemanager import Signal
from .exercise import Exercise
from .setdata import SetData
from .workout import Workout, WorkoutExercise

ROW_COUNT = 8
NO_SELECTION = -1
PLACEHOLDER = "Select an exercise"
WORKOUT_NOTES = "workout_notes"
SAVE_BUTTON = "save"

FocusTarget = Union[str, tuple[str, int]]


class WorkoutBuilderError(Exception):
    """Raised when the entered workout cannot be stored."""


def _to_float(text: str) -> float:
    """Parse a field's text; anything unreadable counts as 0."""
    cleaned = text.strip()
    if not cleaned or "_" in cleaned:
        return 0.0
    try:
        value = float(cleaned)
    except ValueError:
        return 0.0
    return value if math.isfinite(value) else 0.0


def _to_int(text: str) -> int:
    """Parse a field's text as a whole number; anything unreadable counts as 0."""
    cleaned = text.strip()
    if not cleaned or "_" in cleaned:
        return 0
    try:
        return int(cleaned)
    except ValueError:
        return 0


@dataclass
class ExerciseRow:
    """One exercise line of the form; exercise_id -1 means nothing is selected."""

    exercise_id: int = NO_SELECTION
    weight_text: str = ""
    reps_text: str = ""
    sets_text: str = "1"
    notes: str = ""

    def clear(self) -> None:
        """Reset the row to its empty state with one set."""
        self.exercise_id = NO_SELECTION
        self.weight_text = ""
        self.reps_text = ""
        self.sets_text = "1"
        self.notes = ""


class WorkoutBuilder:
    """Collects a workout's notes and exercises and stores them as one workout."""

    def __init__(self, data_manager: DataManager, current_date: Optional[Date] = None) -> None:
        self._data_manager = data_manager
        self._date: Optional[Date] = current_date if current_date is not None else Date.today()
        self._editing_workout_id = 0
        self.workout_created = Signal()
        self.cancelled = Signal()
        self.notes = ""
        self.rows = [ExerciseRow() for _ in range(ROW_COUNT)]
        self._available: list[Exercise] = []
        self.update_exercise_choices()

    @property
    def date(self) -> Optional[Date]:
        """The date the workout belongs to."""
        return self._date

    @property
    def editing_workout_id(self) -> int:
        """Id of the workout being edited, or 0 for a new one."""
        return self._editing_workout_id

    def set_date(self, date: Optional[Date]) -> None:
        """Set the date the workout belongs to."""
        self._date = date

    def set_editing_workout_id(self, workout_id: int) -> None:
        """Set the id of the workout being edited; 0 means a new workout."""
        self._editing_workout_id = workout_id

    def update_exercise_choices(self) -> None:
        """Reload the exercise list; every row's selection returns to the placeholder."""
        self._available = self._data_manager.all_exercises()
        for row in self.rows:
            row.exercise_id = NO_SELECTION

    def exercise_choices(self) -> list[tuple[str, int]]:
        """Return the selectable entries as (label, id), the placeholder first."""
        return [(PLACEHOLDER, NO_SELECTION)] + [
            (exercise.name, exercise.id) for exercise in self._available if exercise.is_active
        ]

    def load_workout_data(self, workouts: Sequence[Workout]) -> None:
        """Fill the form from the first of a day's workouts for editing."""
        self.clear_form()
        if not workouts:
            self._editing_workout_id = 0
            return
        self.update_exercise_choices()
        workout = workouts[0]
        self._editing_workout_id = workout.id
        self.notes = workout.notes
        selectable = {exercise_id for _, exercise_id in self.exercise_choices()}
        for exercise, row in zip(workout.exercises, self.rows):
            if exercise.exercise_id in selectable:
                row.exercise_id = exercise.exercise_id
            if exercise.sets_data:
                first = exercise.sets_data[0]
                row.weight_text = f"{first.weight:.1f}"
                row.reps_text = str(first.reps)
                row.sets_text = str(first.sets)
            row.notes = exercise.notes

    def clear_form(self) -> None:
        """Empty the notes and every row and leave edit mode."""
        self.notes = ""
        self._editing_workout_id = 0
        for row in self.rows:
            row.clear()

    def validate_form(self) -> None:
        """Raise ValueError describing the first problem in the entered data."""
        if not any(row.exercise_id > 0 for row in self.rows):
            raise ValueError("Please select at least one exercise for the workout.")
        for number, row in enumerate(self.rows, start=1):
            if row.exercise_id <= 0:
                continue
            if not row.weight_text:
                raise ValueError(f"Exercise {number}: Please enter weight.")
            if _to_float(row.weight_text) < 0:
                raise ValueError(f"Exercise {number}: Weight cannot be negative.")
            if not row.reps_text:
                raise ValueError(f"Exercise {number}: Please enter reps.")
            if _to_int(row.reps_text) <= 0:
                raise ValueError(f"Exercise {number}: Reps must be greater than 0.")
            if not row.sets_text:
                raise ValueError(f"Exercise {number}: Please enter sets.")
            if _to_int(row.sets_text) <= 0:
                raise ValueError(f"Exercise {number}: Sets must be greater than 0.")

    def _exercise_name(self, exercise_id: int) -> str:
        return next(
            (exercise.name for exercise in self._available if exercise.id == exercise_id), ""
        )

    def save_workout(self) -> Workout:
        """Validate and store the workout, emit workout_created and clear the form."""
        self.validate_form()
        workout = Workout(
            id=self._editing_workout_id, date=self._date, notes=self.notes.strip()
        )
        for row in self.rows:
            if row.exercise_id <= 0:
                continue
            set_data = SetData(
                weight=_to_float(row.weight_text),
                reps=_to_int(row.reps_text),
                sets=_to_int(row.sets_text),
            )
            workout.add_exercise(
                WorkoutExercise(
                    exercise_id=row.exercise_id,
                    exercise_name=self._exercise_name(row.exercise_id),
                    sets_data=[set_data],
                    notes=row.notes.strip(),
                )
            )
        if workout.id == 0 and workout.is_valid():
            workout.id = self._data_manager.next_workout_id()
        if not self._data_manager.save_workout(workout):
            raise WorkoutBuilderError("Failed to save workout. Please check your data.")
        self.workout_created.emit()
        self.clear_form()
        return workout

    def cancel(self) -> None:
        """Emit cancelled."""
        self.cancelled.emit()

    def next_focus(self, field: FocusTarget) -> Optional[FocusTarget]:
        """Return where Tab moves from a notes field, or None to use the default order.

        ``field`` is WORKOUT_NOTES or ("notes", row_index); the result is
        ("exercise", row_index) or SAVE_BUTTON.
        """
        if field == WORKOUT_NOTES:
            return ("exercise", 0) if self.rows else None
        if isinstance(field, tuple) and len(field) == 2 and field[0] == "notes":
            index = field[1]
            if not 0 <= index < len(self.rows):
                return None
            if index + 1 < len(self.rows):
                return ("exercise", index + 1)
            return SAVE_BUTTON
        return None