"""Read-only display of the workouts on a date."""

from __future__ import annotations

from datetime import date as Date
from typing import Optional

from .datamanager import DataManager
from .datemanager import Signal
from .workout import Workout

NO_WORKOUTS = "No workouts for this date"


def _format_number(value: float) -> str:
    """Shortest form of a number: 100.0 gives '100', 62.5 gives '62.5'."""
    if value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(value)


class WorkoutView:
    """Lists the workouts of the selected date and forwards edit and delete requests."""

    def __init__(self, data_manager: DataManager, current_date: Optional[Date] = None) -> None:
        self._data_manager = data_manager
        self._date = current_date if current_date is not None else Date.today()
        self.edit_requested = Signal()
        self.delete_requested = Signal()
        self._workouts: list[Workout] = []
        self.refresh()

    @property
    def date(self) -> Date:
        """The date on display."""
        return self._date

    @property
    def workouts(self) -> list[Workout]:
        """The workouts on display."""
        return list(self._workouts)

    @property
    def has_workouts(self) -> bool:
        """True when there are workouts, and so edit and delete are offered."""
        return bool(self._workouts)

    def set_date(self, date: Date) -> None:
        """Show the workouts of another date."""
        self._date = date
        self.refresh()

    def refresh(self) -> None:
        """Reload the workouts of the current date."""
        self._workouts = self._data_manager.workouts_by_date(self._date)

    def render(self) -> list[str]:
        """Return the display lines for the workouts on display."""
        if not self._workouts:
            return [NO_WORKOUTS]
        lines: list[str] = []
        for workout in self._workouts:
            lines.append("Workout")
            lines.append(f"Status: {workout.status_string()}")
            if workout.notes:
                lines.append(f"Notes: {workout.notes}")
            if workout.exercises:
                lines.append("Exercises:")
            for number, exercise in enumerate(workout.exercises, start=1):
                lines.append(f"{number}. {exercise.exercise_name}")
                lines.extend(
                    f"Set {set_number}: {_format_number(set_data.weight)} kg × "
                    f"{set_data.reps} reps × {set_data.sets} sets"
                    for set_number, set_data in enumerate(exercise.sets_data, start=1)
                )
                if exercise.notes:
                    lines.append(f"Notes: {exercise.notes}")
        return lines

    def request_edit(self) -> None:
        """Emit edit_requested."""
        self.edit_requested.emit()

    def delete(self, confirmed: bool) -> bool:
        """Delete every workout on display if confirmed; return whether anything was deleted."""
        if not self._workouts or not confirmed:
            return False
        for workout in self._workouts:
            self._data_manager.delete_workout(workout.id)
        self.delete_requested.emit()
        return True