"""Management of the exercise library: a form plus a table of exercises."""

from __future__ import annotations

from typing import Optional

from .datamanager import DataManager
from .datemanager import Signal
from .exercise import Exercise

CATEGORIES = ("strength", "cardio", "flexibility")
MAX_NAME_LENGTH = 255
HEADERS = ("ID", "Name", "Category", "Status")

_ADDED = "Exercise added successfully!"
_UPDATED = "Exercise updated successfully!"
_DELETED = "Exercise deleted successfully!"


class ExerciseLibraryError(Exception):
    """Raised when the library cannot store or find an exercise."""


class ExerciseLibrary:
    """Form for adding, editing and deleting exercises, with a table of all of them."""

    def __init__(self, data_manager: DataManager) -> None:
        self._data_manager = data_manager
        self.exercise_added = Signal()
        self.exercise_updated = Signal()
        self.exercise_deleted = Signal()
        self.name = ""
        self._category = CATEGORIES[0]
        self.current_exercise_id = 0
        self.is_editing = False
        self.add_enabled = True
        self.edit_enabled = False
        self.delete_enabled = False
        self.selected_id: Optional[int] = None
        self._rows: list[tuple[str, str, str, str]] = []
        self.refresh()

    @property
    def category(self) -> str:
        """The category chosen in the form."""
        return self._category

    @category.setter
    def category(self, value: str) -> None:
        if value not in CATEGORIES:
            raise ValueError(f"Unknown category: {value!r}")
        self._category = value

    def rows(self) -> list[tuple[str, str, str, str]]:
        """Return the table rows: id, name, category and status."""
        return list(self._rows)

    def refresh(self) -> None:
        """Reload the table from the data manager."""
        self._rows = [
            (
                str(exercise.id),
                exercise.name,
                exercise.category,
                "Active" if exercise.is_active else "Inactive",
            )
            for exercise in self._data_manager.all_exercises()
        ]

    def select(self, exercise_id: int) -> bool:
        """Select a table row and load its exercise into the form; return whether it loaded."""
        if str(exercise_id) not in (row[0] for row in self._rows):
            raise KeyError(exercise_id)
        self.selected_id = exercise_id
        exercise = self._data_manager.load_exercise(exercise_id)
        if exercise.id <= 0:
            return False
        self.current_exercise_id = exercise.id
        self.name = exercise.name
        if exercise.category in CATEGORIES:
            self._category = exercise.category
        self.add_enabled = False
        self.edit_enabled = True
        self.delete_enabled = True
        self.is_editing = True
        return True

    def validate_form(self) -> None:
        """Raise ValueError when the entered name is empty or too long."""
        name = self.name.strip()
        if not name:
            raise ValueError("Exercise name cannot be empty.")
        if len(name) > MAX_NAME_LENGTH:
            raise ValueError("Exercise name is too long (max 255 characters).")

    def add_exercise(self) -> str:
        """Store the entered exercise as a new one and return the success message."""
        self.validate_form()
        exercise = Exercise(id=0, name=self.name.strip(), category=self._category)
        if not self._data_manager.save_exercise(exercise):
            raise ExerciseLibraryError("Failed to add exercise. Please check your data.")
        self.exercise_added.emit()
        self.clear_form()
        self.refresh()
        return _ADDED

    def edit_exercise(self) -> Optional[str]:
        """Update the selected exercise; return the success message, or None if none is selected."""
        self.validate_form()
        if self.current_exercise_id == 0:
            return None
        exercise = self._data_manager.load_exercise(self.current_exercise_id)
        if exercise.id == 0:
            raise ExerciseLibraryError("Exercise not found.")
        exercise.name = self.name.strip()
        exercise.category = self._category
        if not self._data_manager.save_exercise(exercise):
            raise ExerciseLibraryError("Failed to update exercise. Please check your data.")
        self.exercise_updated.emit()
        self.clear_form()
        self.refresh()
        return _UPDATED

    def delete_exercise(self, confirmed: bool) -> Optional[str]:
        """Delete the selected exercise if confirmed; return the success message or None."""
        if self.current_exercise_id == 0 or not confirmed:
            return None
        if not self._data_manager.delete_exercise(self.current_exercise_id):
            raise ExerciseLibraryError("Failed to delete exercise.")
        self.exercise_deleted.emit()
        self.clear_form()
        self.refresh()
        return _DELETED

    def clear_form(self) -> None:
        """Empty the form, leave edit mode and clear the selection."""
        self.name = ""
        self._category = CATEGORIES[0]
        self.current_exercise_id = 0
        self.is_editing = False
        self.add_enabled = True
        self.edit_enabled = False
        self.delete_enabled = False
        self.selected_id = None