"""The journal area: body composition, workouts and the exercise library as tabs."""

from __future__ import annotations

from collections.abc import Callable
from datetime import timedelta
from enum import Enum

from .bodycomposition import BodyComposition
from .bodyform import BodyCompositionForm
from .bodyview import BodyCompositionView
from .datamanager import DataManager
from .datemanager import DateManager
from .exerciselibrary import ExerciseLibrary
from .workoutbuilder import WorkoutBuilder
from .workoutview import WorkoutView

SAVE_FAILED = "Failed to save data. Please try again."
NO_WORKOUT = "No workout for this date"


class JournalError(Exception):
    """Raised when the journal cannot store what was entered."""


class BodyPage(Enum):
    """Which page of the body composition tab is shown."""

    EMPTY = 0
    FORM = 1
    VIEW = 2


class WorkoutPage(Enum):
    """Which page of the workouts tab is shown."""

    EMPTY = 0
    VIEW = 1
    BUILDER = 2


class Tab(Enum):
    """The journal's tabs; the value is the tab's title."""

    BODY_COMPOSITION = "Body Composition"
    WORKOUTS = "Workouts"
    EXERCISE_LIBRARY = "Exercise Library"


class JournalContentArea:
    """Switches between the journal's pages as the date and the user's actions change."""

    def __init__(self, date_manager: DateManager, data_manager: DataManager) -> None:
        self._date_manager = date_manager
        self._data_manager = data_manager

        self.body_form = BodyCompositionForm()
        self.body_view = BodyCompositionView()
        self.workout_builder = WorkoutBuilder(data_manager)
        self.workout_view = WorkoutView(data_manager)
        self.exercise_library = ExerciseLibrary(data_manager)

        self.tab = Tab.BODY_COMPOSITION
        self.body_page = BodyPage.EMPTY
        self.workout_page = WorkoutPage.EMPTY
        self._empty_text = ""

        date_manager.date_changed.connect(lambda _new_date: self.load_data_for_current_date())
        self.body_form.data_saved.connect(self.on_data_saved)
        self.body_form.cancelled.connect(self.on_cancelled)
        self.body_view.edit_requested.connect(self.on_edit_requested)
        self.body_view.delete_requested.connect(self.on_delete_requested)
        self.workout_builder.workout_created.connect(self.on_workout_created)
        self.workout_builder.cancelled.connect(self.on_workout_cancelled)
        self.workout_view.edit_requested.connect(self.on_workout_edit_requested)
        self.workout_view.delete_requested.connect(self.on_workout_delete_requested)
        self.exercise_library.exercise_added.connect(self.on_exercises_changed)
        self.exercise_library.exercise_updated.connect(self.on_exercises_changed)
        self.exercise_library.exercise_deleted.connect(self.on_exercises_changed)

        self._shortcuts: dict[str, Callable[[], None]] = {
            "b": lambda: self.switch_tab(Tab.BODY_COMPOSITION),
            "w": lambda: self.switch_tab(Tab.WORKOUTS),
            "l": lambda: self.switch_tab(Tab.EXERCISE_LIBRARY),
            "e": self._on_edit_shortcut,
            "d": self._on_delete_shortcut,
            "a": self._on_add_shortcut,
            "t": date_manager.go_to_today,
            "n": date_manager.go_to_next,
            "p": date_manager.go_to_previous,
        }

        self.load_data_for_current_date()

    # Body composition

    def load_data_for_current_date(self) -> None:
        """Show the body composition and workouts stored for the selected date."""
        current = self._date_manager.current_date
        if self._data_manager.has_body_composition(current):
            self._show_body_view(self._data_manager.load_body_composition(current))
        else:
            self._show_empty_state()

        workouts = self._data_manager.workouts_by_date(current)
        self.workout_view.set_date(current)
        self.workout_page = WorkoutPage.VIEW if workouts else WorkoutPage.EMPTY

    def _show_empty_state(self) -> None:
        formatted = self._date_manager.format_date(self._date_manager.current_date)
        self._empty_text = f"No data for {formatted}"
        self.body_page = BodyPage.EMPTY

    def _show_body_view(self, data: BodyComposition) -> None:
        self.body_view.set_data(data)
        self.body_page = BodyPage.VIEW

    def empty_state_text(self) -> str:
        """Return the message shown when the date has no body composition."""
        return self._empty_text

    def show_body_composition_form(self) -> None:
        """Open an empty form, prefilled from the previous day's record if there is one."""
        current = self._date_manager.current_date
        self.body_form.set_date(current)
        self.body_form.clear()
        yesterday = current - timedelta(days=1)
        if self._data_manager.has_body_composition(yesterday):
            self.body_form.prefill_with_data(self._data_manager.load_body_composition(yesterday))
        self.body_page = BodyPage.FORM

    def on_data_saved(self, data: BodyComposition) -> None:
        """Store a saved record and show it; raise JournalError if it cannot be stored."""
        if not self._data_manager.save_body_composition(data):
            raise JournalError(SAVE_FAILED)
        self._show_body_view(data)

    def on_cancelled(self) -> None:
        """Leave the form and show what is stored."""
        self.load_data_for_current_date()

    def on_edit_requested(self) -> None:
        """Open the form filled with the selected date's record."""
        current = self._date_manager.current_date
        self.body_form.set_date(current)
        if self._data_manager.has_body_composition(current):
            self.body_form.set_data(self._data_manager.load_body_composition(current))
        self.body_page = BodyPage.FORM

    def on_delete_requested(self) -> None:
        """Delete the selected date's record."""
        self._data_manager.delete_body_composition(self._date_manager.current_date)
        self._show_empty_state()

    # Workouts

    def on_add_workout(self) -> None:
        """Open an empty workout builder for the selected date."""
        self.workout_builder.set_date(self._date_manager.current_date)
        self.workout_builder.clear_form()
        self.workout_page = WorkoutPage.BUILDER

    def on_workout_created(self) -> None:
        """Show the workouts after one was saved."""
        self.workout_view.refresh()
        self.workout_page = WorkoutPage.VIEW

    def on_workout_edit_requested(self) -> None:
        """Open the builder filled with the selected date's workout."""
        current = self._date_manager.current_date
        self.workout_builder.set_date(current)
        self.workout_builder.load_workout_data(self._data_manager.workouts_by_date(current))
        self.workout_page = WorkoutPage.BUILDER

    def on_workout_delete_requested(self) -> None:
        """Reload the workouts after a deletion."""
        self.workout_view.refresh()

    def on_workout_cancelled(self) -> None:
        """Leave the builder and show the workouts."""
        self.workout_view.refresh()
        self.workout_page = WorkoutPage.VIEW

    def on_exercises_changed(self) -> None:
        """Reload the exercises offered by the workout builder."""
        self.workout_builder.update_exercise_choices()

    # Keyboard

    def switch_tab(self, tab: Tab) -> None:
        """Show a tab."""
        self.tab = Tab(tab)

    def _on_edit_shortcut(self) -> None:
        if self.tab is Tab.BODY_COMPOSITION and self.body_page is BodyPage.VIEW:
            self.on_edit_requested()
        elif self.tab is Tab.WORKOUTS and self.workout_page is WorkoutPage.VIEW:
            self.on_workout_edit_requested()

    def _on_delete_shortcut(self) -> None:
        if self.tab is Tab.BODY_COMPOSITION and self.body_page is BodyPage.VIEW:
            self.on_delete_requested()
        elif self.tab is Tab.WORKOUTS and self.workout_page is WorkoutPage.VIEW:
            self.on_workout_delete_requested()

    def _on_add_shortcut(self) -> None:
        if self.tab is Tab.BODY_COMPOSITION and self.body_page is BodyPage.EMPTY:
            self.show_body_composition_form()
        elif self.tab is Tab.WORKOUTS and self.workout_page is WorkoutPage.EMPTY:
            self.on_add_workout()

    def handle_key(self, key: str) -> bool:
        """Run the shortcut bound to a key; return whether the key has one."""
        action = self._shortcuts.get(key)
        if action is None:
            return False
        action()
        return True