"""The main window and a line-driven command interface to the journal."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from datetime import date as Date
from pathlib import Path
from typing import Optional, TextIO, Union

from .datamanager import DataManager
from .datemanager import DateManager
from .exerciselibrary import HEADERS, ExerciseLibraryError
from .journal import NO_WORKOUT, BodyPage, JournalContentArea, JournalError, Tab, WorkoutPage
from .navigation import DateNavigationBar
from .workoutbuilder import WorkoutBuilderError

APPLICATION_NAME = "Fitness Tracker"
APPLICATION_VERSION = "0.1.0"

_HELP = (
    "Commands: show, quit, left, right, date YYYY-MM-DD, "
    "body WEIGHT WAIST HEIGHT NECK [male|female], "
    "row N EXERCISE_ID WEIGHT REPS SETS, exercise CATEGORY NAME, save, cancel, "
    "and the keys b w l e d a t n p."
)


class MainWindow:
    """Date navigation above the journal, driven by keys and commands."""

    title = APPLICATION_NAME

    def __init__(
        self,
        data_path: Union[str, Path, None] = None,
        current_date: Optional[Date] = None,
    ) -> None:
        self.date_manager = DateManager(current_date)
        self.data_manager = DataManager(data_path)
        self.navigation = DateNavigationBar(self.date_manager)
        self.journal = JournalContentArea(self.date_manager, self.data_manager)

    def handle_key(self, key: str, editing: bool) -> bool:
        """Handle a key press; while a text field is being edited, keys are left to it."""
        if editing:
            return False
        if key == "Left":
            self.date_manager.go_to_previous()
            return True
        if key == "Right":
            self.date_manager.go_to_next()
            return True
        return self.journal.handle_key(key)

    # Commands

    def _fill_body(self, arguments: list[str]) -> None:
        journal = self.journal
        if journal.tab is not Tab.BODY_COMPOSITION or journal.body_page is not BodyPage.FORM:
            raise ValueError("The body composition form is not open.")
        if len(arguments) not in (4, 5):
            raise ValueError("Usage: body WEIGHT WAIST HEIGHT NECK [male|female]")
        form = journal.body_form
        if len(arguments) == 5:
            gender = arguments[4].lower()
            if gender not in ("male", "female"):
                raise ValueError(f"Unknown gender: {arguments[4]}")
            form.is_male = gender == "male"
        form.weight_text, form.waist_text, form.height_text, form.neck_text = arguments[:4]

    def _fill_row(self, arguments: list[str]) -> None:
        journal = self.journal
        if journal.tab is not Tab.WORKOUTS or journal.workout_page is not WorkoutPage.BUILDER:
            raise ValueError("The workout builder is not open.")
        if len(arguments) != 5:
            raise ValueError("Usage: row N EXERCISE_ID WEIGHT REPS SETS")
        builder = journal.workout_builder
        number = int(arguments[0])
        if not 1 <= number <= len(builder.rows):
            raise ValueError(f"Row must be between 1 and {len(builder.rows)}.")
        exercise_id = int(arguments[1])
        if exercise_id not in {choice_id for _, choice_id in builder.exercise_choices()}:
            raise ValueError(f"Unknown exercise id: {exercise_id}")
        row = builder.rows[number - 1]
        row.exercise_id = exercise_id
        row.weight_text, row.reps_text, row.sets_text = arguments[2:]

    def _add_exercise(self, rest: str) -> str:
        category, _, name = rest.strip().partition(" ")
        library = self.journal.exercise_library
        library.category = category
        library.name = name
        return library.add_exercise()

    def _save(self) -> None:
        journal = self.journal
        if journal.tab is Tab.BODY_COMPOSITION and journal.body_page is BodyPage.FORM:
            journal.body_form.save()
        elif journal.tab is Tab.WORKOUTS and journal.workout_page is WorkoutPage.BUILDER:
            journal.workout_builder.save_workout()
        else:
            raise ValueError("Nothing to save.")

    def _cancel(self) -> None:
        journal = self.journal
        if journal.tab is Tab.BODY_COMPOSITION and journal.body_page is BodyPage.FORM:
            journal.body_form.cancel()
        elif journal.tab is Tab.WORKOUTS and journal.workout_page is WorkoutPage.BUILDER:
            journal.workout_builder.cancel()
        else:
            raise ValueError("Nothing to cancel.")

    # Rendering

    def _render_body(self) -> list[str]:
        journal = self.journal
        if journal.body_page is BodyPage.EMPTY:
            return [journal.empty_state_text(), "Press a to add body composition."]
        if journal.body_page is BodyPage.FORM:
            form = journal.body_form
            lines = [
                f"Weight (lbs): {form.weight_text}",
                f"Waist (inches): {form.waist_text}",
                f"Height (inches): {form.height_text}",
                f"Neck (inches): {form.neck_text}",
                f"Gender: {'Male' if form.is_male else 'Female'}",
                f"Notes: {form.notes}",
                form.bmi_text(),
                form.body_fat_text(),
            ]
            message = form.validation_message()
            if message:
                lines.append(message)
            return lines
        shown = journal.body_view.render() or {}
        labels = (("Weight", "weight"), ("Waist", "waist"), ("Height", "height"),
                  ("Neck", "neck"), ("Notes", "notes"))
        lines = [f"{label}: {shown[key]}" for label, key in labels if key in shown]
        lines.extend(shown[key] for key in ("timestamp", "bmi", "body_fat") if key in shown)
        return lines

    def _render_workouts(self) -> list[str]:
        journal = self.journal
        if journal.workout_page is WorkoutPage.EMPTY:
            return [NO_WORKOUT, "Press a to add a workout."]
        if journal.workout_page is WorkoutPage.VIEW:
            return journal.workout_view.render()
        builder = journal.workout_builder
        names = dict((choice_id, label) for label, choice_id in builder.exercise_choices())
        lines = [f"Workout notes: {builder.notes}"]
        lines.extend(
            f"{number}. {names.get(row.exercise_id, '')} weight={row.weight_text} "
            f"reps={row.reps_text} sets={row.sets_text} notes={row.notes}"
            for number, row in enumerate(builder.rows, start=1)
        )
        return lines

    def _render_library(self) -> list[str]:
        rows = [HEADERS, *self.journal.exercise_library.rows()]
        return [" | ".join(row) for row in rows]

    def render(self) -> list[str]:
        """Return the lines describing what the window shows."""
        lines = [
            self.title,
            f"Date: {self.navigation.display_date()}  {self.navigation.label_text()}",
            f"[{self.journal.tab.value}]",
        ]
        if self.journal.tab is Tab.BODY_COMPOSITION:
            lines.extend(self._render_body())
        elif self.journal.tab is Tab.WORKOUTS:
            lines.extend(self._render_workouts())
        else:
            lines.extend(self._render_library())
        return lines

    def run(self, lines: Iterable[str], out: TextIO) -> int:
        """Execute commands, one per line, writing results to out; return the exit status."""
        for raw in lines:
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            command, _, rest = line.partition(" ")
            try:
                if command in ("quit", "exit"):
                    break
                if command == "show":
                    out.write("\n".join(self.render()) + "\n")
                elif command == "help":
                    out.write(_HELP + "\n")
                elif command in ("left", "right"):
                    self.handle_key(command.capitalize(), False)
                elif command == "date":
                    self.navigation.pick_date(Date.fromisoformat(rest.strip()))
                elif command == "body":
                    self._fill_body(rest.split())
                elif command == "row":
                    self._fill_row(rest.split())
                elif command == "exercise":
                    out.write(self._add_exercise(rest) + "\n")
                elif command == "save":
                    self._save()
                elif command == "cancel":
                    self._cancel()
                elif not self.handle_key(command, False):
                    out.write(f"Unknown command: {command}\n")
            except (ValueError, JournalError, WorkoutBuilderError, ExerciseLibraryError) as error:
                out.write(f"Error: {error}\n")
        return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Run the journal on commands read from standard input."""
    parser = argparse.ArgumentParser(prog="fitness-tracker", description=_HELP)
    parser.add_argument("--data", type=Path, default=None, help="path of the data file")
    parser.add_argument(
        "--date", type=Date.fromisoformat, default=None, help="date to start on (YYYY-MM-DD)"
    )
    parser.add_argument("--version", action="version", version=APPLICATION_VERSION)
    args = parser.parse_args(argv)
    window = MainWindow(args.data, args.date)
    return window.run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())