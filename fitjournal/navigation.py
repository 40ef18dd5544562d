"""Date navigation controls bound to a DateManager."""

from __future__ import annotations

from datetime import date as Date

from .datemanager import DateManager


class DateNavigationBar:
    """Shows the selected date and moves it on request."""

    def __init__(self, date_manager: DateManager) -> None:
        self._date_manager = date_manager
        self._shown = date_manager.current_date
        self._label = date_manager.format_date(self._shown)
        date_manager.date_changed.connect(self._on_date_changed)

    def _on_date_changed(self, new_date: Date) -> None:
        self._shown = new_date
        self._label = self._date_manager.format_date(new_date)

    def display_date(self) -> str:
        """Return the shown date as MM/dd/yyyy."""
        shown = self._shown
        return f"{shown.month:02d}/{shown.day:02d}/{shown.year:04d}"

    def label_text(self) -> str:
        """Return the long form of the shown date."""
        return self._label

    def pick_date(self, date: Date) -> None:
        """Select a date chosen in the date picker."""
        self._date_manager.set_current_date(date)

    def today(self) -> None:
        """Select today."""
        self._date_manager.go_to_today()

    def previous(self) -> None:
        """Select the day before."""
        self._date_manager.go_to_previous()

    def next(self) -> None:
        """Select the day after."""
        self._date_manager.go_to_next()