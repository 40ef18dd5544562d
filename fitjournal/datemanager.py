"""The currently selected journal date and change notification."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, timedelta
from typing import Any, Optional

_DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


class Signal:
    """A list of callbacks invoked in connection order."""

    def __init__(self) -> None:
        self._callbacks: list[Callable[..., Any]] = []

    def connect(self, callback: Callable[..., Any]) -> None:
        """Register a callback."""
        self._callbacks.append(callback)

    def emit(self, *args: Any) -> None:
        """Call every registered callback with the given arguments."""
        for callback in list(self._callbacks):
            callback(*args)


class DateManager:
    """Holds the selected date and emits date_changed when it changes."""

    def __init__(self, current_date: Optional[date] = None) -> None:
        self._current_date = current_date if current_date is not None else date.today()
        self.date_changed = Signal()

    @property
    def current_date(self) -> date:
        """The selected date."""
        return self._current_date

    def set_current_date(self, date: date) -> None:
        """Select a date, notifying listeners only if it differs."""
        if self._current_date != date:
            self._current_date = date
            self.date_changed.emit(date)

    def go_to_today(self) -> None:
        """Select today."""
        self.set_current_date(date.today())

    def go_to_previous(self) -> None:
        """Select the day before."""
        self.set_current_date(self._current_date - timedelta(days=1))

    def go_to_next(self) -> None:
        """Select the day after."""
        self.set_current_date(self._current_date + timedelta(days=1))

    def format_date(self, date: date) -> str:
        """Format a date like 'Fri, Jan 5, 2024'."""
        day_name = _DAY_NAMES[date.weekday()]
        month_name = _MONTH_NAMES[date.month - 1]
        return f"{day_name}, {month_name} {date.day}, {date.year:04d}"