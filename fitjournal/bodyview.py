"""Read-only display of a day's body measurements."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from .bodycomposition import BodyComposition
from .calculations import format_bmi, format_body_fat
from .datemanager import Signal

_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _format_timestamp(value: Optional[datetime]) -> str:
    """Format like 'Jan 05, 2024 3:07 PM'; a missing timestamp gives ''."""
    if value is None:
        return ""
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    month = _MONTH_NAMES[value.month - 1]
    return f"{month} {value.day:02d}, {value.year:04d} {hour}:{value.minute:02d} {suffix}"


class BodyCompositionView:
    """Shows a stored record and forwards edit and delete requests."""

    def __init__(self) -> None:
        self.edit_requested = Signal()
        self.delete_requested = Signal()
        self._data = BodyComposition()

    @property
    def data(self) -> BodyComposition:
        """The record on display."""
        return self._data

    def set_data(self, data: BodyComposition) -> None:
        """Display a record."""
        self._data = data

    def clear(self) -> None:
        """Display nothing."""
        self._data = BodyComposition()

    def is_visible(self) -> bool:
        """True when there is a non-empty record to show."""
        return not self._data.is_empty()

    def render(self) -> Optional[dict[str, str]]:
        """Return the display texts, or None when there is nothing to show."""
        if not self.is_visible():
            return None
        data = self._data
        return {
            "weight": f"{data.weight:.1f} lbs",
            "waist": f"{data.waist_circumference:.1f} inches",
            "height": f"{data.height:.1f} inches",
            "neck": f"{data.neck_circumference:.1f} inches",
            "notes": data.notes or "No notes",
            "timestamp": f"Last updated: {_format_timestamp(data.timestamp)}",
            "bmi": f"BMI: {format_bmi(data.bmi)}",
            "body_fat": f"Body Fat: {format_body_fat(data.body_fat_percentage, data.is_male)}",
        }

    def request_edit(self) -> None:
        """Emit edit_requested."""
        self.edit_requested.emit()

    def request_delete(self, confirmed: bool) -> bool:
        """Emit delete_requested if the user confirmed; return whether it was emitted."""
        if confirmed:
            self.delete_requested.emit()
        return bool(confirmed)