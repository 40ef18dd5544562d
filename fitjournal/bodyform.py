"""Entry form for a day's body measurements."""

from __future__ import annotations

import math
from datetime import date as Date
from typing import Optional

from .bodycomposition import BodyComposition
from .calculations import format_bmi, format_body_fat
from .datemanager import Signal

SAVE_ERROR = "Please fix the validation errors before saving."


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


def _format_measure(value: float) -> str:
    return f"{value:.1f}"


def _text_field(name: str) -> property:
    def getter(self: BodyCompositionForm) -> str:
        return self._fields[name]

    def setter(self: BodyCompositionForm, value: str) -> None:
        self._set_field(name, value)

    return property(getter, setter, doc=f"Text entered for {name}.")


class BodyCompositionForm:
    """Holds the text of each measurement field and validates it as it changes."""

    weight_text = _text_field("weight")
    waist_text = _text_field("waist")
    height_text = _text_field("height")
    neck_text = _text_field("neck")

    def __init__(self) -> None:
        self.data_saved = Signal()
        self.cancelled = Signal()
        self._date: Optional[Date] = None
        self._fields = {"weight": "", "waist": "", "height": "", "neck": ""}
        self.notes = ""
        self.is_male = True
        self._errors: list[str] = []
        self._show_errors = False

    def _set_field(self, name: str, value: str) -> None:
        if self._fields[name] != value:
            self._fields[name] = value
            self.validate()

    @property
    def save_enabled(self) -> bool:
        """True when the last validation found no errors."""
        return not self._errors

    def set_date(self, date: Optional[Date]) -> None:
        """Set the date the entered measurements belong to."""
        self._date = date

    def get_data(self) -> BodyComposition:
        """Build a record from the current field contents."""
        return BodyComposition(
            date=self._date,
            weight=_to_float(self.weight_text),
            waist_circumference=_to_float(self.waist_text),
            height=_to_float(self.height_text),
            neck_circumference=_to_float(self.neck_text),
            notes=self.notes,
            is_male=self.is_male,
        )

    def set_data(self, data: BodyComposition) -> None:
        """Fill every field from a record."""
        self.weight_text = _format_measure(data.weight)
        self.waist_text = _format_measure(data.waist_circumference)
        self.height_text = _format_measure(data.height)
        self.neck_text = _format_measure(data.neck_circumference)
        self.notes = data.notes
        self.is_male = data.is_male

    def prefill_with_data(self, data: BodyComposition) -> None:
        """Copy the positive measurements and gender of an earlier record; notes are not copied."""
        if data.is_empty():
            return
        if data.weight > 0.0:
            self.weight_text = _format_measure(data.weight)
        if data.waist_circumference > 0.0:
            self.waist_text = _format_measure(data.waist_circumference)
        if data.height > 0.0:
            self.height_text = _format_measure(data.height)
        if data.neck_circumference > 0.0:
            self.neck_text = _format_measure(data.neck_circumference)
        self.is_male = data.is_male

    def clear(self) -> None:
        """Empty every field, reset gender to male and hide the error message."""
        for name in self._fields:
            self._set_field(name, "")
        self.notes = ""
        self.is_male = True
        self._show_errors = False

    def validate(self) -> list[str]:
        """Validate the current contents and return the errors found."""
        self._errors = self.get_data().validation_errors()
        self._show_errors = bool(self._errors)
        return list(self._errors)

    def validation_message(self) -> str:
        """Return the error text shown under the form, or an empty string."""
        if not self._show_errors or not self._errors:
            return ""
        return "Errors:\n• " + "\n• ".join(self._errors)

    def bmi_text(self) -> str:
        """Return the BMI line for the current contents."""
        return f"BMI: {format_bmi(self.get_data().bmi)}"

    def body_fat_text(self) -> str:
        """Return the body-fat line for the current contents."""
        data = self.get_data()
        return f"Body Fat: {format_body_fat(data.body_fat_percentage, data.is_male)}"

    def save(self) -> BodyComposition:
        """Emit data_saved with the entered record; raise ValueError if it is invalid."""
        data = self.get_data()
        if not data.is_valid():
            raise ValueError(SAVE_ERROR)
        self.data_saved.emit(data)
        return data

    def cancel(self) -> None:
        """Emit cancelled."""
        self.cancelled.emit()