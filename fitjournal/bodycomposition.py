"""Body measurements for a day, with derived BMI and body-fat figures."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Optional

_INCH_TO_METRE = 0.0254
_POUND_TO_KG = 0.453592


def _as_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_bool(value: Any) -> bool:
    return value if isinstance(value, bool) else False


def _parse_date(text: str) -> Optional[date]:
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def _parse_datetime(text: str) -> Optional[datetime]:
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


@dataclass
class BodyComposition:
    """Weight in pounds, circumferences and height in inches; date None is invalid."""

    date: Optional[date] = None
    weight: float = 0.0
    waist_circumference: float = 0.0
    height: float = 0.0
    neck_circumference: float = 0.0
    notes: str = ""
    is_male: bool = True
    timestamp: Optional[datetime] = field(default_factory=datetime.now)
    bmi: float = field(default=0.0, init=False)
    body_fat_percentage: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        self.calculate_bmi()
        self.calculate_body_fat()

    def calculate_bmi(self) -> None:
        """Recompute BMI from weight and height; 0 when either is missing."""
        if self.height <= 0.0 or self.weight <= 0.0:
            self.bmi = 0.0
            return
        height_m = self.height * _INCH_TO_METRE
        weight_kg = self.weight * _POUND_TO_KG
        self.bmi = weight_kg / (height_m * height_m)

    def calculate_body_fat(self) -> None:
        """Recompute body fat with the US Navy formula (male only), else 0."""
        self.body_fat_percentage = 0.0
        if self.waist_circumference <= 0.0 or self.neck_circumference <= 0.0 or self.height <= 0.0:
            return
        difference = self.waist_circumference - self.neck_circumference
        if difference <= 0.0 or not self.is_male:
            return
        value = 86.010 * math.log10(difference) - 70.041 * math.log10(self.height) + 36.76
        if 0.0 <= value <= 50.0:
            self.body_fat_percentage = value

    def validation_errors(self) -> list[str]:
        """Return the reasons these measurements are invalid."""
        errors = []
        if self.date is None:
            errors.append("Invalid date")
        checks = (
            (self.weight, 1000.0, "Weight must be greater than 0",
             "Weight seems unrealistic (over 1000)"),
            (self.waist_circumference, 200.0, "Waist circumference must be greater than 0",
             "Waist circumference seems unrealistic (over 200)"),
            (self.height, 300.0, "Height must be greater than 0",
             "Height seems unrealistic (over 300 cm)"),
            (self.neck_circumference, 100.0, "Neck circumference must be greater than 0",
             "Neck circumference seems unrealistic (over 100)"),
        )
        for value, limit, too_small, too_large in checks:
            if value <= 0.0:
                errors.append(too_small)
            elif value > limit:
                errors.append(too_large)
        return errors

    def is_valid(self) -> bool:
        """Return True when there are no validation errors."""
        return not self.validation_errors()

    def is_empty(self) -> bool:
        """Return True when no measurement and no notes were entered."""
        return (
            self.weight <= 0.0
            and self.waist_circumference <= 0.0
            and self.height <= 0.0
            and self.neck_circumference <= 0.0
            and not self.notes
        )

    def to_json(self) -> dict[str, Any]:
        """Return a JSON-ready mapping."""
        return {
            "date": self.date.isoformat() if self.date is not None else "",
            "weight": self.weight,
            "waistCircumference": self.waist_circumference,
            "height": self.height,
            "neckCircumference": self.neck_circumference,
            "notes": self.notes,
            "timestamp": (
                self.timestamp.isoformat(timespec="seconds") if self.timestamp is not None else ""
            ),
            "bmi": self.bmi,
            "bodyFatPercentage": self.body_fat_percentage,
            "isMale": self.is_male,
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> BodyComposition:
        """Build a record from a mapping; stored BMI and body fat are kept as given."""
        result = cls()
        if "date" in data:
            result.date = _parse_date(_as_str(data["date"]))
        if "weight" in data:
            result.weight = _as_float(data["weight"])
        if "waistCircumference" in data:
            result.waist_circumference = _as_float(data["waistCircumference"])
        if "height" in data:
            result.height = _as_float(data["height"])
        if "neckCircumference" in data:
            result.neck_circumference = _as_float(data["neckCircumference"])
        if "notes" in data:
            result.notes = _as_str(data["notes"])
        result.timestamp = (
            _parse_datetime(_as_str(data["timestamp"])) if "timestamp" in data else datetime.now()
        )
        result.bmi = _as_float(data["bmi"]) if "bmi" in data else 0.0
        result.body_fat_percentage = (
            _as_float(data["bodyFatPercentage"]) if "bodyFatPercentage" in data else 0.0
        )
        result.is_male = _as_bool(data["isMale"]) if "isMale" in data else True
        return result