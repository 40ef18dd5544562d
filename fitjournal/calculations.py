"""BMI and body-fat categories, their display strings and colours."""

NOT_AVAILABLE = "Not available"

_DEFAULT_COLOR = "#333"
_RED = "#dc3545"
_GREEN = "#28a745"
_BLUE = "#007bff"
_ORANGE = "#fd7e14"


def bmi_category(bmi: float) -> str:
    """Return the BMI category name for a BMI value."""
    if bmi < 18.5:
        return "Underweight"
    if bmi < 25:
        return "Normal weight"
    if bmi < 30:
        return "Overweight"
    return "Obese"


def format_bmi(bmi: float) -> str:
    """Format a BMI value with its category, or report it as unavailable."""
    if bmi <= 0.0:
        return NOT_AVAILABLE
    return f"{bmi:.1f} ({bmi_category(bmi)})"


def bmi_category_color(category: str) -> str:
    """Return the display colour for a BMI category."""
    if category in ("Obese", "Underweight"):
        return _RED
    if category == "Overweight":
        return _ORANGE
    if category == "Normal weight":
        return _GREEN
    return _DEFAULT_COLOR


def body_fat_category(body_fat: float, is_male: bool = True) -> str:
    """Return the body-fat category name for a percentage."""
    if is_male:
        thresholds = ((6, "Essential fat"), (14, "Athlete"), (18, "Fitness"), (25, "Average"))
    else:
        thresholds = ((14, "Essential fat"), (21, "Athlete"), (25, "Fitness"), (32, "Average"))
    for limit, name in thresholds:
        if body_fat < limit:
            return name
    return "Obese"


def format_body_fat(body_fat: float, is_male: bool = True) -> str:
    """Format a body-fat percentage with its category, or report it as unavailable."""
    if body_fat <= 0.0:
        return NOT_AVAILABLE
    return f"{body_fat:.1f}% ({body_fat_category(body_fat, is_male)})"


def body_fat_category_color(category: str) -> str:
    """Return the display colour for a body-fat category."""
    if category in ("Obese", "Essential fat"):
        return _RED
    if category == "Average":
        return _GREEN
    if category in ("Fitness", "Athlete"):
        return _BLUE
    return _DEFAULT_COLOR