from datetime import date

import pytest

from fitjournal.bodycomposition import BodyComposition
from fitjournal.bodyform import BodyCompositionForm
from fitjournal.calculations import format_bmi, format_body_fat


def _filled_form():
    form = BodyCompositionForm()
    form.set_date(date(2024, 1, 5))
    form.weight_text = "180.0"
    form.waist_text = "34.0"
    form.height_text = "70.0"
    form.neck_text = "15.0"
    return form


def _record(**overrides):
    values = dict(
        date=date(2024, 1, 4),
        weight=180.0,
        waist_circumference=34.0,
        height=70.0,
        neck_circumference=15.0,
        notes="felt good",
        is_male=False,
    )
    values.update(overrides)
    return BodyComposition(**values)


def test_get_data_parses_fields():
    form = _filled_form()
    form.weight_text = "180.5"
    form.notes = "note"
    data = form.get_data()
    assert data.date == date(2024, 1, 5)
    assert data.weight == 180.5
    assert data.waist_circumference == 34.0
    assert data.height == 70.0
    assert data.neck_circumference == 15.0
    assert data.notes == "note"
    assert data.is_male is True


@pytest.mark.parametrize("text", ["", "abc", "1,5", "1_0", "nan"])
def test_unreadable_text_counts_as_zero(text):
    form = BodyCompositionForm()
    form.weight_text = text
    assert form.get_data().weight == 0.0


def test_field_change_validates_automatically():
    form = BodyCompositionForm()
    form.set_date(date(2024, 1, 5))
    form.weight_text = "180"
    message = form.validation_message()
    assert message.startswith("Errors:\n• ")
    assert "Waist circumference must be greater than 0" in message
    assert "Weight must be greater than 0" not in message
    assert form.save_enabled is False


def test_validate_complete_form_has_no_errors():
    form = _filled_form()
    assert form.validate() == []
    assert form.validation_message() == ""
    assert form.save_enabled is True


def test_validate_reports_missing_date():
    form = _filled_form()
    form.set_date(None)
    assert form.validate() == ["Invalid date"]


def test_set_data_round_trip():
    record = _record()
    form = BodyCompositionForm()
    form.set_date(record.date)
    form.set_data(record)
    assert form.weight_text == "180.0"
    assert form.neck_text == "15.0"
    assert form.notes == "felt good"
    assert form.is_male is False
    data = form.get_data()
    assert data.weight == record.weight
    assert data.waist_circumference == record.waist_circumference
    assert data.height == record.height
    assert data.neck_circumference == record.neck_circumference


def test_prefill_skips_zero_fields_and_notes():
    form = BodyCompositionForm()
    form.prefill_with_data(_record(height=0.0))
    assert form.weight_text == "180.0"
    assert form.height_text == ""
    assert form.notes == ""
    assert form.is_male is False


def test_prefill_with_empty_record_changes_nothing():
    form = BodyCompositionForm()
    form.weight_text = "150"
    form.prefill_with_data(BodyComposition(is_male=False))
    assert form.weight_text == "150"
    assert form.is_male is True


def test_clear_resets_everything():
    form = _filled_form()
    form.notes = "x"
    form.is_male = False
    form.clear()
    assert [form.weight_text, form.waist_text, form.height_text, form.neck_text] == [""] * 4
    assert form.notes == ""
    assert form.is_male is True
    assert form.validation_message() == ""


def test_save_emits_data():
    form = _filled_form()
    received = []
    form.data_saved.connect(received.append)
    data = form.save()
    assert len(received) == 1
    assert received[0].weight == 180.0
    assert data.is_valid()


def test_save_invalid_raises_and_does_not_emit():
    form = BodyCompositionForm()
    received = []
    form.data_saved.connect(received.append)
    with pytest.raises(ValueError, match="fix the validation errors"):
        form.save()
    assert received == []


def test_cancel_emits():
    form = BodyCompositionForm()
    calls = []
    form.cancelled.connect(lambda: calls.append(True))
    form.cancel()
    assert calls == [True]


def test_calculation_texts():
    form = _filled_form()
    data = form.get_data()
    assert form.bmi_text() == "BMI: " + format_bmi(data.bmi)
    assert form.body_fat_text() == "Body Fat: " + format_body_fat(data.body_fat_percentage, True)
    assert BodyCompositionForm().bmi_text() == "BMI: Not available"
    form.is_male = False
    assert form.body_fat_text() == "Body Fat: Not available"