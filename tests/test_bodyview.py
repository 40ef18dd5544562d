from datetime import date, datetime

from fitjournal.bodycomposition import BodyComposition
from fitjournal.bodyview import BodyCompositionView
from fitjournal.calculations import format_bmi, format_body_fat


def _record(**overrides):
    values = dict(
        date=date(2024, 1, 5),
        weight=180.0,
        waist_circumference=34.0,
        height=70.0,
        neck_circumference=15.0,
        notes="",
        timestamp=datetime(2024, 1, 5, 15, 7),
    )
    values.update(overrides)
    return BodyComposition(**values)


def test_empty_view_shows_nothing():
    view = BodyCompositionView()
    assert view.is_visible() is False
    assert view.render() is None


def test_render_measurements():
    view = BodyCompositionView()
    view.set_data(_record())
    content = view.render()
    assert view.is_visible() is True
    assert content["weight"] == "180.0 lbs"
    assert content["waist"] == "34.0 inches"
    assert content["height"] == "70.0 inches"
    assert content["neck"] == "15.0 inches"
    assert content["notes"] == "No notes"


def test_render_notes():
    view = BodyCompositionView()
    view.set_data(_record(notes="morning"))
    assert view.render()["notes"] == "morning"


def test_render_timestamp_afternoon():
    view = BodyCompositionView()
    view.set_data(_record())
    assert view.render()["timestamp"] == "Last updated: Jan 05, 2024 3:07 PM"


def test_render_timestamp_midnight():
    view = BodyCompositionView()
    view.set_data(_record(timestamp=datetime(2024, 3, 9, 0, 0)))
    assert view.render()["timestamp"] == "Last updated: Mar 09, 2024 12:00 AM"


def test_render_calculations_match_formatters():
    record = _record()
    view = BodyCompositionView()
    view.set_data(record)
    content = view.render()
    assert content["bmi"] == "BMI: " + format_bmi(record.bmi)
    assert content["body_fat"] == "Body Fat: " + format_body_fat(record.body_fat_percentage, True)


def test_clear_hides_view():
    view = BodyCompositionView()
    view.set_data(_record())
    view.clear()
    assert view.is_visible() is False
    assert view.render() is None


def test_request_edit_emits():
    view = BodyCompositionView()
    calls = []
    view.edit_requested.connect(lambda: calls.append("edit"))
    view.request_edit()
    assert calls == ["edit"]


def test_request_delete_needs_confirmation():
    view = BodyCompositionView()
    calls = []
    view.delete_requested.connect(lambda: calls.append("delete"))
    assert view.request_delete(False) is False
    assert calls == []
    assert view.request_delete(True) is True
    assert calls == ["delete"]