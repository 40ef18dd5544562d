from datetime import date, timedelta

from fitjournal.datemanager import DateManager
from fitjournal.navigation import DateNavigationBar

START = date(2024, 1, 5)


def _bar():
    manager = DateManager(START)
    return manager, DateNavigationBar(manager)


def test_initial_display():
    manager, bar = _bar()
    assert bar.display_date() == "01/05/2024"
    assert bar.label_text() == manager.format_date(START)


def test_pick_date_updates_manager_and_display():
    manager, bar = _bar()
    target = date(2023, 12, 25)
    bar.pick_date(target)
    assert manager.current_date == target
    assert bar.display_date() == "12/25/2023"
    assert bar.label_text() == manager.format_date(target)


def test_previous_and_next():
    manager, bar = _bar()
    bar.previous()
    assert manager.current_date == START - timedelta(days=1)
    assert bar.label_text() == manager.format_date(START - timedelta(days=1))
    bar.next()
    bar.next()
    assert manager.current_date == START + timedelta(days=1)


def test_today():
    manager, bar = _bar()
    bar.today()
    assert manager.current_date == date.today()
    assert bar.label_text() == manager.format_date(date.today())


def test_follows_changes_made_elsewhere():
    manager, bar = _bar()
    manager.go_to_next()
    assert bar.label_text() == manager.format_date(START + timedelta(days=1))
    assert bar.display_date().endswith("/2024")