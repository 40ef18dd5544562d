import pytest

from fitjournal.datamanager import DataManager
from fitjournal.exercise import Exercise
from fitjournal.exerciselibrary import (
    CATEGORIES,
    ExerciseLibrary,
    ExerciseLibraryError,
)


@pytest.fixture
def manager(tmp_path):
    return DataManager(tmp_path / "data.json")


@pytest.fixture
def library(manager):
    return ExerciseLibrary(manager)


def _counter(signal):
    calls = []
    signal.connect(lambda *args: calls.append(args))
    return calls


def test_starts_with_empty_table_and_add_mode(library):
    assert library.rows() == []
    assert library.add_enabled is True
    assert library.edit_enabled is False
    assert library.delete_enabled is False
    assert library.category == CATEGORIES[0]


def test_add_exercise_stores_trimmed_name(library, manager):
    added = _counter(library.exercise_added)
    library.name = "  Squat  "
    library.category = "strength"
    assert library.add_exercise() == "Exercise added successfully!"
    assert len(added) == 1
    assert library.rows() == [("1", "Squat", "strength", "Active")]
    assert manager.load_exercise(1).name == "Squat"
    assert library.name == ""


def test_add_exercise_empty_name_raises(library, manager):
    library.name = "   "
    with pytest.raises(ValueError, match="Exercise name cannot be empty."):
        library.add_exercise()
    assert manager.all_exercises() == []


def test_add_exercise_too_long_name_raises(library):
    library.name = "x" * 256
    with pytest.raises(ValueError, match="too long"):
        library.add_exercise()


def test_name_of_maximum_length_is_accepted(library):
    library.name = "x" * 255
    library.validate_form()
    assert library.add_exercise() == "Exercise added successfully!"


def test_unknown_category_rejected(library):
    with pytest.raises(ValueError):
        library.category = "yoga"
    assert library.category == CATEGORIES[0]


def test_select_loads_exercise_into_form(library, manager):
    manager.save_exercise(Exercise(name="Run", category="cardio"))
    library.refresh()
    assert library.select(1) is True
    assert library.name == "Run"
    assert library.category == "cardio"
    assert library.current_exercise_id == 1
    assert (library.add_enabled, library.edit_enabled, library.delete_enabled) == (
        False,
        True,
        True,
    )
    assert library.is_editing is True


def test_select_unknown_row_raises(library):
    with pytest.raises(KeyError):
        library.select(42)


def test_edit_exercise_updates_store(library, manager):
    manager.save_exercise(Exercise(name="Run", category="cardio"))
    library.refresh()
    updated = _counter(library.exercise_updated)
    library.select(1)
    library.name = "Sprint"
    library.category = "strength"
    assert library.edit_exercise() == "Exercise updated successfully!"
    assert len(updated) == 1
    stored = manager.load_exercise(1)
    assert (stored.name, stored.category) == ("Sprint", "strength")
    assert library.rows() == [("1", "Sprint", "strength", "Active")]
    assert library.current_exercise_id == 0


def test_edit_without_selection_does_nothing(library, manager):
    library.name = "Bench"
    assert library.edit_exercise() is None
    assert manager.all_exercises() == []


def test_edit_missing_exercise_raises(library, manager):
    manager.save_exercise(Exercise(name="Row", category="strength"))
    library.refresh()
    library.select(1)
    manager.delete_exercise(1)
    with pytest.raises(ExerciseLibraryError, match="Exercise not found."):
        library.edit_exercise()


def test_delete_requires_confirmation(library, manager):
    manager.save_exercise(Exercise(name="Row", category="strength"))
    library.refresh()
    library.select(1)
    assert library.delete_exercise(False) is None
    assert manager.load_exercise(1).id == 1


def test_delete_confirmed_removes_exercise(library, manager):
    manager.save_exercise(Exercise(name="Row", category="strength"))
    library.refresh()
    deleted = _counter(library.exercise_deleted)
    library.select(1)
    assert library.delete_exercise(True) == "Exercise deleted successfully!"
    assert len(deleted) == 1
    assert manager.load_exercise(1).id == 0
    assert library.rows() == []


def test_delete_without_selection_returns_none(library):
    assert library.delete_exercise(True) is None


def test_clear_form_resets_state(library, manager):
    manager.save_exercise(Exercise(name="Stretch", category="flexibility"))
    library.refresh()
    library.select(1)
    library.clear_form()
    assert library.name == ""
    assert library.category == CATEGORIES[0]
    assert library.selected_id is None
    assert library.is_editing is False
    assert library.add_enabled is True


def test_inactive_exercise_shown_as_inactive(manager):
    manager.save_exercise(Exercise(name="Old", category="cardio", is_active=False))
    library = ExerciseLibrary(manager)
    assert library.rows() == [("1", "Old", "cardio", "Inactive")]


def test_add_fails_when_store_cannot_be_written(tmp_path):
    library = ExerciseLibrary(DataManager(tmp_path))
    library.name = "Squat"
    with pytest.raises(ExerciseLibraryError, match="Failed to add exercise"):
        library.add_exercise()