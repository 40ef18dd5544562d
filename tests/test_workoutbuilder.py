from datetime import date

import pytest

from fitjournal.datamanager import DataManager
from fitjournal.exercise import Exercise
from fitjournal.setdata import SetData
from fitjournal.workout import Workout, WorkoutExercise
from fitjournal.workoutbuilder import (
    NO_SELECTION,
    PLACEHOLDER,
    ROW_COUNT,
    SAVE_BUTTON,
    WORKOUT_NOTES,
    ExerciseRow,
    WorkoutBuilder,
    WorkoutBuilderError,
)

DAY = date(2024, 3, 4)


@pytest.fixture
def manager(tmp_path):
    dm = DataManager(tmp_path / "data.json")
    dm.save_exercise(Exercise(name="Squat", category="strength"))
    dm.save_exercise(Exercise(name="Run", category="cardio"))
    dm.save_exercise(Exercise(name="Old", category="strength", is_active=False))
    return dm


@pytest.fixture
def builder(manager):
    return WorkoutBuilder(manager, DAY)


def _fill(row, exercise_id, weight="100", reps="5", sets="3", notes=""):
    row.exercise_id = exercise_id
    row.weight_text = weight
    row.reps_text = reps
    row.sets_text = sets
    row.notes = notes


def test_initial_rows(builder):
    assert len(builder.rows) == ROW_COUNT
    assert all(row == ExerciseRow() for row in builder.rows)
    assert builder.rows[0].sets_text == "1"
    assert builder.editing_workout_id == 0


def test_row_clear():
    row = ExerciseRow(exercise_id=2, weight_text="1", reps_text="2", sets_text="3", notes="x")
    row.clear()
    assert row == ExerciseRow()


def test_exercise_choices_only_active(builder):
    choices = builder.exercise_choices()
    assert choices[0] == (PLACEHOLDER, NO_SELECTION)
    assert [name for name, _ in choices[1:]] == ["Squat", "Run"]


def test_update_choices_picks_up_new_exercise(builder, manager):
    manager.save_exercise(Exercise(name="Plank", category="flexibility"))
    builder.rows[0].exercise_id = 1
    builder.update_exercise_choices()
    assert ("Plank", 4) in builder.exercise_choices()
    assert builder.rows[0].exercise_id == NO_SELECTION


def test_validate_requires_selection(builder):
    with pytest.raises(ValueError, match="Please select at least one exercise for the workout."):
        builder.validate_form()


@pytest.mark.parametrize(
    "weight, reps, sets, message",
    [
        ("", "5", "3", "Exercise 1: Please enter weight."),
        ("-5", "5", "3", "Exercise 1: Weight cannot be negative."),
        ("10", "", "3", "Exercise 1: Please enter reps."),
        ("10", "0", "3", "Exercise 1: Reps must be greater than 0."),
        ("10", "5", "", "Exercise 1: Please enter sets."),
        ("10", "5", "0", "Exercise 1: Sets must be greater than 0."),
    ],
)
def test_validate_row_errors(builder, weight, reps, sets, message):
    _fill(builder.rows[0], 1, weight, reps, sets)
    with pytest.raises(ValueError) as excinfo:
        builder.validate_form()
    assert str(excinfo.value) == message


def test_validate_reports_row_number(builder):
    _fill(builder.rows[0], 1)
    _fill(builder.rows[2], 2, reps="0")
    with pytest.raises(ValueError, match="Exercise 3: Reps must be greater than 0."):
        builder.validate_form()


def test_save_stores_workout_and_clears(builder, manager):
    created = []
    builder.workout_created.connect(lambda: created.append(True))
    builder.notes = "  felt good  "
    _fill(builder.rows[0], 1, weight="62.5", reps="8", sets="4", notes=" deep ")
    _fill(builder.rows[3], 2, weight="0", reps="1", sets="1")
    builder.save_workout()

    stored = manager.workouts_by_date(DAY)
    assert len(stored) == 1
    workout = stored[0]
    assert workout.notes == "felt good"
    assert [e.exercise_name for e in workout.exercises] == ["Squat", "Run"]
    assert workout.exercises[0].sets_data == [SetData(weight=62.5, reps=8, sets=4)]
    assert workout.exercises[0].notes == "deep"
    assert created == [True]
    assert builder.notes == ""
    assert all(row == ExerciseRow() for row in builder.rows)


def test_save_failure_raises(builder, manager):
    builder.set_date(None)
    _fill(builder.rows[0], 1)
    with pytest.raises(WorkoutBuilderError):
        builder.save_workout()
    assert manager.all_workouts() == []


def test_load_workout_data_fills_rows(builder):
    workout = Workout(id=7, date=DAY, notes="legs")
    workout.add_exercise(
        WorkoutExercise(exercise_id=1, exercise_name="Squat",
                        sets_data=[SetData(62.5, 8, 4)], notes="slow")
    )
    builder.load_workout_data([workout])
    assert builder.editing_workout_id == 7
    assert builder.notes == "legs"
    row = builder.rows[0]
    assert (row.exercise_id, row.weight_text, row.reps_text, row.sets_text, row.notes) == (
        1, "62.5", "8", "4", "slow"
    )
    assert builder.rows[1] == ExerciseRow()


def test_load_unknown_exercise_leaves_placeholder(builder):
    workout = Workout(id=2, date=DAY)
    workout.add_exercise(
        WorkoutExercise(exercise_id=3, exercise_name="Old", sets_data=[SetData(1.0, 1, 1)])
    )
    builder.load_workout_data([workout])
    assert builder.rows[0].exercise_id == NO_SELECTION
    assert builder.rows[0].reps_text == "1"


def test_load_empty_resets_editing(builder):
    builder.set_editing_workout_id(5)
    builder.load_workout_data([])
    assert builder.editing_workout_id == 0


def test_edit_keeps_single_workout(builder, manager):
    _fill(builder.rows[0], 1)
    builder.save_workout()
    builder.load_workout_data(manager.workouts_by_date(DAY))
    builder.rows[0].reps_text = "10"
    builder.save_workout()
    stored = manager.workouts_by_date(DAY)
    assert len(stored) == 1
    assert stored[0].exercises[0].sets_data[0].reps == 10


def test_cancel_emits(builder):
    calls = []
    builder.cancelled.connect(lambda: calls.append(1))
    builder.cancel()
    assert calls == [1]


def test_next_focus(builder):
    assert builder.next_focus(WORKOUT_NOTES) == ("exercise", 0)
    assert builder.next_focus(("notes", 0)) == ("exercise", 1)
    assert builder.next_focus(("notes", ROW_COUNT - 1)) == SAVE_BUTTON
    assert builder.next_focus(("notes", ROW_COUNT)) is None
    assert builder.next_focus("weight") is None