# fitjournal

A fitness journal organised by day. For each date you can keep:

- **Body composition**: weight (lbs), waist, height and neck (inches), notes
  and gender. BMI and a body-fat estimate (U.S. Navy formula, men only) are
  worked out from the measurements and labelled with a category such as
  "Normal weight" or "Fitness".
- **Workouts**: a workout form with eight exercise rows, each with a weight,
  reps, sets and notes.
- **Exercise library**: named exercises in the categories `strength`,
  `cardio` and `flexibility`, which the workout form offers as choices.

Everything is kept in one JSON file in your per-user application data
directory (see `fitjournal.datamanager.default_data_path()`), written after
every change.

## Installing

```
pip install .
```

## Running

```
fitjournal [--data PATH] [--date YYYY-MM-DD]
```

`--data` chooses the data file, `--date` the day to start on (today by
default), and `--version` prints the version. The program reads commands
from standard input, one per line; blank lines and lines starting with `#`
are ignored, and problems are reported as `Error: ...`.

| Command | Action |
|---------|--------|
| `show` | print what is on screen: the date and the current tab |
| `help` | list the commands |
| `quit`, `exit` | stop |
| `left`, `right` | previous / next day |
| `date YYYY-MM-DD` | go to a date |
| `body WEIGHT WAIST HEIGHT NECK [male\|female]` | fill the open body composition form |
| `row N EXERCISE_ID WEIGHT REPS SETS` | fill row N (1 to 8) of the open workout form |
| `exercise CATEGORY NAME` | add an exercise to the library |
| `save`, `cancel` | save or leave the open form |
| `b`, `w`, `l` | body composition, workouts, exercise library tab |
| `a`, `e`, `d` | add, edit, delete the entry on the current tab |
| `t`, `n`, `p` | today, next day, previous day |

Opening the body composition form with `a` prefills it from the previous
day's entry, if there is one. An example session:

```
exercise strength Bench Press
a
body 180 34 70 15 male
save
w
a
row 1 1 135 8 3
save
show
quit
```

## Using it as a library

```python
from datetime import date
from fitjournal.bodycomposition import BodyComposition
from fitjournal.calculations import format_bmi, format_body_fat

entry = BodyComposition(date(2024, 1, 15), weight=180.0,
                        waist_circumference=34.0, height=70.0,
                        neck_circumference=15.0)
print(format_bmi(entry.bmi))
print(format_body_fat(entry.body_fat_percentage, entry.is_male))
```

`fitjournal.datamanager.DataManager` stores body-composition entries by
date and exercises (`fitjournal.exercise.Exercise`) and workouts
(`fitjournal.workout.Workout`) by id. `fitjournal.app.MainWindow` ties the
date navigation and the journal together; its `run()` method executes the
commands above from any iterable of lines.

## What it does not do

There is no graphical window and no full-screen terminal interface: the
journal is driven by the line commands above. The commands do not set notes
for body composition or workout rows, and exercises can be added to the
library from the command line but not renamed or deleted there
(`fitjournal.exerciselibrary.ExerciseLibrary` offers both to code that uses
the package).

## Tests

```
pip install .[test]
pytest
```