[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fitjournal"
version = "0.1.0"
description = "A day-by-day fitness journal: body composition, workouts and an exercise library"
requires-python = ">=3.10"
dependencies = []
keywords = ["fitness", "journal", "workout", "bmi", "body-fat", "exercise"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: News/Diary",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fitjournal = "fitjournal.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fitjournal"]

[tool.pytest.ini_options]
addopts = "-ra"
