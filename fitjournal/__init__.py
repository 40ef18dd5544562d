"""A day-by-day fitness journal: body composition, workouts and an exercise library."""

__version__ = "0.1.0"