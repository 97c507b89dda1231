"""Matrix training tracker: progression rules and history aggregation."""

from matrix_training.exceptions import (
    EmptySessionRejected,
    InvalidCategory,
    MalformedPersistedData,
    MatrixTrainingError,
    OutOfOrderSession,
    UnknownDay,
    UnknownMachine,
)
from matrix_training.tracker import ExerciseStatus, WorkoutTracker

__all__ = [
    "EmptySessionRejected",
    "ExerciseStatus",
    "InvalidCategory",
    "MalformedPersistedData",
    "MatrixTrainingError",
    "OutOfOrderSession",
    "UnknownDay",
    "UnknownMachine",
    "WorkoutTracker",
]
