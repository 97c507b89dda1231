"""Custom exception hierarchy for the training tracker core."""

from __future__ import annotations


class MatrixTrainingError(Exception):
    """Base exception for all matrix_training errors."""


class InvalidCategory(MatrixTrainingError, ValueError):
    """A category that is not part of the rule table was requested."""

    def __init__(self, category: object) -> None:
        super().__init__(f"Unknown training category: {category!r}")
        self.category = category


class EmptySessionRejected(MatrixTrainingError, ValueError):
    """A session was logged without a single valid set."""

    def __init__(self, message: str = "Enter at least one set before logging.") -> None:
        super().__init__(message)


class OutOfOrderSession(MatrixTrainingError, ValueError):
    """A session is older than the most recent one already logged."""

    def __init__(self, timestamp_ms: int, last_timestamp_ms: int) -> None:
        super().__init__(
            f"Session time {timestamp_ms} is earlier than the last logged "
            f"session ({last_timestamp_ms})"
        )
        self.timestamp_ms = timestamp_ms
        self.last_timestamp_ms = last_timestamp_ms


class MalformedPersistedData(MatrixTrainingError):
    """Persisted JSON does not have the expected session shape."""

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class UnknownMachine(MatrixTrainingError, KeyError):
    """No machine in the catalog matches the given id or number."""

    def __init__(self, machine: object) -> None:
        super().__init__(machine)
        self.machine = machine

    def __str__(self) -> str:
        return f"Unknown machine: {self.machine!r}"


class UnknownDay(MatrixTrainingError, KeyError):
    """The workout plan has no entry for the requested day."""

    def __init__(self, day: object) -> None:
        super().__init__(day)
        self.day = day

    def __str__(self) -> str:
        return f"No workout planned for {self.day!r}"
