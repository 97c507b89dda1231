"""Logged sessions, the immutable unit of training history.

Serialized shape (one element of a history JSON array)::

    {"time": 1718000000000, "sets": [{"reps": 8, "weight": 100}], "handle": "inner"}

``handle`` is omitted when no grip was recorded.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable

from matrix_training.exceptions import EmptySessionRejected, MalformedPersistedData
from matrix_training.models.enums import HandlePosition, parse_handle


@dataclass(frozen=True)
class WorkSet:
    """One performed set: reps at a weight."""

    reps: int
    weight: float

    def __post_init__(self) -> None:
        if isinstance(self.reps, bool) or not isinstance(self.reps, int):
            raise TypeError(f"reps must be an int, got {self.reps!r}")
        if self.reps <= 0:
            raise ValueError(f"reps must be > 0, got {self.reps}")
        if isinstance(self.weight, bool) or not isinstance(self.weight, (int, float)):
            raise TypeError(f"weight must be a number, got {self.weight!r}")
        if not math.isfinite(self.weight) or self.weight < 0:
            raise ValueError(f"weight must be a finite number >= 0, got {self.weight}")

    def to_dict(self) -> dict[str, Any]:
        return {"reps": self.reps, "weight": self.weight}


@dataclass(frozen=True)
class Session:
    """One logged instance of an exercise.

    Sessions are created once, appended to history and never edited.
    ``sets`` is never empty.
    """

    timestamp: int  # epoch milliseconds
    sets: tuple[WorkSet, ...]
    handle: HandlePosition | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "sets", tuple(self.sets))
        if not self.sets:
            raise EmptySessionRejected()

    # -- Factory ----------------------------------------------------------

    @classmethod
    def create(
        cls,
        timestamp: int,
        sets: Iterable[WorkSet],
        handle: HandlePosition | str | None = None,
    ) -> Session:
        """Build a Session, coercing the handle name if one is given."""
        return cls(timestamp=int(timestamp), sets=tuple(sets), handle=parse_handle(handle))

    # -- Derived values ---------------------------------------------------

    @property
    def last_set(self) -> WorkSet:
        return self.sets[-1]

    @property
    def peak_weight(self) -> float:
        """Heaviest weight used in any set of this session."""
        return max(s.weight for s in self.sets)

    def all_sets_reach(self, rep_ceiling: int) -> bool:
        """True if every set has at least *rep_ceiling* reps."""
        return all(s.reps >= rep_ceiling for s in self.sets)

    # -- Serialization ----------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "time": self.timestamp,
            "sets": [s.to_dict() for s in self.sets],
        }
        if self.handle is not None:
            data["handle"] = self.handle.name.lower()
        return data

    @classmethod
    def from_dict(cls, data: Any) -> Session:
        """Parse one persisted session.

        Raises:
            MalformedPersistedData: if *data* does not have the session shape.
        """
        if not isinstance(data, dict):
            raise MalformedPersistedData(f"Session must be an object, got {type(data).__name__}")
        time_value = data.get("time")
        if (
            isinstance(time_value, bool)
            or not isinstance(time_value, (int, float))
            or not math.isfinite(time_value)
        ):
            raise MalformedPersistedData(f"Session time must be a number, got {time_value!r}")
        raw_sets = data.get("sets")
        if not isinstance(raw_sets, list) or not raw_sets:
            raise MalformedPersistedData("Session sets must be a non-empty array")

        try:
            sets = tuple(
                WorkSet(reps=_as_reps(s["reps"]), weight=s["weight"]) for s in raw_sets
            )
            handle = parse_handle(data.get("handle"))
        except (KeyError, TypeError, ValueError) as exc:
            raise MalformedPersistedData(f"Invalid session set data: {exc}") from exc

        return cls(timestamp=int(time_value), sets=sets, handle=handle)


def _as_reps(value: Any) -> int:
    # JSON writers in other tools may emit 8.0 for an integral rep count
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value
