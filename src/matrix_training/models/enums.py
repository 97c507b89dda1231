"""Enumerations and tracker constants."""

from enum import IntEnum, auto

from matrix_training.exceptions import InvalidCategory


class Category(IntEnum):
    """Training-intensity category of a plan entry.

    Persisted and displayed by name (``HEAVY``, ``LIGHT``, ``CORE``).
    """

    HEAVY = auto()
    LIGHT = auto()
    CORE = auto()


class HandlePosition(IntEnum):
    """Grip used on machines with two handle settings."""

    INNER = auto()
    OUTER = auto()


# ---------------------------------------------------------------------------
# Progression constants
# ---------------------------------------------------------------------------
# Consecutive sessions at the rep ceiling before an increase is "earned"
PROGRESSION_STREAK_SESSIONS = 3

# ---------------------------------------------------------------------------
# Weekly summary constants
# ---------------------------------------------------------------------------
MS_PER_DAY = 24 * 60 * 60 * 1000
SUMMARY_WINDOW_DAYS = 7
SUMMARY_WINDOW_MS = SUMMARY_WINDOW_DAYS * MS_PER_DAY

# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------
WEIGHT_UNIT = "lb"
PLAN_DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday")


def parse_category(value: object) -> Category:
    """Coerce a Category or its (case-insensitive) name into a Category.

    Raises:
        InvalidCategory: if *value* names no category.
    """
    if isinstance(value, Category):
        return value
    if isinstance(value, str):
        try:
            return Category[value.strip().upper()]
        except KeyError:
            raise InvalidCategory(value) from None
    raise InvalidCategory(value)


def parse_handle(value: object) -> HandlePosition | None:
    """Coerce ``"inner"``/``"outer"`` (or None) into a HandlePosition."""
    if value is None or isinstance(value, HandlePosition):
        return value
    if isinstance(value, str):
        try:
            return HandlePosition[value.strip().upper()]
        except KeyError:
            pass
    raise ValueError(f"Unknown handle position: {value!r}")
