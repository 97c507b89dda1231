"""Decision logic: progression advice, weekly summary, trend series."""

from matrix_training.engine.aggregator import WeeklyAggregator
from matrix_training.engine.progression import ProgressionEngine
from matrix_training.engine.trends import estimate_one_rep_max, history_frame, weekly_volume

__all__ = [
    "ProgressionEngine",
    "WeeklyAggregator",
    "estimate_one_rep_max",
    "history_frame",
    "weekly_volume",
]
