"""Weekly summary output: raw per-category set counts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from matrix_training.models.enums import Category


@dataclass(frozen=True)
class CategoryTotals:
    """Set counts for one Category over the summary window."""

    total_sets: int = 0
    top_rep_sets: int = 0  # sets at or above the rep ceiling
    top_weight_sets: int = 0  # sets at or above the last session's peak weight

    @property
    def top_rep_ratio(self) -> float:
        if self.total_sets == 0:
            return 0.0
        return self.top_rep_sets / self.total_sets

    @property
    def top_weight_ratio(self) -> float:
        if self.total_sets == 0:
            return 0.0
        return self.top_weight_sets / self.total_sets


@dataclass(frozen=True)
class WeeklySummary:
    """Rolling-window totals for every Category.

    ``totals`` always holds all three categories, zero-filled when idle.
    """

    window_start_ms: int
    window_end_ms: int
    totals: Mapping[Category, CategoryTotals] = field(default_factory=dict)

    def __getitem__(self, category: Category) -> CategoryTotals:
        return self.totals.get(category, CategoryTotals())

    @property
    def total_sets(self) -> int:
        return sum(t.total_sets for t in self.totals.values())

    def as_dict(self) -> dict[str, dict[str, int]]:
        """Plain-data view keyed by category name."""
        return {
            c.name: {
                "total_sets": self[c].total_sets,
                "top_rep_sets": self[c].top_rep_sets,
                "top_weight_sets": self[c].top_weight_sets,
            }
            for c in Category
        }
