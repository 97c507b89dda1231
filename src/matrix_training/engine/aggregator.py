"""Rolling 7-day set counts per category.

For each machine and category with history, the most recent session's peak
weight is the reference for "top weight" sets, whether or not that session
falls inside the window. Counts from all machines are pooled per category.
"""

from __future__ import annotations

import logging

from matrix_training.models.catalog import MachineCatalog
from matrix_training.models.enums import SUMMARY_WINDOW_MS, Category
from matrix_training.models.rules import RuleTable
from matrix_training.models.summary import CategoryTotals, WeeklySummary
from matrix_training.storage.history import SessionHistoryStore

logger = logging.getLogger(__name__)


class WeeklyAggregator:
    """Summarizes training volume and quality over a trailing window."""

    def __init__(
        self,
        history: SessionHistoryStore,
        catalog: MachineCatalog,
        rules: RuleTable,
        window_ms: int = SUMMARY_WINDOW_MS,
    ) -> None:
        self.history = history
        self.catalog = catalog
        self.rules = rules
        self.window_ms = window_ms

    def summarize(self, now_ms: int) -> WeeklySummary:
        """Count sets logged in ``[now_ms - window, now_ms]`` per category.

        Args:
            now_ms: Evaluation time in epoch milliseconds (window end).

        Returns:
            A WeeklySummary holding totals for every Category.
        """
        cutoff = now_ms - self.window_ms
        counts = {c: [0, 0, 0] for c in Category}

        for machine in self.catalog:
            for category in Category:
                sessions = self.history.load(machine.id, category)
                if not sessions:
                    continue

                rule = self.rules.rule_for(category)
                last_peak = sessions[-1].peak_weight
                bucket = counts[category]

                for session in sessions:
                    if not cutoff <= session.timestamp <= now_ms:
                        continue
                    for work_set in session.sets:
                        bucket[0] += 1
                        if work_set.reps >= rule.rep_ceiling:
                            bucket[1] += 1
                        if work_set.weight >= last_peak:
                            bucket[2] += 1

        totals = {
            c: CategoryTotals(total_sets=n, top_rep_sets=r, top_weight_sets=w)
            for c, (n, r, w) in counts.items()
        }
        logger.debug("Weekly summary at %d: %s", now_ms, totals)
        return WeeklySummary(window_start_ms=cutoff, window_end_ms=now_ms, totals=totals)
