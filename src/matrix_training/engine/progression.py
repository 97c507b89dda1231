"""Progression engine — next-weight suggestion and the earned-increase gate.

Two independent checks that may disagree:

* ``suggest_next_weight`` looks only at the last set of the most recent
  session. Hitting the rep ceiling there nudges the next session up by the
  category's increment.
* ``has_earned_progression`` needs a streak: every set of each of the last
  three sessions at or above the rep ceiling. It backs the explicit
  "confirm the increase" action.
"""

from __future__ import annotations

from matrix_training.models.enums import PROGRESSION_STREAK_SESSIONS, Category
from matrix_training.models.rules import RuleTable
from matrix_training.storage.history import SessionHistoryStore


class ProgressionEngine:
    """Derives progression advice from history and the rule table.

    Usage:
        engine = ProgressionEngine(history, DEFAULT_RULES)
        engine.suggest_next_weight("PRESS", Category.HEAVY)
    """

    def __init__(self, history: SessionHistoryStore, rules: RuleTable) -> None:
        self.history = history
        self.rules = rules

    def suggest_next_weight(self, machine_id: str, category: Category | str) -> float | None:
        """Suggested working weight for the next session, or None without history.

        Raises:
            InvalidCategory: if *category* has no rule.
        """
        rule = self.rules.rule_for(category)
        last = self.history.last(machine_id, category)
        if last is None:
            return None

        last_set = last.last_set
        if last_set.reps >= rule.rep_ceiling:
            return last_set.weight + rule.weight_increment
        return last_set.weight

    def has_earned_progression(self, machine_id: str, category: Category | str) -> bool:
        """True when the last three sessions hit the rep ceiling on every set.

        Raises:
            InvalidCategory: if *category* has no rule.
        """
        rule = self.rules.rule_for(category)
        sessions = self.history.load(machine_id, category)
        if len(sessions) < PROGRESSION_STREAK_SESSIONS:
            return False

        recent = sessions[-PROGRESSION_STREAK_SESSIONS:]
        return all(s.all_sets_reach(rule.rep_ceiling) for s in recent)
