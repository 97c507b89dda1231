"""WorkoutTracker — the facade the presentation layer talks to."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable

from matrix_training.engine.aggregator import WeeklyAggregator
from matrix_training.engine.progression import ProgressionEngine
from matrix_training.exceptions import EmptySessionRejected, OutOfOrderSession
from matrix_training.models.catalog import (
    DayPlan,
    Machine,
    MachineCatalog,
    WorkoutPlan,
    default_catalog,
    default_plan,
)
from matrix_training.models.enums import Category, HandlePosition, parse_category
from matrix_training.models.rules import DEFAULT_RULES, Rule, RuleTable
from matrix_training.models.session import Session, WorkSet
from matrix_training.models.summary import WeeklySummary
from matrix_training.storage.backends import KeyValueStore
from matrix_training.storage.history import SessionHistoryStore
from matrix_training.storage.weights import WorkingWeightStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExerciseStatus:
    """Everything needed to display one plan entry."""

    machine: Machine
    category: Category
    rule: Rule
    last_session: Session | None
    suggested_weight: float | None
    earned_progression: bool


class WorkoutTracker:
    """Wires catalog, plan, rules, history and the engines together.

    Usage:
        tracker = WorkoutTracker(JsonFileStore("history.json"))
        tracker.log_session("PRESS", "HEAVY", [(8, 100), (8, 100)], now_ms)
        tracker.exercise_status("PRESS", "HEAVY").suggested_weight
    """

    def __init__(
        self,
        backend: KeyValueStore,
        catalog: MachineCatalog | None = None,
        plan: WorkoutPlan | None = None,
        rules: RuleTable | None = None,
        max_sessions: int | None = None,
    ) -> None:
        self.catalog = catalog or default_catalog()
        self.plan = plan or default_plan()
        self.rules = rules or DEFAULT_RULES
        self.plan.validate(self.catalog)

        self.history = SessionHistoryStore(backend, self.catalog, max_sessions=max_sessions)
        self.weights = WorkingWeightStore(backend, self.catalog)
        self.progression = ProgressionEngine(self.history, self.rules)
        self.aggregator = WeeklyAggregator(self.history, self.catalog, self.rules)

    def log_session(
        self,
        machine_id: str,
        category: Category | str,
        sets: Iterable[tuple[float, float]],
        timestamp_ms: int,
        handle: HandlePosition | str | None = None,
    ) -> Session:
        """Validate raw ``(reps, weight)`` entries and append a new session.

        Entries with non-finite values, ``reps <= 0`` or ``weight < 0`` are
        dropped; fractional reps are truncated.

        Raises:
            InvalidCategory: if *category* has no rule.
            UnknownMachine: if *machine_id* is not in the catalog.
            EmptySessionRejected: if no valid set remains. Nothing is stored.
            OutOfOrderSession: if *timestamp_ms* is earlier than the last
                session logged for this machine and category.
        """
        category = parse_category(category)
        self.rules.rule_for(category)
        machine = self.catalog.get(machine_id)

        valid = _valid_sets(sets)
        if not valid:
            raise EmptySessionRejected()

        session = Session.create(timestamp=timestamp_ms, sets=valid, handle=handle)
        last = self.history.last(machine.id, category)
        if last is not None and session.timestamp < last.timestamp:
            raise OutOfOrderSession(session.timestamp, last.timestamp)

        self.history.append(machine.id, category, session)
        logger.info(
            "Logged %s %s: %d set(s), top %.1f",
            machine.id, category.name, len(session.sets), session.peak_weight,
        )
        return session

    def exercise_status(self, machine_id: str, category: Category | str) -> ExerciseStatus:
        category = parse_category(category)
        return ExerciseStatus(
            machine=self.catalog.get(machine_id),
            category=category,
            rule=self.rules.rule_for(category),
            last_session=self.history.last(machine_id, category),
            suggested_weight=self.progression.suggest_next_weight(machine_id, category),
            earned_progression=self.progression.has_earned_progression(machine_id, category),
        )

    def day_plan(self, day: str) -> DayPlan:
        return self.plan.for_day(day)

    def day_status(self, day: str) -> list[ExerciseStatus]:
        """Status of every exercise planned on *day*, in plan order."""
        return [
            self.exercise_status(entry.machine_id, entry.category)
            for entry in self.day_plan(day).entries
        ]

    def weekly_summary(self, now_ms: int) -> WeeklySummary:
        return self.aggregator.summarize(now_ms)

    def working_weight(self, machine_id: str) -> float:
        return self.weights.get(machine_id)

    def set_working_weight(self, machine_id: str, value: float) -> float:
        return self.weights.set(machine_id, value)

    def step_working_weight(
        self, machine_id: str, category: Category | str, steps: int = 1
    ) -> float:
        """Move the working weight by *steps* increments of the category's rule."""
        rule = self.rules.rule_for(parse_category(category))
        return self.weights.step(machine_id, rule.weight_increment, steps)


def _valid_sets(raw_sets: Iterable[tuple[float, float]]) -> list[WorkSet]:
    valid: list[WorkSet] = []
    for reps, weight in raw_sets:
        try:
            reps_f = float(reps)
            weight_f = float(weight)
        except (TypeError, ValueError):
            continue
        if not (math.isfinite(reps_f) and math.isfinite(weight_f)):
            continue
        if int(reps_f) <= 0 or weight_f < 0:
            continue
        valid.append(WorkSet(reps=int(reps_f), weight=weight_f))
    return valid
