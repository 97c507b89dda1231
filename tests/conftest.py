"""Shared test fixtures: in-memory store, tracker wiring, session builders."""

from __future__ import annotations

from typing import Callable

import pytest

from matrix_training.engine.aggregator import WeeklyAggregator
from matrix_training.engine.progression import ProgressionEngine
from matrix_training.models.catalog import MachineCatalog, default_catalog
from matrix_training.models.rules import DEFAULT_RULES, RuleTable
from matrix_training.models.session import Session, WorkSet
from matrix_training.storage.backends import InMemoryStore
from matrix_training.storage.history import SessionHistoryStore
from matrix_training.tracker import WorkoutTracker

# 2024-06-10 12:00:00 UTC
NOW_MS = 1718020800000


@pytest.fixture
def backend() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def catalog() -> MachineCatalog:
    return default_catalog()


@pytest.fixture
def rules() -> RuleTable:
    return DEFAULT_RULES


@pytest.fixture
def history(backend: InMemoryStore, catalog: MachineCatalog) -> SessionHistoryStore:
    return SessionHistoryStore(backend, catalog)


@pytest.fixture
def progression(history: SessionHistoryStore, rules: RuleTable) -> ProgressionEngine:
    return ProgressionEngine(history, rules)


@pytest.fixture
def aggregator(
    history: SessionHistoryStore, catalog: MachineCatalog, rules: RuleTable
) -> WeeklyAggregator:
    return WeeklyAggregator(history, catalog, rules)


@pytest.fixture
def tracker(backend: InMemoryStore) -> WorkoutTracker:
    return WorkoutTracker(backend)


@pytest.fixture
def make_session() -> Callable[..., Session]:
    """Build a Session from ``(reps, weight)`` pairs."""

    def _make(*sets: tuple[int, float], timestamp: int = NOW_MS, handle: str | None = None) -> Session:
        return Session.create(
            timestamp=timestamp,
            sets=[WorkSet(reps=r, weight=w) for r, w in sets],
            handle=handle,
        )

    return _make
