"""Session history store — append-only session log per (machine, category).

Each (machine, category) pair owns one key, ``"<machine number>_<CATEGORY>"``,
whose value is a JSON array of sessions, oldest first. Nothing is cached:
every query reads through to the backing store, so readers always see the
latest append.
"""

from __future__ import annotations

import logging

from matrix_training.exceptions import MalformedPersistedData
from matrix_training.models.catalog import MachineCatalog
from matrix_training.models.enums import Category, parse_category
from matrix_training.models.session import Session
from matrix_training.storage.backends import KeyValueStore

logger = logging.getLogger(__name__)


def history_key(machine_number: int, category: Category) -> str:
    """Storage key for one machine/category history, e.g. ``"15_HEAVY"``."""
    return f"{machine_number}_{category.name}"


class SessionHistoryStore:
    """Reads and appends Sessions through an injected KeyValueStore.

    ``max_sessions`` is an opt-in retention limit. The default (None) keeps
    every session forever; when set, an append drops the oldest sessions so
    at most ``max_sessions`` remain for that key.
    """

    def __init__(
        self,
        backend: KeyValueStore,
        catalog: MachineCatalog,
        max_sessions: int | None = None,
    ) -> None:
        if max_sessions is not None and max_sessions < 1:
            raise ValueError(f"max_sessions must be >= 1, got {max_sessions}")
        self._backend = backend
        self._catalog = catalog
        self.max_sessions = max_sessions

    def key_for(self, machine_id: str, category: Category | str) -> str:
        machine = self._catalog.get(machine_id)
        return history_key(machine.number, parse_category(category))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def load(self, machine_id: str, category: Category | str) -> tuple[Session, ...]:
        """Return all sessions for the key, oldest first.

        An absent key gives an empty tuple. So does a key whose stored data
        cannot be parsed; that case is logged as a warning.
        """
        key = self.key_for(machine_id, category)
        try:
            return self._read(key)
        except MalformedPersistedData as exc:
            logger.warning("Ignoring malformed history for %s: %s", key, exc)
            return ()

    def last(self, machine_id: str, category: Category | str) -> Session | None:
        """Return the most recently appended session, or None."""
        sessions = self.load(machine_id, category)
        return sessions[-1] if sessions else None

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def append(self, machine_id: str, category: Category | str, session: Session) -> None:
        """Persist *session* after the existing sessions for the key.

        The new array is written with a single backend ``set``.

        Raises:
            MalformedPersistedData: if the existing value for the key cannot
                be parsed; the stored value is left untouched.
        """
        key = self.key_for(machine_id, category)
        sessions = list(self._read(key))
        sessions.append(session)

        if self.max_sessions is not None and len(sessions) > self.max_sessions:
            dropped = len(sessions) - self.max_sessions
            sessions = sessions[dropped:]
            logger.debug("Retention limit %d: dropped %d old session(s) from %s",
                         self.max_sessions, dropped, key)

        self._backend.set(key, [s.to_dict() for s in sessions])

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _read(self, key: str) -> tuple[Session, ...]:
        raw = self._backend.get(key)
        if raw is None:
            return ()
        if not isinstance(raw, list):
            raise MalformedPersistedData(
                f"History must be a JSON array, got {type(raw).__name__}", key=key
            )
        try:
            return tuple(Session.from_dict(item) for item in raw)
        except MalformedPersistedData as exc:
            raise MalformedPersistedData(str(exc), key=key) from exc
