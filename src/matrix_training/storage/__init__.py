"""Persistence: key-value backends, session history and working weights."""

from matrix_training.storage.backends import InMemoryStore, JsonFileStore, KeyValueStore
from matrix_training.storage.history import SessionHistoryStore, history_key
from matrix_training.storage.weights import WEIGHTS_KEY, WorkingWeightStore

__all__ = [
    "InMemoryStore",
    "JsonFileStore",
    "KeyValueStore",
    "SessionHistoryStore",
    "WEIGHTS_KEY",
    "WorkingWeightStore",
    "history_key",
]
