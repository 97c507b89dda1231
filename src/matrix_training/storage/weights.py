"""Per-machine working weight, the load the user plans to put on the stack.

All machines share one key, ``"mtp-user-weights"``, whose value is a JSON
object mapping machine id to weight. Machines never set read as 0.
"""

from __future__ import annotations

import logging
import math
from typing import Any

from matrix_training.exceptions import MalformedPersistedData
from matrix_training.models.catalog import MachineCatalog
from matrix_training.storage.backends import KeyValueStore

logger = logging.getLogger(__name__)

WEIGHTS_KEY = "mtp-user-weights"


class WorkingWeightStore:
    """Reads and writes working weights through an injected KeyValueStore."""

    def __init__(self, backend: KeyValueStore, catalog: MachineCatalog) -> None:
        self._backend = backend
        self._catalog = catalog

    def get(self, machine_id: str) -> float:
        machine = self._catalog.get(machine_id)
        try:
            weights = self._read()
        except MalformedPersistedData as exc:
            logger.warning("Ignoring unreadable working weights: %s", exc)
            return 0.0
        return weights.get(machine.id, 0.0)

    def set(self, machine_id: str, value: float) -> float:
        """Store *value* for the machine, clamped at 0, and return it.

        Raises:
            ValueError: if *value* is not a finite number.
            MalformedPersistedData: if the stored map cannot be parsed.
                Nothing is written in that case.
        """
        machine = self._catalog.get(machine_id)
        weight = float(value)
        if not math.isfinite(weight):
            raise ValueError(f"Working weight must be finite, got {value!r}")
        weight = max(0.0, weight)

        weights = self._read()
        weights[machine.id] = weight
        self._backend.set(WEIGHTS_KEY, weights)
        logger.debug("Working weight for %s set to %.1f", machine.id, weight)
        return weight

    def step(self, machine_id: str, increment: float, steps: int = 1) -> float:
        """Move the working weight by ``steps * increment`` (negative to lower)."""
        return self.set(machine_id, self.get(machine_id) + steps * increment)

    def _read(self) -> dict[str, float]:
        raw: Any = self._backend.get(WEIGHTS_KEY)
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            raise MalformedPersistedData(
                f"Working weights must be an object, got {type(raw).__name__}", key=WEIGHTS_KEY
            )
        weights: dict[str, float] = {}
        for machine_id, value in raw.items():
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise MalformedPersistedData(
                    f"Working weight for {machine_id!r} is not a number", key=WEIGHTS_KEY
                )
            weights[machine_id] = float(value)
        return weights
