"""Per-exercise trend series built from session history.

References:
    Epley (1985). Poundage Chart. Boyd Epley Workout.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd

from matrix_training.models.session import Session

HISTORY_COLUMNS = ("time", "sets", "total_reps", "top_weight", "volume", "best_e1rm")


def estimate_one_rep_max(weight: float, reps: int) -> float:
    """Estimate a one-rep max with the Epley formula.

    e1RM = weight × (1 + reps / 30); a single rep is its own max.

    Returns:
        Estimated max, or 0.0 when either input is non-positive.
    """
    if weight <= 0 or reps <= 0:
        return 0.0
    if reps == 1:
        return float(weight)
    return weight * (1.0 + reps / 30.0)


def history_frame(sessions: Sequence[Session]) -> pd.DataFrame:
    """One row per session, oldest first, with derived load figures."""
    if not sessions:
        return pd.DataFrame(columns=list(HISTORY_COLUMNS))

    rows = []
    for session in sessions:
        reps = np.array([s.reps for s in session.sets], dtype=np.int64)
        weights = np.array([s.weight for s in session.sets], dtype=np.float64)
        rows.append({
            "time": session.timestamp,
            "sets": len(session.sets),
            "total_reps": int(reps.sum()),
            "top_weight": float(weights.max()),
            "volume": float(np.dot(reps, weights)),
            "best_e1rm": max(estimate_one_rep_max(s.weight, s.reps) for s in session.sets),
        })

    df = pd.DataFrame(rows, columns=list(HISTORY_COLUMNS))
    df["time"] = pd.to_datetime(df["time"], unit="ms", utc=True)
    return df


def weekly_volume(sessions: Sequence[Session]) -> pd.Series:
    """Total volume (Σ reps × weight) per calendar week starting Monday.

    The index holds each week's Monday (UTC midnight). Weeks without
    sessions between the first and last one appear with 0.0.
    """
    df = history_frame(sessions)
    if df.empty:
        return pd.Series(dtype=np.float64, name="volume")

    weekly = df.set_index("time")["volume"].resample("W-MON", label="left", closed="left").sum()
    weekly.index = weekly.index.normalize()
    return weekly.astype(np.float64).rename("volume")
