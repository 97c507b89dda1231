"""Command-line front end for the training tracker.

Usage:
    matrix-training plan Monday
    matrix-training log PRESS HEAVY 8x100 8x100 7x100 --handle outer
    matrix-training suggest 15 HEAVY
    matrix-training summary
    matrix-training trend PRESS HEAVY
    matrix-training weight PRESS --up HEAVY
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from datetime import date
from pathlib import Path

from matrix_training import MatrixTrainingError, WorkoutTracker
from matrix_training.engine.trends import history_frame
from matrix_training.formatting import (
    format_prescription,
    format_session,
    format_summary,
    format_weight,
)
from matrix_training.storage.backends import JsonFileStore

from tracker_cli.config import DATA_FILE, HISTORY_LIMIT, LOG_LEVEL

logger = logging.getLogger(__name__)

_EXIT_USAGE = 2


def _now_ms() -> int:
    return int(time.time() * 1000)


def _parse_set(text: str) -> tuple[float, float]:
    """Parse ``REPSxWEIGHT`` (e.g. ``8x100``) into a (reps, weight) pair."""
    reps, sep, weight = text.lower().partition("x")
    if not sep:
        raise argparse.ArgumentTypeError(f"Expected REPSxWEIGHT, got {text!r}")
    try:
        return float(reps), float(weight)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected REPSxWEIGHT, got {text!r}") from None


def _build_tracker(data_file: Path, history_limit: int | None) -> WorkoutTracker:
    return WorkoutTracker(JsonFileStore(data_file), max_sessions=history_limit)


# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------


def cmd_plan(tracker: WorkoutTracker, args: argparse.Namespace) -> None:
    day = args.day or date.today().strftime("%A")
    plan = tracker.day_plan(day)
    print(f"{day.capitalize()} — {plan.title}")
    for status in tracker.day_status(day):
        earned = ""
        if status.earned_progression:
            earned = f"  earned +{format_weight(status.rule.weight_increment)}"
        print(
            f"  {status.machine.label:<26} {status.machine.muscle_group:<18} "
            f"{status.category.name:<6} {format_prescription(status.rule):<8} "
            f"tempo {status.rule.tempo:<6} "
            f"last: {format_session(status.last_session):<24} "
            f"next: {format_weight(status.suggested_weight)}{earned}"
        )


def cmd_log(tracker: WorkoutTracker, args: argparse.Namespace) -> None:
    machine = tracker.catalog.resolve(args.machine)
    timestamp = args.at if args.at is not None else _now_ms()
    session = tracker.log_session(machine.id, args.category, args.sets, timestamp, args.handle)
    print(f"Logged {machine.label}: {format_session(session)}")


def cmd_suggest(tracker: WorkoutTracker, args: argparse.Namespace) -> None:
    machine = tracker.catalog.resolve(args.machine)
    status = tracker.exercise_status(machine.id, args.category)
    print(f"{machine.label} {status.category.name}")
    print(f"  muscle:    {machine.muscle_group}")
    print(f"  target:    {format_prescription(status.rule)} tempo {status.rule.tempo}")
    print(f"  last:      {format_session(status.last_session)}")
    print(f"  suggested: {format_weight(status.suggested_weight)}")
    print(f"  earned:    {'yes' if status.earned_progression else 'no'}")


def cmd_summary(tracker: WorkoutTracker, args: argparse.Namespace) -> None:
    now = args.now if args.now is not None else _now_ms()
    print(format_summary(tracker.weekly_summary(now)))


def cmd_trend(tracker: WorkoutTracker, args: argparse.Namespace) -> None:
    machine = tracker.catalog.resolve(args.machine)
    df = history_frame(tracker.history.load(machine.id, args.category))
    if df.empty:
        print(f"No history for {machine.label} {args.category.upper()}")
        return
    print(df.to_string(index=False))


def cmd_weight(tracker: WorkoutTracker, args: argparse.Namespace) -> None:
    machine = tracker.catalog.resolve(args.machine)
    if args.value is not None:
        weight = tracker.set_working_weight(machine.id, args.value)
    elif args.up:
        weight = tracker.step_working_weight(machine.id, args.up, 1)
    elif args.down:
        weight = tracker.step_working_weight(machine.id, args.down, -1)
    else:
        weight = tracker.working_weight(machine.id)
    print(f"{machine.label} working weight: {format_weight(weight)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="matrix-training", description="Machine-circuit workout tracker"
    )
    parser.add_argument("--data-file", type=Path, default=DATA_FILE, help="History JSON file")
    sub = parser.add_subparsers(dest="command", required=True)

    p_plan = sub.add_parser("plan", help="Show a day's exercises")
    p_plan.add_argument("day", nargs="?", help="Day name (default: today)")
    p_plan.set_defaults(func=cmd_plan)

    p_log = sub.add_parser("log", help="Log a session")
    p_log.add_argument("machine", help="Machine id or number")
    p_log.add_argument("category", help="HEAVY, LIGHT or CORE")
    p_log.add_argument("sets", nargs="+", type=_parse_set, help="Sets as REPSxWEIGHT")
    p_log.add_argument("--handle", choices=["inner", "outer"])
    p_log.add_argument("--at", type=int, help="Timestamp in epoch ms (default: now)")
    p_log.set_defaults(func=cmd_log)

    p_suggest = sub.add_parser("suggest", help="Show the suggested next weight")
    p_suggest.add_argument("machine")
    p_suggest.add_argument("category")
    p_suggest.set_defaults(func=cmd_suggest)

    p_summary = sub.add_parser("summary", help="Rolling 7-day summary")
    p_summary.add_argument("--now", type=int, help="Window end in epoch ms (default: now)")
    p_summary.set_defaults(func=cmd_summary)

    p_trend = sub.add_parser("trend", help="Per-session trend table")
    p_trend.add_argument("machine")
    p_trend.add_argument("category")
    p_trend.set_defaults(func=cmd_trend)

    p_weight = sub.add_parser("weight", help="Show or adjust a machine's working weight")
    p_weight.add_argument("machine")
    p_weight.add_argument("value", nargs="?", type=float, help="New working weight")
    step = p_weight.add_mutually_exclusive_group()
    step.add_argument("--up", metavar="CATEGORY", help="Raise by the category's increment")
    step.add_argument("--down", metavar="CATEGORY", help="Lower by the category's increment")
    p_weight.set_defaults(func=cmd_weight)

    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        tracker = _build_tracker(args.data_file, HISTORY_LIMIT)
        args.func(tracker, args)
    except (MatrixTrainingError, ValueError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        print(f"error: {exc}", file=sys.stderr)
        return _EXIT_USAGE
    return 0


if __name__ == "__main__":
    sys.exit(main())
