"""Machine catalog and weekly workout plan — static configuration inputs.

Machines are identified by a short id (``"PRESS"``) and carry the number
painted on the gym floor (``15``). History keys use the number, so the
catalog is the single place that maps one to the other.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from matrix_training.exceptions import UnknownDay, UnknownMachine
from matrix_training.models.enums import Category


@dataclass(frozen=True)
class Machine:
    """A catalog entry for one training machine."""

    id: str
    number: int
    name: str
    muscle_group: str

    @property
    def label(self) -> str:
        return f"#{self.number} {self.name}"


@dataclass(frozen=True)
class MachineCatalog:
    """Read-only machine lookup by id or by display number.

    Iteration yields machines in catalog order.
    """

    machines: tuple[Machine, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        ids = [m.id for m in self.machines]
        numbers = [m.number for m in self.machines]
        if len(set(ids)) != len(ids):
            raise ValueError("Duplicate machine id in catalog")
        if len(set(numbers)) != len(numbers):
            raise ValueError("Duplicate machine number in catalog")

    @classmethod
    def from_machines(cls, *machines: Machine) -> MachineCatalog:
        return cls(machines=tuple(machines))

    def get(self, machine_id: str) -> Machine:
        """Return the machine with id *machine_id*.

        Raises:
            UnknownMachine: if no machine has that id.
        """
        for machine in self.machines:
            if machine.id == machine_id:
                return machine
        raise UnknownMachine(machine_id)

    def by_number(self, number: int | str) -> Machine:
        """Return the machine with display number *number*."""
        try:
            wanted = int(number)
        except (TypeError, ValueError):
            raise UnknownMachine(number) from None
        for machine in self.machines:
            if machine.number == wanted:
                return machine
        raise UnknownMachine(number)

    def resolve(self, ref: str | int) -> Machine:
        """Look a machine up by id first, then by display number."""
        if isinstance(ref, str):
            for machine in self.machines:
                if machine.id == ref.upper():
                    return machine
        return self.by_number(ref)

    def __iter__(self) -> Iterator[Machine]:
        return iter(self.machines)

    def __len__(self) -> int:
        return len(self.machines)


@dataclass(frozen=True)
class PlanEntry:
    """One exercise slot in a plan day."""

    machine_id: str
    category: Category


@dataclass(frozen=True)
class DayPlan:
    title: str
    entries: tuple[PlanEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class WorkoutPlan:
    """Day name → DayPlan, in weekday order."""

    days: tuple[tuple[str, DayPlan], ...] = field(default_factory=tuple)

    @property
    def day_names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self.days)

    def for_day(self, day: str) -> DayPlan:
        """Return the plan for *day* (case-insensitive day name).

        Raises:
            UnknownDay: if nothing is planned on *day*.
        """
        for name, plan in self.days:
            if name.lower() == day.strip().lower():
                return plan
        raise UnknownDay(day)

    def validate(self, catalog: MachineCatalog) -> None:
        """Check every plan entry refers to a machine in *catalog*."""
        for _, plan in self.days:
            for entry in plan.entries:
                catalog.get(entry.machine_id)


# ---------------------------------------------------------------------------
# Default configuration
# ---------------------------------------------------------------------------


def default_catalog() -> MachineCatalog:
    """The 15-machine circuit the tracker was built for."""
    return MachineCatalog.from_machines(
        Machine("PRESS", 15, "LEG PRESS", "Quads / Glutes"),
        Machine("SLC", 12, "SEATED LEG CURL", "Hamstrings"),
        Machine("CURL", 1, "DEPENDENT CURL", "Arms"),
        Machine("TRI", 2, "TRICEPS PRESS", "Arms"),
        Machine("ABS", 3, "ABD CRUNCH", "Core"),
        Machine("BACK", 4, "BACK EXTENSION", "Lower Back"),
        Machine("ROW", 5, "SEATED ROW", "Mid Back"),
        Machine("SH", 6, "SHOULDER PRESS", "Shoulders"),
        Machine("CHEST", 7, "CHEST PRESS", "Chest"),
        Machine("LAT", 8, "LAT PULLDOWN", "Back"),
        Machine("PEC", 9, "PEC FLY / REAR DELT", "Chest / Rear Delts"),
        Machine("PLC", 10, "PRONE LEG CURL", "Hamstrings"),
        Machine("LEGEXT", 11, "LEG EXTENSION", "Quads"),
        Machine("ADD", 13, "HIP ADDUCTOR", "Inner Thighs"),
        Machine("ABD", 14, "HIP ABDUCTOR", "Glutes"),
    )


def _day(title: str, *entries: tuple[str, Category]) -> DayPlan:
    return DayPlan(title=title, entries=tuple(PlanEntry(m, c) for m, c in entries))


def default_plan() -> WorkoutPlan:
    """Five-day split: heavy/light lower and upper days plus one full-body day."""
    heavy, light, core = Category.HEAVY, Category.LIGHT, Category.CORE
    return WorkoutPlan(
        days=(
            ("Monday", _day(
                "LOWER — HEAVY",
                ("PRESS", heavy), ("SLC", light), ("ADD", light), ("ABD", light), ("ABS", core),
            )),
            ("Tuesday", _day(
                "UPPER — HEAVY + LIGHT",
                ("CHEST", heavy), ("LAT", heavy), ("ROW", light), ("SH", light), ("TRI", light),
            )),
            ("Wednesday", _day(
                "FULL BODY",
                ("PRESS", heavy), ("CHEST", heavy), ("ROW", light), ("ABD", light), ("ABS", core),
            )),
            ("Thursday", _day(
                "LOWER — LIGHT / KNEE SAFE",
                ("PRESS", light), ("SLC", light), ("ADD", light), ("ABD", light), ("BACK", core),
            )),
            ("Friday", _day(
                "UPPER — LIGHT / PUMP",
                ("ROW", light), ("SH", light), ("PEC", light), ("TRI", light), ("CURL", light),
            )),
        )
    )
