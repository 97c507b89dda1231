"""Rule table — per-category set count, rep range and weight increment.

The table is static configuration: loaded once, never mutated. It must
cover every Category so that a lookup can only fail for a value that is
not a Category at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from matrix_training.exceptions import InvalidCategory
from matrix_training.models.enums import Category, parse_category


@dataclass(frozen=True)
class Rule:
    """Training prescription for one Category."""

    set_count: int
    rep_floor: int
    rep_ceiling: int  # reaching this on a set signals readiness to add weight
    weight_increment: float
    tempo: str = ""  # eccentric–pause–concentric seconds, display only

    def __post_init__(self) -> None:
        if self.set_count < 1:
            raise ValueError(f"set_count must be >= 1, got {self.set_count}")
        if self.rep_floor < 0:
            raise ValueError(f"rep_floor must be >= 0, got {self.rep_floor}")
        if self.rep_ceiling < self.rep_floor:
            raise ValueError(
                f"rep_ceiling ({self.rep_ceiling}) is below rep_floor ({self.rep_floor})"
            )
        if self.weight_increment < 0:
            raise ValueError(
                f"weight_increment must be >= 0, got {self.weight_increment}"
            )


@dataclass(frozen=True)
class RuleTable:
    """Exhaustive, read-only mapping of Category to Rule."""

    rules: Mapping[Category, Rule]

    def __post_init__(self) -> None:
        missing = [c.name for c in Category if c not in self.rules]
        if missing:
            raise ValueError(f"Rule table has no rule for: {', '.join(missing)}")
        object.__setattr__(self, "rules", MappingProxyType(dict(self.rules)))

    def rule_for(self, category: Category | str) -> Rule:
        """Return the Rule for *category*.

        Raises:
            InvalidCategory: if *category* is not a configured Category.
        """
        key = parse_category(category)
        try:
            return self.rules[key]
        except KeyError:
            raise InvalidCategory(category) from None

    def __getitem__(self, category: Category | str) -> Rule:
        return self.rule_for(category)

    def __iter__(self):
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)


DEFAULT_RULES = RuleTable(
    rules={
        Category.HEAVY: Rule(set_count=3, rep_floor=6, rep_ceiling=8, weight_increment=5.0, tempo="3–1–2"),
        Category.LIGHT: Rule(set_count=3, rep_floor=10, rep_ceiling=12, weight_increment=2.5, tempo="2–1–2"),
        Category.CORE: Rule(set_count=3, rep_floor=12, rep_ceiling=15, weight_increment=0.0, tempo="2–2–2"),
    }
)
