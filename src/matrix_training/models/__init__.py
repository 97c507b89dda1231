"""Data models for the training tracker."""

from matrix_training.models.catalog import (
    DayPlan,
    Machine,
    MachineCatalog,
    PlanEntry,
    WorkoutPlan,
    default_catalog,
    default_plan,
)
from matrix_training.models.enums import Category, HandlePosition, parse_category
from matrix_training.models.rules import DEFAULT_RULES, Rule, RuleTable
from matrix_training.models.session import Session, WorkSet
from matrix_training.models.summary import CategoryTotals, WeeklySummary

__all__ = [
    "Category",
    "CategoryTotals",
    "DEFAULT_RULES",
    "DayPlan",
    "HandlePosition",
    "Machine",
    "MachineCatalog",
    "PlanEntry",
    "Rule",
    "RuleTable",
    "Session",
    "WeeklySummary",
    "WorkSet",
    "WorkoutPlan",
    "default_catalog",
    "default_plan",
    "parse_category",
]
