"""Nutrition domain models."""

import math
from dataclasses import dataclass
from typing import Literal

PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9

GradeLetter = Literal["A", "B", "C", "D", "F"]


@dataclass(frozen=True)
class MacroProfile:
    """Macronutrient profile for a food item, per 100 g."""

    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float


@dataclass(frozen=True)
class DailyGoals:
    """Daily macro targets. Zero or None means no goal is set."""

    calories: float | None = None
    protein_g: float | None = None
    carbs_g: float | None = None
    fat_g: float | None = None


@dataclass(frozen=True)
class FoodGradeResult:
    """Letter grade with its underlying 0-100 score and badge colour."""

    letter: GradeLetter
    score: int
    color: str


@dataclass(frozen=True)
class DailyEntryItem:
    """A food eaten on a given day and the amount eaten."""

    food: MacroProfile
    grams: float


@dataclass(frozen=True)
class DailyTotals:
    """Consumed macros."""

    calories: float = 0.0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0


@dataclass(frozen=True)
class DailyProgress:
    """Fraction of each daily goal reached, capped at 1."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)
