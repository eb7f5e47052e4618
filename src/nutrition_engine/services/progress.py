"""Daily intake totals and progress against goals."""

from collections.abc import Iterable

from nutrition_engine.domain.nutrition import (
    DailyEntryItem,
    DailyGoals,
    DailyProgress,
    DailyTotals,
    MacroProfile,
)


def consumed_macros(food: MacroProfile, grams: float) -> DailyTotals:
    """Return the macros eaten in a portion of a per-100 g food."""
    factor = grams / 100
    return DailyTotals(
        calories=food.calories * factor,
        protein_g=food.protein_g * factor,
        carbs_g=food.carbs_g * factor,
        fat_g=food.fat_g * factor,
    )


def summarize_entries(items: Iterable[DailyEntryItem]) -> DailyTotals:
    """Sum the macros of a day's entries."""
    total = DailyTotals()
    for item in items:
        portion = consumed_macros(item.food, item.grams)
        total = DailyTotals(
            calories=total.calories + portion.calories,
            protein_g=total.protein_g + portion.protein_g,
            carbs_g=total.carbs_g + portion.carbs_g,
            fat_g=total.fat_g + portion.fat_g,
        )
    return total


def calculate_progress(totals: DailyTotals, goals: DailyGoals) -> DailyProgress:
    """Return the fraction of each goal reached, capped at 1."""
    return DailyProgress(
        calories=_fraction(totals.calories, goals.calories),
        protein_g=_fraction(totals.protein_g, goals.protein_g),
        carbs_g=_fraction(totals.carbs_g, goals.carbs_g),
        fat_g=_fraction(totals.fat_g, goals.fat_g),
    )


def _fraction(current: float, goal: float | None) -> float:
    if not goal or goal <= 0:
        return 0.0
    return min(current / goal, 1.0)
