"""Food grading heuristics.

A food gets a base grade from its per-100 g macro profile. A daily entry
adjusts that grade for the portion eaten relative to the user's daily goals.
Scores are additive adjustments on a 0-100 scale, mapped to a letter grade.
"""

import logging
import math
from collections.abc import Mapping

from nutrition_engine.domain.nutrition import (
    CARBS_KCAL_PER_G,
    FAT_KCAL_PER_G,
    PROTEIN_KCAL_PER_G,
    DailyGoals,
    FoodGradeResult,
    GradeLetter,
    MacroProfile,
    round_half_up,
)

_logger = logging.getLogger(__name__)

# Inclusive lower bounds, checked in order.
GRADE_THRESHOLDS: tuple[tuple[int, GradeLetter], ...] = (
    (85, "A"),
    (70, "B"),
    (55, "C"),
    (40, "D"),
)
FAILING_GRADE: GradeLetter = "F"

GRADE_COLORS: dict[GradeLetter, str] = {
    "A": "#4CAF50",
    "B": "#8BC34A",
    "C": "#FFC107",
    "D": "#FF9800",
    "F": "#F44336",
}

BASE_SCORE = 70.0

# Base grade tiers: (bound, points). "Below" tiers match value < bound,
# "above" tiers match value > bound; the first match wins.
LOW_CALORIE_BONUSES = ((100, 15.0), (200, 7.0))
HIGH_CALORIE_START = 350
HIGH_CALORIE_PENALTY_PER_KCAL = 0.08
VERY_HIGH_CALORIE_THRESHOLD = 500
VERY_HIGH_CALORIE_PENALTY = 20.0

PROTEIN_BONUSES = ((20, 18.0), (10, 10.0))
LOW_PROTEIN_G = 5
LOW_PROTEIN_MIN_CALORIES = 150
LOW_PROTEIN_PENALTY = 10.0

HIGH_FAT_G = 25
HIGH_FAT_PENALTY_PER_G = 0.5
FATTY_LOW_PROTEIN_RATIO = 0.5
FATTY_LOW_PROTEIN_G = 10
FATTY_LOW_PROTEIN_PENALTY = 10.0
FAT_SHARE_PENALTIES = ((50, 15.0), (35, 7.0))

HIGH_CARBS_G = 40
HIGH_CARBS_MIN_CALORIES = 100
HIGH_CARBS_PENALTY_PER_G = 0.3
REFINED_CARBS_PROTEIN_RATIO = 0.1
REFINED_CARBS_PROTEIN_G = 7
REFINED_CARBS_PENALTY = 12.0
CARB_SHARE_PENALTIES = ((60, 15.0), (50, 7.0))

# Percent-of-calories ranges that earn balance points.
BALANCED_PROTEIN_PCT = (15, 40)
BALANCED_FAT_PCT = (15, 40)
BALANCED_CARBS_PCT = (35, 55)
BALANCE_POINTS_PER_MACRO = 4
# (minimum balance points, score bonus)
BALANCE_BONUSES = ((10, 10.0), (8, 5.0))

SYNERGY_BONUS = 20.0
IMBALANCE_PENALTY = 15.0

# Daily entry tiers, on percent of the daily goal eaten in one portion.
DEFAULT_DAILY_GOALS = DailyGoals(
    calories=2000, protein_g=100, carbs_g=200, fat_g=70
)
PORTION_CALORIE_PENALTIES = ((50, 30.0), (35, 20.0))
PORTION_FAT_PENALTIES = ((60, 15.0), (40, 7.0))
PORTION_CARB_PENALTIES = ((60, 10.0), (45, 5.0))
# (protein share above, calorie share below, points)
PORTION_PROTEIN_BONUSES = ((25, 30, 10.0), (15, 20, 5.0))
# Small portions of poor foods: letter -> (calorie share below, points)
SMALL_PORTION_MITIGATION: dict[GradeLetter, tuple[float, float]] = {
    "F": (10, 25.0),
    "D": (7, 7.0),
}
LARGE_PORTION_MIN_BASE_SCORE = 85
LARGE_PORTION_CALORIE_SHARE = 25
LARGE_PORTION_PENALTY = 10.0

_MACRO_FIELDS = ("calories", "protein_g", "carbs_g", "fat_g")


def map_score(score: float) -> FoodGradeResult:
    """Clamp and round a score, then map it to a letter and colour.

    Infinite scores clamp to the nearest bound and NaN maps to 0.
    """
    if math.isnan(score):
        score = 0.0
    clamped = round_half_up(max(0.0, min(100.0, score)))
    letter = FAILING_GRADE
    for lower_bound, candidate in GRADE_THRESHOLDS:
        if clamped >= lower_bound:
            letter = candidate
            break
    return FoodGradeResult(letter=letter, score=clamped, color=GRADE_COLORS[letter])


def calculate_base_food_grade(
    food: MacroProfile | Mapping[str, object] | None,
) -> FoodGradeResult | None:
    """Grade a food from its per-100 g macros.

    Returns None when any macro is missing or not a number.
    """
    macros = _read_macros(food)
    if macros is None:
        return None
    return _grade_macros(macros)


def calculate_daily_entry_grade(
    food: MacroProfile | Mapping[str, object] | None,
    consumed_grams: float,
    daily_goals: DailyGoals | None,
) -> FoodGradeResult | None:
    """Grade a portion of a food against the user's daily goals."""
    macros = _read_macros(food)
    if macros is None:
        return None
    base = _grade_macros(macros)
    if consumed_grams <= 0:
        return base

    goals = _safe_goals(daily_goals)
    factor = consumed_grams / 100

    calorie_share = macros.calories * factor / goals.calories * 100
    fat_share = macros.fat_g * factor / goals.fat_g * 100
    carb_share = macros.carbs_g * factor / goals.carbs_g * 100
    protein_share = macros.protein_g * factor / goals.protein_g * 100

    score = float(base.score)
    score -= _above(calorie_share, PORTION_CALORIE_PENALTIES)
    score -= _above(fat_share, PORTION_FAT_PENALTIES)
    score -= _above(carb_share, PORTION_CARB_PENALTIES)
    for min_protein, max_calories, points in PORTION_PROTEIN_BONUSES:
        if protein_share > min_protein and calorie_share < max_calories:
            score += points
            break

    mitigation = SMALL_PORTION_MITIGATION.get(base.letter)
    if mitigation is not None and calorie_share < mitigation[0]:
        score += mitigation[1]

    if (
        base.score >= LARGE_PORTION_MIN_BASE_SCORE
        and calorie_share > LARGE_PORTION_CALORIE_SHARE
    ):
        score -= LARGE_PORTION_PENALTY

    result = map_score(score)
    _logger.debug(
        "Daily entry grade: grams=%s calorie_share=%.1f base=%s grade=%s",
        consumed_grams,
        calorie_share,
        base.letter,
        result.letter,
    )
    return result


def _grade_macros(macros: MacroProfile) -> FoodGradeResult:
    score = BASE_SCORE + _base_adjustments(macros)
    result = map_score(score)
    _logger.debug(
        "Base grade: calories=%s protein=%s carbs=%s fat=%s raw=%.2f grade=%s",
        macros.calories,
        macros.protein_g,
        macros.carbs_g,
        macros.fat_g,
        score,
        result.letter,
    )
    return result


def _base_adjustments(macros: MacroProfile) -> float:
    calories = macros.calories
    protein = macros.protein_g
    carbs = macros.carbs_g
    fat = macros.fat_g
    adjustment = 0.0

    # Calorie density
    low_calorie_bonus = _below(calories, LOW_CALORIE_BONUSES)
    if low_calorie_bonus:
        adjustment += low_calorie_bonus
    elif calories > HIGH_CALORIE_START:
        adjustment -= (calories - HIGH_CALORIE_START) * HIGH_CALORIE_PENALTY_PER_KCAL
    if calories > VERY_HIGH_CALORIE_THRESHOLD:
        adjustment -= VERY_HIGH_CALORIE_PENALTY

    # Protein
    protein_bonus = _above(protein, PROTEIN_BONUSES)
    if protein_bonus:
        adjustment += protein_bonus
    elif protein < LOW_PROTEIN_G and calories > LOW_PROTEIN_MIN_CALORIES:
        adjustment -= LOW_PROTEIN_PENALTY

    protein_pct = _calorie_pct(protein * PROTEIN_KCAL_PER_G, calories)
    fat_pct = _calorie_pct(fat * FAT_KCAL_PER_G, calories)
    carbs_pct = _calorie_pct(carbs * CARBS_KCAL_PER_G, calories)

    # Fat quantity and share
    if fat > HIGH_FAT_G:
        adjustment -= (fat - HIGH_FAT_G) * HIGH_FAT_PENALTY_PER_G
        if protein < fat * FATTY_LOW_PROTEIN_RATIO and protein < FATTY_LOW_PROTEIN_G:
            adjustment -= FATTY_LOW_PROTEIN_PENALTY
    adjustment -= _above(fat_pct, FAT_SHARE_PENALTIES)

    # Carb quantity and share
    if carbs > HIGH_CARBS_G and calories > HIGH_CARBS_MIN_CALORIES:
        adjustment -= (carbs - HIGH_CARBS_G) * HIGH_CARBS_PENALTY_PER_G
        if (
            protein < carbs * REFINED_CARBS_PROTEIN_RATIO
            and protein < REFINED_CARBS_PROTEIN_G
        ):
            adjustment -= REFINED_CARBS_PENALTY
    adjustment -= _above(carbs_pct, CARB_SHARE_PENALTIES)

    # Macro balance
    balance_points = sum(
        BALANCE_POINTS_PER_MACRO
        for pct, (low, high) in (
            (protein_pct, BALANCED_PROTEIN_PCT),
            (fat_pct, BALANCED_FAT_PCT),
            (carbs_pct, BALANCED_CARBS_PCT),
        )
        if low <= pct <= high
    )
    for min_points, bonus in BALANCE_BONUSES:
        if balance_points >= min_points:
            adjustment += bonus
            break

    # Synergies, each applied independently.
    # High-protein fatty foods (salmon).
    if protein > 18 and fat_pct > 35:
        adjustment += SYNERGY_BONUS
    # Fat-dominant, low-carb, low-protein foods (avocado). Pure fats qualify too.
    if fat > 10 and carbs < 10 and protein < 5:
        adjustment += SYNERGY_BONUS
    if protein < 5 and fat > 20 and carbs > 30 and calories > 200:
        adjustment -= IMBALANCE_PENALTY
    # Low-calorie balanced foods (grains).
    if calories <= 120 and protein >= 4 and carbs >= 20 and fat >= 2:
        adjustment += SYNERGY_BONUS

    return adjustment


def _below(value: float, tiers: tuple[tuple[float, float], ...]) -> float:
    for bound, points in tiers:
        if value < bound:
            return points
    return 0.0


def _above(value: float, tiers: tuple[tuple[float, float], ...]) -> float:
    for bound, points in tiers:
        if value > bound:
            return points
    return 0.0


def _calorie_pct(macro_calories: float, calories: float) -> float:
    if calories > 0:
        return macro_calories / calories * 100
    return 0.0


def _safe_goals(goals: DailyGoals | None) -> DailyGoals:
    """Substitute defaults for missing goals and keep every goal at least 1."""
    goals = goals or DailyGoals()
    return DailyGoals(
        calories=max(1, goals.calories or DEFAULT_DAILY_GOALS.calories),
        protein_g=max(1, goals.protein_g or DEFAULT_DAILY_GOALS.protein_g),
        carbs_g=max(1, goals.carbs_g or DEFAULT_DAILY_GOALS.carbs_g),
        fat_g=max(1, goals.fat_g or DEFAULT_DAILY_GOALS.fat_g),
    )


def _is_number(value: object) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _read_macros(
    food: MacroProfile | Mapping[str, object] | None,
) -> MacroProfile | None:
    if food is None:
        return None
    if isinstance(food, Mapping):
        values = [food.get(name) for name in _MACRO_FIELDS]
    else:
        values = [getattr(food, name, None) for name in _MACRO_FIELDS]
    if not all(_is_number(value) for value in values):
        return None
    calories, protein, carbs, fat = values
    return MacroProfile(calories=calories, protein_g=protein, fat_g=fat, carbs_g=carbs)
