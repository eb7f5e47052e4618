"""Daily calorie and macro goal calculation.

The pipeline runs BMR -> TDEE -> calorie goal -> macro split. Basic
calculations use Mifflin-St Jeor and a lifestyle multiplier. Advanced
calculations use Katch-McArdle when body fat is known and a factorial
MET-hour model of the user's day.
"""

import logging

from nutrition_engine.domain.goals import (
    ActivityInput,
    ActivityLevel,
    AdvancedActivity,
    BasicActivity,
    BiometricProfile,
    CalculatedGoals,
    CalculationMethod,
    CalorieGoal,
    ExerciseIntensity,
    GoalInput,
    GoalIntensity,
    JobActivity,
    MacroSplit,
    PrimaryGoal,
    Sex,
)
from nutrition_engine.domain.nutrition import (
    CARBS_KCAL_PER_G,
    FAT_KCAL_PER_G,
    PROTEIN_KCAL_PER_G,
    round_half_up,
)

_logger = logging.getLogger(__name__)

KATCH_MCARDLE_INTERCEPT = 370
KATCH_MCARDLE_LBM_FACTOR = 21.6
MIFFLIN_SEX_OFFSETS: dict[Sex, float] = {
    Sex.MALE: 5,
    Sex.FEMALE: -161,
}

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

HOURS_PER_DAY = 24
DAYS_PER_WEEK = 7
WORK_HOURS = 8
SLEEP_MET = 0.95
RESIDUAL_MET = 1.3
JOB_METS: dict[JobActivity, float] = {
    JobActivity.SITTING: 1.3,
    JobActivity.STANDING: 2.5,
    JobActivity.MANUAL: 3.5,
    JobActivity.HEAVY: 5.0,
}
RESISTANCE_METS: dict[ExerciseIntensity, float] = {
    ExerciseIntensity.LIGHT: 3.5,
    ExerciseIntensity.MODERATE: 5.0,
    ExerciseIntensity.VIGOROUS: 6.0,
}
CARDIO_METS: dict[ExerciseIntensity, float] = {
    ExerciseIntensity.LIGHT: 5.0,
    ExerciseIntensity.MODERATE: 7.0,
    ExerciseIntensity.VIGOROUS: 9.8,
}

CALORIE_ADJUSTMENTS: dict[PrimaryGoal, dict[GoalIntensity, float]] = {
    PrimaryGoal.LOSE: {
        GoalIntensity.MILD: -300,
        GoalIntensity.MODERATE: -500,
        GoalIntensity.AGGRESSIVE: -750,
    },
    PrimaryGoal.GAIN: {
        GoalIntensity.MILD: 200,
        GoalIntensity.MODERATE: 350,
        GoalIntensity.AGGRESSIVE: 500,
    },
}
MINIMUM_CALORIES: dict[Sex, float] = {
    Sex.FEMALE: 1200,
    Sex.MALE: 1500,
}

DEFAULT_PROTEIN_PER_KG = 1.6
ADVANCED_CUT_PROTEIN_PER_KG = 2.2
GAIN_PROTEIN_PER_KG = 2.0
SEDENTARY_PROTEIN_PER_KG = 1.2
DEFAULT_FAT_PER_KG = 0.9
AGGRESSIVE_CUT_FAT_PER_KG = 0.7


def compute_bmr(profile: BiometricProfile, method: CalculationMethod) -> float:
    """Return basal metabolic rate in kcal/day."""
    lean_mass = profile.lean_mass_kg
    if method == CalculationMethod.ADVANCED and lean_mass is not None:
        return KATCH_MCARDLE_INTERCEPT + KATCH_MCARDLE_LBM_FACTOR * lean_mass
    return (
        10 * profile.weight_kg
        + 6.25 * profile.height_cm
        - 5 * profile.age_years
        + MIFFLIN_SEX_OFFSETS[profile.sex]
    )


def compute_tdee(bmr: float, activity: ActivityInput) -> float:
    """Return total daily energy expenditure in kcal/day."""
    if isinstance(activity, BasicActivity):
        return bmr * ACTIVITY_MULTIPLIERS[activity.activity_level]
    if isinstance(activity, AdvancedActivity):
        return bmr * physical_activity_level(activity)
    raise TypeError(f"Unsupported activity input: {type(activity).__name__}")


def physical_activity_level(activity: AdvancedActivity) -> float:
    """Average MET over a 24-hour day built from the weekly routine."""
    resistance_hours = activity.resistance_hours_per_week / DAYS_PER_WEEK
    cardio_hours = activity.cardio_hours_per_week / DAYS_PER_WEEK
    residual_hours = max(
        0,
        HOURS_PER_DAY
        - activity.sleep_hours
        - WORK_HOURS
        - resistance_hours
        - cardio_hours,
    )
    met_hours = (
        activity.sleep_hours * SLEEP_MET
        + WORK_HOURS * JOB_METS[activity.job_activity]
        + resistance_hours * RESISTANCE_METS[activity.resistance_intensity]
        + cardio_hours * CARDIO_METS[activity.cardio_intensity]
        + residual_hours * RESIDUAL_MET
    )
    return met_hours / HOURS_PER_DAY


def apply_goal_adjustment(tdee: float, goal: GoalInput, sex: Sex) -> CalorieGoal:
    """Shift TDEE by the goal's surplus or deficit, keeping a minimum intake."""
    adjustment = CALORIE_ADJUSTMENTS.get(goal.primary_goal, {}).get(goal.intensity, 0)
    calories = tdee + adjustment
    minimum = MINIMUM_CALORIES[sex]
    if calories < minimum:
        _logger.info(
            "Calorie goal %.0f is below the %s minimum; using %.0f kcal",
            calories,
            sex,
            minimum,
        )
        return CalorieGoal(calories=minimum, minimum_applied=True)
    return CalorieGoal(calories=calories)


def compute_macros(  # noqa: PLR0913
    calorie_goal: float,
    weight_kg: float,
    body_fat_pct: float | None,
    method: CalculationMethod,
    goal: GoalInput,
    activity_level: ActivityLevel | None = None,
) -> MacroSplit:
    """Split a calorie goal into protein, fat and carb grams."""
    protein_per_kg = DEFAULT_PROTEIN_PER_KG
    if method == CalculationMethod.ADVANCED and goal.primary_goal == PrimaryGoal.LOSE:
        protein_per_kg = ADVANCED_CUT_PROTEIN_PER_KG
    elif goal.primary_goal == PrimaryGoal.GAIN:
        protein_per_kg = GAIN_PROTEIN_PER_KG
    elif (
        method == CalculationMethod.BASIC
        and activity_level == ActivityLevel.SEDENTARY
    ):
        protein_per_kg = SEDENTARY_PROTEIN_PER_KG

    protein_basis = weight_kg
    if method == CalculationMethod.ADVANCED and body_fat_pct and body_fat_pct > 0:
        protein_basis = weight_kg * (1 - body_fat_pct / 100)
    protein_g = round_half_up(protein_per_kg * protein_basis)

    fat_per_kg = DEFAULT_FAT_PER_KG
    if (
        goal.primary_goal == PrimaryGoal.LOSE
        and goal.intensity == GoalIntensity.AGGRESSIVE
    ):
        fat_per_kg = AGGRESSIVE_CUT_FAT_PER_KG
    fat_g = round_half_up(fat_per_kg * weight_kg)

    carb_calories = max(
        0, calorie_goal - protein_g * PROTEIN_KCAL_PER_G - fat_g * FAT_KCAL_PER_G
    )
    carbs_g = round_half_up(carb_calories / CARBS_KCAL_PER_G)
    return MacroSplit(protein_g=protein_g, fat_g=fat_g, carbs_g=carbs_g)


def compute_calculated_goals(
    profile: BiometricProfile, activity: ActivityInput, goal: GoalInput
) -> CalculatedGoals:
    """Compute daily calorie and macro targets for a profile."""
    method = activity.method
    bmr = compute_bmr(profile, method)
    tdee = compute_tdee(bmr, activity)
    calorie_goal = apply_goal_adjustment(tdee, goal, profile.sex)
    activity_level = (
        activity.activity_level if isinstance(activity, BasicActivity) else None
    )
    macros = compute_macros(
        calorie_goal.calories,
        profile.weight_kg,
        profile.body_fat_pct,
        method,
        goal,
        activity_level,
    )
    _logger.debug(
        "Goals: method=%s bmr=%.1f tdee=%.1f calories=%.1f macros=%s",
        method,
        bmr,
        tdee,
        calorie_goal.calories,
        macros,
    )
    return CalculatedGoals(
        calories=round_half_up(calorie_goal.calories),
        protein_g=macros.protein_g,
        carbs_g=macros.carbs_g,
        fat_g=macros.fat_g,
        minimum_calories_applied=calorie_goal.minimum_applied,
    )
