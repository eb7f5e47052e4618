"""Tests for daily goal calculation."""

import logging
from dataclasses import dataclass

import pytest

from nutrition_engine.domain.goals import (
    ActivityLevel,
    AdvancedActivity,
    BasicActivity,
    BiometricProfile,
    CalculatedGoals,
    CalculationMethod,
    ExerciseIntensity,
    GoalInput,
    GoalIntensity,
    JobActivity,
    MacroSplit,
    PrimaryGoal,
    Sex,
)
from nutrition_engine.domain.nutrition import DailyGoals
from nutrition_engine.services.goals import (
    apply_goal_adjustment,
    compute_bmr,
    compute_calculated_goals,
    compute_macros,
    compute_tdee,
    physical_activity_level,
)

ROUTINE = AdvancedActivity(
    job_activity=JobActivity.SITTING,
    sleep_hours=8,
    resistance_hours_per_week=3,
    resistance_intensity=ExerciseIntensity.MODERATE,
    cardio_hours_per_week=2,
    cardio_intensity=ExerciseIntensity.VIGOROUS,
)
MAINTAIN = GoalInput(primary_goal=PrimaryGoal.MAINTAIN)


def test_mifflin_st_jeor_bmr(male_profile: BiometricProfile) -> None:
    female = BiometricProfile(age_years=25, sex=Sex.FEMALE, height_cm=180, weight_kg=80)

    assert compute_bmr(male_profile, CalculationMethod.BASIC) == pytest.approx(1805)
    assert compute_bmr(female, CalculationMethod.BASIC) == pytest.approx(1639)


def test_katch_mcardle_bmr_for_advanced_with_body_fat(
    lean_male_profile: BiometricProfile,
) -> None:
    bmr = compute_bmr(lean_male_profile, CalculationMethod.ADVANCED)

    assert bmr == pytest.approx(370 + 21.6 * 64)


def test_basic_method_ignores_body_fat(lean_male_profile: BiometricProfile) -> None:
    bmr = compute_bmr(lean_male_profile, CalculationMethod.BASIC)

    assert bmr == pytest.approx(10 * 80 + 6.25 * 180 - 5 * 30 + 5)


@pytest.mark.parametrize("body_fat_pct", [None, 0])
def test_advanced_without_body_fat_uses_mifflin(body_fat_pct: float | None) -> None:
    profile = BiometricProfile(
        age_years=25,
        sex=Sex.MALE,
        height_cm=180,
        weight_kg=80,
        body_fat_pct=body_fat_pct,
    )

    assert compute_bmr(profile, CalculationMethod.ADVANCED) == pytest.approx(1805)


@pytest.mark.parametrize(
    ("level", "multiplier"),
    [
        (ActivityLevel.SEDENTARY, 1.2),
        (ActivityLevel.LIGHT, 1.375),
        (ActivityLevel.MODERATE, 1.55),
        (ActivityLevel.ACTIVE, 1.725),
        (ActivityLevel.VERY_ACTIVE, 1.9),
    ],
)
def test_basic_tdee_multipliers(level: ActivityLevel, multiplier: float) -> None:
    tdee = compute_tdee(1000, BasicActivity(activity_level=level))

    assert tdee == pytest.approx(1000 * multiplier)


def test_advanced_physical_activity_level() -> None:
    # 8 h sleep, 8 h sitting work, 3/7 h resistance, 2/7 h cardio, rest residual.
    expected_met_hours = 8 * 0.95 + 8 * 1.3 + (3 * 5.0 + 2 * 9.8 + 51 * 1.3) / 7

    assert physical_activity_level(ROUTINE) == pytest.approx(expected_met_hours / 24)
    assert compute_tdee(1500, ROUTINE) == pytest.approx(1500 * expected_met_hours / 24)


def test_advanced_residual_hours_never_negative() -> None:
    routine = AdvancedActivity(
        job_activity=JobActivity.HEAVY,
        sleep_hours=12,
        resistance_hours_per_week=70,
        resistance_intensity=ExerciseIntensity.VIGOROUS,
        cardio_hours_per_week=0,
        cardio_intensity=ExerciseIntensity.LIGHT,
    )

    assert physical_activity_level(routine) == pytest.approx(
        (12 * 0.95 + 8 * 5.0 + 10 * 6.0) / 24
    )


def test_compute_tdee_rejects_unknown_activity() -> None:
    @dataclass
    class UnknownActivity:
        method: str = "custom"

    with pytest.raises(TypeError):
        compute_tdee(1500, UnknownActivity())  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("primary_goal", "intensity", "expected"),
    [
        (PrimaryGoal.LOSE, GoalIntensity.MILD, 2200),
        (PrimaryGoal.LOSE, GoalIntensity.MODERATE, 2000),
        (PrimaryGoal.LOSE, GoalIntensity.AGGRESSIVE, 1750),
        (PrimaryGoal.GAIN, GoalIntensity.MILD, 2700),
        (PrimaryGoal.GAIN, GoalIntensity.MODERATE, 2850),
        (PrimaryGoal.GAIN, GoalIntensity.AGGRESSIVE, 3000),
        (PrimaryGoal.MAINTAIN, GoalIntensity.AGGRESSIVE, 2500),
    ],
)
def test_goal_adjustment_table(
    primary_goal: PrimaryGoal, intensity: GoalIntensity, expected: float
) -> None:
    goal = GoalInput(primary_goal=primary_goal, intensity=intensity)

    result = apply_goal_adjustment(2500, goal, Sex.MALE)

    assert result.calories == expected
    assert result.minimum_applied is False


@pytest.mark.parametrize(("sex", "minimum"), [(Sex.MALE, 1500), (Sex.FEMALE, 1200)])
def test_goal_adjustment_minimum_floor(sex: Sex, minimum: float) -> None:
    goal = GoalInput(primary_goal=PrimaryGoal.LOSE, intensity=GoalIntensity.AGGRESSIVE)

    result = apply_goal_adjustment(1100, goal, sex)

    assert result.calories == minimum
    assert result.minimum_applied is True


def test_goal_adjustment_minimum_floor_is_logged(
    caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
) -> None:
    # The package logger stops propagation once configure_logging has run.
    monkeypatch.setattr(logging.getLogger("nutrition_engine"), "propagate", True)
    caplog.set_level(logging.INFO, logger="nutrition_engine.services.goals")
    goal = GoalInput(primary_goal=PrimaryGoal.LOSE, intensity=GoalIntensity.AGGRESSIVE)

    apply_goal_adjustment(1100, goal, Sex.FEMALE)

    records = [
        record
        for record in caplog.records
        if record.name == "nutrition_engine.services.goals"
    ]
    assert len(records) == 1
    assert records[0].levelno == logging.INFO
    assert "1200 kcal" in records[0].getMessage()


def test_goal_adjustment_above_floor_is_not_logged(
    caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(logging.getLogger("nutrition_engine"), "propagate", True)
    caplog.set_level(logging.INFO, logger="nutrition_engine.services.goals")

    apply_goal_adjustment(2500, MAINTAIN, Sex.MALE)

    assert not [
        record
        for record in caplog.records
        if record.name == "nutrition_engine.services.goals"
    ]


def test_goal_adjustment_at_floor_is_not_flagged() -> None:
    goal = GoalInput(primary_goal=PrimaryGoal.LOSE, intensity=GoalIntensity.MILD)

    result = apply_goal_adjustment(1500, goal, Sex.FEMALE)

    assert result.calories == 1200
    assert result.minimum_applied is False


def test_macros_basic_sedentary_maintain() -> None:
    macros = compute_macros(
        2166, 80, None, CalculationMethod.BASIC, MAINTAIN, ActivityLevel.SEDENTARY
    )

    assert macros == MacroSplit(protein_g=96, fat_g=72, carbs_g=284)


def test_macros_basic_active_uses_default_protein() -> None:
    goal = GoalInput(primary_goal=PrimaryGoal.LOSE, intensity=GoalIntensity.MODERATE)

    macros = compute_macros(
        2000, 80, None, CalculationMethod.BASIC, goal, ActivityLevel.MODERATE
    )

    assert macros.protein_g == 128
    assert macros.fat_g == 72


def test_macros_gain_outranks_sedentary() -> None:
    goal = GoalInput(primary_goal=PrimaryGoal.GAIN)

    macros = compute_macros(
        3000, 80, None, CalculationMethod.BASIC, goal, ActivityLevel.SEDENTARY
    )

    assert macros.protein_g == 160


def test_macros_advanced_cut_uses_lean_mass() -> None:
    goal = GoalInput(primary_goal=PrimaryGoal.LOSE, intensity=GoalIntensity.MODERATE)

    macros = compute_macros(2000, 80, 20, CalculationMethod.ADVANCED, goal)

    assert macros.protein_g == 141
    assert macros.fat_g == 72


def test_macros_aggressive_cut_lowers_fat_on_total_weight() -> None:
    goal = GoalInput(primary_goal=PrimaryGoal.LOSE, intensity=GoalIntensity.AGGRESSIVE)

    macros = compute_macros(2000, 80, 20, CalculationMethod.ADVANCED, goal)

    assert macros.fat_g == 56


def test_macros_advanced_gain_and_maintain() -> None:
    gain = compute_macros(
        3000, 80, 20, CalculationMethod.ADVANCED, GoalInput(PrimaryGoal.GAIN)
    )
    maintain = compute_macros(2500, 80, None, CalculationMethod.ADVANCED, MAINTAIN)

    assert gain.protein_g == 128
    assert maintain.protein_g == 128


def test_macros_carbs_never_negative() -> None:
    macros = compute_macros(
        1000, 100, None, CalculationMethod.BASIC, GoalInput(PrimaryGoal.GAIN)
    )

    assert macros.carbs_g == 0


def test_calculated_goals_basic(male_profile: BiometricProfile) -> None:
    activity = BasicActivity(activity_level=ActivityLevel.SEDENTARY)

    goals = compute_calculated_goals(male_profile, activity, MAINTAIN)

    assert goals == CalculatedGoals(
        calories=2166,
        protein_g=96,
        carbs_g=284,
        fat_g=72,
        minimum_calories_applied=False,
    )


def test_calculated_goals_female_floor() -> None:
    profile = BiometricProfile(age_years=60, sex=Sex.FEMALE, height_cm=150, weight_kg=50)
    activity = BasicActivity(activity_level=ActivityLevel.SEDENTARY)
    goal = GoalInput(primary_goal=PrimaryGoal.LOSE, intensity=GoalIntensity.AGGRESSIVE)

    goals = compute_calculated_goals(profile, activity, goal)

    assert goals.calories == 1200
    assert goals.minimum_calories_applied is True
    assert goals.protein_g == 60
    assert goals.fat_g == 35
    assert goals.carbs_g == 161


def test_calculated_goals_advanced(lean_male_profile: BiometricProfile) -> None:
    goal = GoalInput(primary_goal=PrimaryGoal.LOSE, intensity=GoalIntensity.MODERATE)

    goals = compute_calculated_goals(lean_male_profile, ROUTINE, goal)

    assert goals.calories == 1867
    assert goals.protein_g == 141
    assert goals.fat_g == 72
    assert goals.carbs_g == 164
    assert goals.minimum_calories_applied is False


def test_calculated_goals_to_daily_goals() -> None:
    goals = CalculatedGoals(calories=2000, protein_g=150, carbs_g=200, fat_g=70)

    assert goals.to_daily_goals() == DailyGoals(
        calories=2000, protein_g=150, carbs_g=200, fat_g=70
    )
