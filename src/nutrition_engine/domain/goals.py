"""Domain models for daily goal calculation."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal

from nutrition_engine.domain.nutrition import DailyGoals


class Sex(StrEnum):
    MALE = "male"
    FEMALE = "female"


class CalculationMethod(StrEnum):
    BASIC = "basic"
    ADVANCED = "advanced"


class ActivityLevel(StrEnum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class JobActivity(StrEnum):
    SITTING = "sitting"
    STANDING = "standing"
    MANUAL = "manual"
    HEAVY = "heavy"


class ExerciseIntensity(StrEnum):
    LIGHT = "light"
    MODERATE = "moderate"
    VIGOROUS = "vigorous"


class PrimaryGoal(StrEnum):
    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"


class GoalIntensity(StrEnum):
    MILD = "mild"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"


@dataclass(frozen=True)
class BiometricProfile:
    """Body measurements used for energy estimates.

    Values are expected to be positive and plausible; they are not
    re-validated here.
    """

    age_years: float
    sex: Sex
    height_cm: float
    weight_kg: float
    body_fat_pct: float | None = None

    @property
    def lean_mass_kg(self) -> float | None:
        """Lean body mass, when a body fat percentage is known."""
        if not self.body_fat_pct or self.body_fat_pct <= 0:
            return None
        return self.weight_kg * (1 - self.body_fat_pct / 100)


@dataclass(frozen=True)
class BasicActivity:
    """Activity described by a single lifestyle level."""

    activity_level: ActivityLevel
    method: Literal[CalculationMethod.BASIC] = CalculationMethod.BASIC


@dataclass(frozen=True)
class AdvancedActivity:
    """Activity described by a weekly routine questionnaire."""

    job_activity: JobActivity
    sleep_hours: float
    resistance_hours_per_week: float
    resistance_intensity: ExerciseIntensity
    cardio_hours_per_week: float
    cardio_intensity: ExerciseIntensity
    method: Literal[CalculationMethod.ADVANCED] = CalculationMethod.ADVANCED


ActivityInput = BasicActivity | AdvancedActivity


@dataclass(frozen=True)
class GoalInput:
    """Stated goal. Intensity is ignored when maintaining."""

    primary_goal: PrimaryGoal
    intensity: GoalIntensity = GoalIntensity.MODERATE


@dataclass(frozen=True)
class CalorieGoal:
    """Adjusted calorie goal and whether the minimum floor was applied."""

    calories: float
    minimum_applied: bool = False


@dataclass(frozen=True)
class MacroSplit:
    """Macro grams composing a calorie goal."""

    protein_g: int
    fat_g: int
    carbs_g: int


@dataclass(frozen=True)
class CalculatedGoals:
    """Daily targets produced by the goal calculator."""

    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int
    minimum_calories_applied: bool = False

    def to_daily_goals(self) -> DailyGoals:
        """Return the targets as daily goals."""
        return DailyGoals(
            calories=self.calories,
            protein_g=self.protein_g,
            carbs_g=self.carbs_g,
            fat_g=self.fat_g,
        )
