"""Pydantic models for engine API payloads."""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from nutrition_engine.domain.goals import (
    ActivityLevel,
    AdvancedActivity,
    BasicActivity,
    BiometricProfile,
    ExerciseIntensity,
    GoalInput,
    GoalIntensity,
    JobActivity,
    PrimaryGoal,
    Sex,
)
from nutrition_engine.domain.nutrition import DailyEntryItem, DailyGoals, MacroProfile


class ProfilePayload(BaseModel):
    """Biometric profile payload."""

    model_config = ConfigDict(allow_inf_nan=False)

    age_years: float = Field(gt=0, le=120)
    sex: Sex
    height_cm: float = Field(gt=0)
    weight_kg: float = Field(gt=0)
    body_fat_pct: float | None = Field(default=None, gt=0, lt=100)

    def to_domain(self) -> BiometricProfile:
        return BiometricProfile(
            age_years=self.age_years,
            sex=self.sex,
            height_cm=self.height_cm,
            weight_kg=self.weight_kg,
            body_fat_pct=self.body_fat_pct,
        )


class BasicActivityPayload(BaseModel):
    """Lifestyle activity level payload."""

    method: Literal["basic"]
    activity_level: ActivityLevel

    def to_domain(self) -> BasicActivity:
        return BasicActivity(activity_level=self.activity_level)


class AdvancedActivityPayload(BaseModel):
    """Weekly routine questionnaire payload."""

    model_config = ConfigDict(allow_inf_nan=False)

    method: Literal["advanced"]
    job_activity: JobActivity
    sleep_hours: float = Field(ge=0, le=24)
    resistance_hours_per_week: float = Field(default=0, ge=0)
    resistance_intensity: ExerciseIntensity = ExerciseIntensity.MODERATE
    cardio_hours_per_week: float = Field(default=0, ge=0)
    cardio_intensity: ExerciseIntensity = ExerciseIntensity.MODERATE

    def to_domain(self) -> AdvancedActivity:
        return AdvancedActivity(
            job_activity=self.job_activity,
            sleep_hours=self.sleep_hours,
            resistance_hours_per_week=self.resistance_hours_per_week,
            resistance_intensity=self.resistance_intensity,
            cardio_hours_per_week=self.cardio_hours_per_week,
            cardio_intensity=self.cardio_intensity,
        )


class GoalPayload(BaseModel):
    """Stated goal payload."""

    primary_goal: PrimaryGoal
    intensity: GoalIntensity = GoalIntensity.MODERATE

    def to_domain(self) -> GoalInput:
        return GoalInput(primary_goal=self.primary_goal, intensity=self.intensity)


class GoalsRequest(BaseModel):
    """Request body for goal calculation."""

    profile: ProfilePayload
    activity: Annotated[
        BasicActivityPayload | AdvancedActivityPayload,
        Field(discriminator="method"),
    ]
    goal: GoalPayload


class GradableFoodPayload(BaseModel):
    """Per-100 g macros.

    Missing values make the food ungradeable; non-numeric values are rejected.
    """

    calories: float | None = None
    protein_g: float | None = None
    carbs_g: float | None = None
    fat_g: float | None = None


class DailyGoalsPayload(BaseModel):
    """Daily goals. Missing or zero values fall back to defaults."""

    calories: float | None = None
    protein_g: float | None = None
    carbs_g: float | None = None
    fat_g: float | None = None

    def to_domain(self) -> DailyGoals:
        return DailyGoals(
            calories=self.calories,
            protein_g=self.protein_g,
            carbs_g=self.carbs_g,
            fat_g=self.fat_g,
        )


class BaseGradeRequest(BaseModel):
    """Request body for a food's base grade."""

    food: GradableFoodPayload


class DailyEntryGradeRequest(BaseModel):
    """Request body for a portion grade."""

    food: GradableFoodPayload
    consumed_grams: float
    daily_goals: DailyGoalsPayload = Field(default_factory=DailyGoalsPayload)


class FoodPayload(BaseModel):
    """Complete per-100 g macro profile."""

    calories: float = Field(ge=0)
    protein_g: float = Field(ge=0)
    carbs_g: float = Field(ge=0)
    fat_g: float = Field(ge=0)

    def to_domain(self) -> MacroProfile:
        return MacroProfile(
            calories=self.calories,
            protein_g=self.protein_g,
            fat_g=self.fat_g,
            carbs_g=self.carbs_g,
        )


class EntryItemPayload(BaseModel):
    """A food and the grams eaten."""

    food: FoodPayload
    grams: float = Field(ge=0)

    def to_domain(self) -> DailyEntryItem:
        return DailyEntryItem(food=self.food.to_domain(), grams=self.grams)


class ProgressRequest(BaseModel):
    """Request body for daily progress."""

    items: list[EntryItemPayload]
    daily_goals: DailyGoalsPayload = Field(default_factory=DailyGoalsPayload)
