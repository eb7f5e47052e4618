"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from nutrition_engine.api.app import create_app
from nutrition_engine.config import Settings
from nutrition_engine.domain.goals import BiometricProfile, Sex
from nutrition_engine.domain.nutrition import DailyGoals, MacroProfile

CHICKEN_BREAST = MacroProfile(calories=165, protein_g=31, fat_g=3.6, carbs_g=0)
GLAZED_DONUT = MacroProfile(calories=452, protein_g=4.9, fat_g=25, carbs_g=51)
AVOCADO = MacroProfile(calories=160, protein_g=2, fat_g=15, carbs_g=9)
SALMON = MacroProfile(calories=208, protein_g=20, fat_g=13, carbs_g=0)
QUINOA = MacroProfile(calories=120, protein_g=4, fat_g=2, carbs_g=21)
OLIVE_OIL = MacroProfile(calories=884, protein_g=0, fat_g=100, carbs_g=0)
SUGARY_CEREAL = MacroProfile(calories=380, protein_g=5, fat_g=2, carbs_g=85)
WHITE_BREAD_LIKE = MacroProfile(calories=300, protein_g=5, fat_g=10, carbs_g=50)

STANDARD_GOALS = DailyGoals(calories=2000, protein_g=150, carbs_g=200, fat_g=70)


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", log_level="INFO", debug=False)


@pytest.fixture
def client(settings: Settings) -> TestClient:
    return TestClient(create_app(settings))


@pytest.fixture
def male_profile() -> BiometricProfile:
    return BiometricProfile(age_years=25, sex=Sex.MALE, height_cm=180, weight_kg=80)


@pytest.fixture
def lean_male_profile() -> BiometricProfile:
    return BiometricProfile(
        age_years=30, sex=Sex.MALE, height_cm=180, weight_kg=80, body_fat_pct=20
    )
