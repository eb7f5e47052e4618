"""FastAPI application factory."""

from dataclasses import asdict

from fastapi import FastAPI

from nutrition_engine.api.models import (
    BaseGradeRequest,
    DailyEntryGradeRequest,
    GoalsRequest,
    ProgressRequest,
)
from nutrition_engine.app_logging import configure_logging
from nutrition_engine.config import Settings
from nutrition_engine.domain.nutrition import FoodGradeResult
from nutrition_engine.services.goals import compute_calculated_goals
from nutrition_engine.services.grading import (
    calculate_base_food_grade,
    calculate_daily_entry_grade,
)
from nutrition_engine.services.progress import calculate_progress, summarize_entries


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create a FastAPI app exposing the nutrition engine."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.effective_log_level)

    app = FastAPI(title="Nutrition Engine")
    app.state.settings = resolved_settings

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/goals")
    async def goals(request: GoalsRequest) -> dict[str, object]:
        """Calculate daily calorie and macro targets."""
        result = compute_calculated_goals(
            request.profile.to_domain(),
            request.activity.to_domain(),
            request.goal.to_domain(),
        )
        return asdict(result)

    @app.post("/grades/base")
    async def base_grade(request: BaseGradeRequest) -> dict[str, object]:
        """Grade a food from its per-100 g macros."""
        result = calculate_base_food_grade(request.food.model_dump())
        return {"grade": _grade_payload(result)}

    @app.post("/grades/daily-entry")
    async def daily_entry_grade(request: DailyEntryGradeRequest) -> dict[str, object]:
        """Grade a portion of a food against daily goals."""
        result = calculate_daily_entry_grade(
            request.food.model_dump(),
            request.consumed_grams,
            request.daily_goals.to_domain(),
        )
        return {"grade": _grade_payload(result)}

    @app.post("/progress")
    async def progress(request: ProgressRequest) -> dict[str, object]:
        """Sum a day's entries and report progress toward goals."""
        totals = summarize_entries(item.to_domain() for item in request.items)
        fractions = calculate_progress(totals, request.daily_goals.to_domain())
        return {"totals": asdict(totals), "progress": asdict(fractions)}

    return app


def _grade_payload(result: FoodGradeResult | None) -> dict[str, object] | None:
    if result is None:
        return None
    return asdict(result)
