"""ASGI entrypoint for the nutrition engine API."""

from nutrition_engine.api.app import create_app
from nutrition_engine.config import Settings

app = create_app(Settings())
