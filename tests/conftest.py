"""Pytest fixtures for creative-science tests."""

import logging
from datetime import date

import pytest

from creative_science.config.settings import Settings, get_settings
from creative_science.knowledge.schemas import (
    AnalysisInput,
    ContentInput,
    ContextInput,
    CreativeInput,
    MetricsInput,
)
from creative_science.observability import logging as logging_module


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Each test reads settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _detach_log_handler():
    """Drop the root handler installed by setup_logging (CLI runs install one)."""
    root = logging.getLogger()
    level = root.level
    yield
    if logging_module._handler is not None:
        root.removeHandler(logging_module._handler)
        logging_module._handler = None
    root.setLevel(level)


@pytest.fixture
def test_settings() -> Settings:
    """Settings configured for testing."""
    return Settings(
        environment="development",
        log_level="DEBUG",
        tracing_enabled=False,
    )


@pytest.fixture
def sample_input() -> AnalysisInput:
    """A fully populated conversion creative."""
    return AnalysisInput(
        content=ContentInput(
            headline="New: Save 30% on Your First Order",
            primary_text=(
                "Join 10,000 happy customers who love our proven skincare. "
                "Limited stock, offer ends tonight."
            ),
            description="Free shipping on every order.",
            call_to_action="Get My Discount Now",
        ),
        creative=CreativeInput(
            format="carousel",
            dominant_colors=("red", "white"),
        ),
        context=ContextInput(industry="ecommerce", objective="conversion"),
        metrics=MetricsInput(ctr=1.5, cvr=3.0, roas=4.0),
        as_of=date(2026, 12, 1),
    )


@pytest.fixture
def empty_input() -> AnalysisInput:
    """Input with nothing in it."""
    return AnalysisInput()


@pytest.fixture
def sample_payload() -> dict:
    """JSON-shaped version of sample_input."""
    return {
        "content": {
            "headline": "New: Save 30% on Your First Order",
            "primary_text": (
                "Join 10,000 happy customers who love our proven skincare. "
                "Limited stock, offer ends tonight."
            ),
            "description": "Free shipping on every order.",
            "call_to_action": "Get My Discount Now",
        },
        "creative": {"format": "carousel", "dominant_colors": ["Red", " white "]},
        "context": {"industry": "ecommerce", "objective": "conversion"},
        "metrics": {"ctr": 1.5, "cvr": 3.0, "roas": 4.0},
        "as_of": "2026-12-01",
    }
