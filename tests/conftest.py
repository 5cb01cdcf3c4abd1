"""Shared pytest fixtures."""

import os
import sys

import pytest
from hypothesis import HealthCheck, settings

from location_check.config import Settings


def pytest_configure(config: pytest.Config) -> None:
    """Force line-buffered stdout when piped."""
    if hasattr(sys.stdout, "reconfigure") and not sys.stdout.isatty():
        sys.stdout.reconfigure(line_buffering=True)
    if hasattr(sys.stderr, "reconfigure") and not sys.stderr.isatty():
        sys.stderr.reconfigure(line_buffering=True)


# Hypothesis settings profiles for different environments
settings.register_profile("fast", max_examples=50)
settings.register_profile(
    "ci",
    max_examples=500,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "fast"))


@pytest.fixture(autouse=True)
def _isolate_settings_from_dotenv(monkeypatch: pytest.MonkeyPatch) -> None:
    """Prevent a local .env file or exported variables from leaking into tests."""
    monkeypatch.setattr(
        Settings,
        "model_config",
        {**Settings.model_config, "env_file": None},
    )
    for key in list(os.environ):
        if key.startswith("LOCATION_CHECK_"):
            monkeypatch.delenv(key)


@pytest.fixture
def app_settings() -> Settings:
    return Settings()
