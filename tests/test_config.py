"""Tests for application configuration."""

import pytest
from pydantic import ValidationError

from location_check.config import Settings


class TestDefaults:
    def test_defaults(self, app_settings: Settings) -> None:
        assert app_settings.output_format == "text"
        assert app_settings.strict_input is True
        assert app_settings.json_logs is False
        assert app_settings.debug is False


class TestEnvironment:
    def test_reads_prefixed_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOCATION_CHECK_OUTPUT_FORMAT", "json")
        monkeypatch.setenv("LOCATION_CHECK_STRICT_INPUT", "false")
        s = Settings()
        assert s.output_format == "json"
        assert s.strict_input is False

    def test_ignores_unprefixed_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OUTPUT_FORMAT", "json")
        assert Settings().output_format == "text"

    def test_rejects_unknown_output_format(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOCATION_CHECK_OUTPUT_FORMAT", "xml")
        with pytest.raises(ValidationError):
            Settings()
