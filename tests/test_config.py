"""Tests for option and settings binding."""

import pytest
from pydantic import ValidationError

from service_access.core.config import ServiceAccessOptions
from service_access.core.settings import ServiceAccessSettings


class TestServiceAccessOptions:
    def test_defaults(self):
        options = ServiceAccessOptions()

        assert options.retry == 3
        assert options.delay == 2.0

    def test_partial_options_fall_back_to_defaults(self):
        options = ServiceAccessOptions.model_validate({"retry": 1})

        assert options.retry == 1
        assert options.delay == 2.0

    def test_zero_values_are_kept(self):
        options = ServiceAccessOptions(retry=0, delay=0)

        assert options.retry == 0
        assert options.delay == 0

    def test_is_immutable(self):
        options = ServiceAccessOptions()

        with pytest.raises(ValidationError):
            options.retry = 10

    @pytest.mark.parametrize("data", [{"retry": -1}, {"delay": -1}, {"backoff": "exponential"}])
    def test_rejects_invalid_values(self, data):
        with pytest.raises(ValidationError):
            ServiceAccessOptions.model_validate(data)

    def test_from_app_settings(self):
        settings = ServiceAccessSettings(SERVICE_ACCESS_RETRY=5, SERVICE_ACCESS_DELAY=0.25)

        options = ServiceAccessOptions.from_app_settings(settings)

        assert options.retry == 5
        assert options.delay == 0.25


class TestServiceAccessSettings:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SERVICE_ACCESS_RETRY", "7")
        monkeypatch.setenv("SERVICE_ACCESS_DELAY", "1.5")
        monkeypatch.setenv("SERVICE_ACCESS_CACHE_TTL", "60")

        settings = ServiceAccessSettings()

        assert settings.SERVICE_ACCESS_RETRY == 7
        assert settings.SERVICE_ACCESS_DELAY == 1.5
        assert settings.SERVICE_ACCESS_CACHE_TTL == 60

    def test_defaults_without_environment(self, monkeypatch):
        for name in ("SERVICE_ACCESS_RETRY", "SERVICE_ACCESS_DELAY", "SERVICE_ACCESS_CACHE_TTL"):
            monkeypatch.delenv(name, raising=False)

        settings = ServiceAccessSettings(_env_file=None)

        assert settings.SERVICE_ACCESS_RETRY == 3
        assert settings.SERVICE_ACCESS_DELAY == 2.0
        assert settings.SERVICE_ACCESS_CACHE_TTL is None

    def test_log_level_is_normalized(self):
        settings = ServiceAccessSettings(SERVICE_ACCESS_LOG_LEVEL=" debug ")

        assert settings.SERVICE_ACCESS_LOG_LEVEL == "DEBUG"
