"""Testes para config.settings.scheduler."""

from __future__ import annotations

import pytest

from config.settings import DEFAULT_USER_AGENT, SchedulerSettings, get_scheduler_settings
from config.settings.scheduler import _load_from_env


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_scheduler_settings.cache_clear()
    yield
    get_scheduler_settings.cache_clear()


class TestSchedulerSettings:
    def test_defaults(self) -> None:
        settings = SchedulerSettings()
        assert settings.api_base_url == ""
        assert settings.request_timeout_seconds == 30.0
        assert settings.verify_ssl is True
        assert settings.user_agent == DEFAULT_USER_AGENT

    def test_root_url_strips_trailing_slash(self) -> None:
        settings = SchedulerSettings(api_base_url="https://scheduler.test/")
        assert settings.root_url == "https://scheduler.test"

    def test_validate_ok(self) -> None:
        assert SchedulerSettings(api_base_url="https://scheduler.test").validate() == []

    def test_validate_missing_url(self) -> None:
        errors = SchedulerSettings().validate()
        assert "SCHEDULER_API_BASE_URL não configurado" in errors

    def test_validate_bad_scheme_and_timeout(self) -> None:
        errors = SchedulerSettings(
            api_base_url="ftp://scheduler.test",
            request_timeout_seconds=0,
        ).validate()
        assert len(errors) == 2


class TestLoadFromEnv:
    def test_reads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCHEDULER_API_BASE_URL", "https://scheduler.test")
        monkeypatch.setenv("SCHEDULER_ACCESS_TOKEN", "tok")
        monkeypatch.setenv("SCHEDULER_REQUEST_TIMEOUT_SECONDS", "5")
        monkeypatch.setenv("SCHEDULER_VERIFY_SSL", "false")
        monkeypatch.setenv("SCHEDULER_USER_AGENT", "ops-bot/1.0")

        settings = _load_from_env()

        assert settings == SchedulerSettings(
            api_base_url="https://scheduler.test",
            access_token="tok",
            request_timeout_seconds=5.0,
            verify_ssl=False,
            user_agent="ops-bot/1.0",
        )

    def test_get_scheduler_settings_is_cached(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCHEDULER_API_BASE_URL", "https://first.test")
        first = get_scheduler_settings()
        monkeypatch.setenv("SCHEDULER_API_BASE_URL", "https://second.test")
        assert get_scheduler_settings() is first
