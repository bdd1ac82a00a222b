"""Tests for typed_events.settings.Settings behavior."""

from typing import Any

import pytest
from pydantic import ValidationError

from typed_events.settings import Settings, get_settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch):
    """Defaults should be stable even if external env or .env sets values.

    We explicitly delete both upper & lower case variants and bypass .env loading
    by passing `_env_file=None`.
    """
    for var in [
        "TYPED_EVENTS_LOG_LEVEL",
        "TYPED_EVENTS_THREAD_SAFE",
        "typed_events_log_level",
        "typed_events_thread_safe",
    ]:
        monkeypatch.delenv(var, raising=False)
    s = Settings(_env_file=None)  # ignore project .env file if present
    assert s.log_level == "INFO"
    assert s.thread_safe is True


def test_env_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("TYPED_EVENTS_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("TYPED_EVENTS_THREAD_SAFE", "false")
    s = Settings()  # new instance reads env
    assert s.log_level == "DEBUG"
    assert s.thread_safe is False


def test_case_insensitive_env_name(monkeypatch: pytest.MonkeyPatch):
    # lower-case variable name should still be picked up due to case_sensitive=False
    monkeypatch.setenv("typed_events_thread_safe", "0")  # type: ignore[arg-type]
    s = Settings()
    assert s.thread_safe is False


def test_log_level_is_normalized(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("TYPED_EVENTS_LOG_LEVEL", "trace")
    s = Settings()
    assert s.log_level == "TRACE"


def test_invalid_log_level_rejected():
    with pytest.raises(ValidationError):
        Settings(log_level="verbose")


def test_get_settings_singleton():
    a = get_settings()
    b = get_settings()
    assert a is b


def test_get_settings_cache_not_affected_by_new_env(monkeypatch: pytest.MonkeyPatch):
    # Ensure cache stability: first call caches values
    first = get_settings()
    original = first.thread_safe
    monkeypatch.setenv("TYPED_EVENTS_THREAD_SAFE", str(not original).lower())
    second = get_settings()
    assert second is first
    assert second.thread_safe == original  # cache not invalidated


@pytest.mark.parametrize(
    "override,expected",
    [
        ({"log_level": "WARNING"}, "WARNING"),
        ({"thread_safe": False}, False),
    ],
)
def test_direct_instantiation_with_overrides(override: dict[str, Any], expected: Any):
    s = Settings(**override)
    # pick first and assert value
    key = next(iter(override.keys()))
    assert getattr(s, key) == expected


def test_model_dump_contains_all_core_fields():
    s = Settings()
    data = s.model_dump()
    for field in ["log_level", "thread_safe"]:
        assert field in data
