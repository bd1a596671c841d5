"""
Tests for settings.
"""

from dategetter.config import DEFAULT_PATTERN, Settings, get_settings, update_settings
from dategetter.dialects import PatternDialect


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("DATEGETTER_DIALECT", "strftime")
    monkeypatch.setenv("DATEGETTER_TIMEZONE", "Europe/Paris")
    
    settings = Settings()
    
    assert settings.dialect == PatternDialect.STRFTIME
    assert settings.timezone == "Europe/Paris"


def test_update_settings():
    original = get_settings()
    try:
        updated = update_settings(default_pattern="hh:mm")
        
        assert get_settings() is updated
        assert updated.default_pattern == "hh:mm"
    finally:
        update_settings(**original.model_dump())
    
    assert get_settings().default_pattern == original.default_pattern


def test_default_pattern_constant():
    assert DEFAULT_PATTERN == "YYYY-MM-DD hh:mm:ss"
