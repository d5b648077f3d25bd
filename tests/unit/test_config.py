"""Configuration tests."""

import pytest
from pydantic import ValidationError

from core import get_settings
from core.config import Settings


def test_settings_defaults():
    """Test default settings load correctly."""
    settings = get_settings()

    assert settings.stack_spacing == 80
    assert settings.duplicate_offset == 80
    assert settings.history_limit == 50
    assert settings.max_tree_depth == 20
    assert settings.default_format == "react-native"


def test_settings_cached():
    assert get_settings() is get_settings()


def test_test_environment_disables_cache():
    """conftest sets BUILDER_ENABLE_CACHE=false."""
    assert get_settings().enable_cache is False


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("BUILDER_STACK_SPACING", "120")
    monkeypatch.setenv("BUILDER_HISTORY_LIMIT", "5")
    settings = Settings()
    assert settings.stack_spacing == 120
    assert settings.history_limit == 5


def test_settings_validation():
    """Test settings validation."""
    assert Settings(cache_size=4).cache_size == 4

    with pytest.raises(ValidationError):
        Settings(history_limit=0)

    with pytest.raises(ValidationError):
        Settings(stack_spacing=-1)
