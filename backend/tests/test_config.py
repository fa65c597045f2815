"""
Tests for settings loading
"""
import os
from unittest.mock import patch

import pytest
from app.core.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_config_defaults():
    """Test default values when nothing is set in the environment"""
    with patch.dict(os.environ, {}, clear=True):
        settings = Settings(_env_file=None)

        assert settings.metadata_path == "../json"
        assert settings.api_port == 8080
        assert settings.log_format == "json"
        assert settings.log_file_enabled is False
        assert settings.allowed_origins_list == ["http://localhost:3000"]


def test_config_from_environment():
    with patch.dict(os.environ, {
        "METADATA_PATH": "/srv/metadata",
        "API_PORT": "9000",
        "ALLOWED_ORIGINS": "http://a.local, http://b.local,",
        "LOG_LEVEL": "DEBUG",
    }):
        settings = get_settings()

        assert settings.metadata_path == "/srv/metadata"
        assert settings.api_port == 9000
        assert settings.allowed_origins_list == ["http://a.local", "http://b.local"]
        assert settings.log_level == "DEBUG"


def test_empty_environment_value_is_ignored():
    with patch.dict(os.environ, {"METADATA_PATH": ""}):
        settings = Settings(_env_file=None)

        assert settings.metadata_path == "../json"


def test_invalid_port_rejected():
    from pydantic import ValidationError

    with patch.dict(os.environ, {"API_PORT": "70000"}):
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
