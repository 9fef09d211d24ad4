"""Tests for settings and logging configuration."""

import pytest

from neo_realms.config import RealmSettings, RealmType
from neo_realms.config.logging_config import LoggingConfig, get_log_level_from_verbosity


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Isolate settings from the caller's environment and any .env file."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "REALM_TYPE",
        "REALM_PROPERTIES_PATH",
        "REALM_RELOAD_INTERVAL_SECONDS",
        "REALM_DATABASE_DSN",
        "LOG_LEVEL",
        "LOG_VERBOSITY",
        "LOG_FORMAT",
        "ENABLE_REALM_LOGGING",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestRealmSettings:
    """Test cases for RealmSettings."""

    def test_defaults(self, clean_env):
        settings = RealmSettings()

        assert settings.realm_type == RealmType.PROPERTIES
        assert settings.to_realm_config() == {
            "properties_path": "classpath:realm-users.properties",
        }

    def test_properties_from_env(self, clean_env):
        clean_env.setenv("REALM_TYPE", "properties")
        clean_env.setenv("REALM_PROPERTIES_PATH", "/etc/realm/users.properties")
        clean_env.setenv("REALM_RELOAD_INTERVAL_SECONDS", "30")

        config = RealmSettings().to_realm_config()

        assert config == {
            "properties_path": "/etc/realm/users.properties",
            "reload_interval_seconds": 30.0,
        }

    def test_database_from_env(self, clean_env):
        clean_env.setenv("REALM_TYPE", "database")
        clean_env.setenv("REALM_DATABASE_DSN", "postgresql://u:p@db/identity")

        settings = RealmSettings()

        assert settings.realm_type == RealmType.DATABASE
        assert "postgresql" not in repr(settings)
        assert settings.to_realm_config() == {
            "min_pool_size": 1,
            "max_pool_size": 10,
            "dsn": "postgresql://u:p@db/identity",
        }

    def test_memory_has_no_env_config(self, clean_env):
        assert RealmSettings(realm_type="memory").to_realm_config() == {}


class TestLoggingConfig:
    """Test cases for LoggingConfig."""

    @pytest.mark.parametrize("verbosity,level", [
        ("quiet", "ERROR"),
        ("NORMAL", "WARNING"),
        ("verbose", "INFO"),
        ("debug", "DEBUG"),
        ("chatty", "WARNING"),
    ])
    def test_verbosity_levels(self, verbosity, level):
        assert get_log_level_from_verbosity(verbosity) == level

    def test_default_build(self, clean_env):
        config = LoggingConfig.build()

        assert config["loggers"]["neo_realms"]["level"] == "WARNING"
        assert config["loggers"]["neo_realms.features.realms"] == {"level": "WARNING"}
        assert config["loggers"]["asyncpg"] == {"level": "ERROR"}

    def test_explicit_level_wins(self, clean_env):
        clean_env.setenv("LOG_VERBOSITY", "QUIET")
        clean_env.setenv("LOG_LEVEL", "info")

        config = LoggingConfig.build()

        assert config["handlers"]["console"]["level"] == "INFO"

    def test_realm_logging_enabled(self, clean_env):
        clean_env.setenv("ENABLE_REALM_LOGGING", "true")

        config = LoggingConfig.build()

        assert "neo_realms.features.realms" not in config["loggers"]

    def test_json_format(self, clean_env):
        clean_env.setenv("LOG_FORMAT", "JSON")

        config = LoggingConfig.build()

        assert config["formatters"]["default"]["format"].startswith("{")
