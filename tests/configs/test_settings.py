"""Tests for engine settings loading."""

import pytest
from pydantic import ValidationError

from infra_config.configs.constants import CollisionStrategy
from infra_config.configs.settings import EngineSettings, get_settings


class TestEngineSettings:
    """Tests for EngineSettings defaults and environment overrides."""

    @pytest.fixture(autouse=True)
    def clean_environment(self, monkeypatch) -> None:
        for name in (
            "INFRA_CONFIG_COLLISION_STRATEGY",
            "INFRA_CONFIG_MAX_COLLISION_ATTEMPTS",
            "INFRA_CONFIG_CHECK_RESERVED_PREFIXES",
            "INFRA_CONFIG_ALLOW_UNKNOWN_STAGE",
            "INFRA_CONFIG_LOG_LEVEL",
        ):
            monkeypatch.delenv(name, raising=False)

    def test_defaults(self) -> None:
        """Defaults match the documented engine behaviour."""
        settings = EngineSettings(_env_file=None)

        assert settings.collision_strategy is CollisionStrategy.NUMERIC_SUFFIX
        assert settings.max_collision_attempts == 10
        assert settings.check_reserved_prefixes is True
        assert settings.allow_unknown_stage is True
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch) -> None:
        """INFRA_CONFIG_* variables override defaults."""
        monkeypatch.setenv("INFRA_CONFIG_COLLISION_STRATEGY", "HASH_SUFFIX")
        monkeypatch.setenv("INFRA_CONFIG_MAX_COLLISION_ATTEMPTS", "3")
        monkeypatch.setenv("INFRA_CONFIG_ALLOW_UNKNOWN_STAGE", "false")

        settings = EngineSettings(_env_file=None)

        assert settings.collision_strategy is CollisionStrategy.HASH_SUFFIX
        assert settings.max_collision_attempts == 3
        assert settings.allow_unknown_stage is False

    def test_rejects_unknown_strategy(self, monkeypatch) -> None:
        """Strategy values outside the enum fail fast."""
        monkeypatch.setenv("INFRA_CONFIG_COLLISION_STRATEGY", "RANDOM")

        with pytest.raises(ValidationError):
            EngineSettings(_env_file=None)

    def test_rejects_zero_attempts(self) -> None:
        """At least one collision attempt is required."""
        with pytest.raises(ValidationError):
            EngineSettings(_env_file=None, max_collision_attempts=0)

    def test_get_settings_is_cached(self) -> None:
        """get_settings returns one shared instance."""
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
