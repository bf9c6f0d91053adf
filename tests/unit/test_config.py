"""Unit tests for configuration management."""

import importlib

import pytest

from cookbook.utils.config import Config, config


class TestConfigInitialization:
    """Test Config class initialization and environment variable loading."""

    def test_config_loads_default_values(self, monkeypatch):
        """Test that Config uses default values when env vars not set."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("LOG_TYPE", raising=False)
        monkeypatch.delenv("LOGGER_NAME", raising=False)

        settings = Config()

        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_TYPE == "text"
        assert settings.LOGGER_NAME == "cookbook"

    def test_config_loads_from_environment(self, monkeypatch):
        """Test that Config loads values from environment variables."""
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LOG_TYPE", "json")
        monkeypatch.setenv("LOGGER_NAME", "recipes")

        settings = Config()

        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.LOG_TYPE == "json"
        assert settings.LOGGER_NAME == "recipes"

    def test_config_normalizes_case(self, monkeypatch):
        """Test that level is upper-cased and type lower-cased."""
        monkeypatch.setenv("LOG_LEVEL", "warning")
        monkeypatch.setenv("LOG_TYPE", "JSON")

        settings = Config()

        assert settings.LOG_LEVEL == "WARNING"
        assert settings.LOG_TYPE == "json"


class TestConfigValidation:
    """Test Config validation logic."""

    def test_validate_succeeds_with_defaults(self, monkeypatch):
        """Test that default configuration is valid."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("LOG_TYPE", raising=False)
        monkeypatch.delenv("LOGGER_NAME", raising=False)

        Config().validate()  # Should not raise

    def test_validate_rejects_unknown_log_level(self, monkeypatch):
        """Test that validate() raises ValueError for an unknown LOG_LEVEL."""
        monkeypatch.setenv("LOG_LEVEL", "VERBOSE")

        with pytest.raises(ValueError, match="LOG_LEVEL"):
            Config().validate()

    def test_validate_rejects_unknown_log_type(self, monkeypatch):
        """Test that validate() raises ValueError for an unknown LOG_TYPE."""
        monkeypatch.setenv("LOG_TYPE", "xml")

        with pytest.raises(ValueError, match="LOG_TYPE"):
            Config().validate()

    def test_validate_rejects_blank_logger_name(self, monkeypatch):
        """Test that validate() raises ValueError for a blank LOGGER_NAME."""
        monkeypatch.setenv("LOGGER_NAME", "   ")

        with pytest.raises(ValueError, match="LOGGER_NAME"):
            Config().validate()

    @pytest.mark.parametrize("level", ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    def test_validate_accepts_every_level(self, monkeypatch, level):
        """Test that all standard levels pass validation."""
        monkeypatch.setenv("LOG_LEVEL", level)
        Config().validate()

    @pytest.mark.parametrize("level", ["warn", "fatal", "notset"])
    def test_validate_accepts_level_aliases(self, monkeypatch, level):
        """Test that lower-case aliases known to the logging module pass validation."""
        monkeypatch.setenv("LOG_LEVEL", level)
        Config().validate()

    def test_validate_rejects_non_level_attribute(self, monkeypatch):
        """Test that a logging attribute that is not a level is rejected."""
        monkeypatch.setenv("LOG_LEVEL", "BASIC_FORMAT")

        with pytest.raises(ValueError, match="LOG_LEVEL"):
            Config().validate()

    def test_module_import_with_warn_level(self, monkeypatch):
        """Test that the module-level config validates with LOG_LEVEL=warn."""
        import cookbook.utils.config as config_module

        monkeypatch.setenv("LOG_LEVEL", "warn")
        reloaded = importlib.reload(config_module)

        assert reloaded.config.LOG_LEVEL == "WARN"

        monkeypatch.delenv("LOG_LEVEL")
        importlib.reload(config_module)


class TestModuleLevelConfig:
    """Test module-level config instance."""

    def test_config_is_importable(self):
        """Test that the validated module-level config exists."""
        assert isinstance(config, Config)
        config.validate()
