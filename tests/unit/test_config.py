"""
Unit tests for engine configuration loading.
"""

import logging

import pytest

from deckstyle.config import EngineConfig, configure_logging, load_config
from deckstyle.errors import ConfigError
from deckstyle.layouts import LayoutSource


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self):
        """Test no text yields the default configuration."""
        assert load_config(None, environ={}) == EngineConfig()
        assert load_config("", environ={}) == EngineConfig()

    def test_missing_table(self):
        """Test a document without [deckstyle] yields defaults."""
        assert load_config("[other]\nx = 1\n", environ={}) == EngineConfig()

    def test_values_parsed(self):
        """Test every key is read from the table."""
        config = load_config(
            """
[deckstyle]
default_source = "theme"
default_priority = 10
theme_priority = 60
deck_priority = 200
register_system_layouts = false
register_builtin_components = false
log_level = "debug"
""",
            environ={},
        )
        assert config.default_source is LayoutSource.THEME
        assert config.default_priority == 10
        assert config.theme_priority == 60
        assert config.deck_priority == 200
        assert config.register_system_layouts is False
        assert config.register_builtin_components is False
        assert config.log_level == "DEBUG"

    def test_env_overrides_log_level(self):
        """Test DECKSTYLE_LOG_LEVEL beats the document."""
        config = load_config(
            '[deckstyle]\nlog_level = "ERROR"\n', environ={"DECKSTYLE_LOG_LEVEL": "info"}
        )
        assert config.log_level == "INFO"

    @pytest.mark.parametrize(
        "text,match",
        [
            ("[deckstyle\n", "Invalid TOML"),
            ("deckstyle = 1\n", "must be a table"),
            ("[deckstyle]\ncolour = 1\n", "Unknown"),
            ('[deckstyle]\ndefault_source = "global"\n', "default_source"),
            ('[deckstyle]\ndeck_priority = "high"\n', "deck_priority"),
            ("[deckstyle]\ntheme_priority = true\n", "theme_priority"),
            ('[deckstyle]\nregister_system_layouts = "yes"\n', "register_system_layouts"),
            ('[deckstyle]\nlog_level = "LOUD"\n', "log_level"),
        ],
    )
    def test_invalid(self, text, match):
        """Test invalid documents raise ConfigError."""
        with pytest.raises(ConfigError, match=match):
            load_config(text, environ={})


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_package_logger_only(self):
        """Test only the deckstyle logger hierarchy is touched."""
        root_level = logging.getLogger().level
        package = logging.getLogger("deckstyle")
        previous = package.level
        try:
            configure_logging("DEBUG")
            assert package.level == logging.DEBUG
            assert logging.getLogger().level == root_level
        finally:
            package.setLevel(previous)
