"""Tests for lib/logger.py."""

import json
import logging


class TestGetLogger:
    """Tests for get_logger function."""

    def test_returns_logger_with_shadowkit_prefix(self):
        """Logger name should be prefixed with 'shadowkit.'."""
        from lib.logger import get_logger

        logger = get_logger("test")
        assert logger.name == "shadowkit.test"

    def test_returns_same_logger_on_repeated_calls(self):
        """Should return cached logger instance."""
        from lib.logger import get_logger

        assert get_logger("cached") is get_logger("cached")

    def test_logger_has_stream_handler(self):
        """Logger should have a StreamHandler configured."""
        from lib.logger import get_logger

        logger = get_logger("handler_test")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_default_level_is_warning(self, monkeypatch):
        """Default log level should be WARNING."""
        from lib.logger import get_logger

        monkeypatch.delenv("SHADOWKIT_LOG_LEVEL", raising=False)
        logger = get_logger("level_test")
        assert logger.level == logging.WARNING

    def test_env_level(self, monkeypatch):
        """SHADOWKIT_LOG_LEVEL should set the level of new loggers."""
        from lib.logger import get_logger

        monkeypatch.setenv("SHADOWKIT_LOG_LEVEL", "debug")
        logger = get_logger("env_level_test")
        assert logger.level == logging.DEBUG

    def test_unknown_env_level_falls_back(self, monkeypatch):
        """Unrecognized level names mean WARNING."""
        from lib.logger import get_logger

        monkeypatch.setenv("SHADOWKIT_LOG_LEVEL", "chatty")
        assert get_logger("unknown_level_test").level == logging.WARNING

    def test_custom_level_override(self):
        """Should accept custom log level."""
        from lib.logger import get_logger

        logger = get_logger("custom_level", level="ERROR")
        assert logger.level == logging.ERROR

    def test_logger_does_not_propagate(self):
        """Logger should not propagate to root logger."""
        from lib.logger import get_logger

        assert get_logger("no_propagate").propagate is False


class TestSetLogLevel:
    """Tests for set_log_level function."""

    def test_sets_level_for_all_loggers(self):
        """Should set level for all cached loggers."""
        from lib.logger import get_logger, set_log_level

        logger1 = get_logger("set_level_1")
        logger2 = get_logger("set_level_2")

        set_log_level("ERROR")
        try:
            assert logger1.level == logging.ERROR
            assert logger2.level == logging.ERROR
        finally:
            set_log_level("WARNING")


class TestConfigureFromConfig:
    """Tests for configure_from_config function."""

    def test_applies_configured_level(self, project):
        """logging.level in config should apply to cached loggers."""
        from lib.logger import configure_from_config, get_logger, set_log_level

        config_dir = project / ".shadowkit"
        config_dir.mkdir()
        (config_dir / "config.json").write_text(json.dumps({"logging": {"level": "info"}}))

        logger = get_logger("from_config")
        configure_from_config()
        try:
            assert logger.level == logging.INFO
        finally:
            set_log_level("WARNING")

    def test_no_level_leaves_loggers_alone(self, project):
        """Without logging.level nothing changes."""
        from lib.logger import configure_from_config, get_logger

        logger = get_logger("untouched", level="ERROR")
        configure_from_config()
        assert logger.level == logging.ERROR
