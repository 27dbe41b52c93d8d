import logging
from pathlib import Path

import pytest

import config
from config import Config, load_config
from ingestion.voice import parse_voice_input
from logger import get_logger, setup_logging


@pytest.fixture
def fake_home(tmp_path, monkeypatch):
    """Point Path.home() at a temporary directory."""
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    return tmp_path


class TestLoadConfig:
    """Tests for load_config function."""

    def test_creates_default_config(self, fake_home):
        """Test that a missing config file is created with defaults."""
        loaded = load_config()

        assert loaded == Config.default()
        assert loaded.base_dir == fake_home / "data" / "spendnote"
        assert loaded.log_dir == fake_home / "data" / "spendnote" / "logs"
        assert loaded.log_level == "INFO"
        assert config.get_config_path().exists()

    def test_round_trip_through_file(self, fake_home):
        """Test that a written default config loads back identically."""
        first = load_config()
        second = load_config()

        assert first == second

    def test_reads_existing_values(self, fake_home):
        """Test that values from the TOML file are used."""
        config_path = fake_home / ".config" / "spendnote.toml"
        config_path.parent.mkdir(parents=True)
        config_path.write_text(
            'base_dir = "/srv/spendnote"\n'
            "\n"
            "[logging]\n"
            'level = "DEBUG"\n'
        )

        loaded = load_config()

        assert loaded.base_dir == Path("/srv/spendnote")
        assert loaded.log_level == "DEBUG"
        # log_dir falls back relative to the configured base_dir
        assert loaded.log_dir == Path("/srv/spendnote/logs")


class TestConfigDict:
    """Tests for Config.from_dict and Config.to_dict."""

    def test_console_level_read_from_logging_section(self, fake_home):
        """Test that console_level comes from the [logging] table."""
        loaded = Config.from_dict({"logging": {"console_level": "WARNING"}})

        assert loaded.console_level == "WARNING"
        assert loaded.log_level == "INFO"

    def test_to_dict_round_trip(self, test_config):
        """Test that to_dict produces what from_dict reads."""
        assert Config.from_dict(test_config.to_dict()) == test_config


@pytest.fixture
def spendnote_logger():
    """Yield the spendnote logger and strip its handlers afterwards."""
    logger = logging.getLogger("spendnote")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


class TestSetupLogging:
    """Tests for logger setup."""

    def test_writes_dated_log_file(self, test_config, spendnote_logger):
        """Test that logging creates the log directory and a dated file."""
        logger = setup_logging(test_config)
        logger.info("hello")

        log_files = list(test_config.log_dir.glob("spendnote-*.log"))
        assert len(log_files) == 1
        assert logger is spendnote_logger
        assert len(logger.handlers) == 2

    def test_handler_levels(self, test_config, spendnote_logger):
        """Test that file and console handlers use their own levels."""
        test_config.console_level = "WARNING"

        logger = setup_logging(test_config)
        file_handler, console_handler = logger.handlers

        assert file_handler.level == logging.DEBUG
        assert console_handler.level == logging.WARNING
        assert logger.level == logging.DEBUG

    def test_unknown_level_raises_error(self, test_config, spendnote_logger):
        """Test that a misspelled level name is rejected."""
        test_config.log_level = "VERBOSE"

        with pytest.raises(ValueError, match="Unknown log level: VERBOSE"):
            setup_logging(test_config)

    def test_parser_debug_lines_reach_log_file(self, test_config, spendnote_logger):
        """Test that module loggers write through the configured file handler."""
        logger = setup_logging(test_config)

        parse_voice_input("Spent 25 dollars on coffee")
        parse_voice_input("hello there")
        for handler in logger.handlers:
            handler.flush()

        log_file = next(test_config.log_dir.glob("spendnote-*.log"))
        content = log_file.read_text()
        assert "spendnote.ingestion.voice" in content
        assert "Amount 25 matched" in content
        assert "No amount found in transcript: 'hello there'" in content


class TestGetLogger:
    """Tests for get_logger function."""

    def test_top_logger(self):
        """Test that no name returns the spendnote logger."""
        assert get_logger().name == "spendnote"

    def test_child_logger(self):
        """Test that a module name gives a child of the spendnote logger."""
        logger = get_logger("ingestion.voice")

        assert logger.name == "spendnote.ingestion.voice"
        assert logger.parent is logging.getLogger("spendnote")
