"""
Tests for ttt.utils.config

Tests display constants and Config.
"""

import logging

import pytest

from ttt.utils.config import (
    CELL_STRINGS, DEFAULT_CONFIG, NUM_CELLS, ROW_SEPARATOR, Config,
    _resolve_log_level,
)


class TestConstants:
    """Display constant tests."""

    def test_cell_strings(self):
        """Empty, cross and circle codes all have a display string."""
        assert CELL_STRINGS == {0: " ", 1: "X", 2: "O"}

    def test_row_separator_spans_row(self):
        """Separator is as wide as a rendered row."""
        assert ROW_SEPARATOR == "-" * 11

    def test_num_cells(self):
        """3x3 board."""
        assert NUM_CELLS == 9


class TestResolveLogLevel:
    """_resolve_log_level tests."""

    @pytest.mark.parametrize("name, level", [
        ("DEBUG", logging.DEBUG),
        ("info", logging.INFO),
        ("Warning", logging.WARNING),
    ])
    def test_known_names(self, name: str, level: int):
        """Level names are case-insensitive."""
        assert _resolve_log_level(name) == level

    def test_unknown_raises(self):
        """Unknown names raise ValueError."""
        with pytest.raises(ValueError):
            _resolve_log_level("chatty")


class TestConfig:
    """Config class tests."""

    def test_default_config(self):
        """Default config logs warnings and above."""
        assert DEFAULT_CONFIG.log_level == "WARNING"
        assert DEFAULT_CONFIG.log_level_value == logging.WARNING

    def test_custom_level(self):
        """Custom level is normalised and resolved."""
        config = Config(log_level="debug")
        assert config.log_level == "DEBUG"
        assert config.log_level_value == logging.DEBUG

    def test_unknown_level_raises(self):
        """Unknown level raises ValueError."""
        with pytest.raises(ValueError):
            Config(log_level="nope")
