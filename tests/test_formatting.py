"""
Tests for formatting helpers — utils/formatting.py
"""
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from utils.formatting import cycle_colors, format_share, format_tooltip


class TestFormatShare:
    @pytest.mark.parametrize("value,expected", [
        (35, "35"),
        (35.0, "35"),
        (12.5, "12.5"),
        (0, "0"),
        (-4, "-4"),
        ("n/a", "n/a"),
        (None, "None"),
        (True, "true"),
    ])
    def test_values(self, value, expected):
        assert format_share(value) == expected


class TestFormatTooltip:
    def test_format(self):
        assert format_tooltip("Health", 35) == "Health: 35%"

    def test_float(self):
        assert format_tooltip("Debt interest", 9.25) == "Debt interest: 9.25%"


class TestCycleColors:
    def test_shorter_than_palette(self):
        assert cycle_colors(["a", "b", "c"], 2) == ["a", "b"]

    def test_wraps(self):
        assert cycle_colors(["a", "b"], 5) == ["a", "b", "a", "b", "a"]

    def test_zero(self):
        assert cycle_colors(["a"], 0) == []

    def test_empty_palette(self):
        assert cycle_colors([], 3) == []
