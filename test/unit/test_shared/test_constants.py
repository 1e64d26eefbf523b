"""
Tests for shared constants and the prompt list.
"""

from doodle_dash.shared.constants import (
    BACKGROUND_COLOR,
    COLORS,
    DEFAULT_LINE_WIDTH,
    GAME_DURATION,
    MAX_LINE_WIDTH,
    MIN_LINE_WIDTH,
)
from doodle_dash.shared.prompts import PROMPTS


def test_palette():
    assert len(COLORS) == 11
    assert len(set(COLORS)) == len(COLORS)
    assert COLORS[0] == (0, 0, 0)
    assert BACKGROUND_COLOR == (255, 255, 255)
    assert BACKGROUND_COLOR not in COLORS


def test_line_width_bounds():
    assert MIN_LINE_WIDTH == 1
    assert MAX_LINE_WIDTH == 20
    assert MIN_LINE_WIDTH <= DEFAULT_LINE_WIDTH <= MAX_LINE_WIDTH


def test_game_duration():
    assert GAME_DURATION == 60


def test_prompts():
    assert PROMPTS
    assert all(isinstance(p, str) and p.strip() for p in PROMPTS)
    assert len(set(PROMPTS)) == len(PROMPTS)
