"""Tests for result formatting and calculator rendering."""

import math

import pytest
from rich.console import Console

from calcpad.display import format_result, render_calculator
from calcpad.keypad import KeypadSession
from calcpad.models import Theme


@pytest.mark.parametrize(
    "value, expected",
    [
        (14.0, "14"),
        (5.0, "5"),
        (0.0, "0"),
        (-3.0, "-3"),
        (3.75, "3.75"),
        (2.0 / 3.0, "0.667"),
        (0.1 + 0.2, "0.3"),
        (1e20, "100000000000000000000"),
        (1e-7, "0"),
        (-0.0, "0"),
        (-0.0001, "0"),
    ],
)
def test_format_result(value, expected):
    assert format_result(value) == expected


def test_round_half_even_on_exact_value():
    # 0.125 is exact in binary: a true tie, rounds to the even digit
    assert format_result(0.125, places=2) == "0.12"
    assert format_result(0.375, places=2) == "0.38"


def test_places_zero():
    assert format_result(2.5, places=0) == "2"
    assert format_result(3.5, places=0) == "4"


def test_more_places():
    assert format_result(1 / 3, places=6) == "0.333333"


def test_non_finite():
    assert format_result(math.inf) == "∞"
    assert format_result(-math.inf) == "-∞"
    assert format_result(math.nan) == "NaN"


def test_largest_double_has_no_exponent():
    text = format_result(1.7976931348623157e308)
    assert "e" not in text.lower()
    assert len(text) == 309


def test_negative_places_rejected():
    with pytest.raises(ValueError):
        format_result(1.0, places=-1)


def _render(session: KeypadSession) -> str:
    console = Console(record=True, width=60, color_system=None)
    render_calculator(session, console)
    return console.export_text()


def test_render_shows_display_keys_and_theme():
    session = KeypadSession()
    for key in "12+3":
        session.press(key)
    text = _render(session)
    assert "12+3" in text
    for key in ("7", "/", "=", "."):
        assert key in text
    assert "DARK" in text


def test_render_empty_display_shows_zero():
    text = _render(KeypadSession(theme=Theme.LITE))
    assert "0" in text
    assert "LITE" in text
