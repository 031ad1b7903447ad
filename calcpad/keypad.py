"""Keypad session: the button/keyboard front end of the calculator.

Accumulates key presses into an expression buffer and hands the buffer to
evaluate() on '=' or ENTER. Display formatting and theme state live here
too; the evaluator itself knows nothing about either.
"""

from __future__ import annotations

from calcpad.display import format_result
from calcpad.evaluator import evaluate
from calcpad.models import ParseError, Theme

LAYOUT: tuple[tuple[str, ...], ...] = (
    ("7", "8", "9", "/"),
    ("4", "5", "6", "*"),
    ("1", "2", "3", "-"),
    ("0", ".", "=", "+"),
)

KEYS = frozenset(label for row in LAYOUT for label in row)

# The decimal point is treated like an operator: pressing one after
# another replaces it.
OPERATORS = ("+", "-", "*", "/", ".")

GENERIC_ERROR = "Error"


class KeypadSession:
    """One calculator window's worth of state."""

    layout = LAYOUT

    def __init__(self, theme: Theme = Theme.DARK, places: int = 3) -> None:
        self.theme = theme
        self.places = places
        self.expression = ""
        self.display = ""

    def press(self, label: str) -> str:
        """Handle a keypad button and return the new display text.

        '=' evaluates and clears the buffer; an evaluation error is shown
        as its message. An operator replaces a trailing operator.
        """
        if label not in KEYS:
            raise ValueError(f"Unknown key: {label!r}")

        if label == "=":
            try:
                self.display = self._evaluate_buffer()
            except ParseError as exc:
                self.display = exc.message
            self.expression = ""
        elif label in OPERATORS:
            if self.expression and self.expression[-1] in OPERATORS:
                self.expression = self.expression[:-1]
            self.expression += label
            self.display = self.expression
        else:
            self.expression += label
            self.display = self.expression
        return self.display

    def enter(self) -> str:
        """Handle the ENTER key: evaluate, showing a generic message on failure."""
        try:
            self.display = self._evaluate_buffer()
        except ParseError:
            self.display = GENERIC_ERROR
        self.expression = ""
        return self.display

    def toggle_theme(self) -> Theme:
        self.theme = self.theme.toggled()
        return self.theme

    def _evaluate_buffer(self) -> str:
        if not self.expression:
            return "0"
        return format_result(evaluate(self.expression), self.places)
