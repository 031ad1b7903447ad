"""calcpad — arithmetic expression calculator.

Evaluates strings of numbers, + - * /, parentheses and unary signs to a
float with a single-pass recursive-descent parser, and wraps that in a
keypad-style terminal front end.

Usage:
    python -m calcpad eval "2 + 3 * 4"   # Evaluate one expression
    python -m calcpad keypad             # Interactive keypad session

    >>> from calcpad import evaluate
    >>> evaluate("(2 + 3) * 4")
    20.0
"""

from calcpad.evaluator import evaluate
from calcpad.models import ErrorKind, ParseError, Theme

__all__ = ["ErrorKind", "ParseError", "Theme", "evaluate"]
