"""Arithmetic expression evaluator.

Single-pass recursive descent over the expression text with one character
of lookahead. Values are computed while parsing; no tree is built.

Grammar (lowest precedence first, binary operators left-associative):

    expression := term (('+' | '-') term)*
    term       := factor (('*' | '/') factor)*
    factor     := '(' expression ')' | ('-' | '+') factor | number
    number     := run of digits and '.' that converts to a float

Whitespace is skipped between tokens but ends a number literal, so "1 2"
is two numbers, not twelve.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from calcpad.models import ErrorKind, ParseError

_DIGITS = "0123456789"
_OPERATORS = "+-*/"


@dataclass
class _Cursor:
    """Scan position and lookahead for one evaluate() call.

    ``ch`` is None once the input is exhausted; ``pos`` never exceeds
    ``len(text)``.
    """

    text: str
    pos: int = 0
    ch: Optional[str] = field(init=False)

    def __post_init__(self) -> None:
        self.ch = self.text[self.pos] if self.pos < len(self.text) else None

    def advance(self) -> None:
        if self.pos < len(self.text):
            self.pos += 1
        self.ch = self.text[self.pos] if self.pos < len(self.text) else None

    def skip_whitespace(self) -> None:
        while self.ch is not None and self.ch.isspace():
            self.advance()

    def describe(self) -> str:
        """Human-readable location of the lookahead, for error messages."""
        if self.ch is None:
            return "end of input"
        return f"{self.ch!r} at position {self.pos}"


def evaluate(expression: str) -> float:
    """Evaluate an arithmetic expression to a float.

    Supports + - * /, parentheses, unary signs and decimal literals.
    Division by zero follows IEEE-754: ``1/0`` is ``inf``, ``-1/0`` is
    ``-inf`` and ``0/0`` is ``nan``.

    Args:
        expression: The expression text. May be empty.

    Returns:
        The value of the expression.

    Raises:
        ParseError: On the first syntax problem found. Its ``kind`` tells
            which ErrorKind it is.
            Nesting deeper than the interpreter stack allows is reported
            as UNEXPECTED_CHARACTER.
    """
    cursor = _Cursor(expression)
    try:
        value = _parse_expression(cursor)
    except RecursionError:
        raise ParseError(
            ErrorKind.UNEXPECTED_CHARACTER,
            f"Expression nested too deeply at position {cursor.pos}",
            cursor.pos,
            cursor.ch,
        ) from None
    if cursor.ch is not None:
        raise ParseError(
            ErrorKind.UNEXPECTED_CHARACTER,
            f"Unexpected: {cursor.describe()}",
            cursor.pos,
            cursor.ch,
        )
    return value


def _parse_expression(cursor: _Cursor) -> float:
    value = _parse_term(cursor)
    while True:
        cursor.skip_whitespace()
        if cursor.ch == "+":
            cursor.advance()
            value += _parse_term(cursor)
        elif cursor.ch == "-":
            cursor.advance()
            value -= _parse_term(cursor)
        else:
            return value


def _parse_term(cursor: _Cursor) -> float:
    value = _parse_factor(cursor)
    while True:
        cursor.skip_whitespace()
        if cursor.ch == "*":
            cursor.advance()
            value *= _parse_factor(cursor)
        elif cursor.ch == "/":
            cursor.advance()
            value = _divide(value, _parse_factor(cursor))
        else:
            return value


def _parse_factor(cursor: _Cursor) -> float:
    cursor.skip_whitespace()
    if cursor.ch == "(":
        open_pos = cursor.pos
        cursor.advance()
        value = _parse_expression(cursor)
        if cursor.ch is None:
            raise ParseError(
                ErrorKind.UNBALANCED_PARENTHESIS,
                f"Missing closing parenthesis for '(' at position {open_pos}",
                cursor.pos,
            )
        if cursor.ch != ")":
            raise ParseError(
                ErrorKind.UNEXPECTED_CHARACTER,
                f"Expected ')' but found {cursor.describe()}",
                cursor.pos,
                cursor.ch,
            )
        cursor.advance()
        return value
    if cursor.ch == "-":
        cursor.advance()
        return -_parse_factor(cursor)
    if cursor.ch == "+":
        cursor.advance()
        return _parse_factor(cursor)
    return _parse_number(cursor)


def _parse_number(cursor: _Cursor) -> float:
    start = cursor.pos
    while cursor.ch is not None and (cursor.ch in _DIGITS or cursor.ch == "."):
        cursor.advance()
    text = cursor.text[start:cursor.pos]

    if not text:
        # Nothing usable where an operand must start
        if cursor.ch is None or cursor.ch == ")" or cursor.ch in _OPERATORS:
            raise ParseError(
                ErrorKind.EMPTY_OPERAND,
                f"Expected a number, '(' or sign but found {cursor.describe()}",
                cursor.pos,
                cursor.ch,
            )
        raise ParseError(
            ErrorKind.UNEXPECTED_CHARACTER,
            f"Unexpected: {cursor.describe()}",
            cursor.pos,
            cursor.ch,
        )

    try:
        return float(text)
    except ValueError:
        raise ParseError(
            ErrorKind.MALFORMED_NUMBER,
            f"Malformed number {text!r} at position {start}",
            start,
            text[0],
        ) from None


def _divide(dividend: float, divisor: float) -> float:
    """IEEE-754 division; Python's float division raises on zero instead."""
    if divisor == 0.0:
        if dividend == 0.0 or math.isnan(dividend):
            return math.nan
        return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)
    return dividend / divisor
