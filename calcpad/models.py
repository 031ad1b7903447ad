"""Shared types for calcpad.

ErrorKind, ParseError and Theme: the typed structures that flow between
evaluator → keypad → display → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Categories of evaluation failure."""

    UNEXPECTED_CHARACTER = "unexpected-character"
    UNBALANCED_PARENTHESIS = "unbalanced-parenthesis"
    MALFORMED_NUMBER = "malformed-number"
    EMPTY_OPERAND = "empty-operand"


class ParseError(ValueError):
    """Raised by evaluate() when an expression cannot be reduced to a value.

    Attributes:
        kind: Which ErrorKind was detected.
        position: Index of the offending character. Equals len(expression)
            when the problem is found at end of input.
        char: The offending character, or None at end of input.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        position: int,
        char: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.position = position
        self.char = char

    def __reduce__(self):
        return (self.__class__, (self.kind, self.message, self.position, self.char))

    def __repr__(self) -> str:
        return (
            f"ParseError(kind={self.kind.value!r}, message={self.message!r}, "
            f"position={self.position}, char={self.char!r})"
        )


@dataclass(frozen=True)
class Palette:
    """Colours for one theme."""

    background: str
    button: str
    text: str
    switch_label: str


class Theme(str, Enum):
    """Calculator colour schemes."""

    DARK = "dark"
    LITE = "lite"

    def toggled(self) -> Theme:
        return Theme.LITE if self is Theme.DARK else Theme.DARK

    @property
    def palette(self) -> Palette:
        return _PALETTES[self]


_PALETTES: dict[Theme, Palette] = {
    Theme.DARK: Palette(background="#333333", button="#444444", text="white", switch_label="DARK"),
    Theme.LITE: Palette(background="#F5F5F5", button="#CCCCCC", text="black", switch_label="LITE"),
}
