"""Number formatting and Rich rendering for the calculator.

format_result() turns an evaluated float into display text; the keypad
session and the `eval` command both go through it. render_calculator()
draws the display line, keypad and theme switch as a Rich table.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from calcpad.keypad import KeypadSession

# Enough digits for any finite double at the largest supported place count.
_DECIMAL_PRECISION = 400


def format_result(value: float, places: int = 3) -> str:
    """Format a value with at most `places` fractional digits.

    Rounds half-even on the exact binary value, drops trailing zeros and a
    bare trailing point, never uses exponent notation or digit grouping.

    Examples:
        14.0 → '14', 2.0/3.0 → '0.667', -0.0001 → '0', 1/0 → '∞'
    """
    if places < 0:
        raise ValueError(f"places must be >= 0, got {places}")
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"

    with localcontext() as ctx:
        ctx.prec = _DECIMAL_PRECISION
        rounded = Decimal(value).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_EVEN)
    text = f"{rounded:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def render_calculator(session: KeypadSession, console: Console) -> None:
    """Render the calculator (display, keypad, theme switch) in its theme colours."""
    palette = session.theme.palette
    surface = f"{palette.text} on {palette.background}"
    key_style = f"bold {palette.text} on {palette.button}"

    table = Table(
        title=session.display or "0",
        title_style=f"bold {surface}",
        title_justify="right",
        caption=f"theme: {palette.switch_label}",
        caption_style=surface,
        show_header=False,
        show_lines=True,
        box=box.SQUARE,
        style=surface,
    )
    for _ in range(len(session.layout[0])):
        table.add_column(justify="center", min_width=5)

    for row in session.layout:
        table.add_row(*(f"[{key_style}] {label} [/]" for label in row))

    console.print()
    console.print(table)
