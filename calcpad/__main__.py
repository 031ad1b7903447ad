"""CLI for the calcpad expression calculator.

Usage:
    python -m calcpad eval "2 + 3 * 4"            # Evaluate and print 14
    python -m calcpad eval --raw "1/0"            # Print the float as-is (inf)
    python -m calcpad eval -- "-5 + 3"            # Leading sign needs '--'
    python -m calcpad keypad                      # Interactive keypad session
    python -m calcpad keypad --theme lite         # Start with the light theme
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from calcpad.config import MAX_PLACES, Settings, load_settings, parse_theme
from calcpad.display import format_result, render_calculator
from calcpad.evaluator import evaluate
from calcpad.keypad import KEYS, KeypadSession
from calcpad.models import ParseError

app = typer.Typer(
    name="calcpad",
    help="Arithmetic expression calculator",
    no_args_is_help=True,
)
console = Console(stderr=True)
out = Console()

_QUIT_COMMANDS = ("quit", "exit")


def _settings() -> Settings:
    """Load settings from the environment, exiting on bad values."""
    try:
        return load_settings()
    except ValueError as e:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command("eval")
def cmd_eval(
    expression: str = typer.Argument(help="Expression to evaluate (e.g., '(2 + 3) * 4')"),
    places: Optional[int] = typer.Option(None, "--places", "-p", min=0, max=MAX_PLACES, help="Max decimal places shown"),
    raw: bool = typer.Option(False, "--raw", help="Print the unformatted float"),
) -> None:
    """Evaluate one expression and print the result."""
    settings = _settings()
    try:
        value = evaluate(expression)
    except ParseError as e:
        console.print(f"[red]{e.kind.value}:[/red] {escape(e.message)}")
        raise typer.Exit(1)

    if raw:
        text = repr(value)
    else:
        text = format_result(value, settings.places if places is None else places)
    out.print(text, highlight=False, soft_wrap=True)


@app.command("keypad")
def cmd_keypad(
    theme: Optional[str] = typer.Option(None, "--theme", "-t", help="Theme: dark, lite"),
    places: Optional[int] = typer.Option(None, "--places", "-p", min=0, max=MAX_PLACES, help="Max decimal places shown"),
) -> None:
    """Run an interactive keypad session.

    Each line is a run of key presses (7 8 9 / 4 5 6 * 1 2 3 - 0 . = +);
    other characters are ignored. An empty line is ENTER, 'theme' switches
    dark/lite, 'quit' or end of input leaves.
    """
    settings = _settings()
    if theme is not None:
        try:
            settings = Settings(theme=parse_theme(theme, source="--theme"), places=settings.places)
        except ValueError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            raise typer.Exit(1)
    if places is not None:
        settings = Settings(theme=settings.theme, places=places)

    session = KeypadSession(theme=settings.theme, places=settings.places)
    render_calculator(session, out)

    while True:
        try:
            line = console.input("[dim]keys>[/dim] ")
        except EOFError:
            break

        command = line.strip().lower()
        if command in _QUIT_COMMANDS:
            break
        if command == "theme":
            session.toggle_theme()
        elif not command:
            session.enter()
        else:
            for key in line:
                if key in KEYS:
                    session.press(key)
        render_calculator(session, out)


if __name__ == "__main__":
    app()
