"""Settings builder for calcpad runs.

Reads the CALCPAD_* environment variables into a Settings record that the
CLI uses as option defaults. Self-contained, no external dependencies.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from calcpad.models import Theme

THEME_VAR = "CALCPAD_THEME"
PLACES_VAR = "CALCPAD_PLACES"

DEFAULT_THEME = Theme.DARK
DEFAULT_PLACES = 3
MAX_PLACES = 15


@dataclass(frozen=True)
class Settings:
    """Display settings for a session."""

    theme: Theme = DEFAULT_THEME
    places: int = DEFAULT_PLACES


def parse_places(raw: str, source: str = PLACES_VAR) -> int:
    """Validate a decimal-places value (0..MAX_PLACES)."""
    try:
        places = int(raw)
    except ValueError:
        raise ValueError(f"{source} must be an integer, got {raw!r}") from None
    if not 0 <= places <= MAX_PLACES:
        raise ValueError(f"{source} must be between 0 and {MAX_PLACES}, got {places}")
    return places


def parse_theme(raw: str, source: str = THEME_VAR) -> Theme:
    try:
        return Theme(raw.strip().lower())
    except ValueError:
        choices = ", ".join(t.value for t in Theme)
        raise ValueError(f"{source} must be one of: {choices}; got {raw!r}") from None


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment.

    Args:
        env: Mapping to read instead of os.environ (used by tests).

    Raises:
        ValueError: If a variable is set to something unusable.
    """
    env = os.environ if env is None else env

    theme = DEFAULT_THEME
    raw_theme = env.get(THEME_VAR, "")
    if raw_theme.strip():
        theme = parse_theme(raw_theme)

    places = DEFAULT_PLACES
    raw_places = env.get(PLACES_VAR, "")
    if raw_places.strip():
        places = parse_places(raw_places)

    return Settings(theme=theme, places=places)
