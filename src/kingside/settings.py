"""User-configurable game settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GameSettings:
    """All user-configurable settings for a match."""

    # Players
    white_name: str = "White"
    black_name: str = "Black"

    # Engine
    ai_depth: int = 3

    # Position string to start from; None for the standard opening
    start_position: str | None = None
