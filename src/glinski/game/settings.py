"""Game configuration."""

from __future__ import annotations

import random
from dataclasses import dataclass

from glinski.core.enums import Color
from glinski.game.interfaces import GameMode, HumanSide


@dataclass
class GameSettings:
    """All user-configurable game options."""

    mode: GameMode = GameMode.INTERACTIVE
    human_side: HumanSide = HumanSide.WHITE

    # Delay between bot moves in observer mode, also the bot's reply delay.
    autoplay_interval_ms: int = 1500

    # Whole-game limit for the countdown timer shown by the view.
    time_limit_seconds: int = 300

    # Seed for the bot's random source; None means nondeterministic.
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.autoplay_interval_ms < 0:
            raise ValueError("autoplay_interval_ms must be non-negative")
        if self.time_limit_seconds <= 0:
            raise ValueError("time_limit_seconds must be positive")

    def resolve_human_color(self, rng: random.Random | None = None) -> Color | None:
        """Color the human plays, or ``None`` when bots play both sides."""
        if self.mode == GameMode.OBSERVER:
            return None
        if self.human_side == HumanSide.WHITE:
            return Color.WHITE
        if self.human_side == HumanSide.BLACK:
            return Color.BLACK
        chooser = rng if rng is not None else random.Random(self.seed)
        return chooser.choice((Color.WHITE, Color.BLACK))
