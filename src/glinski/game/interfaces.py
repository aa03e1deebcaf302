"""Abstract interfaces and shared enums for the game layer.

The high-level :class:`GameController` depends on these, not on concrete
player implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from glinski.core.enums import Color

if TYPE_CHECKING:
    from glinski.core.board import Board


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    THINKING = auto()  # bot is choosing
    GAME_OVER = auto()


class GameMode(IntEnum):
    """Who plays."""

    INTERACTIVE = auto()  # human against the bot
    OBSERVER = auto()  # bot against bot


class HumanSide(IntEnum):
    """Side requested by the human in interactive mode."""

    WHITE = auto()
    BLACK = auto()
    RANDOM = auto()


class GameEndReason(IntEnum):
    """Why a finished game ended."""

    CHECKMATE = auto()
    STALEMATE = auto()
    RESIGNATION = auto()
    TIME_EXPIRED = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant (human or bot)."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, board: Board) -> None:
        """Begin the move-selection process.

        For humans this is a no-op (they interact via the board view).
        For bots this kicks off move selection.
        """

    @abstractmethod
    def cancel(self) -> None:
        """Cancel an ongoing move selection (bots only, no-op for humans)."""
