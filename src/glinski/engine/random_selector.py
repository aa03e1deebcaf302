"""Uniform random choice among all legal moves (one-ply, no evaluation)."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from glinski.core.move_validator import MoveValidator

if TYPE_CHECKING:
    from glinski.core.board import Board
    from glinski.core.enums import Color
    from glinski.core.move import Move

_LOGGER = logging.getLogger(__name__)


class RandomMoveSelector:
    """Picks a legal move uniformly at random.

    Args:
        board: Board to enumerate moves on.  May be replaced per call via
            :meth:`choose`.
        rng: Random source.  Pass a seeded :class:`random.Random` (or use
            *seed*) for reproducible selection.
        seed: Convenience seed used when *rng* is not given.
    """

    __slots__ = ("_board", "_rng")

    def __init__(
        self,
        board: Board | None = None,
        rng: random.Random | None = None,
        seed: int | None = None,
    ) -> None:
        self._board = board
        self._rng = rng if rng is not None else random.Random(seed)

    @property
    def board(self) -> Board | None:
        return self._board

    @board.setter
    def board(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def all_legal_moves(self, color: Color) -> list[Move]:
        """Every legal move of *color*, pieces in setup order, cells in scan order."""
        moves = MoveValidator(self._require_board()).legal_moves(color)
        _LOGGER.debug("Found %d legal moves for %s", len(moves), color)
        return moves

    def pick_random(self, color: Color) -> Move | None:
        """One uniformly chosen legal move, or ``None`` when there is none."""
        moves = self.all_legal_moves(color)
        if not moves:
            _LOGGER.debug("No legal moves for %s", color)
            return None
        move = moves[self._rng.randrange(len(moves))]
        _LOGGER.debug("Selected move: %s", move)
        return move

    def pick_for_current_player(self) -> Move | None:
        return self.pick_random(self._require_board().current_player)

    def choose(self, board: Board, color: Color) -> Move | None:
        """:class:`~glinski.engine.search.IMoveSelector` entry point."""
        self._board = board
        return self.pick_random(color)

    # -- Internal -----------------------------------------------------------

    def _require_board(self) -> Board:
        if self._board is None:
            raise RuntimeError("RandomMoveSelector has no board to play on")
        return self._board
