"""High-level rules: check, checkmate, stalemate and game result."""

from __future__ import annotations

from typing import TYPE_CHECKING

from glinski.core.enums import GameResult
from glinski.core.move_validator import MoveValidator

if TYPE_CHECKING:
    from glinski.core.board import Board


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    Every query is asked for the side to move.
    """

    # Product policy: stalemate is scored as a win for the side that is not
    # to move, not as a draw.

    @staticmethod
    def is_in_check(board: Board) -> bool:
        return MoveValidator(board).is_king_in_check(board.side_to_move)

    @staticmethod
    def has_legal_moves(board: Board) -> bool:
        return MoveValidator(board).has_legal_moves(board.side_to_move)

    @staticmethod
    def is_checkmate(board: Board) -> bool:
        if not Rules.is_in_check(board):
            return False
        return not Rules.has_legal_moves(board)

    @staticmethod
    def is_stalemate(board: Board) -> bool:
        if Rules.is_in_check(board):
            return False
        return not Rules.has_legal_moves(board)

    @staticmethod
    def game_result(board: Board) -> GameResult:
        """Determine the current game result."""
        if Rules.has_legal_moves(board):
            return GameResult.IN_PROGRESS
        # Checkmate and stalemate both hand the win to the other side.
        return GameResult.win_for(board.side_to_move.opposite)
