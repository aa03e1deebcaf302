"""Core domain layer — pure Glinski hexagonal chess rules, no external dependencies.

Quick start::

    from glinski.core import Board, Color, MoveValidator

    board = Board.initial()
    validator = MoveValidator(board)
    for move in validator.legal_moves(Color.WHITE):
        print(move)
"""

from glinski.core.board import PROMOTION_RANKS, Board
from glinski.core.directions import (
    bishop_directions,
    direction_between,
    forward_direction,
    knight_offsets,
    pawn_capture_directions,
    rook_directions,
)
from glinski.core.enums import CellColor, Color, GameResult, MoveFlag, PieceType
from glinski.core.move import Move
from glinski.core.move_validator import PAWN_START_RANKS, MoveValidator
from glinski.core.piece import Piece
from glinski.core.rules import Rules
from glinski.core.types import ALL_CELLS, BOARD_RADIUS, CENTER, Cell, is_on_board

__all__ = [
    # Enums / flags
    "CellColor",
    "Color",
    "GameResult",
    "MoveFlag",
    "PieceType",
    # Geometry
    "ALL_CELLS",
    "BOARD_RADIUS",
    "CENTER",
    "Cell",
    "is_on_board",
    "bishop_directions",
    "direction_between",
    "forward_direction",
    "knight_offsets",
    "pawn_capture_directions",
    "rook_directions",
    # Domain objects
    "Board",
    "Move",
    "MoveValidator",
    "Piece",
    "Rules",
    # Rule constants
    "PAWN_START_RANKS",
    "PROMOTION_RANKS",
]
