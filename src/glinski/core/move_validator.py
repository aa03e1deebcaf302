"""Per-piece move legality, attack detection and check detection."""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from glinski.core.directions import (
    Directions,
    bishop_directions,
    direction_between,
    forward_direction,
    knight_offsets,
    pawn_capture_directions,
    rook_directions,
)
from glinski.core.enums import Color, PieceType
from glinski.core.move import Move
from glinski.core.types import ALL_CELLS, BOARD_RADIUS, Cell

if TYPE_CHECKING:
    from glinski.core.board import Board
    from glinski.core.piece import Piece

# Rank (r coordinate) from which an unmoved pawn may advance two cells.
PAWN_START_RANKS: tuple[int, int] = (BOARD_RADIUS, -BOARD_RADIUS)


class MoveValidator:
    """Answers legality questions about a :class:`Board`.

    The validator never mutates its board.  Self-check screening plays the
    candidate move on a :meth:`Board.copy` and asks a fresh validator bound
    to that clone whether the mover's king is attacked.

    Attack probing (:meth:`is_square_under_attack`) reuses the movement
    predicates, blocking included, but skips the side-to-move check, the
    self-check screen and the king's own "destination not attacked" clause.
    Whether a piece attacks a cell does not depend on its own safety, and
    leaving those out keeps attack detection from recursing.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    @property
    def board(self) -> Board:
        return self._board

    # -- Public API ---------------------------------------------------------

    def is_valid_move(self, piece: Piece | None, destination: Cell | None) -> bool:
        """Whether *piece* may legally move to *destination* right now."""
        if piece is None or destination is None:
            return False
        if piece.color != self._board.side_to_move:
            return False
        return self._is_legal(piece, destination)

    def valid_destinations(self, piece: Piece) -> list[Cell]:
        """Every cell *piece* may legally move to."""
        return [cell for cell in ALL_CELLS if self.is_valid_move(piece, cell)]

    def legal_moves(self, color: Color) -> list[Move]:
        """Every legal move of *color*, as if *color* were to move."""
        board = self._board
        moves: list[Move] = []
        for piece in board.pieces_of(color):
            for cell in ALL_CELLS:
                if self._is_legal(piece, cell):
                    moves.append(Move(piece, cell, board.piece_at(cell)))
        return moves

    def has_legal_moves(self, color: Color) -> bool:
        """Whether *color* has at least one legal move, as if to move."""
        for piece in self._board.pieces_of(color):
            for cell in ALL_CELLS:
                if self._is_legal(piece, cell):
                    return True
        return False

    # -- Attack detection (public) -----------------------------------------

    def is_king_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked?  A side without a king is never in check."""
        king = self._board.find_king(color)
        if king is None or king.position is None:
            return False
        return self.is_square_under_attack(king.position, color)

    def is_square_under_attack(self, cell: Cell, color: Color) -> bool:
        """Is *cell* attacked by any piece of *color*'s opponent?"""
        opponent = color.opposite
        for piece in self._board.pieces():
            if piece.color == opponent and self._reaches(piece, cell, attacking=True):
                return True
        return False

    # -- Legality (private) -------------------------------------------------

    def _is_legal(self, piece: Piece, destination: Cell) -> bool:
        if not self._reaches(piece, destination, attacking=False):
            return False
        return not self._would_expose_king(piece, destination)

    def _would_expose_king(self, piece: Piece, destination: Cell) -> bool:
        trial = self._board.copy()
        twin = trial.piece_at(piece.position)
        if twin is None:
            return True
        trial.move_piece(twin, destination)
        return MoveValidator(trial).is_king_in_check(piece.color)

    def _reaches(self, piece: Piece, destination: Cell, *, attacking: bool) -> bool:
        """Movement rules without side-to-move or self-check screening."""
        if piece.is_captured or piece.position is None:
            return False
        board = self._board
        if not board.is_valid_cell(destination):
            return False
        target = board.piece_at(destination)
        if target is not None and target.color == piece.color:
            return False

        pt = piece.piece_type
        match pt:
            case PieceType.PAWN:
                return self._pawn_reaches(piece, destination)
            case PieceType.ROOK:
                return self._slides(piece, destination, rook_directions(piece.color))
            case PieceType.KNIGHT:
                return self._knight_reaches(piece, destination)
            case PieceType.BISHOP:
                return self._bishop_reaches(piece, destination)
            case PieceType.QUEEN:
                return self._slides(
                    piece, destination, rook_directions(piece.color)
                ) or self._bishop_reaches(piece, destination)
            case PieceType.KING:
                return self._king_reaches(piece, destination, attacking=attacking)
            case _:
                assert_never(pt)

    # -- Piece-specific predicates (private) --------------------------------

    def _pawn_reaches(self, piece: Piece, destination: Cell) -> bool:
        board = self._board
        color = piece.color
        current = piece.position
        assert current is not None
        forward = forward_direction(color)

        one_step = current + forward
        if one_step == destination and board.is_empty(destination):
            return True

        if not piece.has_moved and current.r == PAWN_START_RANKS[int(color)]:
            two_step = one_step + forward
            if (
                two_step == destination
                and board.is_empty(one_step)
                and board.is_empty(destination)
            ):
                return True

        for offset in pawn_capture_directions(color):
            if current + offset == destination:
                target = board.piece_at(destination)
                return target is not None and target.color != color
        return False

    def _knight_reaches(self, piece: Piece, destination: Cell) -> bool:
        current = piece.position
        assert current is not None
        if current.distance_to(destination) != 2:
            return False
        return any(current + leap == destination for leap in knight_offsets(piece.color))

    def _bishop_reaches(self, piece: Piece, destination: Cell) -> bool:
        current = piece.position
        assert current is not None
        if current.color_class != destination.color_class:
            return False
        return self._slides(piece, destination, bishop_directions(piece.color))

    def _king_reaches(self, piece: Piece, destination: Cell, *, attacking: bool) -> bool:
        current = piece.position
        assert current is not None
        if current.distance_to(destination) != 1:
            return False
        if attacking:
            return True
        return not self.is_square_under_attack(destination, piece.color)

    def _slides(self, piece: Piece, destination: Cell, directions: Directions) -> bool:
        """Ray walk from the piece to *destination*; every cell between must be empty."""
        current = piece.position
        assert current is not None
        direction = direction_between(current, destination)
        if direction is None or direction not in directions:
            return False

        board = self._board
        step = current + direction
        while step != destination:
            if not board.is_empty(step):
                return False
            step = step + direction
        return True
