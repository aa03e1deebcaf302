"""Piece: mutable game piece with tombstone capture."""

from __future__ import annotations

from glinski.core.enums import Color, PieceType
from glinski.core.types import Cell

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}


class Piece:
    """A piece on (or captured from) the hexagonal board.

    ``piece_type`` and ``color`` never change.  Placing the piece on a cell
    through :attr:`position` always marks it as moved; a captured piece keeps
    living in its board's collection as a tombstone with no position.

    Pieces compare by identity: the "same" pawn on two cloned boards is two
    different pieces.
    """

    __slots__ = ("_piece_type", "_color", "_position", "_has_moved", "_is_captured")

    def __init__(
        self,
        piece_type: PieceType,
        color: Color,
        position: Cell | None = None,
    ) -> None:
        self._piece_type = piece_type
        self._color = color
        self._position = position
        self._has_moved = False
        self._is_captured = False

    # ── Identity ─────────────────────────────────────────────────────────

    @property
    def piece_type(self) -> PieceType:
        return self._piece_type

    @property
    def color(self) -> Color:
        return self._color

    # ── State ────────────────────────────────────────────────────────────

    @property
    def position(self) -> Cell | None:
        return self._position

    @position.setter
    def position(self, cell: Cell | None) -> None:
        if cell is None:
            return
        self._position = cell
        self._has_moved = True

    @property
    def has_moved(self) -> bool:
        return self._has_moved

    @property
    def is_captured(self) -> bool:
        return self._is_captured

    def capture(self) -> None:
        """Take the piece off the board for good."""
        self._is_captured = True
        self._position = None

    def clone(self) -> Piece:
        """Fresh piece with the same observable state."""
        twin = Piece(self._piece_type, self._color, self._position)
        twin._has_moved = self._has_moved
        twin._is_captured = self._is_captured
        return twin

    def snapshot(self) -> tuple[PieceType, Color, Cell | None, bool, bool]:
        """Observable state as a plain tuple, handy for comparisons."""
        return (
            self._piece_type,
            self._color,
            self._position,
            self._has_moved,
            self._is_captured,
        )

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def symbol(self) -> str:
        """Letter symbol: uppercase for white, lowercase for black."""
        letter = self._piece_type.letter
        return letter if self._color == Color.WHITE else letter.lower()

    @property
    def unicode(self) -> str:
        return _UNICODE[(self._color, self._piece_type)]

    def __str__(self) -> str:
        where = "captured" if self._position is None else f"at {self._position}"
        return f"{self._color!s} {self._piece_type!s} {where}"

    def __repr__(self) -> str:
        return (
            f"Piece({self._piece_type.name}, {self._color.name}, "
            f"{self._position!s}, moved={self._has_moved})"
        )
