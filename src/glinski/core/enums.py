"""Core enumerations and flags for the hexagonal chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Glinski piece types."""

    PAWN = 1
    ROOK = 2
    KNIGHT = 3
    BISHOP = 4
    QUEEN = 5
    KING = 6

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @property
    def letter(self) -> str:
        """One-letter symbol, e.g. 'N' for the knight."""
        return _LETTERS[self]

    def __str__(self) -> str:
        return self.display_name


_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.ROOK: "R",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}


class CellColor(IntEnum):
    """Three-coloring class of a hexagonal cell."""

    LIGHT = 0
    MEDIUM = 1
    DARK = 2


class MoveFlag(IntEnum):
    """Special move classification.

    Only ``NORMAL`` is produced by the current rule set; the other members
    are reserved.
    """

    NORMAL = 0
    PROMOTION = 1
    EN_PASSANT = 2
    CASTLING = 3


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3

    @classmethod
    def win_for(cls, color: Color) -> GameResult:
        return cls.WHITE_WINS if color == Color.WHITE else cls.BLACK_WINS

    @property
    def winner(self) -> Color | None:
        if self == GameResult.WHITE_WINS:
            return Color.WHITE
        if self == GameResult.BLACK_WINS:
            return Color.BLACK
        return None
