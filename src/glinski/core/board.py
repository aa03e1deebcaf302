"""Board - piece set and side to move on the radius-5 hexagon."""

from __future__ import annotations

from collections.abc import Iterable

from glinski.core.enums import Color, PieceType
from glinski.core.piece import Piece
from glinski.core.types import BOARD_RADIUS, Cell, is_on_board

# Rank (r coordinate) on which a pawn of each color promotes.
PROMOTION_RANKS: tuple[int, int] = (-BOARD_RADIUS, BOARD_RADIUS)

# White's starting layout, in setup order.  Black mirrors every coordinate.
_WHITE_LAYOUT: tuple[tuple[PieceType, tuple[int, int, int]], ...] = (
    (PieceType.BISHOP, (0, 5, -5)),
    (PieceType.KING, (1, 4, -5)),
    (PieceType.KNIGHT, (2, 3, -5)),
    (PieceType.ROOK, (3, 2, -5)),
    (PieceType.PAWN, (4, 1, -5)),
    (PieceType.QUEEN, (-1, 5, -4)),
    (PieceType.KNIGHT, (-2, 5, -3)),
    (PieceType.ROOK, (-3, 5, -2)),
    (PieceType.PAWN, (-4, 5, -1)),
    (PieceType.BISHOP, (0, 4, -4)),
    (PieceType.BISHOP, (0, 3, -3)),
    (PieceType.PAWN, (0, 1, -1)),
    (PieceType.PAWN, (3, 1, -4)),
    (PieceType.PAWN, (2, 1, -3)),
    (PieceType.PAWN, (1, 1, -2)),
    (PieceType.PAWN, (-3, 4, -1)),
    (PieceType.PAWN, (-2, 3, -1)),
    (PieceType.PAWN, (-1, 2, -1)),
)


class Board:
    """Ordered piece collection plus the side to move.

    Captured pieces stay in the collection as tombstones so list indexes are
    stable; promotion replaces a pawn with a queen at the pawn's index.

    :meth:`move_piece` performs no legality checking at all, that is the
    job of :class:`~glinski.core.move_validator.MoveValidator`.
    """

    __slots__ = ("_pieces", "_side_to_move")

    def __init__(
        self,
        pieces: Iterable[Piece] = (),
        side_to_move: Color = Color.WHITE,
    ) -> None:
        self._pieces: list[Piece] = []
        self._side_to_move = side_to_move
        for piece in pieces:
            self.add(piece)

    # -- Element access -----------------------------------------------------

    def piece_at(self, cell: Cell | None) -> Piece | None:
        """Non-captured piece on *cell*, or ``None``."""
        if cell is None or not is_on_board(cell):
            return None
        for piece in self._pieces:
            if not piece.is_captured and piece.position == cell:
                return piece
        return None

    def is_empty(self, cell: Cell) -> bool:
        return self.piece_at(cell) is None

    @staticmethod
    def is_valid_cell(cell: Cell | None) -> bool:
        return cell is not None and is_on_board(cell)

    # -- Query helpers ------------------------------------------------------

    @property
    def side_to_move(self) -> Color:
        return self._side_to_move

    @property
    def current_player(self) -> Color:
        return self._side_to_move

    def pieces(self) -> tuple[Piece, ...]:
        """Non-captured pieces on valid cells, in setup order."""
        return tuple(
            p
            for p in self._pieces
            if p.position is not None and is_on_board(p.position)
        )

    def pieces_of(self, color: Color) -> tuple[Piece, ...]:
        return tuple(p for p in self.pieces() if p.color == color)

    def all_pieces(self) -> tuple[Piece, ...]:
        """Every piece ever placed, tombstones included."""
        return tuple(self._pieces)

    def find_king(self, color: Color) -> Piece | None:
        """First non-captured king of *color*, or ``None``."""
        for piece in self.pieces():
            if piece.color == color and piece.piece_type == PieceType.KING:
                return piece
        return None

    # -- Mutation / copying -------------------------------------------------

    def add(self, piece: Piece) -> None:
        """Place *piece* while building a custom position."""
        cell = piece.position
        if cell is not None:
            if not is_on_board(cell):
                raise ValueError(f"Cell {cell} is off the board")
            if self.piece_at(cell) is not None:
                raise ValueError(f"Cell {cell} is already occupied")
        self._pieces.append(piece)

    def move_piece(self, piece: Piece, destination: Cell | None) -> bool:
        """Relocate *piece*, capturing and promoting as needed.

        Returns ``False`` (and changes nothing) when *destination* is off the
        board.  Otherwise always succeeds and flips the side to move.
        """
        if piece is None or not self.is_valid_cell(destination):
            return False

        target = self.piece_at(destination)
        if target is not None and target.color != piece.color:
            target.capture()

        piece.position = destination
        self._promote_if_needed(piece, destination)
        self._side_to_move = self._side_to_move.opposite
        return True

    def _promote_if_needed(self, piece: Piece, cell: Cell) -> None:
        if piece.piece_type != PieceType.PAWN:
            return
        if cell.r != PROMOTION_RANKS[int(piece.color)]:
            return
        for idx, candidate in enumerate(self._pieces):
            if candidate is piece:
                self._pieces[idx] = Piece(PieceType.QUEEN, piece.color, cell)
                return

    def copy(self) -> Board:
        b = Board(side_to_move=self._side_to_move)
        b._pieces = [p.clone() for p in self._pieces]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard Glinski starting position, white to move."""
        b = cls()
        for pt, (q, r, s) in _WHITE_LAYOUT:
            b._pieces.append(Piece(pt, Color.WHITE, Cell(q, r, s)))
        for pt, (q, r, s) in _WHITE_LAYOUT:
            b._pieces.append(Piece(pt, Color.BLACK, Cell(-q, -r, -s)))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __repr__(self) -> str:
        rows: list[str] = []
        for r in range(-BOARD_RADIUS, BOARD_RADIUS + 1):
            q_min = max(-BOARD_RADIUS, -BOARD_RADIUS - r)
            q_max = min(BOARD_RADIUS, BOARD_RADIUS - r)
            row = []
            for q in range(q_min, q_max + 1):
                p = self.piece_at(Cell(q, r, -q - r))
                row.append(p.symbol if p else ".")
            rows.append(f"{r:>3} {' ' * abs(r)}{' '.join(row)}")
        rows.append(f"{self._side_to_move!s} to move")
        return "\n".join(rows)
