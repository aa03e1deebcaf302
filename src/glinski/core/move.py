"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from glinski.core.enums import MoveFlag, PieceType

if TYPE_CHECKING:
    from glinski.core.piece import Piece
    from glinski.core.types import Cell


@dataclass(frozen=True, slots=True)
class Move:
    """A piece, where it goes, and what it takes on the way.

    ``flag`` and ``promotion`` are reserved for special moves; the current
    rule set only ever produces ``MoveFlag.NORMAL`` with no promotion choice
    (pawns promote to a queen automatically on the board).
    """

    piece: Piece
    destination: Cell
    captured: Piece | None = None
    flag: MoveFlag = MoveFlag.NORMAL
    promotion: PieceType | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @property
    def start(self) -> Cell | None:
        """Current cell of the moving piece."""
        return self.piece.position

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        text = f"{self.piece.piece_type!s} {self.start} -> {self.destination}"
        if self.captured is not None:
            text += f" (x {self.captured.piece_type!s})"
        if self.flag == MoveFlag.PROMOTION and self.promotion is not None:
            text += f" (= {self.promotion!s})"
        elif self.flag == MoveFlag.EN_PASSANT:
            text += " e.p."
        elif self.flag == MoveFlag.CASTLING:
            text += " O-O"
        return text
