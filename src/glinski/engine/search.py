"""Shared move-selection protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from glinski.core.board import Board
    from glinski.core.enums import Color
    from glinski.core.move import Move


class IMoveSelector(Protocol):
    """Protocol for automated players used by the game layer."""

    def choose(self, board: Board, color: Color) -> Move | None: ...
