"""Cube-coordinate cell type and board geometry helpers.

Cells use cube coordinates ``(q, r, s)`` with ``q + r + s == 0``.  The board
is the radius-5 hexagon around the origin::

    |q| <= 5, |r| <= 5, |s| <= 5     (91 cells)

White starts at positive ``r`` and advances towards ``r = -5``.
"""

from __future__ import annotations

from dataclasses import dataclass

from glinski.core.enums import CellColor

BOARD_RADIUS = 5


@dataclass(frozen=True, slots=True)
class Cell:
    """Immutable hexagonal coordinate."""

    q: int
    r: int
    s: int

    def __post_init__(self) -> None:
        if self.q + self.r + self.s != 0:
            raise ValueError(
                f"Cube coordinates must sum to zero: q + r + s = "
                f"{self.q + self.r + self.s} for {self.q, self.r, self.s}"
            )

    @property
    def color_class(self) -> CellColor:
        """Three-coloring class, ``(q + r) mod 3``."""
        return CellColor((self.q + self.r) % 3)

    def distance_to(self, other: Cell) -> int:
        """Hex distance (number of single steps) to *other*."""
        return (
            abs(self.q - other.q) + abs(self.r - other.r) + abs(self.s - other.s)
        ) // 2

    def __add__(self, other: Cell) -> Cell:
        if not isinstance(other, Cell):
            return NotImplemented
        return Cell(self.q + other.q, self.r + other.r, self.s + other.s)

    def __sub__(self, other: Cell) -> Cell:
        if not isinstance(other, Cell):
            return NotImplemented
        return Cell(self.q - other.q, self.r - other.r, self.s - other.s)

    def __str__(self) -> str:
        return f"({self.q}, {self.r}, {self.s})"


def is_on_board(cell: Cell) -> bool:
    """Whether *cell* lies inside the radius-5 hexagon."""
    return (
        abs(cell.q) <= BOARD_RADIUS
        and abs(cell.r) <= BOARD_RADIUS
        and abs(cell.s) <= BOARD_RADIUS
    )


def _build_all_cells() -> tuple[Cell, ...]:
    cells: list[Cell] = []
    for q in range(-BOARD_RADIUS, BOARD_RADIUS + 1):
        for r in range(-BOARD_RADIUS, BOARD_RADIUS + 1):
            s = -q - r
            if abs(s) <= BOARD_RADIUS:
                cells.append(Cell(q, r, s))
    return tuple(cells)


# Every playable cell, q-major then r ascending.
ALL_CELLS: tuple[Cell, ...] = _build_all_cells()

CENTER = Cell(0, 0, 0)
