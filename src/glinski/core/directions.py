"""Side-dependent direction tables for sliding and leaping pieces.

The two sides keep separate constant tables instead of negating one side's
vectors at runtime: the enumeration order of the diagonal (bishop) and knight
vectors was fixed independently per side.
"""

from __future__ import annotations

from math import gcd

from glinski.core.enums import Color
from glinski.core.types import Cell

Directions = tuple[Cell, ...]


def _cells(*triples: tuple[int, int, int]) -> Directions:
    return tuple(Cell(q, r, s) for q, r, s in triples)


# -- Orthogonal (rook) unit vectors, one per hex edge ----------------------

WHITE_ROOK_DIRS: Directions = _cells(
    (1, 0, -1),
    (1, -1, 0),
    (0, -1, 1),
    (-1, 0, 1),
    (-1, 1, 0),
    (0, 1, -1),
)
BLACK_ROOK_DIRS: Directions = _cells(
    (-1, 0, 1),
    (-1, 1, 0),
    (0, 1, -1),
    (1, 0, -1),
    (1, -1, 0),
    (0, -1, 1),
)

# -- Diagonal (bishop) vectors, hex distance 2 -----------------------------

WHITE_BISHOP_DIRS: Directions = _cells(
    (2, -1, -1),
    (1, -2, 1),
    (-1, -1, 2),
    (-2, 1, 1),
    (-1, 2, -1),
    (1, 1, -2),
)
BLACK_BISHOP_DIRS: Directions = _cells(
    (-2, 1, 1),
    (-1, 2, -1),
    (1, 1, -2),
    (2, -1, -1),
    (1, -2, 1),
    (-1, -1, 2),
)

# -- Knight leaps: 6 diagonal-style + 6 orthogonal-style -------------------

WHITE_KNIGHT_OFFSETS: Directions = WHITE_BISHOP_DIRS + _cells(
    (2, 0, -2),
    (0, -2, 2),
    (-2, 0, 2),
    (0, 2, -2),
    (2, -2, 0),
    (-2, 2, 0),
)
BLACK_KNIGHT_OFFSETS: Directions = BLACK_BISHOP_DIRS + _cells(
    (-2, 0, 2),
    (0, 2, -2),
    (2, 0, -2),
    (0, -2, 2),
    (-2, 2, 0),
    (2, -2, 0),
)

# -- Pawns -----------------------------------------------------------------

WHITE_FORWARD = Cell(0, -1, 1)
BLACK_FORWARD = Cell(0, 1, -1)

WHITE_PAWN_CAPTURES: Directions = _cells((1, -1, 0), (-1, 0, 1))
BLACK_PAWN_CAPTURES: Directions = _cells((1, 0, -1), (-1, 1, 0))

_ROOK_DIRS: tuple[Directions, Directions] = (WHITE_ROOK_DIRS, BLACK_ROOK_DIRS)
_BISHOP_DIRS: tuple[Directions, Directions] = (WHITE_BISHOP_DIRS, BLACK_BISHOP_DIRS)
_KNIGHT_OFFSETS: tuple[Directions, Directions] = (
    WHITE_KNIGHT_OFFSETS,
    BLACK_KNIGHT_OFFSETS,
)
_FORWARD: tuple[Cell, Cell] = (WHITE_FORWARD, BLACK_FORWARD)
_PAWN_CAPTURES: tuple[Directions, Directions] = (
    WHITE_PAWN_CAPTURES,
    BLACK_PAWN_CAPTURES,
)


def rook_directions(color: Color) -> Directions:
    return _ROOK_DIRS[int(color)]


def bishop_directions(color: Color) -> Directions:
    return _BISHOP_DIRS[int(color)]


def knight_offsets(color: Color) -> Directions:
    return _KNIGHT_OFFSETS[int(color)]


def forward_direction(color: Color) -> Cell:
    """Single-step advance vector for *color*'s pawns."""
    return _FORWARD[int(color)]


def pawn_capture_directions(color: Color) -> Directions:
    return _PAWN_CAPTURES[int(color)]


def direction_between(origin: Cell, target: Cell) -> Cell | None:
    """Delta from *origin* to *target* reduced by the gcd of its components.

    Returns ``None`` when the two cells coincide.
    """
    delta = target - origin
    divisor = gcd(gcd(abs(delta.q), abs(delta.r)), abs(delta.s))
    if divisor == 0:
        return None
    return Cell(delta.q // divisor, delta.r // divisor, delta.s // divisor)
