"""Automated players: random move selection and its Qt worker bridge."""

from glinski.engine.qt_bridge import MoveWorker
from glinski.engine.random_selector import RandomMoveSelector
from glinski.engine.search import IMoveSelector

__all__ = [
    "IMoveSelector",
    "MoveWorker",
    "RandomMoveSelector",
]
