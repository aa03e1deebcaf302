"""The two kinds of side in a Glinski game: human and random bot."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from glinski.core.enums import Color
from glinski.game.interfaces import IPlayer

if TYPE_CHECKING:
    from glinski.core.board import Board


class HumanPlayer(IPlayer):
    """Side played from the board: cell clicks reach the controller directly,
    so there is nothing to schedule when it is asked to move.
    """

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color!s})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, board: Board) -> None:
        pass  # moves come from handle_cell_click

    def cancel(self) -> None:
        pass


class AIPlayer(IPlayer):
    """Bot side.  Turn requests are forwarded to the autoplay session, which
    paces them and has the random selector pick a legal move
    (see :class:`~glinski.game.autoplay.AutoPlaySession`).

    Args:
        color: Side the bot plays.
        name: Display name.
        on_request_move: ``(Board) -> None``, given the live board when the
            bot is to move.
        on_cancel: ``() -> None``, drops any scheduled move.
    """

    __slots__ = ("_color", "_name", "_on_request_move", "_on_cancel")

    def __init__(
        self,
        color: Color,
        name: str = "Bot",
        on_request_move: Callable[[Board], None] | None = None,
        on_cancel: Callable[[], None] | None = None,
    ) -> None:
        self._color = color
        self._name = name
        self._on_request_move = on_request_move
        self._on_cancel = on_cancel

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    def request_move(self, board: Board) -> None:
        if self._on_request_move is not None:
            self._on_request_move(board)

    def cancel(self) -> None:
        if self._on_cancel is not None:
            self._on_cancel()
