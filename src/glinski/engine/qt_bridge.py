"""Qt bridge to pick automated moves in a worker thread."""

from __future__ import annotations

import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from glinski.core.board import Board
from glinski.engine.random_selector import RandomMoveSelector
from glinski.engine.search import IMoveSelector


class MoveWorker(QObject):
    """Thread-affine worker that selects bot moves on demand.

    The worker only ever sees a private board clone; the chosen move refers
    to that clone's pieces and must be resolved against the live board by
    the game thread (see :meth:`GameController.submit_move`).
    """

    move_ready = pyqtSignal(int, object)
    no_move = pyqtSignal(int)
    request_cancelled = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_cancel_event", "_selector")

    def __init__(self, *, seed: int | None = None) -> None:
        super().__init__()
        self._selector: IMoveSelector = RandomMoveSelector(seed=seed)
        self._cancel_event = threading.Event()

    @pyqtSlot(object, int)
    def request_move(self, board_obj: object, request_id: int) -> None:
        """Pick a move for the side to move on *board_obj* and emit it."""
        if not isinstance(board_obj, Board):
            self.search_error.emit(request_id, "Worker received invalid board")
            return

        self._cancel_event.clear()
        try:
            move = self._selector.choose(board_obj, board_obj.current_player)
        except Exception as exc:
            self.search_error.emit(request_id, str(exc))
            return

        if self._cancel_event.is_set():
            self.request_cancelled.emit(request_id)
            return

        if move is None:
            self.no_move.emit(request_id)
            return

        self.move_ready.emit(request_id, move)

    @pyqtSlot()
    def cancel(self) -> None:
        """Abandon the current request; its result will not be emitted."""
        self._cancel_event.set()
