"""Timer-driven bot loop for observer and human-vs-bot games."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QThread, QTimer, pyqtSignal

from glinski.core.enums import Color
from glinski.core.move import Move
from glinski.engine.qt_bridge import MoveWorker
from glinski.game.interfaces import GamePhase
from glinski.game.player import AIPlayer, HumanPlayer
from glinski.game.settings import GameSettings

if TYPE_CHECKING:
    from glinski.core.board import Board
    from glinski.game.controller import GameController

_LOGGER = logging.getLogger(__name__)


class _WorkerCommandBus(QObject):
    """Signal bridge for issuing worker commands with queued delivery."""

    move_requested = pyqtSignal(object, int)
    cancel_requested = pyqtSignal()


class AutoPlaySession:
    """Paces bot moves with a single-shot ``QTimer`` and hands them to the
    controller.

    Every bot turn waits ``autoplay_interval_ms`` before the worker picks a
    move, so observer games play out at a watchable speed.  With
    ``threaded=True`` the :class:`MoveWorker` runs on its own ``QThread``;
    otherwise it lives on the game thread and answers synchronously.
    """

    __slots__ = (
        "__weakref__",
        "_controller",
        "_settings",
        "_command_bus",
        "_step_timer",
        "_worker",
        "_worker_thread",
        "_request_id",
        "_pending_request",
        "_pending_board",
        "_is_running",
        "_is_started",
    )

    def __init__(
        self,
        *,
        controller: GameController,
        settings: GameSettings | None = None,
        parent: QObject | None = None,
        threaded: bool = False,
    ) -> None:
        self._controller = controller
        self._settings = settings if settings is not None else GameSettings()

        self._command_bus = _WorkerCommandBus(parent)
        self._step_timer = QTimer(parent)
        self._step_timer.setSingleShot(True)
        self._step_timer.timeout.connect(self.step)

        self._worker = MoveWorker(seed=self._settings.seed)
        self._worker_thread: QThread | None = QThread(parent) if threaded else None
        self._request_id = 0
        self._pending_request: int | None = None
        self._pending_board: Board | None = None
        self._is_running = True
        self._is_started = False

    # ── Lifecycle ────────────────────────────────────────────────────────

    def setup(self) -> None:
        """Wire the worker (starting its thread when threaded)."""
        if self._is_started:
            return
        if self._worker_thread is not None:
            self._worker.moveToThread(self._worker_thread)
        self._command_bus.move_requested.connect(self._worker.request_move)
        self._command_bus.cancel_requested.connect(self._worker.cancel)
        self._worker.move_ready.connect(self._on_move_ready)
        self._worker.no_move.connect(self._on_no_move)
        self._worker.request_cancelled.connect(self._on_cancelled)
        self._worker.search_error.connect(self._on_error)
        if self._worker_thread is not None:
            self._worker_thread.start()
        self._is_started = True

    def shutdown(self) -> None:
        """Cancel the pending move and stop the worker thread."""
        if not self._is_started:
            return
        self.cancel()
        if self._worker_thread is not None:
            self._worker_thread.quit()
            self._worker_thread.wait(2000)
        self._is_started = False

    def new_game(
        self,
        settings: GameSettings | None = None,
        board: Board | None = None,
    ) -> Color | None:
        """Start a game with players built from *settings*.

        Returns the human's color, or ``None`` in observer mode.
        """
        if settings is not None:
            self._settings = settings
        self.setup()
        human = self._settings.resolve_human_color()
        white, black = (
            HumanPlayer(color) if color == human else self.create_ai_player(color)
            for color in (Color.WHITE, Color.BLACK)
        )
        self._is_running = True
        self._controller.new_game(white, black, board)
        return human

    def create_ai_player(self, color: Color) -> AIPlayer:
        """Create a bot player wired to this session."""
        return AIPlayer(
            color,
            "Bot",
            on_request_move=self.request_move,
            on_cancel=self.cancel,
        )

    # ── Pacing ───────────────────────────────────────────────────────────

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def is_running(self) -> bool:
        return self._is_running and not self._controller.state.is_game_over

    @property
    def is_pending(self) -> bool:
        """True while a bot move is scheduled or being picked."""
        return self._pending_request is not None

    def request_move(self, board: Board) -> None:
        """Schedule a bot move for *board* after the autoplay interval."""
        if not self._is_started or not self._is_running:
            return
        self.cancel()
        self._request_id += 1
        self._pending_request = self._request_id
        self._pending_board = board.copy()
        self._step_timer.start(self._settings.autoplay_interval_ms)

    def cancel(self) -> None:
        """Drop the scheduled or in-flight bot move."""
        self._step_timer.stop()
        self._pending_request = None
        self._pending_board = None
        if self._is_started:
            self._command_bus.cancel_requested.emit()

    def start(self) -> None:
        """Resume automatic play, re-requesting a move if a bot is due."""
        self._is_running = True
        player = self._controller.current_player
        if (
            self._controller.state.phase == GamePhase.THINKING
            and player is not None
            and not player.is_human
            and not self.is_pending
        ):
            self.request_move(self._controller.board)

    def stop(self) -> None:
        """Pause automatic play before the next move is computed."""
        self._is_running = False
        self.cancel()

    def step(self) -> None:
        """Dispatch the scheduled request to the worker right away."""
        self._step_timer.stop()
        request_id = self._pending_request
        board = self._pending_board
        if request_id is None or board is None:
            return
        self._command_bus.move_requested.emit(board, request_id)

    # -- Worker callbacks ---------------------------------------------------

    def _on_move_ready(self, request_id: int, move_obj: object) -> None:
        if request_id != self._pending_request:
            return
        if not isinstance(move_obj, Move):
            return
        self._clear_pending()
        if self._controller.state.phase != GamePhase.THINKING:
            return
        if not self._controller.submit_move(move_obj):
            self._handle_failure(f"bot move {move_obj} was rejected by the live board")

    def _on_no_move(self, request_id: int) -> None:
        if request_id != self._pending_request:
            return
        self._clear_pending()
        self._controller.check_game_over()

    def _on_cancelled(self, request_id: int) -> None:
        if request_id == self._pending_request:
            self._clear_pending()

    def _on_error(self, request_id: int, message: str) -> None:
        if request_id != self._pending_request:
            return
        self._clear_pending()
        self._handle_failure(f"bot move selection failed: {message}")

    def _handle_failure(self, message: str) -> None:
        """Forfeit for the bot that could not move, so the game always ends."""
        _LOGGER.warning("Autoplay failure: %s", message)
        self.stop()
        state = self._controller.state
        if not state.is_game_over:
            self._controller.resign(state.side_to_move)

    def _clear_pending(self) -> None:
        self._pending_request = None
        self._pending_board = None
