"""Game state machine — tracks phase transitions and move history."""

from __future__ import annotations

from dataclasses import dataclass, field

from glinski.core.board import Board
from glinski.core.enums import Color, GameResult
from glinski.core.move import Move
from glinski.core.move_validator import MoveValidator
from glinski.core.rules import Rules
from glinski.game.interfaces import GameEndReason, GamePhase


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    was_check: bool = False
    was_capture: bool = False


@dataclass
class GameState:
    """Manages game lifecycle: phase, result, end reason, move history.

    This is a pure data/logic class — no threading, no UI.
    """

    board: Board = field(default_factory=Board.initial, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    end_reason: GameEndReason | None = field(default=None, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, board: Board | None = None) -> None:
        """Initialise (or reset) the game."""
        self.board = board if board is not None else Board.initial()
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.end_reason = None
        self.move_history.clear()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Apply a validated move and return the history record.

        Caller is responsible for the legality check.
        """
        board = self.board
        captured = board.piece_at(move.destination)
        if move.captured is None and captured is not None:
            move = Move(move.piece, move.destination, captured)

        board.move_piece(move.piece, move.destination)

        record = MoveRecord(
            move=move,
            was_check=MoveValidator(board).is_king_in_check(board.side_to_move),
            was_capture=captured is not None,
        )
        self.move_history.append(record)

        self._check_game_over()
        return record

    # ── Termination ──────────────────────────────────────────────────────

    def check_game_over(self) -> bool:
        """Re-run terminal detection for the side to move."""
        if not self.is_game_over:
            self._check_game_over()
        return self.is_game_over

    def resign(self, color: Color) -> None:
        self._finish(GameResult.win_for(color.opposite), GameEndReason.RESIGNATION)

    def expire_time(self) -> None:
        """The game clock ran out: a draw, whatever the position."""
        self._finish(GameResult.DRAW, GameEndReason.TIME_EXPIRED)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.board.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def winner(self) -> Color | None:
        return self.result.winner

    def legal_moves(self) -> list[Move]:
        """Legal moves of the side to move."""
        return MoveValidator(self.board).legal_moves(self.side_to_move)

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        result = Rules.game_result(self.board)
        if result == GameResult.IN_PROGRESS:
            return
        reason = (
            GameEndReason.CHECKMATE
            if Rules.is_in_check(self.board)
            else GameEndReason.STALEMATE
        )
        self._finish(result, reason)

    def _finish(self, result: GameResult, reason: GameEndReason) -> None:
        self.result = result
        self.end_reason = reason
        self.phase = GamePhase.GAME_OVER
