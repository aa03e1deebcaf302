"""GameController — the central orchestrator of a Glinski game.

Coordinates: Players, GameState, MoveValidator, the random bot.
Emits events via simple callbacks so the view / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from glinski.core.board import Board
from glinski.core.enums import Color
from glinski.core.move import Move
from glinski.core.move_validator import MoveValidator
from glinski.core.piece import Piece
from glinski.core.types import Cell
from glinski.engine.random_selector import RandomMoveSelector
from glinski.engine.search import IMoveSelector
from glinski.game.interfaces import GameEndReason, GamePhase, IPlayer
from glinski.game.player import HumanPlayer
from glinski.game.state import GameState

_LOGGER = logging.getLogger(__name__)

_COLOR_NAMES: dict[Color, str] = {Color.WHITE: "White", Color.BLACK: "Black"}


@dataclass(frozen=True, slots=True)
class Highlight:
    """A destination cell to mark for the selected piece."""

    cell: Cell
    is_capture: bool = False


# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move], None]
StatusCallback = Callable[[str], None]
GameOverCallback = Callable[[str, Color | None], None]  # outcome, winner
HighlightCallback = Callable[[list[Highlight]], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_status: list[StatusCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_highlight: list[HighlightCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Orchestrates a full game: validates moves, switches turns, runs the
    bot, notifies listeners.

    Thread-safety: every method must be called from the game (main/UI)
    thread.  Bot moves computed elsewhere arrive through :meth:`submit_move`
    on that thread; the controller never locks.
    """

    __slots__ = (
        "_state",
        "_players",
        "_selector",
        "_selected",
        "events",
    )

    def __init__(self, selector: IMoveSelector | None = None) -> None:
        self._state = GameState()
        self._players: dict[Color, IPlayer] = {}
        self._selector: IMoveSelector = (
            selector if selector is not None else RandomMoveSelector()
        )
        self._selected: Piece | None = None
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.side_to_move)

    @property
    def selected_piece(self) -> Piece | None:
        return self._selected

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    # ── Game lifecycle ───────────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        board: Board | None = None,
    ) -> None:
        """Set up a new game, optionally from a custom *board*."""
        for p in self._players.values():
            if not p.is_human:
                p.cancel()
        self._players = {Color.WHITE: white, Color.BLACK: black}
        self._selected = None

        self._state = GameState()
        self._state.setup(board)
        _LOGGER.info("New game: %s (white) vs %s (black)", white.name, black.name)

        self._emit_phase(GamePhase.AWAITING_MOVE)
        self._emit_highlight([])
        if self._state.check_game_over():
            self._announce_game_over()
            return
        self._emit_status()
        self._prompt_current_player()

    def start_new_game(self) -> None:
        """Restart with the same players (two humans if none were set)."""
        white = self._players.get(Color.WHITE) or HumanPlayer(Color.WHITE)
        black = self._players.get(Color.BLACK) or HumanPlayer(Color.BLACK)
        self.new_game(white, black)

    # ── Selection / highlighting ─────────────────────────────────────────

    def select_piece(self, cell: Cell) -> list[Highlight]:
        """Select the piece on *cell* and return its legal destinations.

        Selecting the already selected cell clears the selection.  Cells
        without a piece of the side to move select nothing.
        """
        if self._state.is_game_over or not self._is_human_turn():
            return []

        if self._selected is not None and self._selected.position == cell:
            self.clear_selection()
            self._emit_status("Selection cleared")
            return []

        piece = self.board.piece_at(cell)
        if piece is None or piece.color != self._state.side_to_move:
            self.clear_selection()
            self._emit_status("Select one of your pieces")
            return []

        self._selected = piece
        highlights = self.highlights_for(piece)
        self._emit_highlight(highlights)
        self._emit_status(f"{piece.piece_type!s} selected, choose a destination")
        return highlights

    def highlights_for(self, piece: Piece) -> list[Highlight]:
        """Legal destinations of *piece*, captures marked."""
        board = self.board
        return [
            Highlight(cell, board.piece_at(cell) is not None)
            for cell in MoveValidator(board).valid_destinations(piece)
        ]

    def clear_selection(self) -> None:
        if self._selected is None:
            return
        self._selected = None
        self._emit_highlight([])

    def handle_cell_click(self, cell: Cell) -> bool:
        """Click-to-select then click-to-move.  Returns True if a move was made."""
        if self._state.is_game_over:
            return False
        if not self._is_human_turn():
            self._emit_status("It is not your turn")
            return False

        selected = self._selected
        clicked = self.board.piece_at(cell)
        if selected is None or (
            clicked is not None and clicked.color == self._state.side_to_move
        ):
            self.select_piece(cell)
            return False
        return self.attempt_move(selected, cell)

    # ── Moves ────────────────────────────────────────────────────────────

    def attempt_move(self, piece: Piece | None, destination: Cell) -> bool:
        """Apply a human's *piece* → *destination* if legal.

        Refused while a bot is to move.  Illegal moves change nothing.
        """
        if self._state.is_game_over:
            return False
        if not self._is_human_turn():
            self._emit_status("It is not your turn")
            return False
        return self._try_move(piece, destination)

    def submit_move(self, move: Move) -> bool:
        """Apply a bot's *move*, resolving its piece against the live board.

        Moves picked on a board clone (e.g. by a worker thread) carry the
        clone's pieces; they are matched by their starting cell.
        """
        if self._state.is_game_over:
            return False
        piece = move.piece
        if piece not in self.board.pieces():
            start = move.start
            piece = self.board.piece_at(start) if start is not None else None
            if piece is None or piece.piece_type != move.piece.piece_type:
                return False
        return self._try_move(piece, move.destination)

    def play_random_move(self) -> Move | None:
        """Let the bot move for the side to move.

        Does nothing while a human player is to move.  Returns the applied
        move, or ``None`` when no move was made; a side to move without any
        legal move ends the game.
        """
        if self._state.is_game_over:
            return None
        cp = self.current_player
        if cp is not None and cp.is_human:
            return None
        move = self._selector.choose(self.board, self._state.side_to_move)
        if move is None:
            self.check_game_over()
            return None
        self._apply(move)
        return move

    # ── Termination ──────────────────────────────────────────────────────

    def check_game_over(self) -> bool:
        """Run terminal detection for the side to move, announcing a finish."""
        if self._state.is_game_over:
            return True
        if self._state.check_game_over():
            self._announce_game_over()
            return True
        return False

    def resign(self, color: Color | None = None) -> None:
        """*color* resigns (default: the human, else the side to move)."""
        if self._state.is_game_over:
            return
        if color is None:
            color = self._human_color()
        if color is None:
            color = self._state.side_to_move
        self._state.resign(color)
        self._announce_game_over()

    def time_expired(self) -> None:
        """The game clock ran out: the game ends in a draw."""
        if self._state.is_game_over:
            return
        self._state.expire_time()
        self._announce_game_over()

    # ── Text ─────────────────────────────────────────────────────────────

    def status_text(self) -> str:
        """Whose turn it is, with a check marker."""
        side = self._state.side_to_move
        text = f"{_COLOR_NAMES[side]} to move"
        if MoveValidator(self.board).is_king_in_check(side):
            text += " (check!)"
        return text

    def outcome_text(self) -> str:
        """Human-readable result of a finished game."""
        state = self._state
        winner = state.winner
        winner_name = _COLOR_NAMES[winner] if winner is not None else ""
        if state.end_reason == GameEndReason.CHECKMATE:
            return f"Checkmate! {winner_name} wins."
        if state.end_reason == GameEndReason.STALEMATE:
            return f"Stalemate! {winner_name} wins."
        if state.end_reason == GameEndReason.RESIGNATION and winner is not None:
            return f"{_COLOR_NAMES[winner.opposite]} resigned. {winner_name} wins."
        if state.end_reason == GameEndReason.TIME_EXPIRED:
            return "Time is up. The game is drawn."
        return ""

    # ── Internal helpers ─────────────────────────────────────────────────

    def _try_move(self, piece: Piece | None, destination: Cell) -> bool:
        if self._state.phase not in (GamePhase.AWAITING_MOVE, GamePhase.THINKING):
            return False
        if not MoveValidator(self.board).is_valid_move(piece, destination):
            _LOGGER.debug("Rejected move %s -> %s", piece, destination)
            if piece is not None:
                self._emit_status(f"Illegal move for {piece.piece_type!s}")
            return False

        assert piece is not None
        self._apply(Move(piece, destination, self.board.piece_at(destination)))
        return True

    def _apply(self, move: Move) -> None:
        self.clear_selection()
        record = self._state.apply_move(move)
        self._emit_move(record.move)

        if self._state.is_game_over:
            self._announce_game_over()
            return

        self._emit_status()
        self._prompt_current_player()

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        cp = self.current_player
        if cp is None:
            return

        if cp.is_human:
            self._state.phase = GamePhase.AWAITING_MOVE
            self._emit_phase(GamePhase.AWAITING_MOVE)
        else:
            self._state.phase = GamePhase.THINKING
            self._emit_phase(GamePhase.THINKING)
            cp.request_move(self.board)

    def _is_human_turn(self) -> bool:
        cp = self.current_player
        return cp is None or cp.is_human

    def _human_color(self) -> Color | None:
        humans = [color for color, p in self._players.items() if p.is_human]
        # Ambiguous with two humans: fall back to the side to move.
        return humans[0] if len(humans) == 1 else None

    def _announce_game_over(self) -> None:
        for p in self._players.values():
            if not p.is_human:
                p.cancel()
        self._selected = None
        outcome = self.outcome_text()
        winner = self._state.winner
        _LOGGER.info("Game over: %s", outcome)
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(outcome, winner)

    def _emit_move(self, move: Move) -> None:
        for cb in self.events.on_move:
            cb(move)

    def _emit_status(self, text: str | None = None) -> None:
        message = text if text is not None else self.status_text()
        for cb in self.events.on_status:
            cb(message)

    def _emit_highlight(self, highlights: list[Highlight]) -> None:
        for cb in self.events.on_highlight:
            cb(highlights)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)


