"""Application entry point: a headless bot-vs-bot observer game."""

from __future__ import annotations

import dataclasses
import logging
import sys
from typing import TYPE_CHECKING

from glinski.core.enums import GameResult
from glinski.game.autoplay import AutoPlaySession
from glinski.game.controller import GameController
from glinski.game.interfaces import GameMode
from glinski.game.settings import GameSettings

if TYPE_CHECKING:
    from glinski.core.board import Board

_LOGGER = logging.getLogger(__name__)


def run_observer(
    settings: GameSettings | None = None,
    board: Board | None = None,
) -> GameResult:
    """Play the bots against each other until the game ends.

    Runs a Qt event loop (creating a ``QCoreApplication`` if none exists)
    so the autoplay timer can pace the moves.
    """
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication(sys.argv)

    settings = dataclasses.replace(
        settings if settings is not None else GameSettings(),
        mode=GameMode.OBSERVER,
    )
    controller = GameController()
    session = AutoPlaySession(controller=controller, settings=settings)

    controller.events.on_move.append(lambda move: _LOGGER.info("%s", move))
    controller.events.on_game_over.append(lambda _outcome, _winner: app.quit())

    session.new_game(board=board)
    if not controller.state.is_game_over:
        app.exec()
    session.shutdown()

    _LOGGER.info("%s", controller.outcome_text())
    return controller.state.result


def main() -> None:
    """Launch an observer game with default settings."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    run_observer(GameSettings(autoplay_interval_ms=200))


if __name__ == "__main__":
    main()
