"""
QuizNight - Family quiz game on a shared screen

Entry point for the application. Runs a headless, auto-played game in
which the local player answers every question.

    python main.py [genre]
"""

import logging
import sys

from PySide6.QtCore import QCoreApplication, QTimer

from config import init_config, setup_logging, APP_NAME, APP_VERSION


logger = logging.getLogger(__name__)

# Delays for the simulated local player, in milliseconds
ANSWER_DELAY_MS = 1500
REVEAL_DELAY_MS = 2000


def main() -> int:
    """Main entry point for QuizNight."""
    # Initialize configuration and directories
    init_config()
    setup_logging()

    # Create application
    qt_app = QCoreApplication(sys.argv)
    qt_app.setApplicationName(APP_NAME)
    qt_app.setApplicationVersion(APP_VERSION)
    logger.info("%s %s starting", APP_NAME, APP_VERSION)

    from app import QuizNightApp
    quiz = QuizNightApp()
    game = quiz.game
    bus = quiz.event_bus

    def answer_current() -> None:
        question = game.current_question
        if question is not None:
            quiz.submit_local_answer(question.correct_index)

    def show_scoreboard() -> None:
        game.advance_to_scoreboard()
        for player in game.standings:
            print(f"  {player.name:<8} {player.score:>4}")
        QTimer.singleShot(REVEAL_DELAY_MS, game.advance_from_scoreboard)

    def on_round_started(round_index: int) -> None:
        question = game.current_question
        print(f"\nQ{round_index + 1}: {question.text}")
        for label, option in zip("ABCD", question.options):
            print(f"  {label}. {option}")
        QTimer.singleShot(ANSWER_DELAY_MS, answer_current)

    def on_round_scored(result) -> None:
        print(f"Answer: {game.current_question.reveal_text}")
        QTimer.singleShot(REVEAL_DELAY_MS, show_scoreboard)

    def on_game_over(winner) -> None:
        print(f"\nWinner: {winner.name if winner else 'nobody'}")
        QTimer.singleShot(0, qt_app.quit)

    bus.round_started.connect(on_round_started)
    bus.round_scored.connect(on_round_scored)
    bus.game_over.connect(on_game_over)
    bus.system_message.connect(lambda level, msg: print(f"[{level}] {msg}"))

    genre = sys.argv[1] if len(sys.argv) > 1 else "Music"

    def start() -> None:
        game.enter_lobby()
        game.open_genre_select()
        game.choose_genre(genre)

    QTimer.singleShot(0, start)

    # Run event loop
    return qt_app.exec()


if __name__ == "__main__":
    sys.exit(main())
