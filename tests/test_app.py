"""
Unit tests for the QuizNightApp controller.
"""

import json

import pytest
from unittest.mock import MagicMock

from app import QuizNightApp
from config import GameSettings
from models.genre import Genre
from conftest import run_ticks


@pytest.fixture
def quiz(qapp, tmp_path):
    quiz = QuizNightApp(bank_path=tmp_path / "missing.json")
    yield quiz
    quiz.game.timer.cancel()


class TestQuizNightApp:
    """Tests for application wiring."""

    def test_default_roster(self, quiz):
        assert [p.name for p in quiz.game.players] == ["Mom", "Dad", "Sam", "Ava"]

    def test_builtin_bank_without_file(self, quiz):
        assert quiz.question_bank.genres == [Genre.MUSIC]

    def test_local_answer_recorded_for_sam(self, quiz):
        """On-screen selections should be recorded for the local player."""
        quiz.game.choose_genre(Genre.MUSIC)

        assert quiz.submit_local_answer(2)
        assert quiz.local_selection() == 2
        assert quiz.game.answers == {quiz.local_player.id: 2}

    def test_local_answer_ignored_outside_countdown(self, quiz):
        assert not quiz.submit_local_answer(2)
        assert quiz.local_selection() is None

    def test_missing_local_player(self, qapp, tmp_path):
        quiz = QuizNightApp(roster=["Mom", "Dad"], bank_path=tmp_path / "missing.json")
        quiz.game.choose_genre(Genre.MUSIC)

        assert not quiz.submit_local_answer(1)
        assert quiz.local_selection() is None
        quiz.game.timer.cancel()

    def test_signals_forwarded_to_event_bus(self, quiz):
        """Orchestrator signals should reach the event bus."""
        screens = MagicMock()
        scored = MagicMock()
        ticks = MagicMock()
        quiz.event_bus.screen_changed.connect(screens)
        quiz.event_bus.round_scored.connect(scored)
        quiz.event_bus.timer_tick.connect(ticks)

        quiz.game.choose_genre(Genre.MUSIC)
        run_ticks(quiz.game.timer, 10)

        screens.assert_called_once_with("question")
        assert ticks.call_count == 10
        scored.assert_called_once()

    def test_custom_bank_file(self, qapp, tmp_path):
        path = tmp_path / "questions.json"
        path.write_text(json.dumps({
            "default": [{"text": "Only", "options": ["a", "b", "c", "d"], "correct_index": 0}],
        }))

        quiz = QuizNightApp(bank_path=path)
        quiz.game.choose_genre(Genre.CINEMA)

        assert quiz.game.question_count == 1
        assert quiz.game.current_question.text == "Only"
        quiz.game.timer.cancel()

    def test_broken_bank_file_falls_back(self, qapp, tmp_path):
        """An invalid bank file should fall back to the built-in questions."""
        path = tmp_path / "questions.json"
        path.write_text("[]")

        quiz = QuizNightApp(bank_path=path)

        assert quiz.question_bank.bank_size(Genre.MUSIC) == 5

    def test_settings_passed_to_game(self, qapp, tmp_path):
        settings = GameSettings(rounds_per_game=2, time_per_question=4)
        quiz = QuizNightApp(settings=settings, bank_path=tmp_path / "missing.json")
        quiz.game.choose_genre(Genre.MUSIC)

        assert quiz.game.question_count == 2
        assert quiz.game.timer_seconds == 4
        quiz.game.timer.cancel()
