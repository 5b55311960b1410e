"""
Unit tests for the QuestionBank.
"""

import json

import pytest

from engine.question_bank import QuestionBank, QuestionBankError, DEFAULT_QUESTIONS, MUSIC_QUESTIONS
from models.genre import Genre
from models.question import Question


def question_dict(text: str, correct: int = 0) -> dict:
    return {"text": text, "options": ["a", "b", "c", "d"], "correct_index": correct}


class TestBuiltinBank:
    """Tests for the questions shipped with the game."""

    def setup_method(self):
        self.bank = QuestionBank.builtin()

    def test_music_has_its_own_questions(self):
        assert self.bank.load_questions(Genre.MUSIC) == MUSIC_QUESTIONS

    def test_unmapped_genre_uses_default(self):
        """Genres without their own sequence should fall back."""
        for genre in (Genre.CINEMA, Genre.KDRAMA, Genre.NETFLIX, Genre.TV):
            assert self.bank.load_questions(genre) == DEFAULT_QUESTIONS

    def test_none_uses_default(self):
        assert self.bank.load_questions(None) == DEFAULT_QUESTIONS

    def test_deterministic(self):
        """The same genre should always yield the same sequence."""
        assert self.bank.load_questions(Genre.MUSIC) == self.bank.load_questions(Genre.MUSIC)

    def test_returns_new_list(self):
        questions = self.bank.load_questions(Genre.MUSIC)
        questions.clear()

        assert len(self.bank.load_questions(Genre.MUSIC)) == 5

    def test_bank_size(self):
        assert self.bank.bank_size(Genre.MUSIC) == 5
        assert self.bank.bank_size(Genre.TV) == 5

    def test_genres(self):
        assert self.bank.genres == [Genre.MUSIC]


class TestShuffle:
    """Tests for the opt-in shuffle."""

    def test_shuffle_keeps_same_questions(self):
        bank = QuestionBank.builtin(shuffle=True, seed=7)
        shuffled = bank.load_questions(Genre.MUSIC)

        assert sorted(q.text for q in shuffled) == sorted(q.text for q in MUSIC_QUESTIONS)

    def test_same_seed_same_order(self):
        """Seeded shuffles should be reproducible."""
        first = QuestionBank.builtin(shuffle=True, seed=42).load_questions(Genre.MUSIC)
        second = QuestionBank.builtin(shuffle=True, seed=42).load_questions(Genre.MUSIC)

        assert first == second

    def test_shuffle_changes_order_for_some_seed(self):
        orders = {
            tuple(q.text for q in QuestionBank.builtin(shuffle=True, seed=s).load_questions(Genre.MUSIC))
            for s in range(10)
        }
        assert len(orders) > 1

    def test_no_shuffle_by_default(self):
        assert not QuestionBank.builtin().shuffle


class TestJsonBank:
    """Tests for loading question banks from JSON documents."""

    def test_load_valid_file(self, tmp_path):
        path = tmp_path / "questions.json"
        path.write_text(json.dumps({
            "default": [question_dict("Default 1")],
            "genres": {
                "Cinema": [question_dict("Film 1", 2), question_dict("Film 2", 3)],
                "tv": [question_dict("Show 1")],
            },
        }))

        bank = QuestionBank.from_json(path)

        cinema = bank.load_questions(Genre.CINEMA)
        assert [q.text for q in cinema] == ["Film 1", "Film 2"]
        assert cinema[0].correct_index == 2
        assert isinstance(cinema[0], Question)
        assert bank.load_questions(Genre.TV)[0].text == "Show 1"
        assert bank.load_questions(Genre.MUSIC)[0].text == "Default 1"

    def test_missing_file(self, tmp_path):
        with pytest.raises(QuestionBankError):
            QuestionBank.from_json(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "questions.json"
        path.write_text("{not json")

        with pytest.raises(QuestionBankError):
            QuestionBank.from_json(path)

    def test_wrong_option_count(self, tmp_path):
        """Questions must have exactly four options."""
        path = tmp_path / "questions.json"
        bad = question_dict("Bad")
        bad["options"] = ["a", "b", "c"]
        path.write_text(json.dumps({"default": [bad]}))

        with pytest.raises(QuestionBankError):
            QuestionBank.from_json(path)

    def test_correct_index_out_of_range(self, tmp_path):
        path = tmp_path / "questions.json"
        path.write_text(json.dumps({"default": [question_dict("Bad", 4)]}))

        with pytest.raises(QuestionBankError):
            QuestionBank.from_json(path)

    def test_unknown_genre_key(self, tmp_path):
        path = tmp_path / "questions.json"
        path.write_text(json.dumps({
            "default": [question_dict("Default 1")],
            "genres": {"Opera": [question_dict("Aria")]},
        }))

        with pytest.raises(QuestionBankError, match="Opera"):
            QuestionBank.from_json(path)

    def test_empty_default_rejected(self, tmp_path):
        path = tmp_path / "questions.json"
        path.write_text(json.dumps({"default": []}))

        with pytest.raises(QuestionBankError):
            QuestionBank.from_json(path)
