"""
Question Bank - Supplies question sequences per genre.

Deterministic by default: the same genre always yields the same sequence.
Shuffling is opt-in and seeded.
"""

import json
import logging
import random
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from models.genre import Genre
from models.question import Question
from models.schemas import QuestionBankFile


logger = logging.getLogger(__name__)


class QuestionBankError(Exception):
    """Raised when a question bank file cannot be loaded."""


MUSIC_QUESTIONS = [
    Question(
        text="Which artist holds the record for the most Grammy wins in history?",
        options=("Quincy Jones", "Beyoncé", "Georg Solti", "Jay-Z"),
        correct_index=2,
        explanation="Georg Solti 🎵",
    ),
    Question(
        text="Who is known as the “King of Pop”?",
        options=("Bruno Mars", "Justin Timberlake", "Michael Jackson", "Lionel Richie"),
        correct_index=2,
        explanation="Michael Jackson 👑",
    ),
    Question(
        text="Which song became the first YouTube video to surpass 1 billion views?",
        options=(
            "“Shape of You” – Ed Sheeran",
            "“Baby” – Justin Bieber",
            "“Gangnam Style” – PSY",
            "“Despacito” – Luis Fonsi",
        ),
        correct_index=2,
        explanation="“Gangnam Style” – PSY 💃",
    ),
    Question(
        text="Which artist released an album entirely visual, with each track "
             "having its own accompanying film?",
        options=(
            "Lady Gaga – Chromatica",
            "Beyoncé – Lemonade",
            "Billie Eilish – Happier Than Ever",
            "Taylor Swift – Evermore",
        ),
        correct_index=1,
        explanation="Beyoncé – Lemonade 🍋",
    ),
    Question(
        text="Which band holds the record for the highest-selling album of all time "
             "in the US with “Their Greatest Hits (1971–1975)”?",
        options=("The Eagles", "Fleetwood Mac", "Bee Gees", "The Rolling Stones"),
        correct_index=0,
        explanation="The Eagles 🦅",
    ),
]

DEFAULT_QUESTIONS = [
    Question(
        text="Which animal is the largest land mammal?",
        options=("Lion", "Elephant", "Hippopotamus", "Giraffe"),
        correct_index=1,
        explanation="Elephant 🐘",
    ),
    Question(
        text="Which planet is known as the Red Planet?",
        options=("Venus", "Mars", "Jupiter", "Saturn"),
        correct_index=1,
        explanation="Mars",
    ),
    Question(
        text="What is the capital of France?",
        options=("Berlin", "Paris", "Rome", "Madrid"),
        correct_index=1,
        explanation="Paris",
    ),
    Question(
        text="In computing, what does CPU stand for?",
        options=(
            "Central Processing Unit",
            "Core Power Unit",
            "Compute Process Utility",
            "Central Power Unit",
        ),
        correct_index=0,
        explanation="Central Processing Unit",
    ),
    Question(
        text="Which ocean is the largest?",
        options=("Atlantic", "Indian", "Pacific", "Arctic"),
        correct_index=2,
        explanation="Pacific",
    ),
]


class QuestionBank:
    """
    Pure data provider mapping genres to ordered question sequences.

    Genres without a sequence of their own fall back to the default one.

    Usage:
        bank = QuestionBank.builtin()
        questions = bank.load_questions(Genre.MUSIC)
    """

    def __init__(self, banks: Optional[dict[Genre, list[Question]]] = None,
                 default: Optional[list[Question]] = None,
                 shuffle: bool = False, seed: Optional[int] = None):
        """
        Initialize the question bank.

        Args:
            banks: Question sequences keyed by genre
            default: Fallback sequence for unmapped genres
            shuffle: Shuffle sequences on every load
            seed: Seed for the shuffle (None for system randomness)
        """
        self._banks = {genre: tuple(qs) for genre, qs in (banks or {}).items()}
        self._default = tuple(default if default is not None else DEFAULT_QUESTIONS)
        self._shuffle = shuffle
        self._rng = random.Random(seed)

    @classmethod
    def builtin(cls, shuffle: bool = False, seed: Optional[int] = None) -> "QuestionBank":
        """The question set shipped with the game."""
        return cls({Genre.MUSIC: MUSIC_QUESTIONS}, DEFAULT_QUESTIONS,
                   shuffle=shuffle, seed=seed)

    @classmethod
    def from_json(cls, path: Union[str, Path], shuffle: bool = False,
                  seed: Optional[int] = None) -> "QuestionBank":
        """
        Load a question bank from a JSON document.

        Raises:
            QuestionBankError: If the file is unreadable or invalid
        """
        path = Path(path)
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise QuestionBankError(f"Cannot read question bank {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise QuestionBankError(f"Invalid JSON in question bank {path}: {e}") from e

        try:
            document = QuestionBankFile.model_validate(raw)
        except ValidationError as e:
            raise QuestionBankError(f"Invalid question bank {path}: {e}") from e

        banks: dict[Genre, list[Question]] = {}
        for key, entries in document.genres.items():
            genre = Genre.parse(key)
            if genre is None:
                raise QuestionBankError(f"Unknown genre '{key}' in question bank {path}")
            banks[genre] = [entry.to_question() for entry in entries]

        default = [entry.to_question() for entry in document.default]
        logger.info("Loaded question bank from %s (%d genres)", path, len(banks))
        return cls(banks, default, shuffle=shuffle, seed=seed)

    @property
    def genres(self) -> list[Genre]:
        """Genres with a sequence of their own."""
        return list(self._banks)

    @property
    def shuffle(self) -> bool:
        return self._shuffle

    def bank_size(self, genre: Optional[Genre]) -> int:
        """Number of questions available for a genre."""
        return len(self._sequence_for(genre))

    def load_questions(self, genre: Optional[Genre]) -> list[Question]:
        """
        Get the ordered question sequence for a genre.

        Args:
            genre: The chosen genre (None or unmapped uses the default)

        Returns:
            A new list of questions
        """
        questions = list(self._sequence_for(genre))
        if self._shuffle:
            self._rng.shuffle(questions)
        return questions

    def _sequence_for(self, genre: Optional[Genre]) -> tuple[Question, ...]:
        return self._banks.get(genre, self._default)
