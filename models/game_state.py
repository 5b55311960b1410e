"""
Screen enumeration and observable game snapshots.
"""

import enum
from dataclasses import dataclass, field
from typing import Optional

from models.genre import Genre
from models.player import Player
from models.question import Question


class Screen(enum.Enum):
    """The UI phase currently presented. Exactly one at a time."""
    HOME = "home"
    LOBBY = "lobby"
    GENRE_SELECT = "genre_select"
    QUESTION = "question"
    SCOREBOARD = "scoreboard"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameSnapshot:
    """
    Immutable snapshot of the game state.
    Emitted after every mutation for presentation layers.
    """
    screen: Screen = Screen.HOME
    players: tuple[Player, ...] = ()
    genre: Optional[Genre] = None
    round_index: int = 0
    question_count: int = 0
    current_question: Optional[Question] = None
    timer_seconds: int = 0
    time_per_question: int = 0
    is_counting_down: bool = False
    revealed_correct: bool = False
    answers: dict[str, int] = field(default_factory=dict)
    winner: Optional[Player] = None

    @property
    def time_fraction(self) -> float:
        """Remaining share of the countdown, from 1.0 down to 0.0."""
        if self.time_per_question <= 0:
            return 0.0
        return max(0.0, min(1.0, self.timer_seconds / self.time_per_question))

    @property
    def round_number(self) -> int:
        """One-based round number for display."""
        return self.round_index + 1
