"""
QuizNight Data Models

Plain data types shared by the game engine and presentation layers.
"""

from models.genre import Genre
from models.player import Player, new_player_id
from models.question import Question, OPTION_COUNT, OPTION_LABELS
from models.game_state import Screen, GameSnapshot
from models.schemas import RosterCreate, QuestionCreate, QuestionBankFile

__all__ = [
    "Genre",
    "Player",
    "new_player_id",
    "Question",
    "OPTION_COUNT",
    "OPTION_LABELS",
    "Screen",
    "GameSnapshot",
    "RosterCreate",
    "QuestionCreate",
    "QuestionBankFile",
]
