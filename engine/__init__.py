"""
QuizNight Game Engine

Core game logic for the quiz night game.
This module contains no GUI dependencies.
"""

from engine.game import GameOrchestrator
from engine.question_bank import QuestionBank, QuestionBankError
from engine.scoring import ScoringPolicy, RoundResult
from engine.timer import RoundTimer

__all__ = [
    "GameOrchestrator",
    "QuestionBank",
    "QuestionBankError",
    "ScoringPolicy",
    "RoundResult",
    "RoundTimer",
]
