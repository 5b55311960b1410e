"""
Scoring Policy - Computes per-player points for a finished round.

Pure and side-effect free: the orchestrator applies the deltas.
"""

from dataclasses import dataclass, field
from typing import Iterable, Mapping

from models.question import Question


@dataclass(frozen=True)
class RoundResult:
    """Outcome of scoring a single round."""
    round_index: int
    deltas: dict[str, int] = field(default_factory=dict)
    correct_player_ids: tuple[str, ...] = ()

    @property
    def points_awarded(self) -> int:
        return sum(self.deltas.values())


class ScoringPolicy:
    """
    Flat-reward scoring: every player whose selection matches the correct
    option earns a fixed number of points, everyone else earns nothing.
    Answer speed does not matter.
    """

    # Reward for a correct answer
    POINTS_PER_CORRECT = 20

    def __init__(self, points_per_correct: int = None):
        self.points_per_correct = (
            self.POINTS_PER_CORRECT if points_per_correct is None else points_per_correct
        )

    def score(self, question: Question, answers: Mapping[str, int],
              player_ids: Iterable[str]) -> dict[str, int]:
        """
        Compute point deltas for a round.

        Args:
            question: The question that was asked
            answers: Selected option index per player id
            player_ids: Roster ids, in roster order

        Returns:
            Delta per roster player id (0 for wrong or missing answers)
        """
        deltas = {}
        for player_id in player_ids:
            selection = answers.get(player_id)
            if selection is not None and question.is_correct(selection):
                deltas[player_id] = self.points_per_correct
            else:
                deltas[player_id] = 0
        return deltas

    def score_round(self, round_index: int, question: Question,
                    answers: Mapping[str, int], player_ids: Iterable[str]) -> RoundResult:
        """Score a round and package the outcome."""
        player_ids = list(player_ids)
        deltas = self.score(question, answers, player_ids)
        correct = tuple(
            pid for pid in player_ids
            if answers.get(pid) is not None and question.is_correct(answers[pid])
        )
        return RoundResult(round_index=round_index, deltas=deltas, correct_player_ids=correct)
