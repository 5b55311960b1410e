"""
Player model for quiz participants.
"""

import uuid
from dataclasses import dataclass, field, replace


def new_player_id() -> str:
    """Generate a unique player identifier."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Player:
    """
    A local player sitting in front of the shared screen.

    Records are immutable; score changes produce a new record with the
    same id so observers can hold on to snapshots safely.
    """
    name: str
    score: int = 0
    id: str = field(default_factory=new_player_id)

    def with_score(self, score: int) -> "Player":
        """Return a copy of this player with a new score (floored at 0)."""
        return replace(self, score=max(0, score))

    def add_points(self, points: int) -> "Player":
        return self.with_score(self.score + points)
