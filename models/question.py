"""
Question model for quiz rounds.
"""

from dataclasses import dataclass
from typing import Optional


OPTION_COUNT = 4
OPTION_LABELS = ("A", "B", "C", "D")


@dataclass(frozen=True)
class Question:
    """
    A multiple-choice question with exactly four options.

    Immutable once loaded; the correct option is identified by index.
    """
    text: str
    options: tuple[str, ...]
    correct_index: int
    explanation: Optional[str] = None

    def __post_init__(self):
        # Accept any sequence for options but store a tuple
        object.__setattr__(self, "options", tuple(self.options))

        if len(self.options) != OPTION_COUNT:
            raise ValueError(
                f"Question needs exactly {OPTION_COUNT} options, got {len(self.options)}"
            )
        if not 0 <= self.correct_index < OPTION_COUNT:
            raise ValueError(f"correct_index out of range: {self.correct_index}")

    @property
    def correct_option(self) -> str:
        """Text of the correct option."""
        return self.options[self.correct_index]

    @property
    def reveal_text(self) -> str:
        """Text shown when the answer is revealed."""
        return self.explanation or self.correct_option

    def is_correct(self, option_index: int) -> bool:
        return option_index == self.correct_index
