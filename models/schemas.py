"""
Pydantic schemas for data validation.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from models.question import Question, OPTION_COUNT


# ============ Roster Schemas ============

class RosterCreate(BaseModel):
    """Schema for the fixed roster of local players."""
    names: list[str] = Field(default_factory=list, max_length=8)

    @field_validator("names")
    @classmethod
    def names_valid(cls, v: list[str]) -> list[str]:
        cleaned = [name.strip() for name in v]
        if any(not name for name in cleaned):
            raise ValueError("Player names cannot be empty")
        if len(set(cleaned)) != len(cleaned):
            raise ValueError("Player names must be unique")
        return cleaned


# ============ Question Schemas ============

class QuestionCreate(BaseModel):
    """Schema for a question loaded from a question bank file."""
    text: str = Field(..., min_length=1)
    options: list[str] = Field(..., min_length=OPTION_COUNT, max_length=OPTION_COUNT)
    correct_index: int = Field(..., ge=0, le=OPTION_COUNT - 1)
    explanation: Optional[str] = None

    @field_validator("text")
    @classmethod
    def text_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Question text cannot be empty")
        return v.strip()

    @field_validator("options")
    @classmethod
    def options_not_empty(cls, v: list[str]) -> list[str]:
        if any(not option.strip() for option in v):
            raise ValueError("Options cannot be empty")
        return v

    def to_question(self) -> Question:
        return Question(
            text=self.text,
            options=tuple(self.options),
            correct_index=self.correct_index,
            explanation=self.explanation,
        )


class QuestionBankFile(BaseModel):
    """
    Schema for a question bank JSON document.

    {
        "default": [ {question}, ... ],
        "genres": { "Music": [ {question}, ... ], ... }
    }
    """
    default: list[QuestionCreate] = Field(..., min_length=1)
    genres: dict[str, list[QuestionCreate]] = Field(default_factory=dict)
