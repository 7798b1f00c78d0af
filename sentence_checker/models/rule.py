# sentence_checker/models/rule.py
from enum import Enum
from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

Level = Literal["error", "warn", "ok"]


class RuleConfig(BaseModel):
    """Grading parameters for one exercise. Built once, never mutated."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    min_words: int = Field(alias="minWords", ge=0)
    required_words: Tuple[str, ...] = Field(default=(), alias="requiredWords")
    require_conditional: bool = Field(default=False, alias="requireConditional")

    @field_validator("required_words")
    @classmethod
    def validate_required_words(cls, v):
        # normalized text is lowercase, so alternatives must be too
        words = []
        for w in v:
            if not w or not w.strip():
                raise ValueError("Required words cannot be empty")
            words.append(w.strip().lower())
        return tuple(words)


class CheckName(str, Enum):
    WORD_COUNT = "word_count"
    REQUIRED_WORD = "required_word"
    CONDITIONAL = "conditional"
    PUNCTUATION = "punctuation"


class Tier(str, Enum):
    FULL = "full"
    PARTIAL = "partial"
    NONE = "none"


class EvaluationStatus(str, Enum):
    MISSING_CONFIG = "missing_config"
    EMPTY_SUBMISSION = "empty_submission"
    GRADED = "graded"


class CheckOutcome(BaseModel):
    """Scoring decision of a single check, independent of message wording."""
    model_config = ConfigDict(frozen=True)

    check: CheckName
    tier: Tier
    delta: int = Field(ge=0, le=2)
    word_count: Optional[int] = None
    alternatives: Tuple[str, ...] = ()


class Evaluation(BaseModel):
    status: EvaluationStatus
    outcomes: Tuple[CheckOutcome, ...] = ()
    score: int = Field(default=0, ge=0, le=5)
    level: Optional[Level] = None
