from __future__ import annotations

from typing import Any, List, Optional

from sentence_checker.models.response import GradeResult
from sentence_checker.models.rule import (
    CheckName,
    CheckOutcome,
    Evaluation,
    EvaluationStatus,
    Level,
    RuleConfig,
    Tier,
)
from sentence_checker.services.evaluation.feedback import render_messages
from sentence_checker.services.evaluation.normalizer import normalize, tokenize

MAX_SCORE = 5
TERMINAL_MARKS = (".", "?", "!")
CONDITIONAL_MARKERS = ("if", "would")


def check_word_count(normalized: str, min_words: int) -> CheckOutcome:
    """Full credit at min_words, partial from min_words // 2 (inclusive)."""
    n = len(tokenize(normalized))
    if n >= min_words:
        tier, delta = Tier.FULL, 2
    elif n >= min_words // 2:
        tier, delta = Tier.PARTIAL, 1
    else:
        tier, delta = Tier.NONE, 0
    return CheckOutcome(check=CheckName.WORD_COUNT, tier=tier, delta=delta, word_count=n)


def check_required_words(normalized: str, required_words) -> CheckOutcome:
    found = any(word in normalized for word in required_words)
    return CheckOutcome(
        check=CheckName.REQUIRED_WORD,
        tier=Tier.FULL if found else Tier.NONE,
        delta=2 if found else 0,
        alternatives=tuple(required_words),
    )


def check_conditional(normalized: str) -> CheckOutcome:
    # plain substring presence; order and adjacency are not inspected
    found = all(marker in normalized for marker in CONDITIONAL_MARKERS)
    return CheckOutcome(
        check=CheckName.CONDITIONAL,
        tier=Tier.FULL if found else Tier.NONE,
        delta=1 if found else 0,
    )


def check_punctuation(raw_text: Any) -> CheckOutcome:
    """Runs on the raw text; normalization would have stripped the mark."""
    raw = raw_text.strip() if isinstance(raw_text, str) else ""
    found = bool(raw) and raw.endswith(TERMINAL_MARKS)
    return CheckOutcome(
        check=CheckName.PUNCTUATION,
        tier=Tier.FULL if found else Tier.NONE,
        delta=1 if found else 0,
    )


def clamp_score(accumulated: int) -> int:
    return max(0, min(accumulated, MAX_SCORE))


def classify_level(score: int) -> Level:
    if score >= 4:
        return "ok"
    if score >= 2:
        return "warn"
    return "error"


def run_checks(config: Optional[RuleConfig], raw_text: Any) -> Evaluation:
    """Apply the exercise rules to one submission and return the scoring decisions.

    Order is fixed: word count, required word (if configured), conditional
    (if configured), punctuation. Every enabled check runs regardless of the
    outcome of the previous ones.
    """
    if config is None:
        return Evaluation(status=EvaluationStatus.MISSING_CONFIG)

    normalized = normalize(raw_text)
    if not normalized:
        return Evaluation(status=EvaluationStatus.EMPTY_SUBMISSION)

    outcomes: List[CheckOutcome] = [check_word_count(normalized, config.min_words)]
    if config.required_words:
        outcomes.append(check_required_words(normalized, config.required_words))
    if config.require_conditional:
        outcomes.append(check_conditional(normalized))
    outcomes.append(check_punctuation(raw_text))

    score = clamp_score(sum(o.delta for o in outcomes))
    return Evaluation(
        status=EvaluationStatus.GRADED,
        outcomes=tuple(outcomes),
        score=score,
        level=classify_level(score),
    )


def evaluate(config: Optional[RuleConfig], raw_text: Any) -> GradeResult:
    evaluation = run_checks(config, raw_text)
    return GradeResult(
        score=evaluation.score,
        messages=render_messages(evaluation),
        level=evaluation.level,
    )
