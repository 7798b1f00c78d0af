from __future__ import annotations

import logging
from typing import Any, Dict, Mapping

from sentence_checker.models.response import BatchResult, GradeResult
from sentence_checker.models.rule import RuleConfig
from sentence_checker.services.evaluation.rule_engine import MAX_SCORE, evaluate

logger = logging.getLogger(__name__)


def compute_percent(total: int, max_total: int) -> int:
    """round(100 * total / max_total) with halves rounded up; 0 for an empty table."""
    if not max_total:
        return 0
    return (200 * total + max_total) // (2 * max_total)


def grade_batch(configs: Mapping[str, RuleConfig], submissions: Mapping[str, Any]) -> BatchResult:
    """Grade every configured exercise.

    Submitted ids without a config are ignored; configured ids without a
    submission are graded as empty text.
    """
    scores: Dict[str, GradeResult] = {}
    total = 0
    max_total = 0

    for exercise_id, config in configs.items():
        result = evaluate(config, submissions.get(exercise_id))
        scores[exercise_id] = result
        total += result.score
        max_total += MAX_SCORE
        logger.debug(f"{exercise_id}: score={result.score} level={result.level}")

    ignored = [k for k in submissions if k not in configs]
    if ignored:
        logger.debug(f"Ignoring unconfigured exercise ids: {ignored}")

    percent = compute_percent(total, max_total)
    logger.info(f"Graded {len(scores)} exercises: {total}/{max_total} ({percent}%)")
    return BatchResult(scores=scores, total=total, max_total=max_total, percent=percent)


class SentenceGrader:
    """Binds a rule table to the batch coordinator for the API and CLI layers."""

    def __init__(self, rules: Mapping[str, RuleConfig]):
        self.rules = rules

    @property
    def exercise_ids(self):
        return list(self.rules)

    def grade(self, submissions: Mapping[str, Any]) -> BatchResult:
        return grade_batch(self.rules, submissions)

    def grade_one(self, exercise_id: str, text: Any) -> GradeResult:
        return evaluate(self.rules.get(exercise_id), text)
