from __future__ import annotations

from typing import Callable, Dict, List, Tuple

from sentence_checker.models.rule import (
    CheckName,
    CheckOutcome,
    Evaluation,
    EvaluationStatus,
    Tier,
)

GLYPH_SUCCESS = "✅"
GLYPH_PARTIAL = "⚠️"
GLYPH_FAILURE = "❌"
GLYPH_PROMPT = "❗"

MISSING_CONFIG_MESSAGE = "No configuration found for this sentence."
EMPTY_SUBMISSION_MESSAGE = f"{GLYPH_PROMPT} Please write a sentence."

Template = Callable[[CheckOutcome], str]

# (check, tier) -> message; scoring never reads this table
MESSAGES: Dict[Tuple[CheckName, Tier], Template] = {
    (CheckName.WORD_COUNT, Tier.FULL):
        lambda o: f"{GLYPH_SUCCESS} Good length ({o.word_count} words).",
    (CheckName.WORD_COUNT, Tier.PARTIAL):
        lambda o: f"{GLYPH_PARTIAL} A bit short ({o.word_count} words). Try to add more detail.",
    (CheckName.WORD_COUNT, Tier.NONE):
        lambda o: f"{GLYPH_FAILURE} Too short ({o.word_count} words). Try to write a longer sentence.",
    (CheckName.REQUIRED_WORD, Tier.FULL):
        lambda o: f"{GLYPH_SUCCESS} You used the target word/structure.",
    (CheckName.REQUIRED_WORD, Tier.NONE):
        lambda o: f"{GLYPH_FAILURE} You didn’t use the target word. Try to include: " + ", ".join(o.alternatives),
    (CheckName.CONDITIONAL, Tier.FULL):
        lambda o: f"{GLYPH_SUCCESS} It looks like a second conditional sentence.",
    (CheckName.CONDITIONAL, Tier.NONE):
        lambda o: f"{GLYPH_FAILURE} Use 'if' + past and 'would' + verb for the second conditional.",
    (CheckName.PUNCTUATION, Tier.FULL):
        lambda o: f"{GLYPH_SUCCESS} Good punctuation at the end.",
    (CheckName.PUNCTUATION, Tier.NONE):
        lambda o: f"{GLYPH_PARTIAL} Add a full stop or question mark at the end.",
}


def render_message(outcome: CheckOutcome) -> str:
    return MESSAGES[(outcome.check, outcome.tier)](outcome)


def render_messages(evaluation: Evaluation) -> List[str]:
    """Turn scoring decisions into the feedback lines shown to the student."""
    if evaluation.status is EvaluationStatus.MISSING_CONFIG:
        return [MISSING_CONFIG_MESSAGE]
    if evaluation.status is EvaluationStatus.EMPTY_SUBMISSION:
        return [EMPTY_SUBMISSION_MESSAGE]
    return [render_message(o) for o in evaluation.outcomes]
