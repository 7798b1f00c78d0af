# sentence_checker/core/dependencies.py
import logging
from functools import lru_cache

from sentence_checker.core.config import settings
from sentence_checker.core.rules import RuleTable, load_rule_table
from sentence_checker.services.sentence_grader import SentenceGrader

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_rule_table() -> RuleTable:
    """Process-wide rule table, built once on first use."""
    table = load_rule_table(settings.SENTENCE_RULES_FILE or None)
    logger.info(f"Rule table ready: {sorted(table)}")
    return table


@lru_cache(maxsize=1)
def get_sentence_grader() -> SentenceGrader:
    """FastAPI dependency; tests override it with their own grader."""
    return SentenceGrader(get_rule_table())
