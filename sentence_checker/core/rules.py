"""Exercise rule tables.

The reference table ships with the service. A deployment can replace it with a
JSON file (see ``SENTENCE_RULES_FILE``) shaped like::

    {"s1": {"minWords": 8, "requiredWords": ["because"], "requireConditional": false}}
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import ValidationError

from sentence_checker.core.exceptions import RuleConfigException
from sentence_checker.models.rule import RuleConfig

logger = logging.getLogger(__name__)

RuleTable = Mapping[str, RuleConfig]

REFERENCE_RULES: RuleTable = MappingProxyType({
    "s1": RuleConfig(min_words=8, required_words=("because",), require_conditional=False),
    "s2": RuleConfig(min_words=8, required_words=("although",), require_conditional=False),
    "s3": RuleConfig(min_words=10, required_words=(), require_conditional=True),
})


def parse_rule_table(raw: Any, source: str = "<memory>") -> RuleTable:
    """Validate a mapping of exercise id -> rule dict into a read-only table."""
    if not isinstance(raw, dict):
        raise RuleConfigException(
            "Rule table must be a JSON object keyed by exercise id",
            details={"source": source, "type": type(raw).__name__},
        )
    table = {}
    for exercise_id, cfg in raw.items():
        try:
            table[str(exercise_id)] = RuleConfig.model_validate(cfg)
        except ValidationError as e:
            raise RuleConfigException(
                f"Invalid rule config for exercise '{exercise_id}'",
                details={"source": source, "errors": e.errors(include_url=False)},
            ) from e
    return MappingProxyType(table)


def load_rule_table(path: str | Path | None = None) -> RuleTable:
    """Return the rule table from ``path``, or the reference table when no path is given."""
    if not path:
        return REFERENCE_RULES

    rules_path = Path(path)
    try:
        raw = json.loads(rules_path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise RuleConfigException(f"Rule file not found: {rules_path}") from e
    except (OSError, ValueError) as e:
        raise RuleConfigException(f"Failed to read rule file {rules_path}: {e}") from e

    table = parse_rule_table(raw, source=str(rules_path))
    logger.info(f"Loaded {len(table)} exercise rules from {rules_path}")
    return table
