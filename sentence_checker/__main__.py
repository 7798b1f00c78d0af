import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from sentence_checker.core.config import settings
from sentence_checker.core.exceptions import RuleConfigException
from sentence_checker.core.rules import load_rule_table
from sentence_checker.services.sentence_grader import SentenceGrader

logger = logging.getLogger(__name__)


def _parse_pairs(pairs: List[str]) -> Dict[str, str]:
    """Turn repeated ``ID=TEXT`` arguments into a submissions mapping."""
    out: Dict[str, str] = {}
    for pair in pairs:
        exercise_id, sep, text = pair.partition("=")
        if not sep or not exercise_id.strip():
            raise ValueError(f"Expected ID=TEXT, got: {pair!r}")
        out[exercise_id.strip()] = text
    return out


def _extract_sentences(payload: Any) -> Dict[str, Any]:
    # accept either the API request body or a bare id -> text mapping
    if isinstance(payload, dict) and isinstance(payload.get("sentences"), dict):
        return payload["sentences"]
    if isinstance(payload, dict) and "sentences" not in payload:
        return payload
    raise ValueError("No sentences provided")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Grade sentence submissions against the exercise rules")
    parser.add_argument("--rules", help="JSON rule file (defaults to SENTENCE_RULES_FILE or the built-in table)")
    group = parser.add_mutually_exclusive_group(required=False)
    group.add_argument("--sentence", action="append", metavar="ID=TEXT", help="Submission for one exercise; repeatable")
    group.add_argument("--file", help="Path to a JSON file with the submissions")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )

    try:
        rules = load_rule_table(args.rules or settings.SENTENCE_RULES_FILE or None)
    except RuleConfigException as e:
        print(f"Failed to load rules: {e.message}", file=sys.stderr)
        return 2

    try:
        if args.sentence:
            submissions = _parse_pairs(args.sentence)
        elif args.file:
            with open(args.file, "r", encoding="utf-8") as f:
                submissions = _extract_sentences(json.load(f))
        else:
            # stdin 에서 JSON 읽기
            submissions = _extract_sentences(json.loads(sys.stdin.read() or "null"))
    except (OSError, ValueError) as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2

    result = SentenceGrader(rules).grade(submissions)
    print(json.dumps(result.model_dump(by_alias=True, exclude_none=True), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
