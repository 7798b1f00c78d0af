#!/usr/bin/env python3
"""
Roster batch grading: spreadsheet of student sentences -> Excel report
"""

import argparse
import logging
from datetime import datetime

from sentence_checker.core.config import settings
from sentence_checker.core.exceptions import RuleConfigException
from sentence_checker.core.rules import load_rule_table
from sentence_checker.utils.roster_report import grade_roster, load_roster, save_report

logging.basicConfig(level=settings.LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def run_batch(input_path: str, output_path: str = None, rules_path: str = None):
    """Grade a roster file and write the report; returns the report path or None on failure."""
    try:
        rules = load_rule_table(rules_path or settings.SENTENCE_RULES_FILE or None)
        df = load_roster(input_path)
        records = grade_roster(df, rules)

        if not output_path:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            output_path = f"sentence_check_results_{timestamp}.xlsx"

        logger.info(f"Saving results to {output_path}")
        return save_report(records, rules, output_path)

    except RuleConfigException as e:
        logger.error(f"Invalid rule configuration: {e.message} {e.details}")
        return None
    except (OSError, ValueError) as e:
        logger.error(f"Batch grading failed: {e}", exc_info=True)
        return None


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Grade a class roster of sentence submissions")
    parser.add_argument("input", help="CSV or Excel roster (one column per exercise id)")
    parser.add_argument("-o", "--output", help="Output .xlsx path (default: timestamped file)")
    parser.add_argument("--rules", help="JSON rule file overriding the built-in table")
    args = parser.parse_args(argv)

    result_file = run_batch(args.input, args.output, args.rules)
    if result_file:
        logger.info(f"Batch processing completed! Output: {result_file}")
        return 0
    logger.error("Batch processing failed!")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
