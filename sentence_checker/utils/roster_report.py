"""
Class roster batch grading.

A roster is a spreadsheet with one row per student and one column per exercise
id (plus an optional ``student`` column). Every row goes through the same batch
coordinator as the API, and the results are written to an Excel workbook.
"""
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

import pandas as pd
from openpyxl.styles import Alignment, Font, PatternFill

from sentence_checker.models.rule import RuleConfig
from sentence_checker.services.sentence_grader import grade_batch

logger = logging.getLogger(__name__)

STUDENT_COLUMN = "student"
LEVELS = ("ok", "warn", "error")
MAX_COLUMN_WIDTH = 60


def load_roster(path: Union[str, Path]) -> pd.DataFrame:
    """Read a CSV or Excel roster. Every cell is read as text."""
    path = Path(path)
    if path.suffix.lower() in (".xlsx", ".xls"):
        df = pd.read_excel(path, dtype=str)
    else:
        df = pd.read_csv(path, dtype=str)
    df.columns = [str(c).strip() for c in df.columns]
    logger.info(f"Loaded {len(df)} rows from {path}")
    logger.info(f"Columns: {list(df.columns)}")
    return df


def _cell(value: Any) -> Any:
    return None if pd.isna(value) else value


def grade_roster(df: pd.DataFrame, rules: Mapping[str, RuleConfig]) -> List[Dict[str, Any]]:
    """Grade every roster row; returns one flat record per student."""
    missing = [ex for ex in rules if ex not in df.columns]
    if missing:
        logger.warning(f"Roster has no column for exercises {missing}; they grade as empty")

    records: List[Dict[str, Any]] = []
    for idx, row in df.iterrows():
        submissions = {ex: _cell(row[ex]) for ex in rules if ex in df.columns}
        result = grade_batch(rules, submissions)

        student = _cell(row[STUDENT_COLUMN]) if STUDENT_COLUMN in df.columns else None
        record: Dict[str, Any] = {STUDENT_COLUMN: student or f"row_{idx + 1}"}
        for ex, grade in result.scores.items():
            record[f"{ex}_score"] = grade.score
            record[f"{ex}_level"] = grade.level or ""
            record[f"{ex}_feedback"] = "\n".join(grade.messages)
        record["total"] = result.total
        record["maxTotal"] = result.max_total
        record["percent"] = result.percent
        records.append(record)

    logger.info(f"Graded {len(records)} students")
    return records


def summarize(records: List[Dict[str, Any]], rules: Mapping[str, RuleConfig]) -> List[Dict[str, Any]]:
    """Per-exercise average score and level distribution."""
    summary = []
    for ex in rules:
        scores = [r[f"{ex}_score"] for r in records]
        levels = [r[f"{ex}_level"] for r in records]
        row: Dict[str, Any] = {
            "exercise": ex,
            "students": len(records),
            "avg_score": round(sum(scores) / len(scores), 2) if scores else 0.0,
        }
        for level in LEVELS:
            row[f"{level}_count"] = levels.count(level)
        row["not_graded"] = levels.count("")
        summary.append(row)
    return summary


def _style_sheet(worksheet, header_color: str) -> None:
    header_font = Font(bold=True, color="FFFFFF")
    header_fill = PatternFill(start_color=header_color, end_color=header_color, fill_type="solid")

    for cell in worksheet[1]:
        cell.font = header_font
        cell.fill = header_fill
        cell.alignment = Alignment(horizontal="center")

    # 열 너비 자동 조정
    for column in worksheet.columns:
        cells = list(column)
        max_length = max((len(str(c.value)) for c in cells if c.value is not None), default=0)
        worksheet.column_dimensions[cells[0].column_letter].width = min(max_length + 2, MAX_COLUMN_WIDTH)


def save_report(
    records: List[Dict[str, Any]],
    rules: Mapping[str, RuleConfig],
    output_path: Union[str, Path],
) -> Path:
    """Write ``Results`` and ``Summary`` sheets to an Excel workbook."""
    output_path = Path(output_path)
    with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
        pd.DataFrame(records).to_excel(writer, sheet_name="Results", index=False)
        _style_sheet(writer.sheets["Results"], "366092")
        for row in writer.sheets["Results"].iter_rows(min_row=2):
            for cell in row:
                cell.alignment = Alignment(wrap_text=True, vertical="top")

        pd.DataFrame(summarize(records, rules)).to_excel(writer, sheet_name="Summary", index=False)
        _style_sheet(writer.sheets["Summary"], "C55A5A")

    logger.info(f"Excel report saved: {output_path}")
    return output_path
