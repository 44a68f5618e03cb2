"""
Rubric Loader
Reads scoring rubrics from Excel workbooks or JSON files.
"""

import json
import logging
import math
import re
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from errors import EmptyRubricError, InvalidRubricError
from models import EvaluationCriterion, criteria_from_dicts

logger = logging.getLogger(__name__)

# Accepted header spellings for each criterion field
COLUMN_ALIASES = {
    "id": ["id", "criteria id", "criterion id"],
    "name": ["name", "criteria", "criterion", "title"],
    "description": ["description", "details"],
    "max_score": ["max score", "max_score", "maxscore", "points", "max points"],
    "weight": ["weight"],
    "keywords": ["keywords", "keyword hints"],
    "required_keywords": ["required keywords", "required_keywords", "requiredkeywords"],
    "category": ["category"]
}


def load_rubric(path) -> List[EvaluationCriterion]:
    """
    Load and validate a rubric file.

    Args:
        path: .xlsx workbook (first sheet, header row) or .json list of criteria

    Returns:
        Criteria in file order
    """
    path = Path(path)
    if not path.exists():
        raise InvalidRubricError(f"Rubric file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".xlsx":
        rows = _read_workbook(path)
    elif suffix == ".json":
        rows = _read_json(path)
    else:
        raise InvalidRubricError(f"Unsupported rubric format: {suffix}. Use .xlsx or .json")

    criteria = validate_rubric(criteria_from_dicts([_fill_defaults(row) for row in rows]))
    logger.info(f"Loaded rubric from {path.name}: {len(criteria)} criteria")
    return criteria


def validate_rubric(criteria: Sequence[EvaluationCriterion]) -> List[EvaluationCriterion]:
    """Reject empty rubrics, non-positive point values and duplicate ids."""
    if not criteria:
        raise EmptyRubricError("Rubric has no criteria")

    seen = set()
    for criterion in criteria:
        if not math.isfinite(criterion.max_score) or criterion.max_score <= 0:
            raise InvalidRubricError(f"Criterion '{criterion.id}' must have a max score above zero")
        if criterion.id in seen:
            raise InvalidRubricError(f"Duplicate criterion id: {criterion.id}")
        seen.add(criterion.id)
    return list(criteria)


def slugify(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "_", name.lower()).strip("_")


def _read_workbook(path: Path) -> List[Dict]:
    import openpyxl

    workbook = openpyxl.load_workbook(path, read_only=True, data_only=True)
    try:
        sheet = workbook.worksheets[0]
        rows = list(sheet.iter_rows(values_only=True))
    finally:
        workbook.close()

    if not rows:
        raise EmptyRubricError(f"Rubric workbook is empty: {path.name}")

    columns = _map_columns(rows[0])
    if "max_score" not in columns or ("name" not in columns and "id" not in columns):
        raise InvalidRubricError("Rubric sheet needs a 'max score' column and a 'name' or 'id' column")

    criteria = []
    for row in rows[1:]:
        if row is None or all(cell is None or str(cell).strip() == "" for cell in row):
            continue
        criteria.append({
            field: _cell(row, index)
            for field, index in columns.items()
        })
    return criteria


def _read_json(path: Path) -> List[Dict]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise InvalidRubricError(f"Invalid rubric JSON in {path.name}: {e}") from e

    if isinstance(data, dict):
        data = data.get("criteria", [])
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise InvalidRubricError("Rubric JSON must be a list of criteria objects")
    return data


def _map_columns(header: Sequence) -> Dict[str, int]:
    columns = {}
    for index, cell in enumerate(header):
        if cell is None:
            continue
        label = str(cell).strip().lower()
        for field, aliases in COLUMN_ALIASES.items():
            if label in aliases and field not in columns:
                columns[field] = index
    return columns


def _cell(row: Sequence, index: int) -> Optional[object]:
    if index >= len(row):
        return None
    value = row[index]
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def _fill_defaults(row: Dict) -> Dict:
    row = dict(row)
    if not row.get("id") and row.get("name"):
        row["id"] = slugify(str(row["name"]))
    return row
