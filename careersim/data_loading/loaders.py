"""
Session loading functions for the career simulator.

This module reads saved wizard sessions from YAML/JSON files and batches of
respondents from CSV. No scoring is done here - that's handled by the
inference module.
"""

import logging
from pathlib import Path
from typing import Dict, List, Any, Optional

import pandas as pd
import yaml

from ..inference.schema import UserState
from ..reference import AXES, QUESTIONS

logger = logging.getLogger(__name__)

RATING_PREFIX = "rating_"
REQUIRED_COLUMNS = ["industry", "size_index"]
GOAL_COLUMNS = ["salary_goal", "overtime_goal"]


def load_session(filepath: str) -> UserState:
    """
    Load one session from a YAML or JSON file.

    The file holds the UserState fields:
    - star_ratings: mapping axis -> 1-5
    - answers: mapping question id -> option index
    - salary_goal, overtime_goal, industry, size_index, role

    Args:
        filepath: Path to the session file

    Returns:
        UserState

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty or contains invalid values
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Session file not found: {filepath}")

    logger.info(f"Loading session from {filepath}")
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        raise ValueError(f"Session file is empty: {filepath}")
    if not isinstance(data, dict):
        raise ValueError(f"Session file must contain a mapping: {filepath}")

    return UserState.from_dict(data)


def _cell(value: Any) -> Optional[Any]:
    """Return None for blank CSV cells."""
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    if pd.isna(value):
        return None
    return value


def _as_int(value: Any, column: str) -> int:
    """Convert a CSV cell to int, rejecting fractional values."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{column} must be an integer, got {value!r}")
    if not number.is_integer():
        raise ValueError(f"{column} must be an integer, got {value!r}")
    return int(number)


def _row_to_state(row: Dict[str, Any]) -> UserState:
    star_ratings = {}
    for axis in AXES:
        column = f"{RATING_PREFIX}{axis}"
        stars = _cell(row.get(column))
        if stars is not None:
            star_ratings[axis] = _as_int(stars, column)

    answers = {}
    for question in QUESTIONS:
        option_index = _cell(row.get(question.id))
        if option_index is not None:
            answers[question.id] = _as_int(option_index, question.id)

    kwargs = {"star_ratings": star_ratings, "answers": answers}
    for col in GOAL_COLUMNS:
        value = _cell(row.get(col))
        if value is not None:
            kwargs[col] = _as_int(value, col)

    industry = _cell(row.get("industry"))
    kwargs["industry"] = str(industry) if industry is not None else None
    size_index = _cell(row.get("size_index"))
    kwargs["size_index"] = _as_int(size_index, "size_index") if size_index is not None else None
    role = _cell(row.get("role"))
    kwargs["role"] = str(role) if role is not None else None

    return UserState(**kwargs)


def load_sessions_csv(filepath: str, delimiter: str = ",") -> List[UserState]:
    """
    Load a batch of sessions from CSV, one respondent per row.

    Expected columns (all optional except industry and size_index):
    - industry, size_index, role
    - salary_goal, overtime_goal
    - rating_<axis> for each axis (1-5)
    - y1q1 ... y3q4 (option index; blank = unanswered)

    Args:
        filepath: Path to the CSV file
        delimiter: Field delimiter

    Returns:
        List of UserState in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If required columns are missing, the file has no rows,
            or a row has invalid values
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Sessions file not found: {filepath}")

    logger.info(f"Loading sessions from {filepath}")
    df = pd.read_csv(path, sep=delimiter)

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"Sessions file is missing required columns: {missing}")
    if df.empty:
        raise ValueError(f"Sessions file is empty: {filepath}")

    states = []
    for i, row in enumerate(df.to_dict(orient="records")):
        try:
            states.append(_row_to_state(row))
        except ValueError as e:
            raise ValueError(f"Invalid session in row {i + 1}: {e}") from e

    logger.info(f"Loaded {len(states)} sessions")
    return states
