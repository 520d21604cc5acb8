"""
Outcome predictors for the third working year.

Both predictors are fixed linear formulas over the projected profile plus the
industry and size selection. They are not trained models.

Salary Formula (万円 / year):
    salary = round(industry_base + speed*180 + growth*120 + autonomy*40 + size_bonus)
    clamped to [300, 800]

Overtime Formula (hours / month):
    overtime = round(45 - worklife*20 + speed*10
                     [+10 for overtime-heavy industries] [+5 for the largest size])
    clamped to [10, 80]

Rounding is half-up (x.5 rounds towards +inf).
"""

import logging
import math
from types import MappingProxyType
from typing import Mapping, Optional, Union

import numpy as np

from ..reference import AXES, IndustryProfile, LARGEST_SIZE_INDEX, MIDDLE_SIZE_INDEX, get_industry

logger = logging.getLogger(__name__)

SALARY_MIN = 300
SALARY_MAX = 800
OVERTIME_MIN = 10
OVERTIME_MAX = 80

DEFAULT_SALARY_BASE = 360
INDUSTRY_SALARY_BASE: Mapping[str, int] = MappingProxyType({
    "コンサル": 420,
    "商社": 400,
    "SE": 380,
    "広告": 370,
})

SIZE_SALARY_BONUS: Mapping[int, int] = MappingProxyType({
    LARGEST_SIZE_INDEX: 30,
    MIDDLE_SIZE_INDEX: 10,
})

SALARY_COEFFICIENTS: Mapping[str, float] = MappingProxyType({
    "speed": 180.0,
    "growth": 120.0,
    "autonomy": 40.0,
})

OVERTIME_BASE = 45.0
OVERTIME_WORKLIFE_COEF = 20.0
OVERTIME_SPEED_COEF = 10.0
OVERTIME_HEAVY_INDUSTRIES = frozenset({"コンサル", "広告"})
OVERTIME_HEAVY_BONUS = 10.0
OVERTIME_LARGEST_SIZE_BONUS = 5.0


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties towards +inf."""
    return int(math.floor(value + 0.5))


def _industry_name(industry: Union[str, IndustryProfile, None]) -> Optional[str]:
    if industry is None or industry == "":
        return None
    try:
        return get_industry(industry).name
    except KeyError:
        # Unlisted industries fall back to the default coefficients
        return str(industry)


def _component(projected, axis: str) -> float:
    return float(np.asarray(projected, dtype=float)[AXES.index(axis)])


def predict_salary(
    projected,
    industry: Union[str, IndustryProfile, None],
    size_index: Optional[int]
) -> int:
    """
    Predict the third-year annual salary.

    Args:
        projected: 6-element projected profile in canonical axis order
        industry: Industry name, slug or profile (None uses the default base)
        size_index: Size bucket (0 = largest); None gives no size bonus

    Returns:
        Salary in 万円, an integer in [300, 800]
    """
    name = _industry_name(industry)
    industry_base = INDUSTRY_SALARY_BASE.get(name, DEFAULT_SALARY_BASE)
    size_bonus = SIZE_SALARY_BONUS.get(size_index, 0)

    # base + speed + growth + autonomy + size bonus, in that order
    raw = industry_base
    for axis, coef in SALARY_COEFFICIENTS.items():
        raw += coef * _component(projected, axis)
    raw += size_bonus
    salary = max(SALARY_MIN, min(SALARY_MAX, round_half_up(raw)))

    logger.debug(f"Salary for industry={name}, size={size_index}: raw={raw:.2f} -> {salary}")
    return salary


def predict_overtime(
    projected,
    industry: Union[str, IndustryProfile, None],
    size_index: Optional[int]
) -> int:
    """
    Predict average monthly overtime hours in the third year.

    Args:
        projected: 6-element projected profile in canonical axis order
        industry: Industry name, slug or profile
        size_index: Size bucket (0 = largest)

    Returns:
        Hours per month, an integer in [10, 80]
    """
    name = _industry_name(industry)

    raw = (
        OVERTIME_BASE
        - OVERTIME_WORKLIFE_COEF * _component(projected, "worklife")
        + OVERTIME_SPEED_COEF * _component(projected, "speed")
    )
    if name in OVERTIME_HEAVY_INDUSTRIES:
        raw += OVERTIME_HEAVY_BONUS
    if size_index == LARGEST_SIZE_INDEX:
        raw += OVERTIME_LARGEST_SIZE_BONUS

    overtime = max(OVERTIME_MIN, min(OVERTIME_MAX, round_half_up(raw)))

    logger.debug(f"Overtime for industry={name}, size={size_index}: raw={raw:.2f} -> {overtime}")
    return overtime
