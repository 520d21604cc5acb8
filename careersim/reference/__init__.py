"""Static reference data: axes, industry/size profiles and the question bank."""

from .axes import AXES, AXIS_LABELS, N_AXES, axis_index
from .profiles import (
    IndustryProfile,
    SizeProfile,
    INDUSTRY_PROFILES,
    INDUSTRIES,
    SIZE_PROFILES,
    LARGEST_SIZE_INDEX,
    MIDDLE_SIZE_INDEX,
    SMALLEST_SIZE_INDEX,
    ROLES,
    get_industry,
    get_size,
    profile_issues,
)
from .questions import (
    Option,
    Question,
    QUESTIONS,
    QUESTION_BANK,
    YEARS,
    get_question,
    questions_for_year,
    question_bank_issues,
)


def validate_reference_data() -> list:
    """Return every consistency problem found in the reference tables."""
    issues = [f"{name}: {problem}" for name, problem in profile_issues().items()]
    issues.extend(question_bank_issues())
    return issues


__all__ = [
    "AXES",
    "AXIS_LABELS",
    "N_AXES",
    "axis_index",
    "IndustryProfile",
    "SizeProfile",
    "INDUSTRY_PROFILES",
    "INDUSTRIES",
    "SIZE_PROFILES",
    "LARGEST_SIZE_INDEX",
    "MIDDLE_SIZE_INDEX",
    "SMALLEST_SIZE_INDEX",
    "ROLES",
    "get_industry",
    "get_size",
    "Option",
    "Question",
    "QUESTIONS",
    "QUESTION_BANK",
    "YEARS",
    "get_question",
    "questions_for_year",
    "validate_reference_data",
]
