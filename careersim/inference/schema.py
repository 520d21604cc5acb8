"""
Input and output schema for a simulation session.

Defines the user state collected by the wizard and the result returned to it.

Wizard Composition:
- Selection: industry, company size, job role
- Goals: third-year salary goal, monthly overtime goal
- Star ratings (1-5) for each of the 6 axes
- Scenario answers: 12 questions (y1q1-y3q4), one option each
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Dict, Any

from ..reference import AXES, QUESTION_BANK, ROLES, SIZE_PROFILES, get_industry, questions_for_year
from ..scoring.combiner import ProjectedProfile
from ..scoring.vector_builder import DEFAULT_STARS, validate_star_ratings

SALARY_GOAL_MIN = 300
SALARY_GOAL_MAX = 800
DEFAULT_SALARY_GOAL = 500
OVERTIME_GOAL_MIN = 0
OVERTIME_GOAL_MAX = 80
DEFAULT_OVERTIME_GOAL = 20


def _default_ratings() -> Dict[str, int]:
    return {axis: DEFAULT_STARS for axis in AXES}


@dataclass
class UserState:
    """
    Everything the user has entered so far.

    Attributes:
        star_ratings: Axis -> stars (1-5); unset axes default to 3
        answers: Question id -> chosen option index (at most one per question)
        salary_goal: Salary goal in 万円 (300-800)
        overtime_goal: Monthly overtime goal in hours (0-80)
        industry: Selected industry name (slugs are accepted and normalized)
        size_index: Selected size bucket (0 = largest)
        role: Selected job role
    """
    star_ratings: Dict[str, int] = field(default_factory=_default_ratings)
    answers: Dict[str, int] = field(default_factory=dict)
    salary_goal: int = DEFAULT_SALARY_GOAL
    overtime_goal: int = DEFAULT_OVERTIME_GOAL
    industry: Optional[str] = None
    size_index: Optional[int] = None
    role: Optional[str] = None

    def __post_init__(self):
        """Validate ranges and normalize the industry name."""
        validate_star_ratings(self.star_ratings)
        ratings = _default_ratings()
        ratings.update(self.star_ratings or {})
        self.star_ratings = ratings

        self.answers = dict(self.answers or {})
        for question_id, option_index in self.answers.items():
            if question_id not in QUESTION_BANK:
                raise ValueError(f"Unknown question id: {question_id!r}")
            QUESTION_BANK[question_id].option(option_index)

        for name in ("salary_goal", "overtime_goal"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a number, got {value!r}")

        if not SALARY_GOAL_MIN <= self.salary_goal <= SALARY_GOAL_MAX:
            raise ValueError(
                f"salary_goal must be between {SALARY_GOAL_MIN} and {SALARY_GOAL_MAX}, "
                f"got {self.salary_goal}"
            )
        if not OVERTIME_GOAL_MIN <= self.overtime_goal <= OVERTIME_GOAL_MAX:
            raise ValueError(
                f"overtime_goal must be between {OVERTIME_GOAL_MIN} and {OVERTIME_GOAL_MAX}, "
                f"got {self.overtime_goal}"
            )

        if self.industry == "":
            self.industry = None
        if self.industry is not None:
            try:
                self.industry = get_industry(self.industry).name
            except KeyError as e:
                raise ValueError(str(e.args[0])) from None

        if self.size_index is not None:
            if isinstance(self.size_index, bool) or not isinstance(self.size_index, int) \
                    or not 0 <= self.size_index < len(SIZE_PROFILES):
                raise ValueError(
                    f"size_index must be in [0, {len(SIZE_PROFILES) - 1}], got {self.size_index!r}"
                )

        if self.role == "":
            self.role = None
        if self.role is not None and self.role not in ROLES:
            raise ValueError(f"Unknown role: {self.role!r}")

    def has_selection(self) -> bool:
        """True when industry and size are both chosen (a projection exists)."""
        return self.industry is not None and self.size_index is not None

    def is_year_complete(self, year: int) -> bool:
        """True when every question of the given year has been answered."""
        return all(q.id in self.answers for q in questions_for_year(year))

    def answered_count(self) -> int:
        return len(self.answers)

    def with_answer(self, question_id: str, option_index: int) -> "UserState":
        """Return a copy with one answer set (replacing any earlier choice)."""
        answers = dict(self.answers)
        answers[question_id] = option_index
        return replace(self, answers=answers, star_ratings=dict(self.star_ratings))

    def with_rating(self, axis: str, stars: int) -> "UserState":
        """Return a copy with one star rating changed."""
        ratings = dict(self.star_ratings)
        ratings[axis] = stars
        return replace(self, star_ratings=ratings, answers=dict(self.answers))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "star_ratings": dict(self.star_ratings),
            "answers": dict(self.answers),
            "salary_goal": self.salary_goal,
            "overtime_goal": self.overtime_goal,
            "industry": self.industry,
            "size_index": self.size_index,
            "role": self.role,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserState":
        """Create from dictionary; missing keys take their defaults."""
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**known)


@dataclass
class GoalComparison:
    """
    Predicted outcomes next to the user's goals.

    Gaps are predicted minus goal: a positive salary gap beats the goal,
    a positive overtime gap exceeds the goal.
    """
    salary_goal: int
    predicted_salary: int
    overtime_goal: int
    predicted_overtime: int

    @classmethod
    def from_state(cls, state: "UserState", predicted_salary: int, predicted_overtime: int) -> "GoalComparison":
        """Put predictions next to the goals stored in the session."""
        return cls(
            salary_goal=state.salary_goal,
            predicted_salary=predicted_salary,
            overtime_goal=state.overtime_goal,
            predicted_overtime=predicted_overtime,
        )

    @property
    def salary_gap(self) -> int:
        return self.predicted_salary - self.salary_goal

    @property
    def overtime_gap(self) -> int:
        return self.predicted_overtime - self.overtime_goal

    @property
    def meets_salary_goal(self) -> bool:
        return self.salary_gap >= 0

    @property
    def meets_overtime_goal(self) -> bool:
        return self.overtime_gap <= 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "salary_goal": self.salary_goal,
            "predicted_salary": self.predicted_salary,
            "salary_gap": self.salary_gap,
            "meets_salary_goal": self.meets_salary_goal,
            "overtime_goal": self.overtime_goal,
            "predicted_overtime": self.predicted_overtime,
            "overtime_gap": self.overtime_gap,
            "meets_overtime_goal": self.meets_overtime_goal,
        }


@dataclass
class SimulationResult:
    """
    Result of simulating one session.

    Attributes:
        industry: Industry name
        size_index: Size bucket index
        size_label: Size bucket display label
        role: Job role (may be None)
        preference: The preference vector (axis -> value)
        profile: Projected, average and target vectors
        predicted_salary: Salary in 万円 [300, 800]
        predicted_overtime: Hours per month [10, 80]
        goals: Comparison against the user's goals
    """
    industry: str
    size_index: int
    size_label: str
    role: Optional[str]
    preference: Dict[str, float]
    profile: ProjectedProfile
    predicted_salary: int
    predicted_overtime: int
    goals: GoalComparison

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "industry": self.industry,
            "size_index": self.size_index,
            "size_label": self.size_label,
            "role": self.role,
            "preference": dict(self.preference),
            "profile": self.profile.to_dict(),
            "chart": self.profile.to_records(),
            "predicted_salary": self.predicted_salary,
            "predicted_overtime": self.predicted_overtime,
            "goals": self.goals.to_dict(),
        }
