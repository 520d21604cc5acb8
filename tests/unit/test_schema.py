"""Unit tests for session schema."""

import pytest

from careersim.inference.schema import GoalComparison, UserState
from careersim.reference import AXES


@pytest.mark.unit
def test_user_state_defaults():
    """Test default ratings, goals and empty selection."""
    state = UserState()

    assert state.star_ratings == {axis: 3 for axis in AXES}
    assert state.answers == {}
    assert state.salary_goal == 500
    assert state.overtime_goal == 20
    assert not state.has_selection()


@pytest.mark.unit
def test_partial_ratings_are_filled():
    """Test that missing axes are filled with 3 stars."""
    state = UserState(star_ratings={"speed": 5})

    assert state.star_ratings["speed"] == 5
    assert state.star_ratings["growth"] == 3


@pytest.mark.unit
def test_industry_slug_is_normalized():
    """Test that slugs are stored as display names."""
    state = UserState(industry="consulting", size_index=1)

    assert state.industry == "コンサル"
    assert state.has_selection()


@pytest.mark.unit
def test_empty_strings_mean_unselected():
    """Test that blank industry and role count as unselected."""
    state = UserState(industry="", role="", size_index=0)

    assert state.industry is None
    assert state.role is None
    assert not state.has_selection()


@pytest.mark.unit
@pytest.mark.parametrize("kwargs", [
    {"star_ratings": {"growth": 7}},
    {"answers": {"y1q1": 5}},
    {"answers": {"zzz": 0}},
    {"salary_goal": 250},
    {"overtime_goal": 81},
    {"salary_goal": "high"},
    {"overtime_goal": None},
    {"overtime_goal": True},
    {"industry": "宇宙"},
    {"size_index": 3},
    {"role": "社長"},
])
def test_invalid_state_rejected(kwargs):
    """Test that invalid values raise ValueError."""
    with pytest.raises(ValueError):
        UserState(**kwargs)


@pytest.mark.unit
def test_year_completion():
    """Test per-year completion tracking."""
    state = UserState()
    for n in range(1, 4):
        state = state.with_answer(f"y1q{n}", 0)
    assert not state.is_year_complete(1)

    state = state.with_answer("y1q4", 1)
    assert state.is_year_complete(1)
    assert not state.is_year_complete(2)
    assert state.answered_count() == 4


@pytest.mark.unit
def test_with_answer_replaces_and_copies():
    """Test that updates return new states and keep one answer per question."""
    original = UserState()
    updated = original.with_answer("y2q2", 0).with_answer("y2q2", 2)

    assert original.answers == {}
    assert updated.answers == {"y2q2": 2}

    rated = updated.with_rating("growth", 5)
    assert rated.star_ratings["growth"] == 5
    assert updated.star_ratings["growth"] == 3


@pytest.mark.unit
def test_dict_round_trip():
    """Test to_dict/from_dict and tolerance of unknown keys."""
    state = UserState(
        star_ratings={"growth": 4},
        answers={"y1q1": 2},
        salary_goal=600,
        overtime_goal=10,
        industry="SE",
        size_index=0,
        role="SE",
    )
    data = state.to_dict()
    data["comment"] = "ignored"

    assert UserState.from_dict(data) == state


@pytest.mark.unit
def test_goal_comparison():
    """Test gap signs and goal flags."""
    goals = GoalComparison(salary_goal=500, predicted_salary=560, overtime_goal=20, predicted_overtime=35)

    assert goals.salary_gap == 60
    assert goals.meets_salary_goal
    assert goals.overtime_gap == 15
    assert not goals.meets_overtime_goal
    assert goals.to_dict()["salary_gap"] == 60


@pytest.mark.unit
def test_non_numeric_goal_raises_value_error():
    """Test a goal of the wrong type fails validation rather than comparison."""
    with pytest.raises(ValueError, match="salary_goal must be a number"):
        UserState(salary_goal="high")
    with pytest.raises(ValueError, match="overtime_goal must be a number"):
        UserState.from_dict({"overtime_goal": [20]})


@pytest.mark.unit
def test_goal_comparison_from_state():
    """Test goals are taken from the session."""
    state = UserState(salary_goal=650, overtime_goal=10)
    goals = GoalComparison.from_state(state, 600, 30)

    assert goals == GoalComparison(salary_goal=650, predicted_salary=600,
                                   overtime_goal=10, predicted_overtime=30)
    assert goals.salary_gap == -50
    assert goals.overtime_gap == 20
