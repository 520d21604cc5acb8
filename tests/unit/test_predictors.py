"""Unit tests for salary and overtime predictors."""

import itertools

import numpy as np
import pytest

from careersim.reference import AXES, INDUSTRIES, get_industry
from careersim.scoring.predictors import predict_overtime, predict_salary, round_half_up


def _vec(**levels):
    vec = np.full(len(AXES), 0.5)
    for axis, value in levels.items():
        vec[AXES.index(axis)] = value
    return vec


@pytest.mark.unit
def test_salary_se_largest_saturated_profile():
    """Test SE / largest size with a fully saturated profile."""
    assert predict_salary(np.ones(6), "SE", 0) == 380 + 180 + 120 + 40 + 30


@pytest.mark.unit
def test_overtime_se_largest_saturated_profile():
    """Test SE / largest size: 45 - 20 + 10 + 5."""
    assert predict_overtime(np.ones(6), "SE", 0) == 40


@pytest.mark.unit
def test_salary_closed_form_with_rounding():
    """Test a non-integer raw salary is rounded."""
    vec = np.array([0.75, 0.81, 0.63, 1.0, 0.85, 0.57])
    # 360 + 0.57*180 + 0.75*120 + 0.63*40 + 10 = 587.8
    assert predict_salary(vec, "メーカー", 1) == 588


@pytest.mark.unit
def test_overtime_closed_form_with_rounding():
    """Test a non-integer raw overtime is rounded."""
    vec = np.array([0.75, 0.81, 0.63, 1.0, 0.85, 0.57])
    # 45 - 0.85*20 + 0.57*10 = 33.7
    assert predict_overtime(vec, "メーカー", 1) == 34


@pytest.mark.unit
@pytest.mark.parametrize("industry,expected_base", [
    ("コンサル", 420),
    ("商社", 400),
    ("SE", 380),
    ("広告", 370),
    ("メーカー", 360),
    ("SIer", 360),
    ("ベンチャー", 360),
])
def test_salary_industry_base(industry, expected_base):
    """Test the per-industry salary constant with a zero profile and no size bonus."""
    assert predict_salary(np.zeros(6), industry, 2) == expected_base


@pytest.mark.unit
@pytest.mark.parametrize("size_index,bonus", [(0, 30), (1, 10), (2, 0), (None, 0)])
def test_salary_size_bonus(size_index, bonus):
    """Test the size bonus for each bucket."""
    assert predict_salary(np.zeros(6), "メーカー", size_index) == 360 + bonus


@pytest.mark.unit
def test_industry_accepts_slug_and_profile():
    """Test that slugs and profile objects resolve to the same constants."""
    vec = _vec()
    by_name = predict_salary(vec, "コンサル", 1)

    assert predict_salary(vec, "consulting", 1) == by_name
    assert predict_salary(vec, get_industry("コンサル"), 1) == by_name
    assert predict_overtime(vec, "advertising", 1) == predict_overtime(vec, "広告", 1)


@pytest.mark.unit
def test_unselected_industry_uses_default_base():
    """Test that a missing industry falls back to the default constants."""
    assert predict_salary(np.zeros(6), None, None) == 360
    assert predict_salary(np.zeros(6), "", None) == 360
    assert predict_overtime(np.zeros(6), None, None) == 45


@pytest.mark.unit
@pytest.mark.parametrize("industry,heavy", [("コンサル", True), ("広告", True), ("SE", False), ("商社", False)])
def test_overtime_heavy_industries(industry, heavy):
    """Test the +10 hours for consulting and advertising."""
    expected = 45 + (10 if heavy else 0)
    assert predict_overtime(np.zeros(6), industry, 2) == expected


@pytest.mark.unit
def test_overtime_largest_size_bonus():
    """Test the +5 hours for the largest size bucket only."""
    assert predict_overtime(np.zeros(6), "SE", 0) == 50
    assert predict_overtime(np.zeros(6), "SE", 1) == 45


@pytest.mark.unit
@pytest.mark.parametrize("industry", INDUSTRIES)
@pytest.mark.parametrize("size_index", [0, 1, 2])
def test_monotone_in_speed(industry, size_index):
    """Test both predictors are non-decreasing in speed."""
    levels = np.linspace(0, 1, 11)
    salaries = [predict_salary(_vec(speed=s), industry, size_index) for s in levels]
    overtimes = [predict_overtime(_vec(speed=s), industry, size_index) for s in levels]

    assert all(b >= a for a, b in zip(salaries, salaries[1:]))
    assert all(b >= a for a, b in zip(overtimes, overtimes[1:]))


@pytest.mark.unit
@pytest.mark.parametrize("industry", INDUSTRIES)
def test_overtime_non_increasing_in_worklife(industry):
    """Test overtime never rises as worklife rises."""
    levels = np.linspace(0, 1, 11)
    overtimes = [predict_overtime(_vec(worklife=w), industry, 0) for w in levels]

    assert all(b <= a for a, b in zip(overtimes, overtimes[1:]))


@pytest.mark.unit
@pytest.mark.parametrize("industry", list(INDUSTRIES) + ["その他"])
@pytest.mark.parametrize("size_index", [0, 1, 2, None])
def test_predictions_stay_in_bounds_for_extreme_profiles(industry, size_index):
    """Test clamping for every 0/1 corner of the profile cube."""
    for corner in itertools.product([0.0, 1.0], repeat=6):
        vec = np.array(corner)
        assert 300 <= predict_salary(vec, industry, size_index) <= 800
        assert 10 <= predict_overtime(vec, industry, size_index) <= 80


@pytest.mark.unit
def test_round_half_up():
    """Test ties round upwards like the wizard display does."""
    assert round_half_up(2.5) == 3
    assert round_half_up(587.5) == 588
    assert round_half_up(33.4) == 33
    assert round_half_up(-0.5) == 0


@pytest.mark.unit
def test_predictors_are_pure():
    """Test repeated calls return the same values and do not mutate input."""
    vec = _vec(speed=0.8, worklife=0.2)
    before = vec.copy()

    assert predict_salary(vec, "SE", 0) == predict_salary(vec, "SE", 0)
    assert predict_overtime(vec, "SE", 0) == predict_overtime(vec, "SE", 0)
    np.testing.assert_array_equal(vec, before)


@pytest.mark.unit
@pytest.mark.parametrize("industry,size_index", [("SE", 0), ("コンサル", 1), ("ベンチャー", 2)])
def test_salary_sums_terms_in_formula_order(industry, size_index):
    """Test the salary equals base + speed + growth + autonomy + bonus evaluated left to right."""
    base = {"SE": 380, "コンサル": 420, "ベンチャー": 360}[industry]
    bonus = {0: 30, 1: 10, 2: 0}[size_index]
    levels = [i / 40 for i in range(41)]

    for sp, gr, au in itertools.product(levels, levels[::4], levels[::8]):
        expected = round_half_up(base + sp * 180 + gr * 120 + au * 40 + bonus)
        expected = max(300, min(800, expected))
        vec = _vec(speed=sp, growth=gr, autonomy=au)
        assert predict_salary(vec, industry, size_index) == expected
