"""Unit tests for preference vector construction."""

import numpy as np
import pytest

from careersim.reference import AXES, QUESTIONS
from careersim.scoring.vector_builder import (
    BlendConfig,
    accumulate_answers,
    build_base_vector,
    build_event_vector,
    build_preference_vector,
    normalize_stars,
)


@pytest.mark.unit
@pytest.mark.parametrize("stars,expected", [(1, 0.0), (2, 0.25), (3, 0.5), (4, 0.75), (5, 1.0)])
def test_normalize_stars(stars, expected):
    """Test that star ratings map linearly onto [0, 1]."""
    assert normalize_stars(stars) == expected


@pytest.mark.unit
def test_neutral_input_gives_midpoint_vector():
    """Test all-3 ratings with no answers gives exactly 0.5 everywhere."""
    ratings = {axis: 3 for axis in AXES}
    vec = build_preference_vector(ratings, {})

    assert vec.shape == (6,)
    assert vec.tolist() == [0.5] * 6


@pytest.mark.unit
def test_missing_ratings_default_to_three():
    """Test that unset axes behave like a 3-star rating."""
    assert build_base_vector({}).tolist() == [0.5] * 6
    assert build_base_vector(None).tolist() == [0.5] * 6
    assert build_preference_vector().tolist() == [0.5] * 6


@pytest.mark.unit
def test_base_vector_follows_axis_order():
    """Test that the base vector is indexed in canonical axis order."""
    ratings = {"growth": 5, "collab": 1, "autonomy": 4, "stability": 2, "worklife": 3, "speed": 5}
    vec = build_base_vector(ratings)

    assert vec.tolist() == [1.0, 0.0, 0.75, 0.25, 0.5, 1.0]


@pytest.mark.unit
def test_no_answers_event_vector_is_neutral():
    """Test that the event vector collapses to 0.5 with zero answers."""
    acc = accumulate_answers({})
    assert acc.tolist() == [0.0] * 6
    assert build_event_vector(acc).tolist() == [0.5] * 6


@pytest.mark.unit
def test_answers_accumulate_including_negative_weights():
    """Test that chosen option weights are summed per axis."""
    answers = {"y1q4": 2, "y3q2": 0}
    acc = accumulate_answers(answers)

    expected = dict(zip(AXES, acc))
    assert expected["speed"] == pytest.approx(1.0)
    assert expected["growth"] == pytest.approx(0.5)
    assert expected["autonomy"] == pytest.approx(0.5)
    assert expected["worklife"] == pytest.approx(-1.0)
    assert expected["collab"] == 0.0
    assert expected["stability"] == 0.0


@pytest.mark.unit
def test_preference_vector_blends_stars_and_answers():
    """Test the 0.6/0.4 blend of stated and scenario vectors."""
    vec = dict(zip(AXES, build_preference_vector({}, {"y1q4": 2, "y3q2": 0})))

    assert vec["speed"] == pytest.approx(0.6 * 0.5 + 0.4 * (0.5 + 1.0 / 8))
    assert vec["growth"] == pytest.approx(0.6 * 0.5 + 0.4 * (0.5 + 0.5 / 8))
    assert vec["worklife"] == pytest.approx(0.6 * 0.5 + 0.4 * (0.5 - 1.0 / 8))
    assert vec["collab"] == pytest.approx(0.5)


@pytest.mark.unit
def test_answer_order_is_irrelevant():
    """Test that the result does not depend on answering order."""
    forward = {q.id: 0 for q in QUESTIONS}
    backward = {q.id: 0 for q in reversed(QUESTIONS)}

    np.testing.assert_allclose(
        build_preference_vector({}, forward),
        build_preference_vector({}, backward)
    )


@pytest.mark.unit
@pytest.mark.parametrize("option_index", [0, 1, 2])
@pytest.mark.parametrize("stars", [1, 3, 5])
def test_preference_vector_stays_in_unit_range(option_index, stars):
    """Test that every component stays in [0, 1] for extreme inputs."""
    answers = {q.id: option_index for q in QUESTIONS}
    ratings = {axis: stars for axis in AXES}
    vec = build_preference_vector(ratings, answers)

    assert np.all(vec >= 0.0)
    assert np.all(vec <= 1.0)


@pytest.mark.unit
def test_event_vector_is_clipped():
    """Test that large accumulated weights saturate at 0 and 1."""
    event = build_event_vector(np.array([10.0, -10.0, 0.0, 4.0, -4.0, 2.0]))
    assert event.tolist() == [1.0, 0.0, 0.5, 1.0, 0.0, 0.75]


@pytest.mark.unit
@pytest.mark.parametrize("ratings", [
    {"growth": 0},
    {"growth": 6},
    {"growth": 2.5},
    {"unknown_axis": 3},
])
def test_invalid_ratings_rejected(ratings):
    """Test that out-of-range ratings and unknown axes raise ValueError."""
    with pytest.raises(ValueError):
        build_preference_vector(ratings, {})


@pytest.mark.unit
@pytest.mark.parametrize("answers", [{"y9q9": 0}, {"y1q1": 3}, {"y1q1": -1}])
def test_invalid_answers_rejected(answers):
    """Test that unknown questions and option indices raise ValueError."""
    with pytest.raises(ValueError):
        build_preference_vector({}, answers)


@pytest.mark.unit
def test_blend_config_validation():
    """Test BlendConfig validation of weights and divisor."""
    BlendConfig().validate()

    with pytest.raises(ValueError):
        BlendConfig(stated_weight=0.7, event_weight=0.4).validate()
    with pytest.raises(ValueError):
        BlendConfig(event_divisor=0).validate()
    with pytest.raises(ValueError):
        BlendConfig(event_offset=1.5).validate()


@pytest.mark.unit
def test_blend_config_from_config():
    """Test reading blend constants from the main config dict."""
    config = {"scoring": {"blend": {"stated_weight": 0.5, "event_weight": 0.5}}}
    blend = BlendConfig.from_config(config)

    assert blend.stated_weight == 0.5
    assert blend.event_weight == 0.5
    assert blend.event_divisor == 8.0
    assert BlendConfig.from_config({}) == BlendConfig()
    assert BlendConfig.from_dict(blend.to_dict()) == blend


@pytest.mark.unit
@pytest.mark.parametrize("config", [
    {"scoring": None},
    {"scoring": {"blend": None}},
    {"global": None},
    None,
])
def test_blend_config_from_config_empty_sections(config):
    """Test empty config sections fall back to the default blend."""
    assert BlendConfig.from_config(config) == BlendConfig()
