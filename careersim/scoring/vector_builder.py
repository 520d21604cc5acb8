"""
Preference vector construction.

Turns raw user input (star ratings and scenario answers) into a normalized
6-axis preference vector. The stated self-rating dominates, the behavioural
signal from scenario answers adjusts it.

Blend Formula:
    base   = (stars - 1) / 4
    acc    = sum of chosen option weights (per axis)
    event  = clip(event_offset + acc / event_divisor, 0, 1)
    pref   = clip(stated_weight * base + event_weight * event, 0, 1)

Default constants: stated_weight=0.6, event_weight=0.4, event_offset=0.5,
event_divisor=8. With no answers the event vector is the neutral midpoint.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Dict, Any, Mapping, Optional

import numpy as np

from ..reference import AXES, N_AXES, QUESTION_BANK

logger = logging.getLogger(__name__)

MIN_STARS = 1
MAX_STARS = 5
DEFAULT_STARS = 3


@dataclass
class BlendConfig:
    """
    Configuration for blending stated and revealed preferences.

    Attributes:
        stated_weight: Weight of the star-rating vector
        event_weight: Weight of the scenario-answer vector
        event_offset: Neutral level of the event vector
        event_divisor: Scale that maps accumulated weights into [0, 1]
    """
    stated_weight: float = 0.6
    event_weight: float = 0.4
    event_offset: float = 0.5
    event_divisor: float = 8.0

    def validate(self) -> None:
        """Validate configuration values."""
        for name in ["stated_weight", "event_weight", "event_offset"]:
            value = getattr(self, name)
            if not 0 <= value <= 1:
                raise ValueError(f"{name} must be in [0, 1], got {value}")
        if abs(self.stated_weight + self.event_weight - 1.0) > 1e-9:
            raise ValueError(
                f"Blend weights must sum to 1: {self.stated_weight} + {self.event_weight}"
            )
        if self.event_divisor <= 0:
            raise ValueError(f"event_divisor must be positive, got {self.event_divisor}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "BlendConfig":
        """Create from dictionary."""
        return cls(**d)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "BlendConfig":
        """Create from main config dictionary (``scoring.blend`` section)."""
        scoring = (config or {}).get("scoring")
        blend = scoring.get("blend") if isinstance(scoring, dict) else None
        if not isinstance(blend, dict):
            blend = {}
        defaults = cls()
        return cls(
            stated_weight=float(blend.get("stated_weight", defaults.stated_weight)),
            event_weight=float(blend.get("event_weight", defaults.event_weight)),
            event_offset=float(blend.get("event_offset", defaults.event_offset)),
            event_divisor=float(blend.get("event_divisor", defaults.event_divisor)),
        )


def clamp01(values):
    """Clip a scalar or array into [0, 1]."""
    return np.clip(values, 0.0, 1.0)


def normalize_stars(stars: int) -> float:
    """Map a 1-5 star rating onto [0, 1]: 1 -> 0.0, 3 -> 0.5, 5 -> 1.0."""
    return float(clamp01((stars - 1) / 4))


def validate_star_ratings(star_ratings: Optional[Mapping[str, int]]) -> None:
    """
    Check that every rating names a known axis and is an integer in 1-5.

    Raises:
        ValueError: On an unknown axis or an out-of-range rating
    """
    for axis, stars in (star_ratings or {}).items():
        if axis not in AXES:
            raise ValueError(f"Unknown axis in star ratings: {axis!r}")
        if isinstance(stars, bool) or not isinstance(stars, int) or not MIN_STARS <= stars <= MAX_STARS:
            raise ValueError(f"{axis} rating must be an integer between 1 and 5, got {stars!r}")


def build_base_vector(star_ratings: Optional[Mapping[str, int]] = None) -> np.ndarray:
    """
    Build the star-rating-only vector.

    Args:
        star_ratings: Mapping of axis -> stars (1-5); missing axes count as 3

    Returns:
        Array of 6 floats in [0, 1] in canonical axis order
    """
    validate_star_ratings(star_ratings)
    ratings = star_ratings or {}
    return np.array([normalize_stars(ratings.get(axis, DEFAULT_STARS)) for axis in AXES])


def accumulate_answers(answers: Optional[Mapping[str, int]] = None) -> np.ndarray:
    """
    Sum the weight vectors of the chosen options.

    Args:
        answers: Mapping of question id -> chosen option index

    Returns:
        Array of 6 accumulated (unclipped, signed) weights

    Raises:
        ValueError: On an unknown question id or invalid option index
    """
    acc = np.zeros(N_AXES, dtype=float)
    for question_id, option_index in (answers or {}).items():
        if question_id not in QUESTION_BANK:
            raise ValueError(f"Unknown question id: {question_id!r}")
        option = QUESTION_BANK[question_id].option(option_index)
        acc += option.weight_vector()
    return acc


def build_event_vector(accumulator: np.ndarray, config: Optional[BlendConfig] = None) -> np.ndarray:
    """Convert accumulated weights into the [0, 1] event vector."""
    config = config or BlendConfig()
    return clamp01(config.event_offset + np.asarray(accumulator, dtype=float) / config.event_divisor)


def build_preference_vector(
    star_ratings: Optional[Mapping[str, int]] = None,
    answers: Optional[Mapping[str, int]] = None,
    config: Optional[BlendConfig] = None
) -> np.ndarray:
    """
    Compute the preference vector from ratings and scenario answers.

    Args:
        star_ratings: Mapping of axis -> stars (1-5); missing axes count as 3
        answers: Mapping of question id -> option index; unanswered
            questions contribute nothing
        config: Blend constants (defaults to BlendConfig())

    Returns:
        Array of 6 floats in [0, 1] in canonical axis order
    """
    config = config or BlendConfig()
    base = build_base_vector(star_ratings)
    event = build_event_vector(accumulate_answers(answers), config)
    preference = clamp01(config.stated_weight * base + config.event_weight * event)

    logger.debug(
        f"Preference vector from {len(answers or {})} answers: "
        f"{np.round(preference, 4).tolist()}"
    )
    return preference
