"""
Profile combination against industry and company-size references.

Projected Formula:
    you = clip(base + size_delta + sensitivity * size_multiplier * preference, 0, 1)

Average Formula (no personal modulation):
    avg = clip(base + size_delta, 0, 1)

The target overlay is the star-rating-only vector and is passed through
unchanged. When industry or size is missing there is no projection and the
combiner returns None; the caller decides what to show instead.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Any, List, Optional, Union

import numpy as np
import pandas as pd

from ..reference import AXES, AXIS_LABELS, N_AXES, IndustryProfile, SizeProfile, get_industry, get_size
from .vector_builder import clamp01

logger = logging.getLogger(__name__)


@dataclass
class ProjectedProfile:
    """
    Result of combining a preference vector with reference profiles.

    Attributes:
        projected: The user's projected profile ("you")
        average: Industry norm for the chosen size ("avg")
        target: Star-rating-only vector ("target")
    """
    projected: np.ndarray
    average: np.ndarray
    target: np.ndarray

    def axis_value(self, axis: str, which: str = "projected") -> float:
        """Return one component by axis name."""
        return float(getattr(self, which)[AXES.index(axis)])

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary of axis -> value maps."""
        return {
            "projected": dict(zip(AXES, map(float, self.projected))),
            "average": dict(zip(AXES, map(float, self.average))),
            "target": dict(zip(AXES, map(float, self.target))),
        }

    def to_records(self) -> List[Dict[str, Any]]:
        """One record per axis with the three overlays (radar chart rows)."""
        return [
            {
                "axis": axis,
                "label": AXIS_LABELS[axis],
                "you": float(self.projected[i]),
                "avg": float(self.average[i]),
                "target": float(self.target[i]),
            }
            for i, axis in enumerate(AXES)
        ]

    def to_frame(self) -> pd.DataFrame:
        """Same rows as to_records() as a DataFrame."""
        return pd.DataFrame(self.to_records(), columns=["axis", "label", "you", "avg", "target"])


def _as_vector(values, name: str) -> np.ndarray:
    vec = np.asarray(values, dtype=float)
    if vec.shape != (N_AXES,):
        raise ValueError(f"{name} must have {N_AXES} components, got shape {vec.shape}")
    return vec


def combine_vectors(
    base,
    sensitivity,
    size_delta,
    size_multiplier,
    user
) -> np.ndarray:
    """
    Project a user vector through industry and size coefficients.

    All arguments are 6-element sequences in canonical axis order.

    Returns:
        Array of 6 floats in [0, 1]
    """
    base = _as_vector(base, "base")
    sensitivity = _as_vector(sensitivity, "sensitivity")
    size_delta = _as_vector(size_delta, "size_delta")
    size_multiplier = _as_vector(size_multiplier, "size_multiplier")
    user = _as_vector(user, "user")
    return clamp01(base + size_delta + sensitivity * size_multiplier * user)


def average_vector(industry: IndustryProfile, size: SizeProfile) -> np.ndarray:
    """Industry norm for a size bucket: clip(base + delta)."""
    return clamp01(industry.base_array() + size.delta_array())


def combine_profile(
    industry: Union[str, IndustryProfile, None],
    size: Union[int, SizeProfile, None],
    preference,
    target=None
) -> Optional[ProjectedProfile]:
    """
    Combine a preference vector with an industry and a size profile.

    Args:
        industry: IndustryProfile, industry name/slug, or None if unselected
        size: SizeProfile, size index, or None if unselected
        preference: 6-element preference vector
        target: Star-rating-only vector for the comparison overlay; the
            preference vector is used when omitted

    Returns:
        ProjectedProfile, or None when industry or size is unselected
    """
    if industry is None or industry == "" or size is None:
        logger.debug("Industry or size not selected; no projection")
        return None

    industry = get_industry(industry)
    if not isinstance(size, SizeProfile):
        size = get_size(size)

    preference = _as_vector(preference, "preference")
    target = preference if target is None else _as_vector(target, "target")

    projected = combine_vectors(
        industry.base,
        industry.sensitivity,
        size.delta,
        size.multiplier,
        preference
    )
    average = average_vector(industry, size)

    return ProjectedProfile(projected=projected, average=average, target=clamp01(target.copy()))
