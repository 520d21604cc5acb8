"""
Industry and company-size reference profiles.

Industry profiles set the baseline level of each axis and how strongly a
user's own preference shifts it. Size profiles shift the baseline additively
and scale the industry sensitivity.

Values are fixed reference data; all records are frozen and the lookup
tables are read-only views.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Tuple, Union

import numpy as np

from .axes import N_AXES


@dataclass(frozen=True)
class IndustryProfile:
    """
    Reference profile of one industry.

    Attributes:
        name: Display name (used as the primary key)
        slug: ASCII alias accepted by lookups
        base: Default level per axis, each in [0, 1]
        sensitivity: Positive multiplier per axis applied to user preference
    """
    name: str
    slug: str
    base: Tuple[float, ...]
    sensitivity: Tuple[float, ...]

    def base_array(self) -> np.ndarray:
        return np.asarray(self.base, dtype=float)

    def sensitivity_array(self) -> np.ndarray:
        return np.asarray(self.sensitivity, dtype=float)


@dataclass(frozen=True)
class SizeProfile:
    """
    Reference adjustment for a company-size bucket.

    Attributes:
        index: Position in SIZE_PROFILES (0 is the largest bucket)
        label: Display label
        delta: Additive offset per axis
        multiplier: Positive scaling per axis applied to industry sensitivity
    """
    index: int
    label: str
    delta: Tuple[float, ...]
    multiplier: Tuple[float, ...]

    def delta_array(self) -> np.ndarray:
        return np.asarray(self.delta, dtype=float)

    def multiplier_array(self) -> np.ndarray:
        return np.asarray(self.multiplier, dtype=float)


_INDUSTRY_ROWS = [
    # name, slug, base, sensitivity
    ("メーカー", "manufacturer",
     (0.55, 0.60, 0.45, 0.75, 0.65, 0.40), (1.00, 1.05, 0.90, 1.10, 1.00, 0.85)),
    ("コンサル", "consulting",
     (0.80, 0.55, 0.70, 0.35, 0.30, 0.85), (1.20, 1.00, 1.15, 0.80, 0.75, 1.25)),
    ("商社", "trading",
     (0.65, 0.75, 0.60, 0.55, 0.45, 0.75), (1.05, 1.15, 1.00, 0.95, 0.85, 1.10)),
    ("SIer", "sier",
     (0.50, 0.65, 0.40, 0.80, 0.70, 0.45), (0.95, 1.05, 0.85, 1.10, 1.05, 0.90)),
    ("SE", "se",
     (0.70, 0.60, 0.75, 0.55, 0.60, 0.80), (1.10, 1.00, 1.20, 0.90, 0.95, 1.15)),
    ("広告", "advertising",
     (0.75, 0.65, 0.70, 0.35, 0.40, 0.90), (1.15, 1.05, 1.10, 0.80, 0.80, 1.25)),
    ("ベンチャー", "venture",
     (0.85, 0.55, 0.85, 0.30, 0.30, 0.90), (1.25, 0.95, 1.25, 0.75, 0.75, 1.30)),
]

_SIZE_ROWS = [
    # label, delta, multiplier
    ("大手(1000+)",
     (-0.05, 0.05, -0.10, 0.15, 0.10, -0.10), (0.95, 1.05, 0.90, 1.10, 1.05, 0.90)),
    ("中堅(100-999)",
     (0.00, 0.00, 0.00, 0.05, 0.00, 0.00), (1.00, 1.00, 1.00, 1.05, 1.00, 1.00)),
    ("小規模(~99)",
     (0.10, -0.05, 0.15, -0.10, -0.10, 0.10), (1.10, 0.95, 1.15, 0.90, 0.90, 1.10)),
]

INDUSTRY_PROFILES: Mapping[str, IndustryProfile] = MappingProxyType({
    name: IndustryProfile(name=name, slug=slug, base=base, sensitivity=sens)
    for name, slug, base, sens in _INDUSTRY_ROWS
})

INDUSTRIES: Tuple[str, ...] = tuple(INDUSTRY_PROFILES)

_INDUSTRY_BY_SLUG: Mapping[str, IndustryProfile] = MappingProxyType({
    profile.slug: profile for profile in INDUSTRY_PROFILES.values()
})

SIZE_PROFILES: Tuple[SizeProfile, ...] = tuple(
    SizeProfile(index=i, label=label, delta=delta, multiplier=mult)
    for i, (label, delta, mult) in enumerate(_SIZE_ROWS)
)

LARGEST_SIZE_INDEX = 0
MIDDLE_SIZE_INDEX = 1
SMALLEST_SIZE_INDEX = 2

ROLES: Tuple[str, ...] = (
    "技術系",
    "事務系",
    "営業",
    "戦略コンサルタント",
    "ビジネスコンサルタント",
    "SIer",
    "SE",
    "デザイン",
)


def get_industry(industry: Union[str, IndustryProfile]) -> IndustryProfile:
    """
    Look up an industry profile by display name or slug.

    Args:
        industry: Display name (e.g. "SE"), slug (e.g. "consulting"),
            or an IndustryProfile which is returned unchanged

    Returns:
        The matching IndustryProfile

    Raises:
        KeyError: If no industry matches
    """
    if isinstance(industry, IndustryProfile):
        return industry
    if industry in INDUSTRY_PROFILES:
        return INDUSTRY_PROFILES[industry]
    if industry in _INDUSTRY_BY_SLUG:
        return _INDUSTRY_BY_SLUG[industry]
    raise KeyError(f"Unknown industry: {industry!r} (expected one of {', '.join(INDUSTRIES)})")


def get_size(index: int) -> SizeProfile:
    """Look up a size profile by bucket index (0 = largest)."""
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(SIZE_PROFILES):
        raise IndexError(f"Size index must be in [0, {len(SIZE_PROFILES) - 1}], got {index!r}")
    return SIZE_PROFILES[index]


def profile_issues() -> Dict[str, str]:
    """Check every profile vector for length and range; returns {record: problem}."""
    issues = {}
    for profile in INDUSTRY_PROFILES.values():
        if len(profile.base) != N_AXES or len(profile.sensitivity) != N_AXES:
            issues[profile.name] = f"vectors must have {N_AXES} components"
        elif not all(0.0 <= b <= 1.0 for b in profile.base):
            issues[profile.name] = "base values must lie in [0, 1]"
        elif not all(s > 0 for s in profile.sensitivity):
            issues[profile.name] = "sensitivities must be positive"
    for size in SIZE_PROFILES:
        if len(size.delta) != N_AXES or len(size.multiplier) != N_AXES:
            issues[size.label] = f"vectors must have {N_AXES} components"
        elif not all(m > 0 for m in size.multiplier):
            issues[size.label] = "multipliers must be positive"
    return issues
