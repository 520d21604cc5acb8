"""
Canonical preference axes.

Every vector in the simulator is a 6-element sequence indexed by this order.
The order never changes at runtime.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

AXES: Tuple[str, ...] = ("growth", "collab", "autonomy", "stability", "worklife", "speed")

N_AXES = len(AXES)

AXIS_LABELS: Mapping[str, str] = MappingProxyType({
    "growth": "成長意欲",
    "collab": "協働力",
    "autonomy": "裁量",
    "stability": "安定",
    "worklife": "ワークライフ",
    "speed": "業務スピード",
})

_AXIS_INDEX: Mapping[str, int] = MappingProxyType({axis: i for i, axis in enumerate(AXES)})


def axis_index(axis: str) -> int:
    """
    Return the canonical position of an axis.

    Raises:
        KeyError: If the axis name is not one of AXES
    """
    try:
        return _AXIS_INDEX[axis]
    except KeyError:
        raise KeyError(f"Unknown axis: {axis!r} (expected one of {', '.join(AXES)})") from None
