"""
Edge detection primitive shared by all evaluators.

Holds one prior boolean. step() compares a new boolean against it, stores the
new value unconditionally, and reports whether it changed.
"""

import math
from numbers import Real


def validate_threshold(threshold) -> float:
    """Return threshold as float. Raises ValueError for non-numeric or NaN input."""
    if isinstance(threshold, bool) or not isinstance(threshold, Real):
        raise ValueError(f"threshold must be a number, got {threshold!r}")
    value = float(threshold)
    if math.isnan(value):
        raise ValueError("threshold must not be NaN")
    return value


def is_active(value: float, threshold: float) -> bool:
    """Inclusive threshold test: a value equal to the threshold counts as active."""
    return value >= threshold


class EdgeDetector:
    """One boolean with edge reporting. Initial state is inactive."""

    __slots__ = ("state",)

    def __init__(self) -> None:
        self.state = False

    def step(self, active: bool) -> bool:
        """Store active; return True if it differs from the previous state."""
        changed = active != self.state
        self.state = active
        return changed

    def reset(self) -> None:
        self.state = False
