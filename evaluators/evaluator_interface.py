"""
Evaluator Interface Module

Defines the single-method contract shared by all gesture evaluators, so the
FaceTrigger service can run single-signal and paired-signal evaluators
interchangeably.

Evaluators are stateful, not reentrant and not thread-safe: feed each
instance from one thread, one frame at a time.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Tuple


class FaceTriggerEvaluator(ABC):
    """
    Abstract interface for gesture evaluators.

    An evaluator owns a fixed threshold and the prior boolean state(s) of the
    signals it tracks. Each call compares the latest frame against the
    threshold and reports state transitions to the delegate.
    """

    gesture: str = ""
    keys: Tuple[str, ...] = ()  # blend shape names read from each frame

    @abstractmethod
    def evaluate(self, frame: Mapping[str, float], delegate: Any) -> None:
        """
        Update state from one coefficient frame and report transitions.

        Args:
            frame: location name -> intensity (see blend_shapes.coerce_frame)
            delegate: event sink exposing optional callback slots
        """
        pass

    @abstractmethod
    def reset(self) -> None:
        """Return to the initial (all inactive) state without emitting events."""
        pass
