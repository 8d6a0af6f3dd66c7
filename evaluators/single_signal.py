"""
Single-Signal Evaluator Module

Tracks one coefficient (or the mean of a fixed group, used by smile) against
one threshold. Edge-triggered: the delegate hears changed(active) only when
the boolean flips, and fired() only on a flip to active.

If any tracked coefficient is missing from a frame, the frame is skipped
entirely for this evaluator and its state stays frozen.
"""

from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from evaluators.blend_shapes import BlendShapeLocation, location_name
from evaluators.delegate import Effect, effect_for, emit
from evaluators.edge import EdgeDetector, is_active, validate_threshold
from evaluators.evaluator_interface import FaceTriggerEvaluator

L = BlendShapeLocation

# Gesture -> coefficient(s) read. Jaw left/right are mirrored: the tracker's
# "jawRight" is the person's left, and vice versa.
SINGLE_SIGNAL_KEYS: Dict[str, Tuple[BlendShapeLocation, ...]] = {
    "smile": (L.MOUTH_SMILE_LEFT, L.MOUTH_SMILE_RIGHT),
    "brow_up": (L.BROW_INNER_UP,),
    "cheek_puff": (L.CHEEK_PUFF,),
    "mouth_pucker": (L.MOUTH_PUCKER,),
    "jaw_open": (L.JAW_OPEN,),
    "jaw_left": (L.JAW_RIGHT,),
    "jaw_right": (L.JAW_LEFT,),
}


class SingleSignalEvaluator(FaceTriggerEvaluator):
    """Edge-triggered threshold evaluator for one signal."""

    def __init__(
        self,
        gesture: str,
        keys: Sequence[Union[BlendShapeLocation, str]],
        threshold: float,
        effect: Optional[Effect] = None,
    ):
        """
        Args:
            gesture: gesture name, used for logging and default slot names
            keys: coefficient(s) to read; several keys are averaged
            threshold: activation threshold (inclusive)
            effect: delegate slots to report to; defaults to effect_for(gesture)
        """
        if not keys:
            raise ValueError(f"{gesture}: at least one blend shape key is required")
        self.gesture = gesture
        self.keys: Tuple[str, ...] = tuple(location_name(k) for k in keys)
        self.threshold = validate_threshold(threshold)
        self.effect = effect if effect is not None else effect_for(gesture)
        self._edge = EdgeDetector()

    @property
    def active(self) -> bool:
        return self._edge.state

    def _read(self, frame: Mapping[str, float]) -> Optional[float]:
        total = 0.0
        for key in self.keys:
            value = frame.get(key)
            if value is None:
                return None
            total += float(value)
        return total / len(self.keys)

    def evaluate(self, frame: Mapping[str, float], delegate: Any) -> None:
        value = self._read(frame)
        if value is None:
            return
        active = is_active(value, self.threshold)
        if self._edge.step(active):
            emit(delegate, self.effect, active)

    def reset(self) -> None:
        self._edge.reset()

    def __repr__(self) -> str:
        return f"SingleSignalEvaluator({self.gesture!r}, keys={self.keys}, threshold={self.threshold})"


def make_single_signal_evaluator(gesture: str, threshold: float) -> SingleSignalEvaluator:
    """Build the evaluator for a known single-signal gesture (see SINGLE_SIGNAL_KEYS)."""
    try:
        keys = SINGLE_SIGNAL_KEYS[gesture]
    except KeyError:
        raise ValueError(f"Unknown single-signal gesture: {gesture!r}") from None
    return SingleSignalEvaluator(gesture, keys, threshold)
