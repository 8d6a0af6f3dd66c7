"""
Paired-Signal (Combiner) Evaluator Module

Tracks a left/right pair of coefficients and derives three booleans:
both-active, left-active, right-active. Per frame at most one of them is
reported, in this order of precedence:

  1. both changed  -> both effect
  2. left changed  -> left effect
  3. right changed -> right effect

All three priors are stored every frame, whichever branch fired. A missing
coefficient on either side reads as inactive, whatever the threshold
(unlike the single-signal evaluator, which skips the frame).

Left/right in the gesture tables are the person's own sides, so each entry
names the tracker's opposite-side coefficient.
"""

from typing import Any, Dict, Mapping, NamedTuple, Optional, Union

from evaluators.blend_shapes import BlendShapeLocation, location_name
from evaluators.delegate import Effect, effect_for, emit
from evaluators.edge import EdgeDetector, is_active, validate_threshold
from evaluators.evaluator_interface import FaceTriggerEvaluator

L = BlendShapeLocation


class PairedGesture(NamedTuple):
    """Configuration for one paired gesture. A None effect is a no-op."""
    left_key: BlendShapeLocation
    right_key: BlendShapeLocation
    on_both: Optional[Effect]
    on_left: Optional[Effect]
    on_right: Optional[Effect]


PAIRED_GESTURES: Dict[str, PairedGesture] = {
    "blink": PairedGesture(
        left_key=L.EYE_BLINK_RIGHT,
        right_key=L.EYE_BLINK_LEFT,
        on_both=effect_for("blink"),
        on_left=effect_for("blink_left"),
        on_right=effect_for("blink_right"),
    ),
    # Only the "both" transition is meaningful for brow-down and squint
    "brow_down": PairedGesture(
        left_key=L.BROW_DOWN_RIGHT,
        right_key=L.BROW_DOWN_LEFT,
        on_both=effect_for("brow_down"),
        on_left=None,
        on_right=None,
    ),
    "squint": PairedGesture(
        left_key=L.EYE_SQUINT_RIGHT,
        right_key=L.EYE_SQUINT_LEFT,
        on_both=effect_for("squint"),
        on_left=None,
        on_right=None,
    ),
}


class PairedSignalEvaluator(FaceTriggerEvaluator):
    """Combiner over two edge detectors plus a derived "both" edge detector."""

    def __init__(
        self,
        gesture: str,
        left_key: Union[BlendShapeLocation, str],
        right_key: Union[BlendShapeLocation, str],
        threshold: float,
        on_both: Optional[Effect] = None,
        on_left: Optional[Effect] = None,
        on_right: Optional[Effect] = None,
    ):
        self.gesture = gesture
        self.left_key = location_name(left_key)
        self.right_key = location_name(right_key)
        self.keys = (self.left_key, self.right_key)
        self.threshold = validate_threshold(threshold)
        self.on_both = on_both
        self.on_left = on_left
        self.on_right = on_right
        self._both = EdgeDetector()
        self._left = EdgeDetector()
        self._right = EdgeDetector()

    @property
    def state(self):
        """(both, left, right) priors."""
        return self._both.state, self._left.state, self._right.state

    def _side_active(self, frame: Mapping[str, float], key: str) -> bool:
        value = frame.get(key)
        return value is not None and is_active(float(value), self.threshold)

    def evaluate(self, frame: Mapping[str, float], delegate: Any) -> None:
        new_left = self._side_active(frame, self.left_key)
        new_right = self._side_active(frame, self.right_key)
        new_both = new_left and new_right

        both_changed = self._both.step(new_both)
        left_changed = self._left.step(new_left)
        right_changed = self._right.step(new_right)

        if both_changed:
            emit(delegate, self.on_both, new_both)
        elif left_changed:
            emit(delegate, self.on_left, new_left)
        elif right_changed:
            emit(delegate, self.on_right, new_right)

    def reset(self) -> None:
        self._both.reset()
        self._left.reset()
        self._right.reset()

    def __repr__(self) -> str:
        return (
            f"PairedSignalEvaluator({self.gesture!r}, left={self.left_key}, "
            f"right={self.right_key}, threshold={self.threshold})"
        )


def make_paired_signal_evaluator(gesture: str, threshold: float) -> PairedSignalEvaluator:
    """Build the evaluator for a known paired gesture (see PAIRED_GESTURES)."""
    try:
        cfg = PAIRED_GESTURES[gesture]
    except KeyError:
        raise ValueError(f"Unknown paired gesture: {gesture!r}") from None
    return PairedSignalEvaluator(
        gesture,
        cfg.left_key,
        cfg.right_key,
        threshold,
        on_both=cfg.on_both,
        on_left=cfg.on_left,
        on_right=cfg.on_right,
    )
