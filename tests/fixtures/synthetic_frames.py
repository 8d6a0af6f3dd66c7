"""
Synthetic coefficient frames and a recording delegate for evaluator tests.

Frames use tracker naming (e.g. "eyeBlinkLeft"). Remember the mirroring: the
tracker's "Left" coefficient drives the person's RIGHT side in the gesture
tables, so person_blink(left=..., right=...) writes the opposite keys.
"""

from typing import Any, Dict, List, Tuple

from evaluators.delegate import FaceTriggerDelegate
from evaluators.registry import GESTURES

ALL_SLOT_GESTURES = GESTURES + ["blink_left", "blink_right"]


class RecordingDelegate:
    """
    Records every delegate call as (slot_name, payload) in order.

    payload is the boolean for "changed" slots and None for "fired" slots.
    """

    def __init__(self):
        self.calls: List[Tuple[str, Any]] = []
        for gesture in ALL_SLOT_GESTURES:
            setattr(self, f"on_{gesture}_changed", self._changed(f"on_{gesture}_changed"))
            setattr(self, f"on_{gesture}", self._fired(f"on_{gesture}"))

    def _changed(self, slot: str):
        return lambda active: self.calls.append((slot, active))

    def _fired(self, slot: str):
        return lambda: self.calls.append((slot, None))

    def clear(self) -> None:
        self.calls = []

    def slots(self) -> List[str]:
        return [slot for slot, _ in self.calls]


def recording_dataclass_delegate(calls: List[Tuple[str, Any]], *gestures: str) -> FaceTriggerDelegate:
    """FaceTriggerDelegate with only the given gestures' slots set, appending into calls."""
    slots: Dict[str, Any] = {}
    for g in gestures:
        slots[f"on_{g}_changed"] = (lambda s: lambda active: calls.append((s, active)))(f"on_{g}_changed")
        slots[f"on_{g}"] = (lambda s: lambda: calls.append((s, None)))(f"on_{g}")
    return FaceTriggerDelegate(**slots)


def smile_frame(left: float, right: float) -> Dict[str, float]:
    return {"mouthSmileLeft": left, "mouthSmileRight": right}


def person_blink(left: float = None, right: float = None) -> Dict[str, float]:
    """Blink frame in the person's terms; None omits the coefficient."""
    frame = {}
    if left is not None:
        frame["eyeBlinkRight"] = left
    if right is not None:
        frame["eyeBlinkLeft"] = right
    return frame


def neutral_frame() -> Dict[str, float]:
    """Every tracked coefficient present at 0.0."""
    names = [
        "mouthSmileLeft", "mouthSmileRight", "eyeBlinkLeft", "eyeBlinkRight",
        "browDownLeft", "browDownRight", "browInnerUp", "eyeSquintLeft", "eyeSquintRight",
        "cheekPuff", "mouthPucker", "jawOpen", "jawLeft", "jawRight",
    ]
    return {n: 0.0 for n in names}
