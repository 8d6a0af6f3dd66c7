"""
Gesture registry: gesture name -> evaluator factory, and the thresholds
used to build them.

TriggerThresholds defaults come from config (environment); pass explicit
values to override per instance.
"""

from dataclasses import asdict, dataclass, field
from typing import Callable, Dict, Iterable, List, Optional

import config
from evaluators.evaluator_interface import FaceTriggerEvaluator
from evaluators.paired_signal import make_paired_signal_evaluator
from evaluators.single_signal import make_single_signal_evaluator


@dataclass(frozen=True)
class TriggerThresholds:
    """Activation threshold per gesture (0-1, inclusive)."""
    smile: float = field(default_factory=lambda: config.SMILE_THRESHOLD)
    blink: float = field(default_factory=lambda: config.BLINK_THRESHOLD)
    brow_down: float = field(default_factory=lambda: config.BROW_DOWN_THRESHOLD)
    brow_up: float = field(default_factory=lambda: config.BROW_UP_THRESHOLD)
    squint: float = field(default_factory=lambda: config.SQUINT_THRESHOLD)
    cheek_puff: float = field(default_factory=lambda: config.CHEEK_PUFF_THRESHOLD)
    mouth_pucker: float = field(default_factory=lambda: config.MOUTH_PUCKER_THRESHOLD)
    jaw_open: float = field(default_factory=lambda: config.JAW_OPEN_THRESHOLD)
    jaw_left: float = field(default_factory=lambda: config.JAW_LEFT_THRESHOLD)
    jaw_right: float = field(default_factory=lambda: config.JAW_RIGHT_THRESHOLD)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


# Order matters: evaluators run (and report) in this order each frame.
EVALUATOR_FACTORIES: Dict[str, Callable[[str, float], FaceTriggerEvaluator]] = {
    "smile": make_single_signal_evaluator,
    "blink": make_paired_signal_evaluator,
    "brow_down": make_paired_signal_evaluator,
    "brow_up": make_single_signal_evaluator,
    "squint": make_paired_signal_evaluator,
    "cheek_puff": make_single_signal_evaluator,
    "mouth_pucker": make_single_signal_evaluator,
    "jaw_open": make_single_signal_evaluator,
    "jaw_left": make_single_signal_evaluator,
    "jaw_right": make_single_signal_evaluator,
}

GESTURES: List[str] = list(EVALUATOR_FACTORIES)


def build_evaluators(
    thresholds: Optional[TriggerThresholds] = None,
    gestures: Optional[Iterable[str]] = None,
) -> List[FaceTriggerEvaluator]:
    """
    Build one evaluator per requested gesture, in registry order.

    Args:
        thresholds: per-gesture thresholds; defaults to TriggerThresholds()
        gestures: subset of GESTURES; None or empty = all

    Raises:
        ValueError: for unknown gesture names or invalid thresholds
    """
    thresholds = thresholds or TriggerThresholds()
    wanted = [g.strip().lower() for g in (gestures or [])]
    unknown = [g for g in wanted if g not in EVALUATOR_FACTORIES]
    if unknown:
        raise ValueError(f"Unknown gesture(s): {', '.join(unknown)}. Valid: {', '.join(GESTURES)}")
    selected = [g for g in GESTURES if not wanted or g in wanted]
    values = thresholds.to_dict()
    return [EVALUATOR_FACTORIES[g](g, values[g]) for g in selected]
