"""
Evaluators package for Face Trigger.

This package turns per-frame blend shape coefficients into debounced gesture
events: the blend shape vocabulary, the delegate (event sink), the shared edge
detector, single-signal and paired-signal evaluators, and the gesture registry.
"""

from .blend_shapes import BlendShapeLocation, CoefficientFrame, coerce_frame, frame_from_scores
from .delegate import FaceTriggerDelegate, Effect
from .evaluator_interface import FaceTriggerEvaluator
from .single_signal import SingleSignalEvaluator
from .paired_signal import PairedSignalEvaluator
from .registry import TriggerThresholds, build_evaluators, GESTURES

__all__ = [
    'BlendShapeLocation',
    'CoefficientFrame',
    'coerce_frame',
    'frame_from_scores',
    'FaceTriggerDelegate',
    'Effect',
    'FaceTriggerEvaluator',
    'SingleSignalEvaluator',
    'PairedSignalEvaluator',
    'TriggerThresholds',
    'build_evaluators',
    'GESTURES',
]
