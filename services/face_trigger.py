"""
FaceTrigger service.

Owns one evaluator per enabled gesture and feeds each incoming coefficient
frame through all of them, in registry order, reporting to one delegate.
Supports pause/unpause (frames are ignored while paused) and reset (all
evaluators back to inactive without emitting events).

Like the evaluators it owns, the service is not thread-safe: call
process_frame from the thread that receives tracker frames.
"""

import logging
from typing import Any, List, Mapping, Optional

import config
from evaluators.blend_shapes import CoefficientFrame, coerce_frame
from evaluators.evaluator_interface import FaceTriggerEvaluator
from evaluators.registry import TriggerThresholds, build_evaluators

logger = logging.getLogger(__name__)


class FaceTrigger:
    """Runs the configured gesture evaluators against each tracker frame."""

    def __init__(
        self,
        delegate: Any,
        thresholds: Optional[TriggerThresholds] = None,
        gestures: Optional[List[str]] = None,
        diagnostic_logging: Optional[bool] = None,
        diagnostic_interval: Optional[int] = None,
    ):
        """
        Args:
            delegate: event sink (FaceTriggerDelegate or any object with the same slots)
            thresholds: per-gesture thresholds; defaults from config
            gestures: subset of gestures to evaluate; defaults to config.FACE_TRIGGER_GESTURES (all if empty)
            diagnostic_logging: log tracked coefficients periodically; defaults from config
            diagnostic_interval: frames between diagnostic lines; defaults from config
        """
        self.delegate = delegate
        self.thresholds = thresholds or TriggerThresholds()
        self.evaluators: List[FaceTriggerEvaluator] = build_evaluators(
            self.thresholds,
            gestures if gestures is not None else config.FACE_TRIGGER_GESTURES,
        )
        self._paused = False
        self._frame_count = 0
        self._diagnostic = (
            config.FACE_TRIGGER_DIAGNOSTIC_LOGGING if diagnostic_logging is None else diagnostic_logging
        )
        self._diagnostic_interval = max(
            1, diagnostic_interval or config.FACE_TRIGGER_DIAGNOSTIC_LOG_INTERVAL
        )
        logger.info(
            "FaceTrigger ready: %s",
            ", ".join(e.gesture for e in self.evaluators) or "(no gestures)",
        )

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def frame_count(self) -> int:
        """Frames evaluated so far (paused frames are not counted)."""
        return self._frame_count

    def pause(self) -> None:
        """Ignore incoming frames until unpause(). Evaluator state is kept."""
        self._paused = True

    def unpause(self) -> None:
        self._paused = False

    def reset(self) -> None:
        """Return every evaluator to inactive (e.g. when the tracked face is lost)."""
        for evaluator in self.evaluators:
            evaluator.reset()
        self._frame_count = 0

    def process_frame(self, raw_frame: Optional[Mapping[Any, Any]]) -> Optional[CoefficientFrame]:
        """
        Evaluate one tracker frame and report transitions to the delegate.

        Returns the normalized frame, or None if the service is paused.
        Delegate callback exceptions propagate.
        """
        if self._paused:
            return None
        frame = coerce_frame(raw_frame)
        self._frame_count += 1
        if self._diagnostic and self._frame_count % self._diagnostic_interval == 0:
            self._log_diagnostic(frame)
        for evaluator in self.evaluators:
            evaluator.evaluate(frame, self.delegate)
        return frame

    def _log_diagnostic(self, frame: CoefficientFrame) -> None:
        diag = {"frame": self._frame_count}
        for evaluator in self.evaluators:
            diag[evaluator.gesture] = {k: round(frame[k], 3) for k in evaluator.keys if k in frame}
        logger.info("face_trigger_diagnostic %s", diag)
