"""
MediaPipe Blend Shape Source

Reads BGR frames from a webcam or video file with OpenCV, runs the MediaPipe
Face Landmarker (with blend shape output) on each one, and yields coefficient
frames ready for the FaceTrigger service.

MediaPipe reports the same 52 ARKit-style blend shape names the evaluators
use, plus a "_neutral" category that coerce_frame drops.
"""

import logging
import os
import time
from typing import Any, Iterator, Optional, Tuple, Union

import cv2
import mediapipe as mp
import numpy as np
from mediapipe.tasks import python as mp_tasks
from mediapipe.tasks.python import vision

from evaluators.blend_shapes import CoefficientFrame, frame_from_categories

logger = logging.getLogger(__name__)


class MediaPipeBlendShapeSource:
    """
    Capture + Face Landmarker pipeline producing one coefficient frame per video frame.

    Usage:
        with MediaPipeBlendShapeSource("face_landmarker.task") as source:
            for frame in source.frames():
                trigger.process_frame(frame)
    """

    def __init__(
        self,
        model_path: str,
        source: Union[int, str] = 0,
        min_detection_confidence: float = 0.5,
        min_tracking_confidence: float = 0.5,
    ):
        """
        Args:
            model_path: path to a face_landmarker.task bundle
            source: camera index or video file path
            min_detection_confidence: Face Landmarker detection confidence (0-1)
            min_tracking_confidence: Face Landmarker tracking confidence (0-1)
        """
        self.model_path = model_path
        self.source = source
        self._det_conf = max(0.01, min(0.99, float(min_detection_confidence)))
        self._track_conf = max(0.01, min(0.99, float(min_tracking_confidence)))
        self.cap: Optional[cv2.VideoCapture] = None
        self._landmarker = None
        self._last_timestamp_ms = -1

    def __enter__(self) -> "MediaPipeBlendShapeSource":
        self.open()
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def open(self) -> None:
        """
        Open the capture and create the Face Landmarker.

        Raises:
            FileNotFoundError: if the model bundle does not exist
            RuntimeError: if the capture cannot be opened
        """
        if not os.path.isfile(self.model_path):
            raise FileNotFoundError(f"Face Landmarker model not found: {self.model_path}")
        self.cap = cv2.VideoCapture(self.source)
        if not self.cap.isOpened():
            self.cap.release()
            self.cap = None
            raise RuntimeError(f"Could not open video source: {self.source!r}")
        self._landmarker = self._create_landmarker()
        logger.info("MediaPipe source opened: source=%s model=%s", self.source, self.model_path)

    def _create_landmarker(self):
        options = vision.FaceLandmarkerOptions(
            base_options=mp_tasks.BaseOptions(model_asset_path=self.model_path),
            running_mode=vision.RunningMode.VIDEO,
            num_faces=1,
            output_face_blendshapes=True,
            min_face_detection_confidence=self._det_conf,
            min_tracking_confidence=self._track_conf,
        )
        return vision.FaceLandmarker.create_from_options(options)

    def _next_timestamp_ms(self) -> int:
        # VIDEO mode requires strictly increasing timestamps
        ts = int(time.monotonic() * 1000)
        if ts <= self._last_timestamp_ms:
            ts = self._last_timestamp_ms + 1
        self._last_timestamp_ms = ts
        return ts

    def detect(self, image_bgr: np.ndarray) -> Optional[CoefficientFrame]:
        """
        Run the Face Landmarker on one BGR image.

        Returns the first face's coefficient frame, or None if no face was found.
        """
        if self._landmarker is None:
            raise RuntimeError("Source is not open")
        if image_bgr is None or image_bgr.size == 0:
            return None
        rgb = cv2.cvtColor(image_bgr, cv2.COLOR_BGR2RGB)
        mp_image = mp.Image(image_format=mp.ImageFormat.SRGB, data=rgb)
        result = self._landmarker.detect_for_video(mp_image, self._next_timestamp_ms())
        return extract_frame(result)

    def read(self) -> Tuple[bool, Optional[CoefficientFrame]]:
        """
        Read and analyze the next video frame.

        Returns:
            (ok, frame): ok is False at end of stream or on read failure;
            frame is None when no face was detected in this video frame.
        """
        if self.cap is None:
            raise RuntimeError("Source is not open")
        ok, image = self.cap.read()
        if not ok or image is None:
            logger.warning("Video frame read failed; stopping source %s", self.source)
            return False, None
        return True, self.detect(image)

    def frames(self) -> Iterator[CoefficientFrame]:
        """Yield coefficient frames until the stream ends. Frames without a face are skipped."""
        while True:
            ok, frame = self.read()
            if not ok:
                return
            if frame is not None:
                yield frame

    def close(self) -> None:
        """Release the capture and the Face Landmarker."""
        if self._landmarker is not None:
            self._landmarker.close()
            self._landmarker = None
        if self.cap is not None:
            self.cap.release()
            self.cap = None


def extract_frame(result: Any) -> Optional[CoefficientFrame]:
    """First face's blend shapes from a FaceLandmarkerResult, or None if no face."""
    blendshapes = getattr(result, "face_blendshapes", None)
    if not blendshapes:
        return None
    return frame_from_categories(blendshapes[0])
