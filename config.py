"""
=============================================================================
CONFIGURATION FOR FACE TRIGGER (config.py)
=============================================================================

WHAT THIS FILE DOES (in plain language):
----------------------------------------
This file holds ALL configurable settings for the project in one place. Other
files read from it. Values come from the environment (e.g. your .env file or
system variables), so you can tune thresholds per device or per user without
changing code.

MAIN GROUPS OF SETTINGS:
------------------------
  1. Gesture thresholds  - How strongly a blend shape must be activated (0-1)
                           before a gesture counts as "on".
  2. Enabled gestures    - Which evaluators the FaceTrigger service builds.
  3. Diagnostic logging  - Optional periodic log of raw coefficients.
  4. Capture             - Camera index and MediaPipe model path for the CLI.

HOW VALUES ARE CHOSEN:
---------------------
  - Environment variables (e.g. FACE_TRIGGER_SMILE_THRESHOLD) override everything.
  - If an env var is not set, we use the default listed here.
  - Thresholds are read once at import; evaluators never reconfigure at runtime.
=============================================================================
"""

import os
from typing import List


def _env_float(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def _env_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


# ============================================================================
# GESTURE THRESHOLDS (blend shape intensity needed to count as "on")
# ============================================================================
# Comparison is inclusive: a coefficient equal to the threshold is active.
# Lower = more sensitive. Brow-down and cheek-puff coefficients rarely get high,
# so their defaults are low; brow-up is noisy near the top, so its default is high.
# ----------------------------------------------------------------------------
SMILE_THRESHOLD: float = _env_float("FACE_TRIGGER_SMILE_THRESHOLD", 0.7)
BLINK_THRESHOLD: float = _env_float("FACE_TRIGGER_BLINK_THRESHOLD", 0.8)
BROW_DOWN_THRESHOLD: float = _env_float("FACE_TRIGGER_BROW_DOWN_THRESHOLD", 0.25)
BROW_UP_THRESHOLD: float = _env_float("FACE_TRIGGER_BROW_UP_THRESHOLD", 0.95)
SQUINT_THRESHOLD: float = _env_float("FACE_TRIGGER_SQUINT_THRESHOLD", 0.8)
CHEEK_PUFF_THRESHOLD: float = _env_float("FACE_TRIGGER_CHEEK_PUFF_THRESHOLD", 0.2)
MOUTH_PUCKER_THRESHOLD: float = _env_float("FACE_TRIGGER_MOUTH_PUCKER_THRESHOLD", 0.7)
JAW_OPEN_THRESHOLD: float = _env_float("FACE_TRIGGER_JAW_OPEN_THRESHOLD", 0.9)
JAW_LEFT_THRESHOLD: float = _env_float("FACE_TRIGGER_JAW_LEFT_THRESHOLD", 0.3)
JAW_RIGHT_THRESHOLD: float = _env_float("FACE_TRIGGER_JAW_RIGHT_THRESHOLD", 0.3)

# ============================================================================
# ENABLED GESTURES
# ============================================================================
# Comma-separated subset, e.g. "smile,blink,jaw_open". Empty = all gestures.
# Unknown names are rejected when the FaceTrigger service is built.
# ----------------------------------------------------------------------------
def _parse_gestures(raw: str) -> List[str]:
    return [g.strip().lower() for g in (raw or "").split(",") if g.strip()]


FACE_TRIGGER_GESTURES: List[str] = _parse_gestures(os.getenv("FACE_TRIGGER_GESTURES", ""))

# ============================================================================
# Diagnostic logging (off by default)
# ============================================================================
# When True, log the tracked coefficients every N frames to aid threshold tuning.
FACE_TRIGGER_DIAGNOSTIC_LOGGING: bool = os.getenv("FACE_TRIGGER_DIAGNOSTIC_LOGGING", "false").lower() == "true"
# Log every N frames (e.g. 30 = once per second at 30 fps). Ignored when logging is disabled.
FACE_TRIGGER_DIAGNOSTIC_LOG_INTERVAL: int = max(1, _env_int("FACE_TRIGGER_DIAGNOSTIC_LOG_INTERVAL", 30))

# ============================================================================
# CAPTURE (used by run_face_trigger.py and services.mediapipe_source)
# ============================================================================
# MediaPipe Face Landmarker model bundle (face_landmarker.task), downloadable from
# the MediaPipe model page. Must be a model that outputs blend shapes.
FACE_LANDMARKER_MODEL_PATH: str = (os.getenv("FACE_LANDMARKER_MODEL_PATH") or "face_landmarker.task").strip()
FACE_TRIGGER_CAMERA_INDEX: int = _env_int("FACE_TRIGGER_CAMERA_INDEX", 0)
