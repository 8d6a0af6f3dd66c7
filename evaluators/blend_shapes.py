"""
Blend Shape Vocabulary Module

Defines the closed set of named facial locations reported by the face tracker
(ARKit / MediaPipe Face Landmarker naming, 52 entries) and helpers that turn
raw tracker output into a coefficient frame: a plain dict from location name
to float intensity in [0, 1].

Note that the tracker's "left" and "right" are mirrored relative to the
observed person. The names here are the tracker's names; evaluators that care
about the person's own left/right cross-map them in their gesture tables.
"""

import logging
import math
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Union

import numpy as np

logger = logging.getLogger(__name__)


class BlendShapeLocation(str, Enum):
    """Enumeration of tracked blend shape locations (tracker naming). Members compare equal to their names."""
    # Eyes
    EYE_BLINK_LEFT = "eyeBlinkLeft"
    EYE_LOOK_DOWN_LEFT = "eyeLookDownLeft"
    EYE_LOOK_IN_LEFT = "eyeLookInLeft"
    EYE_LOOK_OUT_LEFT = "eyeLookOutLeft"
    EYE_LOOK_UP_LEFT = "eyeLookUpLeft"
    EYE_SQUINT_LEFT = "eyeSquintLeft"
    EYE_WIDE_LEFT = "eyeWideLeft"
    EYE_BLINK_RIGHT = "eyeBlinkRight"
    EYE_LOOK_DOWN_RIGHT = "eyeLookDownRight"
    EYE_LOOK_IN_RIGHT = "eyeLookInRight"
    EYE_LOOK_OUT_RIGHT = "eyeLookOutRight"
    EYE_LOOK_UP_RIGHT = "eyeLookUpRight"
    EYE_SQUINT_RIGHT = "eyeSquintRight"
    EYE_WIDE_RIGHT = "eyeWideRight"
    # Jaw
    JAW_FORWARD = "jawForward"
    JAW_LEFT = "jawLeft"
    JAW_RIGHT = "jawRight"
    JAW_OPEN = "jawOpen"
    # Mouth
    MOUTH_CLOSE = "mouthClose"
    MOUTH_FUNNEL = "mouthFunnel"
    MOUTH_PUCKER = "mouthPucker"
    MOUTH_LEFT = "mouthLeft"
    MOUTH_RIGHT = "mouthRight"
    MOUTH_SMILE_LEFT = "mouthSmileLeft"
    MOUTH_SMILE_RIGHT = "mouthSmileRight"
    MOUTH_FROWN_LEFT = "mouthFrownLeft"
    MOUTH_FROWN_RIGHT = "mouthFrownRight"
    MOUTH_DIMPLE_LEFT = "mouthDimpleLeft"
    MOUTH_DIMPLE_RIGHT = "mouthDimpleRight"
    MOUTH_STRETCH_LEFT = "mouthStretchLeft"
    MOUTH_STRETCH_RIGHT = "mouthStretchRight"
    MOUTH_ROLL_LOWER = "mouthRollLower"
    MOUTH_ROLL_UPPER = "mouthRollUpper"
    MOUTH_SHRUG_LOWER = "mouthShrugLower"
    MOUTH_SHRUG_UPPER = "mouthShrugUpper"
    MOUTH_PRESS_LEFT = "mouthPressLeft"
    MOUTH_PRESS_RIGHT = "mouthPressRight"
    MOUTH_LOWER_DOWN_LEFT = "mouthLowerDownLeft"
    MOUTH_LOWER_DOWN_RIGHT = "mouthLowerDownRight"
    MOUTH_UPPER_UP_LEFT = "mouthUpperUpLeft"
    MOUTH_UPPER_UP_RIGHT = "mouthUpperUpRight"
    # Brows
    BROW_DOWN_LEFT = "browDownLeft"
    BROW_DOWN_RIGHT = "browDownRight"
    BROW_INNER_UP = "browInnerUp"
    BROW_OUTER_UP_LEFT = "browOuterUpLeft"
    BROW_OUTER_UP_RIGHT = "browOuterUpRight"
    # Cheeks, nose, tongue
    CHEEK_PUFF = "cheekPuff"
    CHEEK_SQUINT_LEFT = "cheekSquintLeft"
    CHEEK_SQUINT_RIGHT = "cheekSquintRight"
    NOSE_SNEER_LEFT = "noseSneerLeft"
    NOSE_SNEER_RIGHT = "noseSneerRight"
    TONGUE_OUT = "tongueOut"


# Type alias: location name -> intensity. Keys may be names or BlendShapeLocation members.
CoefficientFrame = Dict[str, float]

# All location names in declaration order (single shared list; no per-call allocation).
LOCATION_NAMES = [loc.value for loc in BlendShapeLocation]
_KNOWN_NAMES = frozenset(LOCATION_NAMES)


def location_name(location: Union[BlendShapeLocation, str]) -> str:
    """
    Return the tracker name for a location given as enum member or string.

    Raises:
        ValueError: if the name is not part of the blend shape vocabulary
    """
    if isinstance(location, BlendShapeLocation):
        return location.value
    name = str(location)
    if name not in _KNOWN_NAMES:
        raise ValueError(f"Unknown blend shape location: {name!r}")
    return name


def coerce_frame(raw: Optional[Mapping[Any, Any]]) -> CoefficientFrame:
    """
    Normalize tracker output into a coefficient frame.

    Keys may be BlendShapeLocation members or tracker names; values any real
    number (numpy scalars included). Unknown names (e.g. MediaPipe's
    "_neutral") and None values are dropped so they read as "missing" to the
    evaluators.
    """
    frame: CoefficientFrame = {}
    if not raw:
        return frame
    for key, value in raw.items():
        name = key.value if isinstance(key, BlendShapeLocation) else str(key)
        if name not in _KNOWN_NAMES:
            logger.debug("Dropping unknown blend shape %s", name)
            continue
        if value is None:
            continue
        frame[name] = float(value)
    return frame


def frame_from_scores(scores: Any, names: Optional[Sequence[str]] = None) -> CoefficientFrame:
    """
    Build a frame from a score vector (e.g. a 52-element numpy array).
    NaN entries are dropped and read as missing.

    Args:
        scores: 1-D array-like of intensities
        names: location names matching scores order; defaults to LOCATION_NAMES

    Raises:
        ValueError: if scores and names differ in length
    """
    arr = np.asarray(scores, dtype=np.float64).reshape(-1)
    order = list(names) if names is not None else LOCATION_NAMES
    if arr.shape[0] != len(order):
        raise ValueError(f"Expected {len(order)} scores, got {arr.shape[0]}")
    return coerce_frame({n: v for n, v in zip(order, arr) if not math.isnan(v)})


def frame_from_categories(categories: Iterable[Any]) -> CoefficientFrame:
    """
    Build a frame from MediaPipe Category-like objects (category_name, score).
    """
    return coerce_frame({c.category_name: c.score for c in categories})
