#!/usr/bin/env python3
"""
Live gesture triggers from a webcam (or video file).

Reads frames with OpenCV, extracts blend shapes with the MediaPipe Face
Landmarker, and logs every gesture event the FaceTrigger service reports.

Usage: python run_face_trigger.py [--camera N | --video PATH] [--model PATH]
                                  [--gestures smile,blink] [--max-frames N] [--verbose]
"""

import argparse
import logging
import os
import sys

# Ensure project root is on path
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, PROJECT_ROOT)

import config
from evaluators.delegate import FaceTriggerDelegate
from evaluators.registry import GESTURES

logger = logging.getLogger("face_trigger")


def build_logging_delegate() -> FaceTriggerDelegate:
    """Delegate that logs every changed/fired slot for every gesture."""
    slots = {}
    for gesture in GESTURES + ["blink_left", "blink_right"]:
        slots[f"on_{gesture}_changed"] = (lambda g: lambda active: logger.info("%s -> %s", g, active))(gesture)
        slots[f"on_{gesture}"] = (lambda g: lambda: logger.info("%s fired", g))(gesture)
    return FaceTriggerDelegate(**slots)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Log facial gesture triggers from a webcam or video file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_face_trigger.py
  python run_face_trigger.py --camera 1 --gestures smile,blink
  python run_face_trigger.py --video clip.mp4 --max-frames 300 --verbose
""",
    )
    parser.add_argument("--camera", type=int, default=config.FACE_TRIGGER_CAMERA_INDEX, help="Camera index")
    parser.add_argument("--video", default=None, help="Video file to read instead of a camera")
    parser.add_argument("--model", default=config.FACE_LANDMARKER_MODEL_PATH, help="face_landmarker.task path")
    parser.add_argument("--gestures", default="", help="Comma-separated gestures (default: all)")
    parser.add_argument("--max-frames", type=int, default=0, help="Stop after N frames with a face (0 = no limit)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable diagnostic logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Imported here so --help works without the capture stack loaded
    from services.face_trigger import FaceTrigger
    from services.mediapipe_source import MediaPipeBlendShapeSource

    gestures = [g for g in args.gestures.split(",") if g.strip()] or None
    try:
        trigger = FaceTrigger(
            build_logging_delegate(),
            gestures=gestures,
            diagnostic_logging=True if args.verbose else None,
        )
    except ValueError as e:
        parser.error(str(e))

    source = args.video if args.video else args.camera
    try:
        with MediaPipeBlendShapeSource(args.model, source=source) as capture:
            for frame in capture.frames():
                trigger.process_frame(frame)
                if args.max_frames and trigger.frame_count >= args.max_frames:
                    break
    except (FileNotFoundError, RuntimeError) as e:
        logger.error("%s", e)
        return 1
    except KeyboardInterrupt:
        pass
    logger.info("Processed %d frames", trigger.frame_count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
