"""
Services package for Face Trigger.

This package contains the runtime pieces around the evaluators:
- FaceTrigger: runs the configured gesture evaluators on each tracker frame
- MediaPipe source: webcam/video capture + Face Landmarker blend shapes
"""
