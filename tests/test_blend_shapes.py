"""
Blend shape vocabulary and frame coercion tests.
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import unittest
from types import SimpleNamespace

import numpy as np


class TestBlendShapeLocation(unittest.TestCase):

    def test_vocabulary_size(self):
        """52 ARKit / MediaPipe blend shapes, names unique."""
        from evaluators.blend_shapes import BlendShapeLocation, LOCATION_NAMES
        self.assertEqual(len(BlendShapeLocation), 52)
        self.assertEqual(len(set(LOCATION_NAMES)), 52)

    def test_tracked_locations_present(self):
        from evaluators.blend_shapes import LOCATION_NAMES
        for name in (
            "mouthSmileLeft", "mouthSmileRight", "eyeBlinkLeft", "eyeBlinkRight",
            "browDownLeft", "browDownRight", "browInnerUp", "eyeSquintLeft", "eyeSquintRight",
            "cheekPuff", "mouthPucker", "jawOpen", "jawLeft", "jawRight",
        ):
            self.assertIn(name, LOCATION_NAMES)

    def test_location_name(self):
        from evaluators.blend_shapes import BlendShapeLocation, location_name
        self.assertEqual(location_name(BlendShapeLocation.JAW_OPEN), "jawOpen")
        self.assertEqual(location_name("jawOpen"), "jawOpen")
        with self.assertRaises(ValueError):
            location_name("jaw_open")


class TestCoerceFrame(unittest.TestCase):

    def test_enum_keys_and_numpy_values(self):
        from evaluators.blend_shapes import BlendShapeLocation, coerce_frame
        frame = coerce_frame({
            BlendShapeLocation.JAW_OPEN: np.float32(0.5),
            "cheekPuff": np.float64(0.25),
        })
        self.assertEqual(frame, {"jawOpen": 0.5, "cheekPuff": 0.25})
        self.assertIsInstance(frame["jawOpen"], float)

    def test_drops_unknown_and_none(self):
        from evaluators.blend_shapes import coerce_frame
        frame = coerce_frame({"_neutral": 0.9, "jawOpen": None, "mouthPucker": 0.1})
        self.assertEqual(frame, {"mouthPucker": 0.1})

    def test_empty_and_none(self):
        from evaluators.blend_shapes import coerce_frame
        self.assertEqual(coerce_frame(None), {})
        self.assertEqual(coerce_frame({}), {})


class TestFrameBuilders(unittest.TestCase):

    def test_frame_from_scores_default_order(self):
        from evaluators.blend_shapes import LOCATION_NAMES, frame_from_scores
        scores = np.linspace(0.0, 1.0, 52)
        frame = frame_from_scores(scores)
        self.assertEqual(len(frame), 52)
        self.assertAlmostEqual(frame[LOCATION_NAMES[0]], 0.0)
        self.assertAlmostEqual(frame[LOCATION_NAMES[-1]], 1.0)

    def test_frame_from_scores_custom_names_and_nan(self):
        from evaluators.blend_shapes import frame_from_scores
        frame = frame_from_scores([0.3, float("nan")], names=["jawOpen", "cheekPuff"])
        self.assertEqual(frame, {"jawOpen": 0.3})

    def test_frame_from_scores_length_mismatch(self):
        from evaluators.blend_shapes import frame_from_scores
        with self.assertRaises(ValueError):
            frame_from_scores([0.1, 0.2])

    def test_frame_from_categories(self):
        from evaluators.blend_shapes import frame_from_categories
        cats = [
            SimpleNamespace(category_name="_neutral", score=0.7),
            SimpleNamespace(category_name="eyeBlinkLeft", score=0.85),
        ]
        self.assertEqual(frame_from_categories(cats), {"eyeBlinkLeft": 0.85})


class TestDelegateEmit(unittest.TestCase):

    def test_effect_for_slot_names(self):
        from evaluators.delegate import effect_for
        eff = effect_for("blink_left")
        self.assertEqual(eff.changed_slot, "on_blink_left_changed")
        self.assertEqual(eff.fired_slot, "on_blink_left")

    def test_emit_inactive_skips_fired(self):
        from evaluators.delegate import FaceTriggerDelegate, effect_for, emit
        calls = []
        d = FaceTriggerDelegate(on_squint_changed=calls.append, on_squint=lambda: calls.append("fired"))
        emit(d, effect_for("squint"), False)
        self.assertEqual(calls, [False])
        emit(d, effect_for("squint"), True)
        self.assertEqual(calls, [False, True, "fired"])

    def test_emit_none_effect_is_noop(self):
        from evaluators.delegate import emit
        emit(object(), None, True)

    def test_delegate_has_all_slots(self):
        from dataclasses import fields
        from evaluators.delegate import FaceTriggerDelegate
        self.assertEqual(len(fields(FaceTriggerDelegate)), 24)


if __name__ == "__main__":
    unittest.main()
