"""
Test cases for the sign registry and the one-hand / two-hand classifiers.
"""
import unittest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from signlens.classifier import SingleHandClassifier, TwoHandClassifier
from signlens.config import load_config
from signlens.registry import GestureRegistry, GestureRule, PairRule, default_registry
from signlens.types import FingerState, TWO_HANDS_DETECTED, UNKNOWN
from tests import hands as poses
from tests.hands import make_landmarks


class TestGestureRule(unittest.TestCase):
    """Test individual rule matching."""

    def test_partial_pattern_wildcards(self):
        """Test that fingers left out of the pattern are ignored."""
        rule = GestureRule("INDEX_UP", {"index": True})
        landmarks = make_landmarks()
        self.assertTrue(rule.matches(FingerState(True, True, False, False, True), landmarks))
        self.assertTrue(rule.matches(FingerState(False, True, True, True, False), landmarks))
        self.assertFalse(rule.matches(FingerState(True, False, True, True, True), landmarks))

    def test_rule_needs_pattern_or_predicate(self):
        with self.assertRaises(ValueError):
            GestureRule("EMPTY")
        with self.assertRaises(ValueError):
            GestureRule("TYPO", {"indx": True})

    def test_pair_rule_distance_is_strict(self):
        rule = PairRule("CLOSE", "A", "B", max_distance=0.2)
        self.assertTrue(rule.matches("A", "B", 0.19))
        self.assertFalse(rule.matches("A", "B", 0.2))
        self.assertFalse(rule.matches("B", "A", 0.1))


class TestRegistryOrder(unittest.TestCase):
    """Test first-match-wins evaluation."""

    def test_earlier_rule_wins(self):
        """Test that a state matching two rules returns the earlier one."""
        state = FingerState(False, True, False, False, False)
        landmarks = make_landmarks(index=True)
        first = GestureRule("FIRST", {"index": True})
        second = GestureRule("SECOND", {"index": True, "middle": False})

        self.assertEqual(GestureRegistry([first, second], []).match_one(state, landmarks), "FIRST")
        self.assertEqual(GestureRegistry([second, first], []).match_one(state, landmarks), "SECOND")

    def test_gated_pair_must_come_first(self):
        """Test that an ungated pair rule listed first shadows the gated one."""
        gated = PairRule("SORRY", "OPEN_PALM", "OPEN_PALM", max_distance=0.2)
        ungated = PairRule("HELLO", "OPEN_PALM", "OPEN_PALM")

        ordered = GestureRegistry([], [gated, ungated])
        self.assertEqual(ordered.match_pair("OPEN_PALM", "OPEN_PALM", 0.1), "SORRY")

        shadowed = GestureRegistry([], [ungated, gated])
        self.assertEqual(shadowed.match_pair("OPEN_PALM", "OPEN_PALM", 0.1), "HELLO")

    def test_no_match(self):
        registry = GestureRegistry([GestureRule("FIST", {"index": False})], [])
        state = FingerState(False, True, False, False, False)
        self.assertIsNone(registry.match_one(state, make_landmarks(index=True)))
        self.assertIsNone(registry.match_pair("A", "B", 0.5))

    def test_default_names(self):
        registry = default_registry(load_config().classifier)
        self.assertEqual(
            registry.names,
            ["OPEN_PALM", "FIST", "POINTING_UP", "ONE", "TWO", "THREE", "FOUR",
             "THUMBS_UP", "THUMBS_DOWN",
             "SORRY", "HELLO", "THANK_YOU", "EXCELLENT", "PLEASE", "TOGETHER"]
        )


class TestSingleHandClassifier(unittest.TestCase):
    """Test the canonical one-hand signs."""

    def setUp(self):
        self.cfg = load_config()
        self.classifier = SingleHandClassifier(self.cfg.classifier)

    def classify(self, pose):
        return self.classifier.classify(make_landmarks(**pose))

    def test_named_signs(self):
        cases = {
            "OPEN_PALM": poses.OPEN_PALM,
            "FIST": poses.FIST,
            "POINTING_UP": poses.POINTING_UP,
            "ONE": poses.ONE,
            "TWO": poses.TWO,
            "THREE": poses.THREE,
            "FOUR": poses.FOUR,
            "THUMBS_UP": poses.THUMBS_UP,
            "THUMBS_DOWN": poses.THUMBS_DOWN,
        }
        for expected, pose in cases.items():
            with self.subTest(expected=expected):
                self.assertEqual(self.classify(pose), expected)

    def test_sideways_thumb_is_unknown(self):
        """Test that a thumb-only pose without a clear vertical direction is unresolved."""
        self.assertEqual(self.classify(poses.THUMB_SIDEWAYS), UNKNOWN)

    def test_thumb_margin(self):
        """Test that a thumb tip barely above the IP joint is not THUMBS_UP."""
        self.assertEqual(self.classify(dict(thumb=True, thumb_rise=0.05)), UNKNOWN)
        self.assertEqual(self.classify(dict(thumb=True, thumb_rise=0.09)), "THUMBS_UP")

    def test_unlisted_pattern_is_unknown(self):
        """Test that four fingers without the thumb match nothing."""
        pose = dict(index=True, middle=True, ring=True, pinky=True)
        self.assertEqual(self.classify(pose), UNKNOWN)

    def test_four_excludes_pinky(self):
        """Test that FOUR and OPEN_PALM stay distinct."""
        self.assertEqual(self.classify(poses.FOUR), "FOUR")
        self.assertEqual(self.classify(poses.OPEN_PALM), "OPEN_PALM")

    def test_custom_registry(self):
        registry = GestureRegistry([GestureRule("ANY_INDEX", {"index": True})], [])
        classifier = SingleHandClassifier(self.cfg.classifier, registry)
        self.assertEqual(classifier.classify(make_landmarks(**poses.TWO)), "ANY_INDEX")
        self.assertEqual(classifier.classify(make_landmarks()), UNKNOWN)


class TestTwoHandClassifier(unittest.TestCase):
    """Test the canonical two-hand signs."""

    def setUp(self):
        self.cfg = load_config()
        self.classifier = TwoHandClassifier(self.cfg.classifier)

    def classify(self, left_pose, right_pose, left_x=0.3, right_x=0.7):
        left = make_landmarks(wrist_x=left_x, **left_pose)
        right = make_landmarks(wrist_x=right_x, **right_pose)
        return self.classifier.classify(left, right)

    def test_please(self):
        self.assertEqual(self.classify(poses.FIST, poses.OPEN_PALM), "PLEASE")

    def test_please_is_ordered(self):
        """Test that swapping FIST and OPEN_PALM does not give PLEASE."""
        self.assertEqual(self.classify(poses.OPEN_PALM, poses.FIST), TWO_HANDS_DETECTED)

    def test_hello_when_apart(self):
        self.assertEqual(self.classify(poses.OPEN_PALM, poses.OPEN_PALM, 0.3, 0.55), "HELLO")

    def test_sorry_when_close(self):
        self.assertEqual(self.classify(poses.OPEN_PALM, poses.OPEN_PALM, 0.45, 0.55), "SORRY")

    def test_other_pairs(self):
        self.assertEqual(self.classify(poses.FIST, poses.FIST), "THANK_YOU")
        self.assertEqual(self.classify(poses.THUMBS_UP, poses.THUMBS_UP), "EXCELLENT")
        self.assertEqual(self.classify(poses.POINTING_UP, poses.POINTING_UP), "TOGETHER")

    def test_unresolved_hand(self):
        """Test that an unknown sign on either side reports presence only."""
        self.assertEqual(self.classify(poses.THUMB_SIDEWAYS, poses.FIST), TWO_HANDS_DETECTED)
        self.assertEqual(self.classify(poses.FIST, poses.THUMB_SIDEWAYS), TWO_HANDS_DETECTED)

    def test_unpaired_signs(self):
        self.assertEqual(self.classify(poses.TWO, poses.THREE), TWO_HANDS_DETECTED)

    def test_proximity_threshold_from_config(self):
        """Test that the SORRY gate follows hand_proximity_threshold."""
        self.cfg.classifier.hand_proximity_threshold = 0.3
        classifier = TwoHandClassifier(self.cfg.classifier)
        left = make_landmarks(wrist_x=0.3, **poses.OPEN_PALM)
        right = make_landmarks(wrist_x=0.55, **poses.OPEN_PALM)
        self.assertEqual(classifier.classify(left, right), "SORRY")


if __name__ == '__main__':
    unittest.main()
