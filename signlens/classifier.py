"""
Single-hand and two-hand sign classification for one frame.
"""
from typing import Optional, Sequence

from .config import ClassifierConfig
from .landmarks import finger_states, hand_distance
from .registry import GestureRegistry, default_registry
from .types import Landmark, TWO_HANDS_DETECTED, UNKNOWN


class SingleHandClassifier:
    """Maps one hand's landmarks to a sign name through the one-hand rules."""

    def __init__(self, cfg: ClassifierConfig, registry: Optional[GestureRegistry] = None):
        self.cfg = cfg
        self.registry = registry or default_registry(cfg)

    def classify(self, landmarks: Sequence[Landmark]) -> str:
        """
        Classify one hand.

        Args:
            landmarks: List of 21 validated hand landmarks

        Returns:
            Name of the first matching rule, or UNKNOWN
        """
        fingers = finger_states(landmarks, self.cfg.thumb_open_threshold)
        return self.registry.match_one(fingers, landmarks) or UNKNOWN


class TwoHandClassifier:
    """Combines the signs of both hands and their wrist distance into a paired sign."""

    def __init__(self, cfg: ClassifierConfig, registry: Optional[GestureRegistry] = None,
                 single: Optional[SingleHandClassifier] = None):
        self.cfg = cfg
        self.registry = registry or default_registry(cfg)
        self.single = single or SingleHandClassifier(cfg, self.registry)

    def classify(self, left: Sequence[Landmark], right: Sequence[Landmark]) -> str:
        """
        Classify a pair of hands.

        Args:
            left: Landmarks of the hand in the left slot
            right: Landmarks of the hand in the right slot

        Returns:
            Paired sign name, or TWO_HANDS_DETECTED when either hand is
            unresolved or no pair rule matches
        """
        left_sign = self.single.classify(left)
        right_sign = self.single.classify(right)
        if left_sign == UNKNOWN or right_sign == UNKNOWN:
            return TWO_HANDS_DETECTED

        distance = hand_distance(left, right)
        return self.registry.match_pair(left_sign, right_sign, distance) or TWO_HANDS_DETECTED
