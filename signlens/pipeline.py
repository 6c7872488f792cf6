"""
Per-stream gesture recognizer: hands in, debounced gesture label out.
"""
import logging
from typing import Optional, Sequence

from .classifier import SingleHandClassifier, TwoHandClassifier
from .config import Cfg
from .registry import GestureRegistry, default_registry
from .roles import HandRoleAssigner
from .stability import make_stability_filter
from .types import Hand

logger = logging.getLogger(__name__)


class GestureRecognizer:
    """
    Main per-frame entry point that coordinates role assignment, classification
    and stabilization.

    Each video stream owns its own recognizer; nothing here is shared between
    instances.
    """

    def __init__(self, cfg: Cfg, registry: Optional[GestureRegistry] = None):
        """Initialize the recognizer with configuration."""
        self.cfg = cfg
        self.registry = registry or default_registry(cfg.classifier)
        self.roles = HandRoleAssigner()
        self.single = SingleHandClassifier(cfg.classifier, self.registry)
        self.pair = TwoHandClassifier(cfg.classifier, self.registry, self.single)
        self.stability = make_stability_filter(cfg.stability)

        self.last_raw: Optional[str] = None
        self.frame_count = 0

    def classify_raw(self, hands: Sequence[Hand]) -> Optional[str]:
        """
        Classify one frame without touching stability state.

        Args:
            hands: 0-2 hands reported by the tracker

        Returns:
            Raw label for the frame, or None if no hand is present

        Raises:
            InvalidInputError: if the hand set cannot be classified
        """
        roles = self.roles.assign(hands)
        if roles.left is not None and roles.right is not None:
            return self.pair.classify(roles.left.landmarks, roles.right.landmarks)
        hand = roles.left or roles.right
        if hand is not None:
            return self.single.classify(hand.landmarks)
        return None

    def process_frame(self, hands: Sequence[Hand], t_now: Optional[float] = None) -> Optional[str]:
        """
        Process a frame and return the confirmed gesture.

        Args:
            hands: 0-2 hands reported by the tracker
            t_now: Current timestamp in seconds, used by the lock policy

        Returns:
            Confirmed gesture label, or None if nothing is confirmed yet

        Raises:
            InvalidInputError: if the hand set cannot be classified; stability
                state is left unchanged
        """
        raw = self.classify_raw(hands)

        self.last_raw = raw
        self.frame_count += 1
        return self.stability.update(raw, t_now)

    @property
    def confirmed(self) -> Optional[str]:
        return self.stability.confirmed

    def reset(self) -> None:
        """Reset stability state, e.g. when a capture session restarts."""
        logger.debug("Resetting recognizer after %d frames", self.frame_count)
        self.stability.reset()
        self.last_raw = None
        self.frame_count = 0
