"""
Hand Gesture Recognition Core

Turns per-frame MediaPipe hand landmarks into a single debounced gesture
label: role assignment, finger-state rules for one and two hands, and a
stability filter.
"""

__version__ = "0.1.0"
__author__ = "SignLens Team"

from .types import Hand, FingerState, HandRoles, GestureSinkProto, UNKNOWN, TWO_HANDS_DETECTED
from .errors import SignLensError, InvalidInputError, ConfigError
from .config import load_config, Cfg
from .landmarks import finger_states, hand_distance, hands_from_results
from .roles import HandRoleAssigner
from .registry import GestureRule, PairRule, GestureRegistry, default_registry
from .classifier import SingleHandClassifier, TwoHandClassifier
from .stability import MajorityVoteFilter, RunLengthLockFilter, make_stability_filter
from .pipeline import GestureRecognizer
from .display_mock import MockDisplay, format_gesture_name

__all__ = [
    "Hand",
    "FingerState",
    "HandRoles",
    "GestureSinkProto",
    "UNKNOWN",
    "TWO_HANDS_DETECTED",
    "SignLensError",
    "InvalidInputError",
    "ConfigError",
    "load_config",
    "Cfg",
    "finger_states",
    "hand_distance",
    "hands_from_results",
    "HandRoleAssigner",
    "GestureRule",
    "PairRule",
    "GestureRegistry",
    "default_registry",
    "SingleHandClassifier",
    "TwoHandClassifier",
    "MajorityVoteFilter",
    "RunLengthLockFilter",
    "make_stability_filter",
    "GestureRecognizer",
    "MockDisplay",
    "format_gesture_name",
]
