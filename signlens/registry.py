"""
Ordered rule tables for one-hand and two-hand signs.

Rules are evaluated top to bottom and the first match wins, so the order of
each table is part of its behaviour.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

from .config import ClassifierConfig
from .landmarks import INDEX_MCP, INDEX_TIP, THUMB_IP, THUMB_TIP
from .types import FingerState, Landmark

logger = logging.getLogger(__name__)

FINGERS = ("thumb", "index", "middle", "ring", "pinky")

Predicate = Callable[[FingerState, Sequence[Landmark]], bool]


@dataclass(frozen=True)
class GestureRule:
    """
    A one-hand sign.

    Matches either on a partial finger pattern (fingers left out are
    wildcards) or on a predicate over the finger state and raw landmarks.
    """
    name: str
    fingers: Dict[str, bool] = field(default_factory=dict)
    predicate: Optional[Predicate] = None

    def __post_init__(self):
        unknown = set(self.fingers) - set(FINGERS)
        if unknown:
            raise ValueError(f"Unknown finger names in rule {self.name}: {sorted(unknown)}")
        if not self.fingers and self.predicate is None:
            raise ValueError(f"Rule {self.name} needs a finger pattern or a predicate")

    def matches(self, fingers: FingerState, landmarks: Sequence[Landmark]) -> bool:
        if self.predicate is not None:
            return self.predicate(fingers, landmarks)
        return _pattern(fingers, self.fingers)


@dataclass(frozen=True)
class PairRule:
    """A two-hand sign made of a left sign, a right sign and an optional proximity gate."""
    name: str
    left: str
    right: str
    max_distance: Optional[float] = None

    def matches(self, left: str, right: str, distance: float) -> bool:
        if left != self.left or right != self.right:
            return False
        return self.max_distance is None or distance < self.max_distance


class GestureRegistry:
    """Holds the ordered one-hand and two-hand rule tables."""

    def __init__(self, one_hand: Sequence[GestureRule], two_hand: Sequence[PairRule]):
        self.one_hand: List[GestureRule] = list(one_hand)
        self.two_hand: List[PairRule] = list(two_hand)

    def match_one(self, fingers: FingerState, landmarks: Sequence[Landmark]) -> Optional[str]:
        """Return the first one-hand rule name that matches, or None."""
        for rule in self.one_hand:
            if rule.matches(fingers, landmarks):
                logger.debug("One-hand rule matched: %s (%s)", rule.name, fingers)
                return rule.name
        return None

    def match_pair(self, left: str, right: str, distance: float) -> Optional[str]:
        """Return the first pair rule name that matches, or None."""
        for rule in self.two_hand:
            if rule.matches(left, right, distance):
                logger.debug("Pair rule matched: %s (%s, %s, d=%.3f)", rule.name, left, right, distance)
                return rule.name
        return None

    @property
    def names(self) -> List[str]:
        return [r.name for r in self.one_hand] + [r.name for r in self.two_hand]


def _only(*open_fingers: str) -> Dict[str, bool]:
    """Full pattern where exactly the given fingers are open."""
    return {name: name in open_fingers for name in FINGERS}


THUMB_ONLY = _only("thumb")
INDEX_ONLY = _only("index")


def _pattern(fingers: FingerState, wanted: Dict[str, bool]) -> bool:
    return all(getattr(fingers, name) == value for name, value in wanted.items())


def thumb_vertical(direction: str, margin: float) -> Predicate:
    """
    Thumb-only pose with the tip clearly above ("up") or below ("down") the IP joint.

    The margin rejects a sideways thumb, where tip and IP sit at nearly the
    same height.
    """
    def predicate(fingers: FingerState, landmarks: Sequence[Landmark]) -> bool:
        if not _pattern(fingers, THUMB_ONLY):
            return False
        rise = landmarks[THUMB_IP][1] - landmarks[THUMB_TIP][1]
        return rise > margin if direction == "up" else -rise > margin
    return predicate


def index_raised(margin: float) -> Predicate:
    """Index-only pose with the index tip at least margin above its MCP knuckle."""
    def predicate(fingers: FingerState, landmarks: Sequence[Landmark]) -> bool:
        if not _pattern(fingers, INDEX_ONLY):
            return False
        return landmarks[INDEX_MCP][1] - landmarks[INDEX_TIP][1] > margin
    return predicate


def default_registry(cfg: ClassifierConfig) -> GestureRegistry:
    """
    Build the canonical sign tables.

    POINTING_UP comes before ONE so a clearly raised index reports
    POINTING_UP while a short or bent index falls through to ONE. The
    proximity-gated SORRY comes before the ungated HELLO on the same signs.
    """
    one_hand = [
        GestureRule("OPEN_PALM", _only(*FINGERS)),
        GestureRule("FIST", _only()),
        GestureRule("POINTING_UP", predicate=index_raised(cfg.pointing_margin)),
        GestureRule("ONE", INDEX_ONLY),
        GestureRule("TWO", _only("index", "middle")),
        GestureRule("THREE", _only("index", "middle", "ring")),
        GestureRule("FOUR", _only("thumb", "index", "middle", "ring")),
        GestureRule("THUMBS_UP", predicate=thumb_vertical("up", cfg.thumb_vertical_margin)),
        GestureRule("THUMBS_DOWN", predicate=thumb_vertical("down", cfg.thumb_vertical_margin)),
    ]
    two_hand = [
        PairRule("SORRY", "OPEN_PALM", "OPEN_PALM", max_distance=cfg.hand_proximity_threshold),
        PairRule("HELLO", "OPEN_PALM", "OPEN_PALM"),
        PairRule("THANK_YOU", "FIST", "FIST"),
        PairRule("EXCELLENT", "THUMBS_UP", "THUMBS_UP"),
        PairRule("PLEASE", "FIST", "OPEN_PALM"),
        PairRule("TOGETHER", "POINTING_UP", "POINTING_UP"),
    ]
    return GestureRegistry(one_hand, two_hand)
