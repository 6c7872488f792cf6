"""
Landmark validation and per-finger geometry.
"""
import math
import numbers
from typing import Any, List, Optional, Sequence

from .errors import InvalidInputError
from .types import FingerState, Hand, HANDEDNESS_LABELS, Landmark, NUM_LANDMARKS, WRIST

# Thumb: tip=4, base (MCP)=2, IP=3
THUMB_TIP = 4
THUMB_IP = 3
THUMB_BASE = 2

INDEX_MCP = 5
INDEX_TIP = 8

FINGER_TIPS = [8, 12, 16, 20]
FINGER_PIPS = [6, 10, 14, 18]


def validate_hand(hand: Hand, hand_index: int, require_handedness: bool = False) -> None:
    """
    Check that a hand can be classified.

    Args:
        hand: Hand to check
        hand_index: Position of the hand in the frame, used in the error
        require_handedness: Whether a "Left"/"Right" label is mandatory

    Raises:
        InvalidInputError: naming the hand and the offending field
    """
    landmarks = hand.landmarks
    if landmarks is None or len(landmarks) != NUM_LANDMARKS:
        count = 0 if landmarks is None else len(landmarks)
        raise InvalidInputError(
            f"expected {NUM_LANDMARKS} landmarks, got {count}",
            hand_index=hand_index, field="landmarks"
        )
    for i, point in enumerate(landmarks):
        try:
            x, y = point[0], point[1]
        except (TypeError, IndexError, KeyError):
            raise InvalidInputError(
                f"landmark {i} has no (x, y) pair: {point!r}",
                hand_index=hand_index, field="landmarks"
            ) from None
        if not (isinstance(x, numbers.Real) and isinstance(y, numbers.Real)):
            raise InvalidInputError(
                f"landmark {i} has non-numeric coordinates: {point!r}",
                hand_index=hand_index, field="landmarks"
            )
    if require_handedness and hand.handedness not in HANDEDNESS_LABELS:
        raise InvalidInputError(
            f"expected one of {HANDEDNESS_LABELS}, got {hand.handedness!r}",
            hand_index=hand_index, field="handedness"
        )


def finger_states(landmarks: Sequence[Landmark], thumb_threshold: float = 0.05) -> FingerState:
    """
    Classify each finger as open or closed.

    Index to pinky are open when the tip is above (smaller y than) the PIP
    joint, which assumes a roughly upright hand. The thumb is open when the
    horizontal gap between tip and base exceeds thumb_threshold, in either
    direction.

    Args:
        landmarks: List of 21 hand landmarks
        thumb_threshold: Minimum |tip.x - base.x| for an open thumb

    Returns:
        FingerState for this frame
    """
    thumb = abs(landmarks[THUMB_TIP][0] - landmarks[THUMB_BASE][0]) > thumb_threshold
    index, middle, ring, pinky = (
        landmarks[tip][1] < landmarks[pip][1]  # inverted y-axis
        for tip, pip in zip(FINGER_TIPS, FINGER_PIPS)
    )
    return FingerState(thumb=thumb, index=index, middle=middle, ring=ring, pinky=pinky)


def wrist_x(landmarks: Sequence[Landmark]) -> float:
    return landmarks[WRIST][0]


def hand_distance(left: Sequence[Landmark], right: Sequence[Landmark]) -> float:
    """Euclidean distance between the two wrists in normalized units."""
    dx = left[WRIST][0] - right[WRIST][0]
    dy = left[WRIST][1] - right[WRIST][1]
    return math.hypot(dx, dy)


def hands_from_results(results: Any) -> List[Hand]:
    """
    Convert a MediaPipe Hands result into core Hand objects.

    Works on anything shaped like ``mp.solutions.hands.Hands.process`` output:
    ``multi_hand_landmarks[i].landmark[j].x/.y/.z`` and
    ``multi_handedness[i].classification[0].label``.

    Args:
        results: MediaPipe result object

    Returns:
        List of hands in tracker order (empty if no hand detected)
    """
    multi_landmarks = getattr(results, "multi_hand_landmarks", None)
    if not multi_landmarks:
        return []

    multi_handedness = getattr(results, "multi_handedness", None) or []
    hands = []
    for i, hand_landmarks in enumerate(multi_landmarks):
        points = [(lm.x, lm.y, lm.z) for lm in hand_landmarks.landmark]
        label: Optional[str] = None
        if i < len(multi_handedness) and multi_handedness[i].classification:
            label = multi_handedness[i].classification[0].label
        hands.append(Hand(landmarks=points, handedness=label))
    return hands
