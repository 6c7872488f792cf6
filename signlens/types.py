"""
Type definitions for the gesture recognition core.
"""
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence, Tuple, runtime_checkable


# (x, y) or (x, y, z) in normalized camera space; z is ignored
Landmark = Tuple[float, ...]

NUM_LANDMARKS = 21
WRIST = 0

HANDEDNESS_LABELS = ("Left", "Right")

# Single hand with no matching rule
UNKNOWN = "Unknown"
# Two hands present but no pair rule resolved
TWO_HANDS_DETECTED = "Two hands detected"


@dataclass(frozen=True)
class Hand:
    """One detected hand for a single frame."""
    landmarks: Sequence[Landmark]  # length 21
    handedness: Optional[str] = None  # "Left" / "Right" as reported by the tracker


@dataclass(frozen=True)
class FingerState:
    """Open (extended) flag per finger for one hand in one frame."""
    thumb: bool
    index: bool
    middle: bool
    ring: bool
    pinky: bool


@dataclass(frozen=True)
class HandRoles:
    """Screen-relative left/right slots for the hands of one frame."""
    left: Optional[Hand] = None
    right: Optional[Hand] = None

    @property
    def count(self) -> int:
        return (self.left is not None) + (self.right is not None)


@runtime_checkable
class GestureSinkProto(Protocol):
    """Abstract protocol for UI layers that display the confirmed gesture."""

    async def show(self, gesture: Optional[str]) -> None:
        """Display the confirmed gesture, or the idle state when None."""
        ...
