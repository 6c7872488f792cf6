"""
Temporal debouncing of the raw per-frame gesture label.
"""
import logging
import math
import time
from collections import Counter, deque
from typing import Deque, Optional, Union

from .config import StabilityConfig

logger = logging.getLogger(__name__)


class MajorityVoteFilter:
    """
    Sliding-window majority vote over the last N raw labels.

    Features:
    - No output change until the window is full
    - A label is confirmed once it fills ceil(N * threshold) slots
    - Sticky: a weak window keeps the previous confirmed label, even None frames
    """

    def __init__(self, window_size: int = 5, threshold: float = 0.8):
        """Initialize the filter with an empty window."""
        self.window_size = window_size
        self.threshold = threshold
        self.required = math.ceil(window_size * threshold)
        self.history: Deque[Optional[str]] = deque(maxlen=window_size)
        self.confirmed: Optional[str] = None

    def update(self, label: Optional[str], now: Optional[float] = None) -> Optional[str]:
        """
        Push a raw label and return the confirmed label.

        Args:
            label: Raw label for this frame (None when nothing was recognized)
            now: Unused, accepted for interface parity with RunLengthLockFilter

        Returns:
            Current confirmed label
        """
        self.history.append(label)

        if len(self.history) < self.window_size:
            return self.confirmed

        counts = Counter(g for g in self.history if g is not None)
        if not counts:
            return self.confirmed

        # most_common keeps first-seen order among equal counts
        candidate, count = counts.most_common(1)[0]
        if count >= self.required:
            if candidate != self.confirmed:
                logger.debug("Confirmed %s (%d/%d)", candidate, count, self.window_size)
            self.confirmed = candidate
        return self.confirmed

    def reset(self) -> None:
        """Clear the window and the confirmed label."""
        self.history.clear()
        self.confirmed = None


class RunLengthLockFilter:
    """
    Confirms a label after a run of identical frames, then holds it for a lock period.

    While locked every raw label is ignored. After the lock expires the run
    counter starts again from the next raw label.
    """

    def __init__(self, required_frames: int = 7, lock_duration_ms: int = 500):
        """Initialize the filter with no run and no lock."""
        self.required_frames = required_frames
        self.lock_duration_s = lock_duration_ms / 1000.0
        self.run_label: Optional[str] = None
        self.run_length = 0
        self.lock_until: Optional[float] = None
        self.confirmed: Optional[str] = None

    def update(self, label: Optional[str], now: Optional[float] = None) -> Optional[str]:
        """
        Push a raw label and return the confirmed label.

        Args:
            label: Raw label for this frame (None when nothing was recognized)
            now: Timestamp in seconds; defaults to time.monotonic()

        Returns:
            Current confirmed label
        """
        if now is None:
            now = time.monotonic()

        if self.lock_until is not None:
            if now < self.lock_until:
                return self.confirmed
            logger.debug("Lock on %s expired", self.confirmed)
            self.lock_until = None
            self.run_label = None
            self.run_length = 0

        if label == self.run_label and self.run_length > 0:
            self.run_length += 1
        else:
            self.run_label = label
            self.run_length = 1

        if label is not None and self.run_length >= self.required_frames:
            self.confirmed = label
            self.lock_until = now + self.lock_duration_s
            self.run_length = 0
            logger.debug("Confirmed %s, locked for %.0f ms", label, self.lock_duration_s * 1000)

        return self.confirmed

    def reset(self) -> None:
        """Clear the run counter, the lock and the confirmed label."""
        self.run_label = None
        self.run_length = 0
        self.lock_until = None
        self.confirmed = None


StabilityFilter = Union[MajorityVoteFilter, RunLengthLockFilter]


def make_stability_filter(cfg: StabilityConfig) -> StabilityFilter:
    """Create the filter selected by cfg.policy."""
    if cfg.policy == "majority":
        return MajorityVoteFilter(cfg.window_size, cfg.majority_threshold)
    if cfg.policy == "lock":
        return RunLengthLockFilter(cfg.required_frames, cfg.lock_duration_ms)
    raise ValueError(f"Unknown stability policy: {cfg.policy}")
