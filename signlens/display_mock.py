"""
Mock display sink for exercising the recognizer without a UI.
"""
import logging
from typing import List, Optional

logger = logging.getLogger(__name__)

IDLE_TEXT = "No gesture detected"


def format_gesture_name(gesture: Optional[str]) -> str:
    """Turn a label such as THANK_YOU into display text ("Thank You")."""
    if not gesture:
        return IDLE_TEXT
    return " ".join(word[:1] + word[1:].lower() for word in gesture.split("_"))


class MockDisplay:
    """Mock sink that logs display text instead of rendering it."""

    def __init__(self):
        """Initialize the mock display."""
        self.show_count = 0
        self.shown: List[str] = []

    async def show(self, gesture: Optional[str]) -> None:
        """Log the display text instead of rendering it."""
        self.show_count += 1
        text = format_gesture_name(gesture)
        self.shown.append(text)
        logger.info("[MockDisplay] %s (call #%d)", text, self.show_count)

    def reset_counters(self) -> None:
        """Reset display counters for testing."""
        self.show_count = 0
        self.shown.clear()
