"""
MediaPipe Hands adapter producing the recognizer's per-frame hand set.
"""
import cv2
import mediapipe as mp
import numpy as np
from typing import List, Sequence

from .landmarks import hands_from_results
from .types import Hand


class HandsTracker:
    """Hand landmark tracker using MediaPipe Hands."""

    def __init__(self, max_num_hands: int = 2, model_complexity: int = 1,
                 min_detection_conf: float = 0.5, min_tracking_conf: float = 0.5):
        """
        Initialize the hands tracker.

        Args:
            max_num_hands: Maximum number of hands to detect
            model_complexity: 0 = lite, 1 = full
            min_detection_conf: Minimum confidence for hand detection
            min_tracking_conf: Minimum confidence for hand tracking
        """
        self.mp_hands = mp.solutions.hands
        self.hands = self.mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=max_num_hands,
            model_complexity=model_complexity,
            min_detection_confidence=min_detection_conf,
            min_tracking_confidence=min_tracking_conf
        )

    def process(self, frame_bgr: np.ndarray) -> List[Hand]:
        """
        Process a frame and return the detected hands.

        Args:
            frame_bgr: Input frame in BGR format

        Returns:
            Up to max_num_hands hands, each with 21 landmarks in [0..1] range
        """
        # Convert BGR to RGB for MediaPipe
        frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)
        results = self.hands.process(frame_rgb)
        return hands_from_results(results)

    def draw_landmarks(self, frame: np.ndarray, hands: Sequence[Hand]) -> np.ndarray:
        """
        Draw hand landmarks and bones on the frame.

        Args:
            frame: Input frame
            hands: Hands returned by process()

        Returns:
            Frame with landmarks drawn
        """
        height, width = frame.shape[:2]

        for hand in hands:
            points = [(int(p[0] * width), int(p[1] * height)) for p in hand.landmarks]
            for a, b in self.mp_hands.HAND_CONNECTIONS:
                cv2.line(frame, points[a], points[b], (0, 255, 0), 2)
            for px, py in points:
                cv2.circle(frame, (px, py), 3, (0, 0, 255), -1)

        return frame

    def close(self) -> None:
        self.hands.close()
