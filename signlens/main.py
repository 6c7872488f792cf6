"""
Webcam demo application for the gesture recognizer.
"""
import asyncio
import logging
import time
from typing import Optional

import cv2

from .config import load_config
from .display_mock import MockDisplay, format_gesture_name
from .errors import InvalidInputError
from .pipeline import GestureRecognizer
from .tracker import HandsTracker

logger = logging.getLogger(__name__)


class GestureRecognitionApp:
    """Main application class for webcam gesture recognition."""

    def __init__(self, config_path: Optional[str] = None):
        """Initialize the application with configuration."""
        self.config = load_config(config_path)
        self.tracker = HandsTracker(
            max_num_hands=self.config.mediapipe.max_num_hands,
            model_complexity=self.config.mediapipe.model_complexity,
            min_detection_conf=self.config.mediapipe.min_detection_confidence,
            min_tracking_conf=self.config.mediapipe.min_tracking_confidence
        )
        self.display = MockDisplay()
        self.recognizer = GestureRecognizer(self.config)
        self.last_shown: Optional[str] = None

        # Initialize camera
        self.cap = cv2.VideoCapture(self.config.camera.index)
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.config.camera.width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.config.camera.height)
        self.cap.set(cv2.CAP_PROP_FPS, self.config.camera.fps)

        if not self.cap.isOpened():
            raise RuntimeError(f"Failed to open camera {self.config.camera.index}")

    async def run(self):
        """Run the main application loop."""
        logger.info("Starting %s (stability policy: %s)",
                    self.config.display.window_name, self.config.stability.policy)
        logger.info("Press 'q' to quit, 'r' to reset")

        try:
            while True:
                ret, frame = self.cap.read()
                if not ret:
                    logger.error("Failed to read frame from camera")
                    break

                if self.config.display.mirror:
                    frame = cv2.flip(frame, 1)

                hands = self.tracker.process(frame)

                try:
                    gesture = self.recognizer.process_frame(hands, t_now=time.monotonic())
                except InvalidInputError as e:
                    logger.warning("Skipping frame: %s", e)
                    gesture = self.recognizer.confirmed

                if gesture != self.last_shown:
                    await self.display.show(gesture)
                    self.last_shown = gesture

                if hands and self.config.display.show_landmarks:
                    frame = self.tracker.draw_landmarks(frame, hands)

                cv2.putText(frame, format_gesture_name(gesture), (10, 40),
                            cv2.FONT_HERSHEY_SIMPLEX, 1.0,
                            (0, 255, 0) if gesture else (153, 153, 153), 2)
                cv2.putText(frame, f"Hands: {len(hands)}  Raw: {self.recognizer.last_raw}", (10, 75),
                            cv2.FONT_HERSHEY_SIMPLEX, 0.5, (255, 255, 255), 1)
                cv2.putText(frame, "Press 'q' to quit, 'r' to reset", (10, frame.shape[0] - 20),
                            cv2.FONT_HERSHEY_SIMPLEX, 0.5, (255, 255, 255), 1)

                cv2.imshow(self.config.display.window_name, frame)

                key = cv2.waitKey(1) & 0xFF
                if key == ord('q'):
                    break
                if key == ord('r'):
                    self.recognizer.reset()
                    logger.info("Recognizer reset")
        finally:
            self.close()

    def close(self) -> None:
        """Release camera, tracker and windows."""
        self.cap.release()
        self.tracker.close()
        cv2.destroyAllWindows()


async def main():
    """Entry point for the application."""
    import sys

    logging.basicConfig(level=logging.INFO)
    config_path = sys.argv[1] if len(sys.argv) > 1 else None

    try:
        app = GestureRecognitionApp(config_path)
        await app.run()
    except KeyboardInterrupt:
        logger.info("Application interrupted by user")


def cli():
    asyncio.run(main())


if __name__ == "__main__":
    cli()
