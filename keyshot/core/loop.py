"""Fixed-rate frame loop hosting the capture controller."""

import logging
import time
from typing import Callable, Optional

from .controller import CaptureController
from .stop_checker import StopChecker

logger = logging.getLogger(__name__)


class FrameLoop:
    """Drives the controller's per-frame callbacks."""

    def __init__(
        self,
        controller: CaptureController,
        frame_rate: float,
        stop_checker: Optional[StopChecker] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize frame loop.

        Args:
            controller: Component to drive.
            frame_rate: Frames per second.
            stop_checker: Stop flag; a fresh one is created if None.
            clock: Monotonic time source in seconds.
        """
        if frame_rate <= 0:
            raise ValueError(f"frame_rate must be positive, got {frame_rate}")
        self.controller = controller
        self.frame_interval = 1.0 / frame_rate
        self.stop_checker = stop_checker or StopChecker()
        self.clock = clock
        self.frame_count = 0

    def stop(self) -> None:
        """Stop after the current frame."""
        self.stop_checker.request_stop()

    def run(self, max_frames: Optional[int] = None) -> int:
        """
        Run frames until stopped.

        Args:
            max_frames: Optional frame limit.

        Returns:
            Number of frames executed.
        """
        self.controller.start()
        self.frame_count = 0

        while not self.stop_checker.check():
            if max_frames is not None and self.frame_count >= max_frames:
                break

            frame_start = self.clock()
            self.controller.update()
            self.controller.end_of_frame()
            self.frame_count += 1

            elapsed = self.clock() - frame_start
            remaining = self.frame_interval - elapsed
            if remaining > 0 and self.stop_checker.interruptible_sleep(remaining):
                break

        logger.info(f"Frame loop stopped after {self.frame_count} frames")
        return self.frame_count
