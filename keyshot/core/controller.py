"""Capture component driven by the frame loop."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from ..image.frame import FrameSource, ScreenRect
from ..image.screenshot import ScreenshotCapture
from ..utils.exceptions import ScreenshotError
from .input import KeyTrigger

logger = logging.getLogger(__name__)


class CaptureController:
    """Takes a screenshot whenever the trigger key goes down."""

    def __init__(
        self,
        capture: ScreenshotCapture,
        frame_source: FrameSource,
        trigger: KeyTrigger,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize capture controller.

        Args:
            capture: Screenshot writer.
            frame_source: Frame buffer access, used for the screen size.
            trigger: Key trigger polled on every update.
            clock: Source of the capture time.
        """
        self.capture = capture
        self.frame_source = frame_source
        self.trigger = trigger
        self.clock = clock

        self.screen_width = 0
        self.screen_height = 0
        self.rect: Optional[ScreenRect] = None
        self.last_saved: Optional[Path] = None

        self._pending: Optional[datetime] = None

    @property
    def pending(self) -> bool:
        """True while a read-back capture waits for the end of the frame."""
        return self._pending is not None

    def start(self) -> None:
        """Record the screen size and capture area."""
        self.rect = self.frame_source.screen_rect()
        self.screen_width = self.rect.width
        self.screen_height = self.rect.height
        logger.info(
            f"Capture ready: {self.screen_width}x{self.screen_height}, "
            f"method={self.capture.config.method.name}, key='{self.trigger.key}'"
        )

    def update(self) -> None:
        """Poll the trigger key; take a shot if it was pressed this frame."""
        if self.trigger.poll():
            self.take_shot()

    def take_shot(self) -> Optional[Path]:
        """
        Record a screenshot now.

        The built-in method writes immediately. The read-back methods wait for
        end_of_frame() so the whole frame is in the buffer.

        Returns:
            Path of the written file, or None if deferred or failed.
        """
        if self.rect is None:
            self.start()

        moment = self.clock()

        if self.capture.config.method.reads_pixels:
            if self._pending is not None:
                logger.debug("Capture already pending for this frame, ignoring trigger")
                return None
            self._pending = moment
            return None

        return self._run_capture(moment)

    def end_of_frame(self) -> Optional[Path]:
        """
        Run the pending read-back capture, if any.

        Returns:
            Path of the written file, or None.
        """
        if self._pending is None:
            return None

        moment, self._pending = self._pending, None
        return self._run_capture(moment)

    def _run_capture(self, moment: datetime) -> Optional[Path]:
        try:
            path = self.capture.capture(self.rect, moment)
        except ScreenshotError as e:
            logger.error(f"Screenshot failed: {e}")
            return None

        self.last_saved = path
        return path
