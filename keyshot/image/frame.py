"""Frame buffer access: screen dimensions, pixel read-back and built-in capture."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Optional

import cv2
import mss
import numpy as np
from PIL import Image

from ..utils.exceptions import ScreenshotError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScreenRect:
    """Capture area in screen coordinates."""

    left: int
    top: int
    width: int
    height: int

    @classmethod
    def from_monitor(cls, monitor: Dict[str, int]) -> "ScreenRect":
        """Build a rect from an mss monitor dict."""
        return cls(
            left=int(monitor["left"]),
            top=int(monitor["top"]),
            width=int(monitor["width"]),
            height=int(monitor["height"]),
        )

    def as_monitor(self) -> Dict[str, int]:
        """Return the rect in the dict form mss expects."""
        return {"left": self.left, "top": self.top, "width": self.width, "height": self.height}


def _default_grabber():
    # newer mss releases expose MSS and deprecate mss.mss
    factory = getattr(mss, "MSS", None) or mss.mss
    return factory()


class FrameSource:
    """Reads the rendered frame of one monitor."""

    def __init__(self, monitor: int = 1, sct_factory: Optional[Callable] = None):
        """
        Initialize frame source.

        Args:
            monitor: mss monitor index (0 is all monitors combined, 1 the primary).
            sct_factory: Callable returning an mss-like grabber. Defaults to the
                installed mss release's constructor.

        Raises:
            ScreenshotError: If the display can't be opened.
        """
        self.monitor = monitor
        try:
            self._sct = (sct_factory or _default_grabber)()
        except Exception as e:
            logger.error(f"Error opening display for capture: {e}")
            raise ScreenshotError(f"Failed to open display: {e}") from e

    def __enter__(self) -> "FrameSource":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying grabber."""
        close = getattr(self._sct, "close", None)
        if close is not None:
            close()

    def screen_rect(self) -> ScreenRect:
        """
        Get the current size of the configured monitor.

        Returns:
            ScreenRect covering the whole monitor.

        Raises:
            ScreenshotError: If the monitor index doesn't exist.
        """
        monitors = self._sct.monitors
        if not 0 <= self.monitor < len(monitors):
            raise ScreenshotError(
                f"Monitor {self.monitor} not found ({len(monitors) - 1} monitor(s) available)"
            )
        return ScreenRect.from_monitor(monitors[self.monitor])

    def _grab_rgb(self, rect: ScreenRect) -> np.ndarray:
        try:
            shot = self._sct.grab(rect.as_monitor())
        except Exception as e:
            logger.error(f"Error grabbing frame {rect}: {e}")
            raise ScreenshotError(f"Failed to grab frame: {e}") from e

        # mss hands back BGRA; drop alpha like an RGB24 texture
        return cv2.cvtColor(np.asarray(shot, dtype=np.uint8), cv2.COLOR_BGRA2RGB)

    def read_pixels(self, rect: ScreenRect) -> Image.Image:
        """
        Read the pixels of the capture area into an RGB bitmap.

        Args:
            rect: Capture area.

        Returns:
            PIL image in RGB mode, sized like rect.
        """
        return Image.fromarray(self._grab_rgb(rect))

    def capture_to_file(self, path: Path, scale: int = 1) -> Path:
        """
        Capture the whole monitor straight to a PNG file.

        Args:
            path: Destination file.
            scale: Integer factor to increase the resolution by.

        Returns:
            The written path.

        Raises:
            ScreenshotError: If the grab or the write fails.
        """
        if scale < 1:
            raise ScreenshotError(f"Scale must be >= 1, got {scale}")

        pixels = self._grab_rgb(self.screen_rect())
        if scale > 1:
            height, width = pixels.shape[:2]
            pixels = cv2.resize(
                pixels, (width * scale, height * scale), interpolation=cv2.INTER_CUBIC
            )

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            Image.fromarray(pixels).save(path, format="PNG")
        except OSError as e:
            logger.error(f"Failed to save screenshot: {e}")
            raise ScreenshotError(f"Failed to write {path}: {e}") from e

        return path
