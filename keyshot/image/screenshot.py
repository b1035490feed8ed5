"""Screenshot capture functionality."""

import logging
from datetime import datetime
from pathlib import Path

from ..config.settings import CaptureConfig, CaptureMethod
from ..utils.exceptions import ScreenshotError
from .encoder import encode
from .frame import FrameSource, ScreenRect

logger = logging.getLogger(__name__)

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_timestamp(moment: datetime) -> str:
    """
    Format a moment for use in a screenshot filename.

    Args:
        moment: Time the shot was taken.

    Returns:
        String like "_29-Jan-2018-07-33-26-6" (the last field is tenths of a second).
    """
    return (
        f"_{moment.day}-{_MONTHS[moment.month - 1]}-{moment.year:04d}-"
        f"{moment.hour:02d}-{moment.minute:02d}-{moment.second:02d}-"
        f"{moment.microsecond // 100000}"
    )


class ScreenshotCapture:
    """Takes screenshots with the configured method and writes them to disk."""

    def __init__(self, frame_source: FrameSource, config: CaptureConfig, output_dir: Path):
        """
        Initialize screenshot capture.

        Args:
            frame_source: Frame buffer access.
            config: Capture settings.
            output_dir: Directory screenshots are written to.
        """
        self.frame_source = frame_source
        self.config = config
        self.output_dir = output_dir

    def build_filename(self, timestamp: str, extension: str) -> str:
        """Build a filename like Screenshot_29-Jan-2018-07-33-26-6.png."""
        return f"{self.config.prefix}{timestamp}{extension}"

    def screenshot_png(self, timestamp: str) -> Path:
        """
        Capture with the built-in screenshot call, upscaled by config.scale.

        Args:
            timestamp: Formatted capture time.

        Returns:
            Path of the written PNG.
        """
        path = self.output_dir / self.build_filename(timestamp, ".png")
        self.frame_source.capture_to_file(path, self.config.scale)
        logger.info(f"Screenshot saved to {path}")
        return path

    def read_pixels(self, rect: ScreenRect, timestamp: str) -> Path:
        """
        Read back the capture area, encode it and write the bytes.

        Args:
            rect: Capture area.
            timestamp: Formatted capture time.

        Returns:
            Path of the written file.
        """
        bitmap = self.frame_source.read_pixels(rect)
        try:
            data, extension = encode(bitmap, self.config.method, self.config.jpg_quality)
        finally:
            bitmap.close()

        return self.write_bytes(data, self.build_filename(timestamp, extension))

    def capture(self, rect: ScreenRect, moment: datetime) -> Path:
        """
        Capture using whichever method is configured.

        Args:
            rect: Capture area for the read-back methods.
            moment: Time the shot was requested.

        Returns:
            Path of the written file.
        """
        timestamp = format_timestamp(moment)
        if self.config.method is CaptureMethod.SCREENSHOT_PNG:
            return self.screenshot_png(timestamp)
        return self.read_pixels(rect, timestamp)

    def write_bytes(self, data: bytes, filename: str) -> Path:
        """
        Write encoded screen data to the output directory.

        Args:
            data: Encoded image bytes.
            filename: File name, including extension.

        Returns:
            Path of the written file.

        Raises:
            ScreenshotError: If the file can't be written.
        """
        path = self.output_dir / filename
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as e:
            logger.error(f"Failed to save screenshot: {e}")
            raise ScreenshotError(f"Failed to write {path}: {e}") from e

        logger.info(f"Screenshot saved to {path} ({len(data)} bytes)")
        return path
