"""Configuration settings dataclass."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class CaptureMethod(Enum):
    """Screenshot taking method."""

    SCREENSHOT_PNG = "screenshot_png"
    READ_PIXELS_PNG = "read_pixels_png"
    READ_PIXELS_JPG = "read_pixels_jpg"

    @classmethod
    def parse(cls, value) -> "CaptureMethod":
        """
        Parse a capture method from its name or value, ignoring case.

        Args:
            value: CaptureMethod, or a string such as "READ_PIXELS_JPG".

        Returns:
            Matching CaptureMethod.

        Raises:
            ValueError: If no method matches.
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for method in cls:
            if method.value == key:
                return method
        raise ValueError(f"Unknown capture method: {value}")

    @property
    def reads_pixels(self) -> bool:
        """True for the read-back methods, which run at the end of the frame."""
        return self is not CaptureMethod.SCREENSHOT_PNG


@dataclass
class CaptureConfig:
    """Screenshot capture settings."""
    method: CaptureMethod = CaptureMethod.SCREENSHOT_PNG
    prefix: str = "Screenshot"
    scale: int = 1
    jpg_quality: int = 75
    monitor: int = 1


@dataclass
class HotkeyConfig:
    """Key that triggers a capture."""
    key: str = "p"


@dataclass
class LoopConfig:
    """Frame loop settings."""
    frame_rate: float = 30.0


@dataclass
class PathsConfig:
    """Path configuration."""
    output: str = "."
    logs: str = "logs"

    def get_output_path(self, base_path: Path) -> Path:
        """Get absolute screenshot output path."""
        return base_path / self.output

    def get_log_path(self, base_path: Path) -> Path:
        """Get absolute log path."""
        return base_path / self.logs


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    file: str = "logs/keyshot.log"
    console: bool = True
    format: str = "%(asctime)s %(levelname)s %(message)s"


@dataclass
class Settings:
    """Main settings container."""

    capture: CaptureConfig = None
    hotkey: HotkeyConfig = None
    loop: LoopConfig = None
    paths: PathsConfig = None
    logging: LoggingConfig = None

    def __post_init__(self):
        """Initialize default configs if not provided."""
        if self.capture is None:
            self.capture = CaptureConfig()
        if self.hotkey is None:
            self.hotkey = HotkeyConfig()
        if self.loop is None:
            self.loop = LoopConfig()
        if self.paths is None:
            self.paths = PathsConfig()
        if self.logging is None:
            self.logging = LoggingConfig()
