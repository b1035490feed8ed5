"""Configuration loader from YAML file."""

import yaml
from pathlib import Path
from typing import Optional

from .settings import (
    Settings,
    CaptureConfig,
    CaptureMethod,
    HotkeyConfig,
    LoopConfig,
    PathsConfig,
    LoggingConfig,
)
from ..utils.exceptions import ConfigurationError


def load_config(config_path: Optional[Path] = None) -> Settings:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, looks for config.yaml in project root.

    Returns:
        Settings object with loaded configuration.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        yaml.YAMLError: If config file is invalid YAML.
        ConfigurationError: If a section or value is invalid.
    """
    if config_path is None:
        # Look for config.yaml in project root (parent of keyshot package)
        project_root = Path(__file__).parent.parent.parent
        config_path = project_root / "config.yaml"

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config_data = yaml.safe_load(f)

    if config_data is None:
        config_data = {}
    if not isinstance(config_data, dict):
        raise ConfigurationError(f"{config_path} must contain a mapping of sections")

    settings = Settings()

    if "capture" in config_data:
        capture_data = _section(config_data, "capture")
        try:
            method = CaptureMethod.parse(capture_data.get("method", "screenshot_png"))
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
        settings.capture = CaptureConfig(
            method=method,
            prefix=str(capture_data.get("prefix", "Screenshot")),
            scale=_whole_number(capture_data, "capture.scale", 1),
            jpg_quality=_whole_number(capture_data, "capture.jpg_quality", 75),
            monitor=_whole_number(capture_data, "capture.monitor", 1),
        )

    if "hotkey" in config_data:
        hotkey_data = _section(config_data, "hotkey")
        settings.hotkey = HotkeyConfig(key=str(hotkey_data.get("key", "p")))

    if "loop" in config_data:
        loop_data = _section(config_data, "loop")
        settings.loop = LoopConfig(frame_rate=_number(loop_data, "loop.frame_rate", 30.0))

    if "paths" in config_data:
        paths_data = _section(config_data, "paths")
        settings.paths = PathsConfig(
            output=paths_data.get("output", "."),
            logs=paths_data.get("logs", "logs"),
        )

    if "logging" in config_data:
        log_data = _section(config_data, "logging")
        settings.logging = LoggingConfig(
            level=log_data.get("level", "INFO"),
            file=log_data.get("file", "logs/keyshot.log"),
            console=log_data.get("console", True),
            format=log_data.get("format", "%(asctime)s %(levelname)s %(message)s"),
        )

    validate_settings(settings)
    return settings


def _section(config_data: dict, name: str) -> dict:
    """Return a config section, treating an empty one as defaults."""
    section = config_data[name] or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"'{name}' must be a mapping, got {type(section).__name__}")
    return section


def _number(data: dict, key: str, default: float) -> float:
    """Read a numeric value; key is the dotted name used in error messages."""
    value = data.get(key.rsplit(".", 1)[-1], default)
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"{key} must be a number, got {value!r}") from e


def _whole_number(data: dict, key: str, default: int) -> int:
    """Read an integer value, rejecting fractions instead of truncating them."""
    number = _number(data, key, default)
    if not number.is_integer():
        raise ConfigurationError(f"{key} must be a whole number, got {number}")
    return int(number)


def validate_settings(settings: Settings) -> None:
    """
    Check value ranges the YAML schema can't express.

    Raises:
        ConfigurationError: On the first invalid value.
    """
    capture = settings.capture
    if capture.scale < 1:
        raise ConfigurationError(f"capture.scale must be >= 1, got {capture.scale}")
    if not 0 <= capture.jpg_quality <= 100:
        raise ConfigurationError(
            f"capture.jpg_quality must be between 0 and 100, got {capture.jpg_quality}"
        )
    if capture.monitor < 0:
        raise ConfigurationError(f"capture.monitor must be >= 0, got {capture.monitor}")
    if not settings.hotkey.key.strip():
        raise ConfigurationError("hotkey.key must not be empty")
    if settings.loop.frame_rate <= 0:
        raise ConfigurationError(
            f"loop.frame_rate must be positive, got {settings.loop.frame_rate}"
        )
