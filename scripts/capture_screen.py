"""Screenshot capture utility script."""

import sys
from datetime import datetime
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from keyshot.config.loader import load_config
from keyshot.image.frame import FrameSource
from keyshot.image.screenshot import ScreenshotCapture
from keyshot.utils.exceptions import ConfigurationError, ScreenshotError


def main():
    """Capture and save screenshot."""
    project_root = Path(__file__).parent.parent

    # Load configuration
    try:
        config_path = project_root / "config.yaml"
        settings = load_config(config_path)
    except FileNotFoundError:
        print(f"Error: Configuration file not found: {config_path}")
        sys.exit(1)
    except ConfigurationError as e:
        print(f"Error loading configuration: {e}")
        sys.exit(1)

    output_dir = settings.paths.get_output_path(project_root)

    try:
        with FrameSource(settings.capture.monitor) as frame_source:
            screenshot = ScreenshotCapture(frame_source, settings.capture, output_dir)
            path = screenshot.capture(frame_source.screen_rect(), datetime.now())
    except ScreenshotError as e:
        print(f"Failed to capture screenshot: {e}")
        sys.exit(1)

    print(f"Screenshot saved to {path}")


if __name__ == "__main__":
    main()
