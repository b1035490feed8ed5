"""Entry point for keyshot."""

import argparse
import signal
import sys
from pathlib import Path
from typing import List, Optional

from .config.loader import load_config
from .config.settings import Settings
from .core.controller import CaptureController
from .core.input import KeyTrigger
from .core.loop import FrameLoop
from .core.stop_checker import StopChecker
from .image.frame import FrameSource
from .image.screenshot import ScreenshotCapture
from .utils.exceptions import KeyshotError
from .utils.logging import setup_logging


def build_controller(
    settings: Settings, project_root: Path, frame_source: FrameSource
) -> CaptureController:
    """Wire a capture controller from settings."""
    output_dir = settings.paths.get_output_path(project_root)
    capture = ScreenshotCapture(frame_source, settings.capture, output_dir)
    trigger = KeyTrigger(settings.hotkey.key)
    return CaptureController(capture, frame_source, trigger)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="keyshot", description="Save a screenshot whenever the capture key is pressed."
    )
    parser.add_argument("--config", type=Path, default=None, help="path to config.yaml")
    parser.add_argument(
        "--once", action="store_true", help="take a single screenshot and exit"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    # Get project root (parent of keyshot package)
    project_root = Path(__file__).parent.parent

    # Load configuration
    config_path = args.config or project_root / "config.yaml"
    try:
        settings = load_config(config_path)
    except FileNotFoundError:
        print(f"Error: Configuration file not found: {config_path}")
        print("Please create config.yaml in the project root.")
        sys.exit(1)
    except Exception as e:
        print(f"Error loading configuration: {e}")
        sys.exit(1)

    # Setup logging
    log_dir = settings.paths.get_log_path(project_root)
    setup_logging(settings.logging, log_dir)

    try:
        with FrameSource(settings.capture.monitor) as frame_source:
            controller = build_controller(settings, project_root, frame_source)
            if args.once:
                controller.start()
                controller.take_shot()
                controller.end_of_frame()
                if controller.last_saved is None:
                    sys.exit(1)
                print(f"Screenshot saved to {controller.last_saved}")
                return

            stop = StopChecker()

            # Setup signal handlers for graceful shutdown
            def signal_handler(sig, frame):
                print("\nReceived interrupt signal, shutting down...")
                stop.request_stop()

            signal.signal(signal.SIGINT, signal_handler)
            signal.signal(signal.SIGTERM, signal_handler)

            print(f"Press '{settings.hotkey.key}' to take a screenshot, Ctrl+C to quit.")
            FrameLoop(controller, settings.loop.frame_rate, stop).run()
    except KeyshotError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
