"""Stop flag checker for interrupting the frame loop."""

import threading
import time
from typing import Callable, Optional


class StopChecker:
    """Manages stop flag checking for interruptible operations."""

    def __init__(self, check_func: Optional[Callable[[], bool]] = None):
        """
        Initialize stop checker.

        Args:
            check_func: Function that returns True if stop is requested.
                If None, only request_stop() stops.
        """
        self.check_func = check_func
        self._event = threading.Event()

    def request_stop(self) -> None:
        """Ask the loop to stop after the current frame."""
        self._event.set()

    def check(self) -> bool:
        """
        Check if stop is requested.

        Returns:
            True if stop requested, False otherwise.
        """
        if self._event.is_set():
            return True
        return bool(self.check_func and self.check_func())

    def interruptible_sleep(self, duration: float, check_interval: float = 0.1) -> bool:
        """
        Sleep for duration, checking stop flag periodically.

        Args:
            duration: Total sleep duration in seconds.
            check_interval: How often to check stop flag.

        Returns:
            True if interrupted by stop request, False if completed normally.
        """
        remaining = duration
        while remaining > 0:
            if self.check():
                return True  # Interrupted
            sleep_time = min(check_interval, remaining)
            time.sleep(sleep_time)
            remaining -= sleep_time
        return False  # Completed normally
