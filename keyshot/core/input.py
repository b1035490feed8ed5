"""Key press detection."""

import logging
from typing import Callable, Optional

import keyboard

from ..utils.exceptions import InputError

logger = logging.getLogger(__name__)


class KeyTrigger:
    """Edge-triggered key check, polled once per frame."""

    def __init__(self, key: str, is_pressed: Optional[Callable[[str], bool]] = None):
        """
        Initialize key trigger.

        Args:
            key: Key name understood by the keyboard library (e.g. "p", "f12").
            is_pressed: Key state function. Defaults to keyboard.is_pressed.
        """
        self.key = key
        self._is_pressed = is_pressed or keyboard.is_pressed
        self._was_down = False

    def poll(self) -> bool:
        """
        Check the key for this frame.

        Returns:
            True only on the frame the key went down.

        Raises:
            InputError: If the keyboard backend can't be read.
        """
        try:
            down = bool(self._is_pressed(self.key))
        except (ImportError, OSError, ValueError) as e:
            # keyboard raises ImportError on Linux when not run as root
            raise InputError(f"Failed to read key '{self.key}': {e}") from e

        pressed = down and not self._was_down
        self._was_down = down
        if pressed:
            logger.debug(f"Key '{self.key}' pressed")
        return pressed
