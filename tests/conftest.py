from datetime import datetime
from pathlib import Path

import numpy as np
import pytest

from keyshot.config.settings import CaptureConfig, CaptureMethod
from keyshot.core.controller import CaptureController
from keyshot.core.input import KeyTrigger
from keyshot.image.frame import FrameSource
from keyshot.image.screenshot import ScreenshotCapture


class FakeScreen:
    """mss stand-in: one 8x6 monitor filled with a single BGRA color."""

    def __init__(self, width=8, height=6, bgra=(10, 20, 30, 255)):
        self.monitors = [
            {"left": 0, "top": 0, "width": width, "height": height},
            {"left": 0, "top": 0, "width": width, "height": height},
        ]
        self.bgra = bgra
        self.grabs = []
        self.closed = False

    def grab(self, monitor):
        self.grabs.append(monitor)
        frame = np.zeros((monitor["height"], monitor["width"], 4), dtype=np.uint8)
        frame[:, :] = self.bgra
        return frame

    def close(self):
        self.closed = True


class FakeKeys:
    """Scripted key state, one entry consumed per poll."""

    def __init__(self, states):
        self.states = list(states)

    def __call__(self, key):
        return self.states.pop(0) if self.states else False


@pytest.fixture
def screen() -> FakeScreen:
    return FakeScreen()


@pytest.fixture
def frame_source(screen) -> FrameSource:
    return FrameSource(monitor=1, sct_factory=lambda: screen)


@pytest.fixture
def make_controller(frame_source, tmp_path: Path):
    def factory(method=CaptureMethod.SCREENSHOT_PNG, keys=(), **config):
        capture_config = CaptureConfig(method=method, **config)
        capture = ScreenshotCapture(frame_source, capture_config, tmp_path)
        trigger = KeyTrigger("p", is_pressed=FakeKeys(keys))
        return CaptureController(
            capture, frame_source, trigger, clock=lambda: datetime(2018, 1, 29, 7, 33, 26, 600000)
        )

    return factory
