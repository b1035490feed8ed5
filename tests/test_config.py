from pathlib import Path

import pytest

from keyshot.config.loader import load_config
from keyshot.config.settings import CaptureMethod, Settings
from keyshot.utils.exceptions import ConfigurationError


def write_config(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_empty_file_gives_defaults(tmp_path):
    settings = load_config(write_config(tmp_path, ""))

    assert settings.capture.method is CaptureMethod.SCREENSHOT_PNG
    assert settings.capture.prefix == "Screenshot"
    assert settings.capture.scale == 1
    assert settings.capture.jpg_quality == 75
    assert settings.hotkey.key == "p"
    assert settings.paths.output == "."


def test_sections_are_loaded(tmp_path):
    settings = load_config(
        write_config(
            tmp_path,
            "capture:\n"
            "  method: READ_PIXELS_JPG\n"
            "  prefix: Shot\n"
            "  jpg_quality: 90\n"
            "hotkey:\n"
            "  key: f12\n"
            "loop:\n"
            "  frame_rate: 60\n"
            "paths:\n"
            "  output: shots\n",
        )
    )

    assert settings.capture.method is CaptureMethod.READ_PIXELS_JPG
    assert settings.capture.prefix == "Shot"
    assert settings.capture.jpg_quality == 90
    assert settings.hotkey.key == "f12"
    assert settings.loop.frame_rate == 60.0
    assert settings.paths.get_output_path(tmp_path) == tmp_path / "shots"


@pytest.mark.parametrize(
    "text",
    [
        "capture:\n  method: bmp\n",
        "capture:\n  scale: 0\n",
        "capture:\n  jpg_quality: 101\n",
        "capture:\n  jpg_quality: -1\n",
        "loop:\n  frame_rate: 0\n",
        "hotkey:\n  key: ' '\n",
        "capture:\n  scale: big\n",
        "capture:\n  scale: 1.5\n",
        "capture:\n  jpg_quality: high\n",
        "capture:\n  monitor: [1]\n",
        "loop:\n  frame_rate: fast\n",
        "capture: [1]\n",
        "- capture\n",
    ],
)
def test_invalid_values_raise(tmp_path, text):
    with pytest.raises(ConfigurationError):
        load_config(write_config(tmp_path, text))


def test_settings_defaults_fill_missing_sections():
    settings = Settings()
    assert settings.loop.frame_rate == 30.0
    assert settings.logging.level == "INFO"


def test_capture_method_parse():
    assert CaptureMethod.parse("read_pixels_png") is CaptureMethod.READ_PIXELS_PNG
    assert CaptureMethod.parse(CaptureMethod.READ_PIXELS_JPG) is CaptureMethod.READ_PIXELS_JPG
    assert not CaptureMethod.SCREENSHOT_PNG.reads_pixels
    assert CaptureMethod.READ_PIXELS_JPG.reads_pixels


def test_whole_float_scale_is_accepted(tmp_path):
    settings = load_config(write_config(tmp_path, "capture:\n  scale: 2.0\n"))
    assert settings.capture.scale == 2
