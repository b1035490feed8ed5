import io

from PIL import Image

from keyshot.config.settings import CaptureMethod
from keyshot.image.encoder import encode, encode_jpg, encode_png


def make_bitmap():
    return Image.new("RGB", (16, 16), (200, 100, 50))


def test_png_signature():
    assert encode_png(make_bitmap()).startswith(b"\x89PNG\r\n\x1a\n")


def test_jpg_signature_and_quality_changes_size():
    bitmap = Image.effect_noise((64, 64), 64).convert("RGB")
    low = encode_jpg(bitmap, 5)
    high = encode_jpg(bitmap, 95)

    assert low.startswith(b"\xff\xd8")
    assert len(low) < len(high)


def test_jpg_quality_is_clamped():
    data = encode_jpg(make_bitmap(), 0)
    with Image.open(io.BytesIO(data)) as image:
        assert image.format == "JPEG"


def test_encode_picks_format_from_method():
    assert encode(make_bitmap(), CaptureMethod.READ_PIXELS_JPG)[1] == ".jpg"
    assert encode(make_bitmap(), CaptureMethod.READ_PIXELS_PNG)[1] == ".png"
    assert encode(make_bitmap(), CaptureMethod.SCREENSHOT_PNG)[1] == ".png"
