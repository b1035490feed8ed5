"""Bitmap encoding to PNG and JPEG."""

import io
from typing import Tuple

from PIL import Image

from ..config.settings import CaptureMethod
from ..utils.exceptions import EncodeError


def _encode(image: Image.Image, fmt: str, **params) -> bytes:
    buffer = io.BytesIO()
    try:
        image.save(buffer, format=fmt, **params)
    except (OSError, ValueError) as e:
        raise EncodeError(f"Failed to encode bitmap as {fmt}: {e}") from e
    return buffer.getvalue()


def encode_png(image: Image.Image) -> bytes:
    """Encode a bitmap as PNG."""
    return _encode(image, "PNG")


def encode_jpg(image: Image.Image, quality: int = 75) -> bytes:
    """
    Encode a bitmap as JPEG.

    Args:
        image: RGB bitmap.
        quality: JPEG quality, clamped to 1-100.

    Returns:
        JPEG bytes.
    """
    quality = max(1, min(100, int(quality)))
    return _encode(image, "JPEG", quality=quality)


def encode(image: Image.Image, method: CaptureMethod, quality: int = 75) -> Tuple[bytes, str]:
    """
    Encode a bitmap according to the capture method.

    Returns:
        Tuple of (encoded bytes, file extension including the dot).
    """
    if method is CaptureMethod.READ_PIXELS_JPG:
        return encode_jpg(image, quality), ".jpg"
    return encode_png(image), ".png"
