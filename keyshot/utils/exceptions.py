"""Custom exception classes for keyshot."""


class KeyshotError(Exception):
    """Base exception for keyshot."""

    pass


class ScreenshotError(KeyshotError):
    """Exception raised for screenshot capture or write errors."""

    pass


class EncodeError(ScreenshotError):
    """Exception raised when a bitmap can't be encoded to PNG or JPEG."""

    pass


class InputError(KeyshotError):
    """Exception raised when the keyboard backend can't be polled."""

    pass


class ConfigurationError(KeyshotError):
    """Exception raised for configuration errors."""

    pass
