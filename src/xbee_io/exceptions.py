"""
xbee_io.exceptions

Errors raised while decoding and querying IO samples.

Classes:
    - IOSampleError: Base class for every error raised by this package
    - NullInputError: No payload was supplied
    - MalformedFrameError: Payload length is inconsistent with its declared masks
    - LineNotPresentError: A queried IO line has no value in the sample
    - UnsupportedOperationError: The sample carries no power supply value
"""


class IOSampleError(Exception):
    """Base class for IO sample errors."""


class NullInputError(IOSampleError, TypeError):
    """Raised when an IO sample is built from ``None``."""


class MalformedFrameError(IOSampleError, ValueError):
    """Raised when the payload is too short for the fields its masks declare."""


class LineNotPresentError(IOSampleError, ValueError):
    """
    Raised when a single-line accessor is asked for a line that is not in the sample.

    Attributes:
        line: The IOLine that was queried.
    """

    def __init__(self, line, message: str | None = None):
        self.line = line
        super().__init__(message or f"{line} has no value in this sample.")


class UnsupportedOperationError(IOSampleError):
    """Raised when the power supply value is requested from a sample that lacks it."""
