"""
xbee_io
=======

Decoder for the IO sample records reported by XBee-style radio modules.

Given one already-delimited sample payload, IOSample validates it and exposes
the digital state of each enabled DIO line, the readings of the enabled AD
lines and the optional power supply reading.

Modules:
    - io_line: IOLine enumeration with the fixed bit index of every line
    - io_value: IOValue (LOW/HIGH) enumeration
    - io_sample: IOSample decoder
    - exceptions: Error classes raised while decoding or querying samples
    - models: Pydantic snapshot model of a decoded sample
    - config: Logging setup helper
"""

from ._version import VERSION
from .config import configure_logger
from .exceptions import (
    IOSampleError,
    LineNotPresentError,
    MalformedFrameError,
    NullInputError,
    UnsupportedOperationError,
)
from .io_line import IOLine
from .io_sample import POWER_SUPPLY_BIT, IOSample, get_bits
from .io_value import IOValue
from .models import IOSampleModel

__all__ = [
    "VERSION",
    "configure_logger",
    "IOSample",
    "IOSampleModel",
    "IOLine",
    "IOValue",
    "POWER_SUPPLY_BIT",
    "get_bits",
    "IOSampleError",
    "NullInputError",
    "MalformedFrameError",
    "LineNotPresentError",
    "UnsupportedOperationError",
]
