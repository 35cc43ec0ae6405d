"""
xbee_io.io_sample

Decoding of the IO sample payload reported by XBee-style radio modules.

An IO sample packs which DIO/AD lines are active, their current values and,
optionally, the module's supply voltage. Two layouts exist:

Standard layout::

    [0]      sample set count
    [1..2]   digital mask (big-endian, bit i -> IOLine index i)
    [3]      analog mask (bit i -> AD line i, bit 7 -> power supply)
    [4..5]   digital values, only present if the digital mask is not zero
    [...]    one big-endian 16-bit reading per analog mask bit, ascending

Legacy 802.15.4 layout (IOSample.from_legacy or legacy=True)::

    [0]      sample set count
    [1..2]   combined mask: bits 0-8 DIO0-DIO8, bits 9-14 AD0-AD5
    [3..4]   digital values, only present if the digital part is not zero
    [...]    one big-endian 16-bit reading per analog bit, ascending

Functions:
    - get_bits: Extracts a bitfield from an integer

Classes:
    - IOSample: Immutable, decoded view of one IO sample payload
"""

import logging
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Union

from xbee_io.exceptions import (
    LineNotPresentError,
    MalformedFrameError,
    NullInputError,
    UnsupportedOperationError,
)
from xbee_io.io_line import IOLine
from xbee_io.io_value import IOValue
from xbee_io.models import IOSampleModel

logger = logging.getLogger(__name__)

MIN_PAYLOAD_LENGTH = 5
POWER_SUPPLY_BIT = 7

DIGITAL_MASK_BITS = 16
ANALOG_MASK_BITS = 8

# 802.15.4 combined mask
LEGACY_DIGITAL_BITS = 9
LEGACY_ANALOG_START_BIT = 9
LEGACY_ANALOG_BITS = 6

PayloadLike = Union[bytes, bytearray, memoryview, Iterable[int]]


def get_bits(value: int, start_bit: int, length: int = 1) -> int:
    """
    Extract ``length`` bits of ``value`` starting at ``start_bit`` (bit 0 is the LSB).
    """
    mask = (1 << length) - 1
    return (value >> start_bit) & mask


def _freeze_payload(io_sample_payload: Optional[PayloadLike]) -> bytes:
    """Copy the caller's buffer into an immutable bytes object."""
    if io_sample_payload is None:
        raise NullInputError("IO sample payload cannot be None.")
    if isinstance(io_sample_payload, (str, int)):
        # bytes(5) would silently build a zero-filled buffer
        raise MalformedFrameError(
            f"IO sample payload must be a byte sequence, not {type(io_sample_payload).__name__}."
        )
    try:
        return bytes(io_sample_payload)
    except (TypeError, ValueError) as e:
        raise MalformedFrameError(f"IO sample payload is not a valid byte sequence: {e}") from e


def _read_uint16(payload: bytes, offset: int, field: str) -> int:
    if offset + 2 > len(payload):
        logger.warning(
            f"Truncated IO sample: {field} expected at bytes {offset}-{offset + 1}, "
            f"payload has {len(payload)} bytes"
        )
        raise MalformedFrameError(
            f"IO sample payload is too short: {field} needs bytes {offset}-{offset + 1} "
            f"but only {len(payload)} bytes were received."
        )
    return int.from_bytes(payload[offset : offset + 2], byteorder="big")


class IOSample:
    """
    IOSample

    Decoded IO sample. All values are parsed once in the constructor; the
    object is read-only afterwards and can be shared freely.

    Single-line accessors (get_digital_value, get_analog_value) raise when the
    line is absent, while the bulk mappings (digital_values, analog_values)
    simply do not contain it.

    Args:
        io_sample_payload: Raw sample bytes, already delimited by the caller.
        legacy: Decode with the 802.15.4 combined-mask layout instead of the
            standard one. The payload itself does not say which layout it uses.

    Raises:
        NullInputError: If the payload is None.
        MalformedFrameError: If the payload is shorter than its masks require.
    """

    __slots__ = (
        "_payload",
        "_legacy",
        "_sample_count",
        "_digital_mask",
        "_analog_mask",
        "_digital_values",
        "_analog_values",
        "_power_supply_value",
    )

    def __init__(self, io_sample_payload: Optional[PayloadLike], *, legacy: bool = False):
        payload = _freeze_payload(io_sample_payload)
        if len(payload) < MIN_PAYLOAD_LENGTH:
            logger.warning(f"Rejecting IO sample of {len(payload)} bytes: {payload.hex()}")
            raise MalformedFrameError(
                f"IO sample payload must be at least {MIN_PAYLOAD_LENGTH} bytes long, "
                f"got {len(payload)}."
            )

        self._payload = payload
        self._legacy = bool(legacy)
        self._sample_count = payload[0]

        digital_values: dict[IOLine, IOValue] = {}
        analog_values: dict[IOLine, int] = {}
        power_supply_value: Optional[int] = None

        if self._legacy:
            combined_mask = _read_uint16(payload, 1, "combined mask")
            digital_mask = get_bits(combined_mask, 0, LEGACY_DIGITAL_BITS)
            analog_mask = get_bits(combined_mask, LEGACY_ANALOG_START_BIT, LEGACY_ANALOG_BITS)
            analog_bits = LEGACY_ANALOG_BITS
            offset = 3
        else:
            digital_mask = _read_uint16(payload, 1, "digital mask")
            analog_mask = payload[3]
            analog_bits = ANALOG_MASK_BITS
            offset = 4

        logger.debug(
            f"Decoding {'legacy' if self._legacy else 'standard'} IO sample: "
            f"digital_mask=0x{digital_mask:04X} analog_mask=0x{analog_mask:02X}"
        )

        # The digital values field is only sent when at least one DIO is enabled.
        if digital_mask:
            digital_field = _read_uint16(payload, offset, "digital values")
            offset += 2
            for bit in range(DIGITAL_MASK_BITS):
                if not get_bits(digital_mask, bit):
                    continue
                line = IOLine.get_dio(bit)
                digital_values[line] = IOValue.HIGH if get_bits(digital_field, bit) else IOValue.LOW

        for bit in range(analog_bits):
            if not get_bits(analog_mask, bit):
                continue
            reading = _read_uint16(payload, offset, f"analog value for bit {bit}")
            offset += 2
            if not self._legacy and bit == POWER_SUPPLY_BIT:
                power_supply_value = reading
            else:
                analog_values[IOLine.get_dio(bit)] = reading

        if offset < len(payload):
            logger.debug(f"Ignoring {len(payload) - offset} trailing byte(s) in IO sample")

        self._digital_mask = digital_mask
        self._analog_mask = analog_mask
        self._digital_values = MappingProxyType(digital_values)
        self._analog_values = MappingProxyType(analog_values)
        self._power_supply_value = power_supply_value

    @classmethod
    def from_legacy(cls, io_sample_payload: Optional[PayloadLike]) -> "IOSample":
        """Decode a payload sent by an 802.15.4 module (combined digital/analog mask)."""
        return cls(io_sample_payload, legacy=True)

    # ── Raw fields ──────────────────────────────────────────────────────────
    @property
    def payload(self) -> bytes:
        """The (copied) raw bytes this sample was decoded from."""
        return self._payload

    @property
    def is_legacy(self) -> bool:
        """True if the payload used the 802.15.4 combined-mask layout."""
        return self._legacy

    @property
    def sample_count(self) -> int:
        return self._sample_count

    @property
    def digital_mask(self) -> int:
        return self._digital_mask

    @property
    def analog_mask(self) -> int:
        return self._analog_mask

    # ── Digital values ──────────────────────────────────────────────────────
    def has_digital_values(self) -> bool:
        return bool(self._digital_values)

    def has_digital_value(self, io_line: IOLine) -> bool:
        """Return True if ``io_line`` is enabled in the digital mask."""
        return io_line in self._digital_values

    def get_digital_value(self, io_line: IOLine) -> IOValue:
        """
        Return the digital value of ``io_line``.

        Raises:
            LineNotPresentError: If the line is not part of the digital mask.
        """
        try:
            return self._digital_values[io_line]
        except KeyError:
            raise LineNotPresentError(
                io_line, f"{io_line} does not have a digital value in this sample."
            ) from None

    @property
    def digital_values(self) -> Mapping[IOLine, IOValue]:
        """Read-only mapping of every line with a digital value."""
        return self._digital_values

    # ── Analog values ───────────────────────────────────────────────────────
    def has_analog_values(self) -> bool:
        """Return True if any AD line has a reading. The power supply does not count."""
        return bool(self._analog_values)

    def has_analog_value(self, io_line: IOLine) -> bool:
        return io_line in self._analog_values

    def get_analog_value(self, io_line: IOLine) -> int:
        """
        Return the analog reading of ``io_line``.

        Raises:
            LineNotPresentError: If the line has no analog reading. The power
                supply reading is only available through get_power_supply_value.
        """
        try:
            return self._analog_values[io_line]
        except KeyError:
            raise LineNotPresentError(
                io_line, f"{io_line} does not have an analog value in this sample."
            ) from None

    @property
    def analog_values(self) -> Mapping[IOLine, int]:
        """Read-only mapping of every line with an analog reading."""
        return self._analog_values

    # ── Power supply ────────────────────────────────────────────────────────
    def has_power_supply_value(self) -> bool:
        return self._power_supply_value is not None

    def get_power_supply_value(self) -> int:
        """
        Return the raw power supply reading.

        Raises:
            UnsupportedOperationError: If the sample does not include it.
        """
        if self._power_supply_value is None:
            raise UnsupportedOperationError("IO sample does not contain a power supply value.")
        return self._power_supply_value

    # ── Conversion ──────────────────────────────────────────────────────────
    def to_model(self) -> IOSampleModel:
        """Snapshot this sample as a pydantic model for JSON consumers."""
        return IOSampleModel(
            sample_count=self._sample_count,
            digital_mask=self._digital_mask,
            analog_mask=self._analog_mask,
            digital_values={line.name: value.name for line, value in self._digital_values.items()},
            analog_values={line.name: reading for line, reading in self._analog_values.items()},
            power_supply_value=self._power_supply_value,
            legacy=self._legacy,
        )

    def _key(self):
        return (
            self._legacy,
            self._sample_count,
            self._digital_mask,
            self._analog_mask,
            frozenset(self._digital_values.items()),
            frozenset(self._analog_values.items()),
            self._power_supply_value,
        )

    def __eq__(self, other):
        if not isinstance(other, IOSample):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self) -> str:
        parts = [f"[{line}: {value}]" for line, value in self._digital_values.items()]
        parts += [f"[{line}: {reading}]" for line, reading in self._analog_values.items()]
        if self._power_supply_value is not None:
            parts.append(f"[Power supply voltage: {self._power_supply_value}]")
        return "{" + ", ".join(parts) + "}"

    def __repr__(self) -> str:
        return (
            f"IOSample(digital_mask=0x{self._digital_mask:04X}, "
            f"analog_mask=0x{self._analog_mask:02X}, payload={self._payload.hex()!r})"
        )
