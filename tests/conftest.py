"""
Shared IO sample payloads.

The module reporting these samples is configured as follows:

DIO0, DIO4 and DIO9 are digital I/O; DIO0 and DIO9 are HIGH, DIO4 is LOW.
DIO1 and DIO3 are ADC inputs reading 0x020C (524) and 0x00FA (250).
Power supply reporting is enabled and reads 0x04E2 (1250).
"""

import pytest

INVALID_IO_DATA = bytes([0x00, 0x01, 0x02, 0x03])
IO_DATA_ONLY_DIGITAL = bytes([0x01, 0x02, 0x11, 0x00, 0x02, 0x01])
IO_DATA_ONLY_ANALOG = bytes([0x01, 0x00, 0x00, 0x8A, 0x02, 0x0C, 0x00, 0xFA, 0x04, 0xE2])
IO_DATA_MIXED = bytes(
    [0x01, 0x02, 0x11, 0x8A, 0x02, 0x01, 0x02, 0x0C, 0x00, 0xFA, 0x04, 0xE2]
)

DIO1_ANALOG_VALUE = 524
DIO3_ANALOG_VALUE = 250
POWER_SUPPLY_VALUE = 1250

DIGITAL_MASK = 529  # 0x0211
ANALOG_MASK = 138  # 0x8A


@pytest.fixture
def digital_payload():
    return IO_DATA_ONLY_DIGITAL


@pytest.fixture
def analog_payload():
    return IO_DATA_ONLY_ANALOG


@pytest.fixture
def mixed_payload():
    return IO_DATA_MIXED
