"""
xbee_io.io_line

Enumeration of the IO lines a radio module can report in an IO sample.

Each line has a fixed bit index. Bit ``index`` of the digital mask (and of the
analog mask, for the analog-capable lines) tells whether the line carries a
value in a given sample, so the indexes must never change.

Classes:
    - IOLine: The addressable DIO/AD/PWM lines of the module
"""

from enum import Enum
from typing import Optional


class IOLine(Enum):
    """
    IOLine

    Attributes:
        index (int): Bit position of the line in the sample masks.
        description (str): Human readable line name (e.g. 'DIO1/AD1').
        has_pwm_capability (bool): Whether the line can be configured as PWM output.
        at_command (str): AT command used to configure the line.
    """

    DIO0_AD0 = (0, "DIO0/AD0", False, "D0")
    DIO1_AD1 = (1, "DIO1/AD1", False, "D1")
    DIO2_AD2 = (2, "DIO2/AD2", False, "D2")
    DIO3_AD3 = (3, "DIO3/AD3", False, "D3")
    DIO4_AD4 = (4, "DIO4/AD4", False, "D4")
    DIO5_AD5 = (5, "DIO5/AD5", False, "D5")
    DIO6 = (6, "DIO6", False, "D6")
    DIO7 = (7, "DIO7", False, "D7")
    DIO8 = (8, "DIO8", False, "D8")
    DIO9 = (9, "DIO9", False, "D9")
    DIO10_PWM0 = (10, "DIO10/PWM0", True, "P0")
    DIO11_PWM1 = (11, "DIO11/PWM1", True, "P1")
    DIO12 = (12, "DIO12", False, "P2")
    DIO13 = (13, "DIO13", False, "P3")
    DIO14 = (14, "DIO14", False, "P4")
    DIO15 = (15, "DIO15", False, "P5")
    DIO16 = (16, "DIO16", False, "P6")
    DIO17 = (17, "DIO17", False, "P7")
    DIO18 = (18, "DIO18", False, "P8")
    DIO19 = (19, "DIO19", False, "P9")

    def __init__(self, index: int, description: str, has_pwm_capability: bool, at_command: str):
        self.index = index
        self.description = description
        self.has_pwm_capability = has_pwm_capability
        self.at_command = at_command

    @classmethod
    def get_dio(cls, index: int) -> Optional["IOLine"]:
        """Return the line with the given bit index, or None if there is no such line."""
        return _LINES_BY_INDEX.get(index)

    def __str__(self) -> str:
        return self.description


_LINES_BY_INDEX = {line.index: line for line in IOLine}
