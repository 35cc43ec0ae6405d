"""
xbee_io.io_value

Digital state of an IO line.

A line that is not part of a sample's digital mask has no IOValue at all;
there is no 'unknown' member.
"""

from enum import Enum
from typing import Optional


class IOValue(Enum):
    """Digital IO value. The ids match the module's 'digital out low/high' settings."""

    LOW = (4, "Low")
    HIGH = (5, "High")

    def __init__(self, id: int, display_name: str):
        self.id = id
        self.display_name = display_name

    @classmethod
    def get(cls, id: int) -> Optional["IOValue"]:
        for value in cls:
            if value.id == id:
                return value
        return None

    def __str__(self) -> str:
        return self.display_name
