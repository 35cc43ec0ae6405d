"""
xbee_io.models

Pydantic models for handing decoded IO samples to consumers that serialize them
(event reporting, JSON APIs, logs).

Models:
    - IOSampleModel: Frozen snapshot of every value carried by an IOSample
"""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, conint, field_validator

from xbee_io.io_line import IOLine
from xbee_io.io_value import IOValue

Reading = conint(ge=0, le=0xFFFF)


class IOSampleModel(BaseModel):
    """
    IOSampleModel

    Attributes:
        sample_count (int): Number of sample sets announced by the module.
        digital_mask (int): Raw digital mask.
        analog_mask (int): Raw analog mask (bit 7 is the power supply).
        digital_values (Dict[str, str]): IOLine name -> IOValue name ('HIGH'/'LOW').
        analog_values (Dict[str, int]): IOLine name -> 16-bit reading.
        power_supply_value (Optional[int]): Supply voltage reading, if reported.
        legacy (bool): Whether the payload used the 802.15.4 layout.
    """

    sample_count: int = Field(1, ge=0, le=0xFF)
    digital_mask: int = Field(..., ge=0, le=0xFFFF)
    analog_mask: int = Field(..., ge=0, le=0xFF)
    digital_values: Dict[str, str] = Field(default_factory=dict)
    analog_values: Dict[str, Reading] = Field(default_factory=dict)
    power_supply_value: Optional[Reading] = None
    legacy: bool = False

    model_config = ConfigDict(frozen=True)

    @field_validator("digital_values")
    @classmethod
    def check_digital_values(cls, v: Dict[str, str]) -> Dict[str, str]:
        for line_name, value_name in v.items():
            if line_name not in IOLine.__members__:
                raise ValueError(f"Unknown IO line '{line_name}'")
            if value_name not in IOValue.__members__:
                raise ValueError(f"Invalid digital value '{value_name}' for {line_name}")
        return v

    @field_validator("analog_values")
    @classmethod
    def check_analog_lines(cls, v: Dict[str, int]) -> Dict[str, int]:
        for line_name in v:
            if line_name not in IOLine.__members__:
                raise ValueError(f"Unknown IO line '{line_name}'")
        return v
