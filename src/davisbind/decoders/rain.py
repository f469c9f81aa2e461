"""
Decoder for Davis rain click counters.
"""
import logging
from enum import Enum
from typing import Optional

import numpy as np

from ..const import RAIN_CLICK_BASE, RAIN_VALUE_WIDTH
from ..errors import DecodeError
from ..sensor_classes import AbstractSensor, SensorConfig


class RainField(Enum):
    """Rain counters of a LOOP packet and their byte offsets."""
    RAIN_RATE = 41
    STORM_RAIN = 46
    DAY_RAIN = 50
    MONTH_RAIN = 52
    YEAR_RAIN = 54

    @property
    def offset(self) -> int:
        return self.value


class RainSensor(AbstractSensor):
    def __init__(self, logger: logging.Logger, click_base: Optional[float] = None):
        super().__init__(logger)
        self.click_base: float = RAIN_CLICK_BASE if click_base is None else float(click_base)

    @property
    def config(self) -> SensorConfig:
        return SensorConfig(
            name="Rain",
            id="rain",
            unit_of_measurement="mm",
        )

    def decode(self, data: bytes, offset: int) -> float:
        """
        Decodes a rain value from a raw payload.

        The counter is a signed 16-bit little-endian click count starting at
        `offset`; the result is clicks * click_base.
        """
        if offset < 0 or offset + RAIN_VALUE_WIDTH > len(data):
            raise DecodeError(
                f"Cannot read {RAIN_VALUE_WIDTH} bytes at offset {offset} "
                f"from a {len(data)} byte payload"
            )

        clicks = int(np.frombuffer(bytes(data), dtype="<i2", count=1, offset=offset)[0])
        value = clicks * self.click_base

        self.logger.info(
            f"  - Rain Data (Bytes {offset}-{offset + 1}):\n"
            f"    - Raw Click Counter: {clicks}\n"
            f"    - Formula: {clicks} * {self.click_base}\n"
            f"    - Rain: {value:.2f} mm"
        )

        return value

    def decode_field(self, data: bytes, field: RainField) -> float:
        return self.decode(data, field.offset)
