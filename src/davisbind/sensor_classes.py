from dataclasses import dataclass
from typing import Optional, Any
from abc import ABC, abstractmethod
import logging


@dataclass
class SensorConfig:
    name: str
    id: str  # Key of the decoded value when reported to the host
    unit_of_measurement: Optional[str] = None


class AbstractSensor(ABC):
    def __init__(self, logger: logging.Logger):
        self.logger = logger

    @property
    @abstractmethod
    def config(self) -> SensorConfig:
        pass

    @abstractmethod
    def decode(self, data: bytes, offset: int) -> Any:
        """
        Transforms the raw payload bytes at 'offset' into a host value.
        """
        pass
