from .rain import RainSensor, RainField
