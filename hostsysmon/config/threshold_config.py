"""Threshold configuration data structure."""
from dataclasses import dataclass


@dataclass(frozen=True)
class ThresholdConfig:
    """Alert thresholds, in percent (temperature in degrees C)."""
    memory: int = 80
    cpu: int = 90
    temperature: int = 80
    disk: int = 90
    check_temperature: bool = True

    def __post_init__(self):
        """Fix invalid values."""
        if self.memory <= 0 or self.memory > 100:
            object.__setattr__(self, "memory", 80)
        if self.cpu <= 0 or self.cpu > 100:
            object.__setattr__(self, "cpu", 90)
        if self.temperature <= 0 or self.temperature > 150:
            object.__setattr__(self, "temperature", 80)
        if self.disk <= 0 or self.disk > 100:
            object.__setattr__(self, "disk", 90)
