"""Alert data model for threshold breaches."""
from dataclasses import dataclass


@dataclass(frozen=True)
class SystemAlert:
    level: str  # "I", "W", "E"
    message: str
    category: str  # "MEMORY", "CPU", "DISK", "TEMPERATURE"
