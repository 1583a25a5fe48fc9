"""Data models produced by the collectors."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

CATEGORIES = ("cpu", "gpu", "memory", "disk", "network", "load")


@dataclass(frozen=True)
class MetricSample:
    """Raw text captured from one collector for one report."""
    category: str
    content: str
    timestamp: datetime


@dataclass(frozen=True)
class Readings:
    """Scalar readings used for threshold checks; None means unavailable."""
    memory: Optional[int] = None
    cpu: Optional[int] = None
    disk: Optional[int] = None
    temperature: Optional[float] = None
