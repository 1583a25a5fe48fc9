"""Main configuration data structure."""
from dataclasses import dataclass, field
from pathlib import Path

from .collection_config import CollectionConfig
from .display_config import DisplayConfig
from .threshold_config import ThresholdConfig


@dataclass(frozen=True)
class Config:
    """Main configuration class."""
    log_dir: Path = Path("./monitoring_logs")
    monitoring_log: str = "monitoring.log"
    thresholds: ThresholdConfig = field(default_factory=ThresholdConfig)
    collection: CollectionConfig = field(default_factory=CollectionConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    def __post_init__(self):
        """Fix invalid values."""
        object.__setattr__(self, "log_dir", Path(self.log_dir))
        if not self.monitoring_log:
            object.__setattr__(self, "monitoring_log", "monitoring.log")

    @property
    def monitoring_log_path(self) -> Path:
        """Persistent log kept beside the reports, outside any report directory."""
        return self.log_dir / self.monitoring_log
