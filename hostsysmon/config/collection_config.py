"""Collection settings configuration."""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CollectionConfig:
    """How the external metric tools are invoked."""
    cpu_sample_seconds: int = 1
    smart_device: str = "auto"
    command_timeout: Optional[float] = None

    def __post_init__(self):
        """Fix invalid values."""
        if self.cpu_sample_seconds <= 0:
            object.__setattr__(self, "cpu_sample_seconds", 1)
        if not self.smart_device:
            object.__setattr__(self, "smart_device", "auto")
        if self.command_timeout is not None and self.command_timeout <= 0:
            object.__setattr__(self, "command_timeout", None)
