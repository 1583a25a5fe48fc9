"""Sample the scalar readings used for threshold checks."""
import logging
from typing import Callable, Optional, Sequence, TypeVar

from ..config.collection_config import CollectionConfig
from ..core.errors import CollectorError, ReadingParseError
from .base import run_command
from .parsers import (
    parse_cpu_percent,
    parse_disk_percent,
    parse_memory_percent,
    parse_temperature,
)
from .system_models import Readings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ReadingSampler:
    """Runs free, mpstat, df and sensors and parses one value from each."""

    def __init__(self, config: CollectionConfig, runner: Callable[..., str] = run_command):
        self.config = config
        self.runner = runner

    def sample(self) -> Readings:
        """Take fresh readings; any reading that fails is left as None."""
        return Readings(
            memory=self._read("memory", ["free"], parse_memory_percent),
            cpu=self._read("cpu", ["mpstat", str(self.config.cpu_sample_seconds), "1"],
                           parse_cpu_percent),
            disk=self._read("disk", ["df", "/"], parse_disk_percent),
            temperature=self._read("temperature", ["sensors"], parse_temperature),
        )

    def _read(self, metric: str, cmd: Sequence[str], parser: Callable[[str], T]) -> Optional[T]:
        try:
            output = self.runner(cmd, timeout=self.config.command_timeout)
            return parser(output)
        except (CollectorError, ReadingParseError) as e:
            logger.warning("Skipping %s threshold check: %s", metric, e)
            return None
