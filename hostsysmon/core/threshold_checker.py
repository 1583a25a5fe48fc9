"""Threshold checks on sampled readings."""
import logging
from typing import List, Optional, Union

from ..collectors.system_models import Readings
from ..config.threshold_config import ThresholdConfig
from .alerts import SystemAlert

logger = logging.getLogger(__name__)


class ThresholdChecker:
    """Raises a blocking user alert for every reading above its threshold."""

    def __init__(self, thresholds: ThresholdConfig, dialogs):
        self.thresholds = thresholds
        self.dialogs = dialogs

    def check(self, readings: Readings) -> List[SystemAlert]:
        """Check each reading independently; unavailable readings are skipped."""
        checks = [
            ("MEMORY", "High Memory Usage", readings.memory, self.thresholds.memory, "%"),
            ("CPU", "High CPU Usage", readings.cpu, self.thresholds.cpu, "%"),
            ("DISK", "High Disk Usage", readings.disk, self.thresholds.disk, "%"),
        ]
        if self.thresholds.check_temperature:
            checks.append(
                ("TEMPERATURE", "High Temperature", readings.temperature,
                 self.thresholds.temperature, "°C")
            )

        alerts = []
        for category, label, value, limit, unit in checks:
            if not self._breached(value, limit):
                continue
            alert = SystemAlert("E", f"ALERT: {label} ({_format(value)}{unit})", category)
            logger.warning("%s (threshold %s%s)", alert.message, limit, unit)
            alerts.append(alert)
            try:
                self.dialogs.alert(alert.message)
            except Exception:
                logger.exception("Could not show alert for %s", category)
        return alerts

    @staticmethod
    def _breached(value: Optional[Union[int, float]], limit: int) -> bool:
        return value is not None and value > limit


def _format(value: Union[int, float]) -> str:
    if isinstance(value, float):
        return f"{value:.1f}"
    return str(value)
