"""Default collector set for a report."""
from typing import List

from ..config.collection_config import CollectionConfig
from .base import MetricCollector
from .network_collector import network_collector
from .system_collector import (
    cpu_collector,
    disk_collector,
    gpu_collector,
    load_collector,
    memory_collector,
)


def default_collectors(config: CollectionConfig) -> List[MetricCollector]:
    """One collector per metric category."""
    return [
        cpu_collector(config),
        gpu_collector(config),
        memory_collector(config),
        disk_collector(config),
        network_collector(config),
        load_collector(config),
    ]
