"""Network interface statistics collector."""
from ..config.collection_config import CollectionConfig
from .base import CommandCollector, MetricCollector, Section


def network_collector(config: CollectionConfig) -> MetricCollector:
    """Interface statistics from ifconfig followed by ip -s link."""
    return CommandCollector("network", [
        Section(["ifconfig"], title="Network Statistics", optional=True,
                skip_message="Interface configuration skipped."),
        Section(["ip", "-s", "link"]),
    ], timeout=config.command_timeout)
