"""System metrics collectors for CPU, GPU, memory, disk, and load."""
import re

import psutil

from ..config.collection_config import CollectionConfig
from .base import CommandCollector, MetricCollector, Section

FALLBACK_SMART_DEVICE = "/dev/sda"

_NUMBERED_PARTITION = re.compile(r"^(/dev/(?:nvme\d+n\d+|mmcblk\d+))p\d+$")
_LETTERED_PARTITION = re.compile(r"^(/dev/[a-z]+)\d+$")


def resolve_smart_device(setting: str) -> str:
    """Resolve "auto" to the whole-disk device backing the root filesystem."""
    if setting != "auto":
        return setting

    try:
        partitions = psutil.disk_partitions(all=False)
    except OSError:
        return FALLBACK_SMART_DEVICE

    for part in partitions:
        if part.mountpoint == "/" and part.device.startswith("/dev/"):
            return _whole_disk(part.device)
    return FALLBACK_SMART_DEVICE


def _whole_disk(device: str) -> str:
    """Strip the partition suffix: /dev/sda1 -> /dev/sda, /dev/nvme0n1p2 -> /dev/nvme0n1."""
    match = _NUMBERED_PARTITION.match(device) or _LETTERED_PARTITION.match(device)
    return match.group(1) if match else device


def cpu_collector(config: CollectionConfig) -> MetricCollector:
    """CPU utilization over the sample window, followed by sensor temperatures."""
    return CommandCollector("cpu", [
        Section(["mpstat", str(config.cpu_sample_seconds), "1"], title="CPU Metrics"),
        Section(["sensors"], title="CPU Temperature", optional=True,
                skip_message="Temperature readings skipped."),
    ], timeout=config.command_timeout)


def gpu_collector(config: CollectionConfig) -> MetricCollector:
    return CommandCollector("gpu", [
        Section(["lshw", "-C", "display"], title="GPU Metrics", optional=True,
                skip_message="GPU metrics skipped."),
    ], timeout=config.command_timeout)


def memory_collector(config: CollectionConfig) -> MetricCollector:
    return CommandCollector("memory", [
        Section(["free", "-h"], title="Memory Metrics"),
    ], timeout=config.command_timeout)


def disk_collector(config: CollectionConfig) -> MetricCollector:
    """Disk usage plus best-effort SMART status; SMART errors are suppressed."""
    device = resolve_smart_device(config.smart_device)
    return CommandCollector("disk", [
        Section(["df", "-h"], title="Disk Usage"),
        Section(["smartctl", "--all", device], title="SMART Status", optional=True,
                skip_message="SMART status skipped.", quiet=True),
    ], timeout=config.command_timeout)


def load_collector(config: CollectionConfig) -> MetricCollector:
    return CommandCollector("load", [
        Section(["uptime"], title="System Load Metrics"),
    ], timeout=config.command_timeout)
