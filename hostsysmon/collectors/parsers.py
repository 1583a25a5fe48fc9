"""Extract single numeric readings from tool output.

Each parser returns a typed value or raises ReadingParseError; nothing
else in the package interprets collector text.
"""
import re

from ..core.errors import ReadingParseError

_PERCENT = re.compile(r"(\d+)%")
# First reading after the label; ignores the "(high = ..., crit = ...)" tail
_SENSOR_TEMP = re.compile(r":\s+([+-]?\d+(?:\.\d+)?)\s*°C")


def parse_memory_percent(free_output: str) -> int:
    """Percent of RAM used from plain `free` output (100 * used / total)."""
    for line in free_output.splitlines():
        fields = line.split()
        if fields and fields[0] == "Mem:":
            try:
                total, used = int(fields[1]), int(fields[2])
            except (IndexError, ValueError) as e:
                raise ReadingParseError(f"Unexpected free output: {line!r}") from e
            if total <= 0:
                raise ReadingParseError(f"Total memory is {total}")
            return 100 * used // total
    raise ReadingParseError("No 'Mem:' line in free output")


def parse_cpu_percent(mpstat_output: str) -> int:
    """CPU busy percent as 100 - %idle from the mpstat Average line."""
    for line in mpstat_output.splitlines():
        if line.startswith("Average"):
            fields = line.split()
            try:
                idle = float(fields[-1].replace(",", "."))
            except (IndexError, ValueError) as e:
                raise ReadingParseError(f"Unexpected mpstat output: {line!r}") from e
            return int(100 - idle)
    raise ReadingParseError("No 'Average' line in mpstat output")


def parse_disk_percent(df_output: str) -> int:
    """Use% from the last line of `df <mountpoint>` output."""
    lines = [line for line in df_output.splitlines() if line.strip()]
    if not lines:
        raise ReadingParseError("Empty df output")

    matches = _PERCENT.findall(lines[-1])
    if not matches:
        raise ReadingParseError(f"No usage percentage in df output: {lines[-1]!r}")
    return int(matches[-1])


def parse_temperature(sensors_output: str) -> float:
    """Highest temperature in degrees C reported by `sensors`."""
    readings = []
    for line in sensors_output.splitlines():
        match = _SENSOR_TEMP.search(line)
        if match:
            readings.append(float(match.group(1)))
    if not readings:
        raise ReadingParseError("No temperature readings in sensors output")
    return max(readings)
