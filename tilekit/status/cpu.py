"""CPU frequency and CPU usage between successive readings."""

from __future__ import annotations

from tilekit.status.util import _read_text, _scan_int, fmt_human

CPU_FREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"
PROC_STAT = "/proc/stat"


class CpuMeter:
    """Measures CPU usage as the busy share of time since the previous reading."""

    def __init__(self, stat_path: str = PROC_STAT) -> None:
        self.stat_path = stat_path
        self._previous: list[float] | None = None

    def _read(self) -> list[float] | None:
        text = _read_text(self.stat_path)
        if text is None:
            return None
        fields = text.split()[1:8]
        if len(fields) != 7:
            return None
        try:
            return [float(field) for field in fields]
        except ValueError:
            return None

    def perc(self) -> str | None:
        """Return usage in percent since the last call, or None on the first call."""
        current = self._read()
        if current is None:
            return None
        previous, self._previous = self._previous, current
        if previous is None or previous[0] == 0:
            return None

        # user nice system idle iowait irq softirq
        total = sum(current) - sum(previous)
        if total == 0:
            return None
        busy = [0, 1, 2, 5, 6]
        used = sum(current[i] for i in busy) - sum(previous[i] for i in busy)
        return str(int(100 * used / total))


_meter = CpuMeter()


def cpu_freq(unused: object = None, path: str = CPU_FREQ) -> str | None:
    """Return the current frequency of the first CPU in human-readable Hz."""
    freq = _scan_int(path)
    if freq is None:
        return None
    return fmt_human(freq * 1000, 1000)


def cpu_perc(unused: object = None) -> str | None:
    """Return system CPU usage in percent since the previous call."""
    return _meter.perc()