"""Memory and swap usage read from the kernel's meminfo table."""

from __future__ import annotations

from tilekit.status.util import _read_text, fmt_human

MEMINFO = "/proc/meminfo"


def read_meminfo(path: str = MEMINFO) -> dict[str, int] | None:
    """Return the fields of a meminfo file as a mapping of name to kB value."""
    text = _read_text(path)
    if text is None:
        return None
    info: dict[str, int] = {}
    for line in text.splitlines():
        name, sep, rest = line.partition(":")
        if not sep:
            continue
        tokens = rest.split()
        if tokens and tokens[0].isdigit():
            info[name.strip()] = int(tokens[0])
    return info


def _fields(path: str, *names: str) -> list[int] | None:
    info = read_meminfo(path)
    if info is None:
        return None
    try:
        return [info[name] for name in names]
    except KeyError:
        return None


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def ram_free(unused: object = None, path: str = MEMINFO) -> str | None:
    """Return the memory available for new allocations."""
    fields = _fields(path, "MemAvailable")
    return None if fields is None else fmt_human(fields[0] * 1024, 1024)


def ram_perc(unused: object = None, path: str = MEMINFO) -> str | None:
    """Return the share of memory in use, not counting buffers and cache."""
    fields = _fields(path, "MemTotal", "MemFree", "Buffers", "Cached")
    if fields is None:
        return None
    total, free, buffers, cached = fields
    if total == 0:
        return None
    used = (total - free) - (buffers + cached)
    return str(_trunc_div(100 * used, total))


def ram_total(unused: object = None, path: str = MEMINFO) -> str | None:
    """Return the total amount of memory."""
    fields = _fields(path, "MemTotal")
    return None if fields is None else fmt_human(fields[0] * 1024, 1024)


def ram_used(unused: object = None, path: str = MEMINFO) -> str | None:
    """Return the memory in use, not counting buffers and cache."""
    fields = _fields(path, "MemTotal", "MemFree", "Buffers", "Cached")
    if fields is None:
        return None
    total, free, buffers, cached = fields
    return fmt_human((total - free - buffers - cached) * 1024, 1024)


def swap_free(unused: object = None, path: str = MEMINFO) -> str | None:
    """Return the free swap space."""
    fields = _fields(path, "SwapFree")
    return None if fields is None else fmt_human(fields[0] * 1024, 1024)


def swap_perc(unused: object = None, path: str = MEMINFO) -> str | None:
    """Return the share of swap in use, not counting swap cache."""
    fields = _fields(path, "SwapTotal", "SwapFree", "SwapCached")
    if fields is None:
        return None
    total, free, cached = fields
    if total == 0:
        return None
    return str(_trunc_div(100 * (total - free - cached), total))


def swap_total(unused: object = None, path: str = MEMINFO) -> str | None:
    """Return the total swap space."""
    fields = _fields(path, "SwapTotal")
    return None if fields is None else fmt_human(fields[0] * 1024, 1024)


def swap_used(unused: object = None, path: str = MEMINFO) -> str | None:
    """Return the swap in use, not counting swap cache."""
    fields = _fields(path, "SwapTotal", "SwapFree", "SwapCached")
    if fields is None:
        return None
    total, free, cached = fields
    return fmt_human((total - free - cached) * 1024, 1024)