"""Shared helpers for status components: human-readable sizes, warnings, file scanning."""

from __future__ import annotations

import re
import sys

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}

# Longest line a component keeps from a file or a command (fgets into a 1 KiB buffer).
_LINE_MAX = 1022

_SIGNED_RE = re.compile(r"\s*([+-]?\d+)")
_UNSIGNED_RE = re.compile(r"\s*(\d+)")


def warn(message: str) -> None:
    """Write a warning line to standard error."""
    print(message, file=sys.stderr)


def fmt_human(num: int | float, base: int) -> str:
    """Scale ``num`` by powers of ``base`` (1000 or 1024) and add the unit prefix."""
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        raise ValueError(f"fmt_human: invalid base {base!r}") from None

    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f} {prefixes[index]}"


def read_first_line(path: str) -> str | None:
    """Return the first line of ``path`` without its newline, or None if unreadable or empty."""
    try:
        with open(path, encoding="utf-8", errors="replace") as fp:
            line = fp.readline(_LINE_MAX)
    except OSError as err:
        warn(f"fopen '{path}': {err.strerror}")
        return None
    if not line:
        return None
    return line[:-1] if line.endswith("\n") else line


def _read_text(path: str) -> str | None:
    try:
        with open(path, encoding="utf-8", errors="replace") as fp:
            return fp.read()
    except OSError as err:
        warn(f"fopen '{path}': {err.strerror}")
        return None


def _scan_int(path: str, signed: bool = False) -> int | None:
    """Read the leading integer of a file, skipping whitespace first."""
    text = _read_text(path)
    if text is None:
        return None
    found = (_SIGNED_RE if signed else _UNSIGNED_RE).match(text)
    return int(found.group(1)) if found else None