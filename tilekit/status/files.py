"""Components that read files, directories, sensors and command output."""

from __future__ import annotations

import os
import subprocess

from tilekit.status.util import _LINE_MAX, _scan_int, read_first_line, warn

ENTROPY_AVAIL = "/proc/sys/kernel/random/entropy_avail"


def cat(path: str) -> str | None:
    """Return the first line of a file, or None if it is missing or empty."""
    line = read_first_line(path)
    return line or None


def num_files(path: str) -> str | None:
    """Return the number of entries in a directory."""
    try:
        entries = os.listdir(path)
    except OSError as err:
        warn(f"opendir '{path}': {err.strerror}")
        return None
    return str(len(entries))


def run_command(cmd: str) -> str | None:
    """Run a shell command and return the first line of its output."""
    try:
        proc = subprocess.Popen(
            cmd, shell=True, stdout=subprocess.PIPE, text=True, errors="replace"
        )
    except OSError as err:
        warn(f"popen '{cmd}': {err.strerror}")
        return None
    with proc:
        assert proc.stdout is not None
        line = proc.stdout.readline(_LINE_MAX)
        proc.stdout.close()
        proc.wait()
    if line.endswith("\n"):
        line = line[:-1]
    return line or None


def temp(file: str) -> str | None:
    """Return the temperature in degrees Celsius from a millidegree sensor file."""
    value = _scan_int(file)
    return None if value is None else str(value // 1000)


def entropy(unused: object = None, path: str = ENTROPY_AVAIL) -> str | None:
    """Return the available kernel entropy."""
    value = _scan_int(path)
    return None if value is None else str(value)