"""Components describing the running system: time, disks, host, load, uptime, user."""

from __future__ import annotations

import os
import pwd
import socket
import time

from tilekit.status.util import fmt_human, warn

_STRFTIME_MAX = 1024


def datetime(fmt: str) -> str | None:
    """Return the local time formatted with ``fmt``."""
    result = time.strftime(fmt, time.localtime())
    if not result or len(result) >= _STRFTIME_MAX:
        warn("strftime: Result string exceeds buffer size")
        return None
    return result


def _statvfs(path: str) -> os.statvfs_result | None:
    try:
        return os.statvfs(path)
    except OSError as err:
        warn(f"statvfs '{path}': {err.strerror}")
        return None


def disk_free(path: str) -> str | None:
    """Return the space available to unprivileged users on a filesystem."""
    fs = _statvfs(path)
    return None if fs is None else fmt_human(fs.f_frsize * fs.f_bavail, 1024)


def disk_perc(path: str) -> str | None:
    """Return the used share of a filesystem in percent."""
    fs = _statvfs(path)
    if fs is None or fs.f_blocks == 0:
        return None
    return str(int(100 * (1 - fs.f_bavail / fs.f_blocks)))


def disk_total(path: str) -> str | None:
    """Return the total size of a filesystem."""
    fs = _statvfs(path)
    return None if fs is None else fmt_human(fs.f_frsize * fs.f_blocks, 1024)


def disk_used(path: str) -> str | None:
    """Return the used space of a filesystem."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * (fs.f_blocks - fs.f_bfree), 1024)


def hostname(unused: object = None) -> str | None:
    """Return the host name."""
    try:
        return socket.gethostname()
    except OSError as err:
        warn(f"gethostname: {err.strerror}")
        return None


def kernel_release(unused: object = None) -> str | None:
    """Return the kernel release, as ``uname -r`` prints it."""
    try:
        return os.uname().release
    except OSError as err:
        warn(f"uname: {err.strerror}")
        return None


def load_avg(unused: object = None) -> str | None:
    """Return the 1, 5 and 15 minute load averages."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError:
        warn("getloadavg: Failed to obtain load average")
        return None
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"


def _uptime_clock() -> int:
    for name in ("CLOCK_BOOTTIME", "CLOCK_UPTIME"):
        clock = getattr(time, name, None)
        if clock is not None:
            return clock
    return time.CLOCK_MONOTONIC


def uptime(unused: object = None) -> str | None:
    """Return the system uptime as 'Hh Mm'."""
    clock = _uptime_clock()
    try:
        seconds = int(time.clock_gettime(clock))
    except OSError:
        warn(f"clock_gettime {clock}")
        return None
    return f"{seconds // 3600}h {seconds % 3600 // 60}m"


def gid(unused: object = None) -> str:
    """Return the real group id of the current process."""
    return str(os.getgid())


def uid(unused: object = None) -> str:
    """Return the effective user id of the current process."""
    return str(os.geteuid())


def username(unused: object = None) -> str | None:
    """Return the login name of the effective user."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError:
        warn(f"getpwuid '{euid}': no such user")
        return None