"""Network components: interface addresses, throughput and wireless link state."""

from __future__ import annotations

import array
import fcntl
import os
import re
import socket
import struct

import psutil

from tilekit.status.util import _LINE_MAX, _scan_int, fmt_human, warn

SYSFS_NET = "/sys/class/net"
PROC_WIRELESS = "/proc/net/wireless"

_SIOCGIWESSID = 0x8B1B
_IW_ESSID_MAX_SIZE = 32
_IFNAMSIZ = 16
_IWREQ_SIZE = 32

_QUALITY_RE = re.compile(r"\s*[+-]?\d+\s*([+-]?\d+)")


def _ip(interface: str, family: int) -> str | None:
    try:
        addresses = psutil.net_if_addrs()
    except OSError as err:
        warn(f"getifaddrs: {err.strerror}")
        return None
    for addr in addresses.get(interface, ()):
        if addr.family == family:
            return addr.address
    return None


def ipv4(interface: str) -> str | None:
    """Return the IPv4 address of an interface."""
    return _ip(interface, socket.AF_INET)


def ipv6(interface: str) -> str | None:
    """Return the IPv6 address of an interface."""
    return _ip(interface, socket.AF_INET6)


class NetSpeed:
    """Reports the byte rate of an interface between successive calls."""

    def __init__(self, direction: str, interval: int = 1000, sysfs: str = SYSFS_NET) -> None:
        if direction not in ("rx", "tx"):
            raise ValueError(f"direction must be 'rx' or 'tx', not {direction!r}")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.direction = direction
        self.interval = interval
        self.sysfs = sysfs
        self._bytes = 0

    def __call__(self, interface: str) -> str | None:
        path = os.path.join(self.sysfs, interface, "statistics", f"{self.direction}_bytes")
        old = self._bytes
        value = _scan_int(path)
        if value is None:
            return None
        self._bytes = value
        if old == 0:
            return None
        delta = (value - old) % (1 << 64)
        return fmt_human(delta * 1000 // self.interval, 1024)


_rx_meter = NetSpeed("rx")
_tx_meter = NetSpeed("tx")


def netspeed_rx(interface: str) -> str | None:
    """Return the receive rate of an interface since the previous call."""
    return _rx_meter(interface)


def netspeed_tx(interface: str) -> str | None:
    """Return the transmit rate of an interface since the previous call."""
    return _tx_meter(interface)


def rssi_to_perc(rssi: int) -> int:
    """Map a signal strength in dBm onto 0..100 percent."""
    if rssi >= -50:
        return 100
    if rssi <= -100:
        return 0
    return 2 * (rssi + 100)


def wifi_perc(
    interface: str, sysfs: str = SYSFS_NET, wireless_path: str = PROC_WIRELESS
) -> str | None:
    """Return the link quality of a wireless interface in percent."""
    operstate = os.path.join(sysfs, interface, "operstate")
    try:
        with open(operstate, encoding="utf-8", errors="replace") as fp:
            status = fp.readline(4)
    except OSError as err:
        warn(f"fopen '{operstate}': {err.strerror}")
        return None
    if status != "up\n":
        return None

    try:
        with open(wireless_path, encoding="utf-8", errors="replace") as fp:
            lines = [fp.readline(_LINE_MAX) for _ in range(3)]
    except OSError as err:
        warn(f"fopen '{wireless_path}': {err.strerror}")
        return None
    line = lines[-1]
    if not all(lines):
        return None

    start = line.find(interface)
    if start < 0:
        return None
    found = _QUALITY_RE.match(line[start + len(interface) + 2:])
    if found is None:
        return None
    quality = int(found.group(1))
    # 70 is the maximum link quality the kernel reports
    return str(int(quality / 70 * 100))


def wifi_essid(interface: str) -> str | None:
    """Return the ESSID a wireless interface is associated with."""
    name = interface.encode()
    if len(name) >= _IFNAMSIZ:
        warn("snprintf: Output truncated")
        return None

    essid = array.array("B", bytes(_IW_ESSID_MAX_SIZE + 1))
    pointer = essid.buffer_info()[0]
    request = struct.pack("16sPHH", name, pointer, _IW_ESSID_MAX_SIZE + 1, 0)
    request = request.ljust(_IWREQ_SIZE, b"\0")

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as err:
        warn(f"socket 'AF_INET': {err.strerror}")
        return None
    with sock:
        try:
            fcntl.ioctl(sock.fileno(), _SIOCGIWESSID, request)
        except OSError as err:
            warn(f"ioctl 'SIOCGIWESSID': {err.strerror}")
            return None

    raw = essid.tobytes().split(b"\0", 1)[0]
    return raw.decode("utf-8", errors="replace") or None