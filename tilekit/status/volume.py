"""Master volume read from an OSS mixer device."""

from __future__ import annotations

import array
import fcntl
import os

from tilekit.status.util import warn

# _IOR('M', 0xfe, int) and _IOR('M', i, int)
_SOUND_MIXER_READ_DEVMASK = 0x80044DFE
_MIXER_READ_BASE = 0x80044D00

_SOUND_DEVICE_NAMES = (
    "vol", "bass", "treble", "synth", "pcm", "speaker", "line", "mic",
    "cd", "mix", "pcm2", "rec", "igain", "ogain", "line1", "line2",
    "line3", "dig1", "dig2", "dig3", "phin", "phout", "video", "radio",
    "monitor",
)


def _ioctl_int(fd: int, request: int) -> int:
    buf = array.array("i", [0])
    fcntl.ioctl(fd, request, buf, True)
    return buf[0]


def vol_perc(card: str) -> str | None:
    """Return the master volume of a mixer device in percent."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError as err:
        warn(f"open '{card}': {err.strerror}")
        return None

    try:
        try:
            devmask = _ioctl_int(fd, _SOUND_MIXER_READ_DEVMASK)
        except OSError as err:
            warn(f"ioctl 'SOUND_MIXER_READ_DEVMASK': {err.strerror}")
            return None

        value = None
        for index, name in enumerate(_SOUND_DEVICE_NAMES):
            if devmask & (1 << index) and name == "vol":
                try:
                    value = _ioctl_int(fd, _MIXER_READ_BASE | index)
                except OSError as err:
                    warn(f"ioctl 'MIXER_READ({index})': {err.strerror}")
                    return None
    finally:
        os.close(fd)

    if value is None:
        return None
    return str(value & 0xFF)