"""Battery percentage, charging state and remaining time from the power-supply class."""

from __future__ import annotations

import os
import re

from tilekit.status.util import _scan_int

SYSFS_POWER_SUPPLY = "/sys/class/power_supply"

_STATE_SYMBOLS = {
    "Charging": "+",
    "Discharging": "-",
    "Full": "o",
    "Not charging": "o",
}

_STATE_RE = re.compile(r"[a-zA-Z ]{1,12}")


def _read_state(path: str) -> str | None:
    try:
        with open(path, encoding="utf-8", errors="replace") as fp:
            text = fp.read()
    except OSError:
        return None
    found = _STATE_RE.match(text)
    return found.group(0) if found else None


def _pick(directory: str, *names: str) -> str | None:
    for name in names:
        path = os.path.join(directory, name)
        if os.access(path, os.R_OK):
            return path
    return None


def battery_perc(bat: str, sysfs: str = SYSFS_POWER_SUPPLY) -> str | None:
    """Return the battery capacity in percent."""
    capacity = _scan_int(os.path.join(sysfs, bat, "capacity"), signed=True)
    return None if capacity is None else str(capacity)


def battery_state(bat: str, sysfs: str = SYSFS_POWER_SUPPLY) -> str | None:
    """Return '+', '-', 'o' or '?' for the battery's charging state."""
    state = _read_state(os.path.join(sysfs, bat, "status"))
    if state is None:
        return None
    return _STATE_SYMBOLS.get(state, "?")


def battery_remaining(bat: str, sysfs: str = SYSFS_POWER_SUPPLY) -> str | None:
    """Return the remaining time as 'Hh Mm' while discharging, '' otherwise."""
    directory = os.path.join(sysfs, bat)
    state = _read_state(os.path.join(directory, "status"))
    if state is None:
        return None

    charge_path = _pick(directory, "charge_now", "energy_now")
    if charge_path is None:
        return None
    charge_now = _scan_int(charge_path)
    if charge_now is None:
        return None

    if state != "Discharging":
        return ""

    current_path = _pick(directory, "current_now", "power_now")
    if current_path is None:
        return None
    current_now = _scan_int(current_path)
    if not current_now:
        return None

    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"