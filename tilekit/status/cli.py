"""The status line command: render components periodically to stdout or the root window."""

from __future__ import annotations

import os
import signal
import subprocess
import sys
import time
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from tilekit.status.battery import battery_perc, battery_state
from tilekit.status.cpu import cpu_perc
from tilekit.status.memory import ram_perc
from tilekit.status.system import datetime
from tilekit.status.util import warn

VERSION = "1.0"
PROG = "slstatus"

# interval between updates, in milliseconds
INTERVAL = 1000
# text shown when a component cannot produce a value
UNKNOWN_STR = "n/a"
# maximum length of the status line, terminator included
MAXLEN = 2048


@dataclass(frozen=True)
class Component:
    """One piece of the status line: a function, its printf-style format and its argument."""

    func: Callable[[Any], str | None]
    fmt: str
    arg: Any = None


DEFAULT_COMPONENTS = (
    Component(datetime, "%s", "%F %T"),
    Component(cpu_perc, " CPU:%s%%"),
    Component(ram_perc, " RAM:%s%%"),
    Component(battery_perc, " BAT:%s%%", "BAT0"),
    Component(battery_state, " (%s)", "BAT0"),
)


@dataclass(frozen=True)
class _Flags:
    single_line: bool = False
    once: bool = False


class _Wake(Exception):
    """Raised from a signal handler to cut the sleep between updates short."""


def render_status(
    components: Iterable[Component] = DEFAULT_COMPONENTS,
    unknown: str = UNKNOWN_STR,
    maxlen: int = MAXLEN,
) -> str:
    """Concatenate the formatted components, stopping at the first that does not fit."""
    status = ""
    used = 0
    for component in components:
        result = component.func(component.arg)
        if result is None:
            result = unknown
        try:
            piece = component.fmt % result
        except (TypeError, ValueError) as err:
            warn(f"vsnprintf: {err}")
            break
        size = len(piece.encode("utf-8"))
        if size >= maxlen - used:
            warn("vsnprintf: Output truncated")
            break
        status += piece
        used += size
    return status


def _usage() -> SystemExit:
    return SystemExit(f"usage: {PROG} [-v] [-s] [-1]")


def parse_args(argv: list[str]) -> _Flags:
    """Parse the command line flags; raise SystemExit for -v and on misuse."""
    single_line = False
    once = False
    args = list(argv)
    while args:
        arg = args[0]
        if not arg.startswith("-") or arg == "-":
            break
        args.pop(0)
        if arg == "--":
            break
        for flag in arg[1:]:
            if flag == "v":
                raise SystemExit(f"{PROG}-{VERSION}")
            if flag == "1":
                once = True
                single_line = True
            elif flag == "s":
                single_line = True
            else:
                raise _usage()
    if args:
        raise _usage()
    return _Flags(single_line=single_line, once=once)


def _set_root_name(name: str) -> None:
    try:
        subprocess.run(["xsetroot", "-name", name], check=True)
    except (OSError, subprocess.CalledProcessError):
        raise SystemExit("XStoreName: Allocation failed") from None


@dataclass
class _State:
    done: bool = False
    sleeping: bool = False


def main(argv: list[str] | None = None) -> int:
    """Run the status loop; with -s print to stdout, with -1 print once and exit."""
    flags = parse_args(sys.argv[1:] if argv is None else argv)
    state = _State(done=flags.once)

    def handler(signo: int, frame: object) -> None:
        if signo != signal.SIGUSR1:
            state.done = True
        if state.sleeping:
            raise _Wake

    signals = (signal.SIGINT, signal.SIGTERM, signal.SIGUSR1)
    previous = {sig: signal.signal(sig, handler) for sig in signals}
    try:
        if not flags.single_line and not os.environ.get("DISPLAY"):
            raise SystemExit("XOpenDisplay: Failed to open display")

        while True:
            start = time.monotonic()
            status = render_status(DEFAULT_COMPONENTS)
            if flags.single_line:
                try:
                    print(status, flush=True)
                except OSError as err:
                    raise SystemExit(f"puts: {err.strerror}") from None
            else:
                _set_root_name(status)

            if not state.done:
                wait = INTERVAL / 1000 - (time.monotonic() - start)
                if wait >= 0:
                    try:
                        state.sleeping = True
                        time.sleep(wait)
                    except _Wake:
                        pass
                    finally:
                        state.sleeping = False
            if state.done:
                break

        if not flags.single_line:
            _set_root_name("")
    finally:
        for sig, old in previous.items():
            signal.signal(sig, old)
    return 0