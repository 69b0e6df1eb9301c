"""Filter a list of files by properties, in the manner of test(1)."""

from __future__ import annotations

import os
import stat
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, TextIO

PROG = "stest"
USAGE = f"usage: {PROG} [-abcdefghlpqrsuvwx] [-n file] [-o file] [file...]"

_FLAGS = "abcdefghlpqrsuvwx"
_PATH_MAX = 4096


class UsageError(ValueError):
    """Raised when the command line cannot be parsed."""


@dataclass(frozen=True)
class Options:
    """Selected tests: single-letter flags plus the reference times of -n and -o."""

    flags: frozenset[str] = frozenset()
    newer_than: int | None = None
    older_than: int | None = None

    def flag(self, letter: str) -> bool:
        """Return whether the test named by ``letter`` is enabled."""
        if letter == "n":
            return self.newer_than is not None
        if letter == "o":
            return self.older_than is not None
        return letter in self.flags


def _mtime_seconds(st: os.stat_result) -> int:
    return st.st_mtime_ns // 1_000_000_000


def _reference_mtime(path: str) -> int | None:
    try:
        return _mtime_seconds(os.stat(path))
    except OSError as err:
        print(f"{path}: {err.strerror}", file=sys.stderr)
        return None
    except ValueError as err:
        print(f"{path}: {err}", file=sys.stderr)
        return None


def parse_args(argv: Iterable[str]) -> tuple[Options, list[str]]:
    """Parse flags and return the options with the remaining file operands."""
    args = list(argv)
    flags: set[str] = set()
    newer: int | None = None
    older: int | None = None
    index = 0
    while index < len(args):
        arg = args[index]
        if not arg.startswith("-") or arg == "-":
            break
        index += 1
        if arg == "--":
            break
        pos = 1
        while pos < len(arg):
            letter = arg[pos]
            if letter in "no":
                rest = arg[pos + 1:]
                if rest:
                    value = rest
                elif index < len(args):
                    value = args[index]
                    index += 1
                else:
                    raise UsageError(f"option -{letter} requires a file")
                mtime = _reference_mtime(value)
                if letter == "n":
                    newer = mtime
                else:
                    older = mtime
                break
            if letter not in _FLAGS:
                raise UsageError(f"unknown option -{letter}")
            flags.add(letter)
            pos += 1
    return Options(frozenset(flags), newer, older), args[index:]


def _access(path: str, mode: int) -> bool:
    try:
        return os.access(path, mode)
    except (OSError, ValueError):
        return False


def _is_symlink(path: str) -> bool:
    try:
        return stat.S_ISLNK(os.lstat(path).st_mode)
    except (OSError, ValueError):
        return False


def _passes(path: str, name: str, options: Options) -> bool:
    try:
        st = os.stat(path)
    except (OSError, ValueError):
        return False
    mode = st.st_mode
    flag = options.flag
    checks = (
        ("a", lambda: True),
        ("b", lambda: stat.S_ISBLK(mode)),
        ("c", lambda: stat.S_ISCHR(mode)),
        ("d", lambda: stat.S_ISDIR(mode)),
        ("e", lambda: _access(path, os.F_OK)),
        ("f", lambda: stat.S_ISREG(mode)),
        ("g", lambda: bool(mode & stat.S_ISGID)),
        ("h", lambda: _is_symlink(path)),
        ("n", lambda: _mtime_seconds(st) > options.newer_than),
        ("o", lambda: _mtime_seconds(st) < options.older_than),
        ("p", lambda: stat.S_ISFIFO(mode)),
        ("r", lambda: _access(path, os.R_OK)),
        ("s", lambda: st.st_size > 0),
        ("u", lambda: bool(mode & stat.S_ISUID)),
        ("w", lambda: _access(path, os.W_OK)),
        ("x", lambda: _access(path, os.X_OK)),
    )
    if not flag("a") and name.startswith("."):
        return False
    return all(check() for letter, check in checks[1:] if flag(letter))


def matches(path: str, name: str, options: Options) -> bool:
    """Return whether ``path`` passes every enabled test, inverted by -v."""
    return _passes(path, name, options) != options.flag("v")


def run(
    options: Options, files: Iterable[str], stdin: TextIO | None = None
) -> Iterator[str]:
    """Yield the names that pass; read paths from ``stdin`` when no files are given."""
    files = list(files)
    if not files:
        source = sys.stdin if stdin is None else stdin
        for line in source:
            if line.endswith("\n"):
                line = line[:-1]
            if matches(line, line, options):
                yield line
        return

    for arg in files:
        if options.flag("l"):
            try:
                entries = os.listdir(arg)
            except (OSError, ValueError):
                entries = None
            if entries is not None:
                for entry in (".", "..", *entries):
                    path = f"{arg}/{entry}"
                    if len(os.fsencode(path)) >= _PATH_MAX:
                        continue
                    if matches(path, entry, options):
                        yield entry
                continue
        if matches(arg, arg, options):
            yield arg


def main(argv: list[str] | None = None) -> int:
    """Print the passing names; exit 0 if any passed, 1 if none, 2 on misuse."""
    args = sys.argv[1:] if argv is None else argv
    try:
        options, files = parse_args(args)
    except UsageError:
        print(USAGE, file=sys.stderr)
        return 2

    found = False
    for name in run(options, files):
        if options.flag("q"):
            return 0
        found = True
        print(name)
    return 0 if found else 1