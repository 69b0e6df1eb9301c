"""Menu items and the token matching that orders them: exact, prefix, substring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, TextIO

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


@dataclass(eq=False)
class Item:
    """One menu entry; ``out`` marks an entry already printed."""

    text: str
    out: bool = False


def _lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def cistrstr(haystack: str, needle: str) -> int:
    """Return the index of ``needle`` in ``haystack`` ignoring ASCII case, or -1."""
    return _lower(haystack).find(_lower(needle))


def match_items(
    items: Iterable[Item], text: str, case_insensitive: bool = False
) -> list[Item]:
    """Return the items holding every space-separated token of ``text``.

    Exact matches come first, then items starting with the first token,
    then the rest, each group in input order.
    """
    tokens = [token for token in text.split(" ") if token]

    contains: Callable[[str, str], bool]
    starts: Callable[[str, str], bool]
    equal: Callable[[str, str], bool]
    if case_insensitive:
        contains = lambda hay, tok: cistrstr(hay, tok) >= 0  # noqa: E731
        starts = lambda hay, tok: _lower(hay).startswith(_lower(tok))  # noqa: E731
        equal = lambda a, b: _lower(a) == _lower(b)  # noqa: E731
    else:
        contains = lambda hay, tok: tok in hay  # noqa: E731
        starts = str.startswith
        equal = str.__eq__

    exact: list[Item] = []
    prefix: list[Item] = []
    substring: list[Item] = []
    for item in items:
        if not all(contains(item.text, token) for token in tokens):
            continue
        if not tokens or equal(text, item.text):
            exact.append(item)
        elif starts(item.text, tokens[0]):
            prefix.append(item)
        else:
            substring.append(item)
    return exact + prefix + substring


def read_items(stream: TextIO) -> list[Item]:
    """Read one item per line, dropping each line's trailing newline."""
    items = []
    for line in stream:
        if line.endswith("\n"):
            line = line[:-1]
        items.append(Item(line))
    return items