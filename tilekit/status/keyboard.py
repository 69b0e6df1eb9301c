"""Keyboard indicator formatting and keymap layout extraction."""

from __future__ import annotations

import re

# Symbols from the xkb rules configuration that never name a layout.
_INVALID_SYMBOLS = ("evdev", "inet", "pc", "base")

_INDICATOR_FMT_MAX = 4


def format_indicators(fmt: str, led_mask: int) -> str:
    """Render caps ('c') and num ('n') lock indicators according to ``fmt``.

    Each letter may be followed by '?'. With '?', the letter (case preserved)
    appears only while the indicator is on. Without it, the letter always
    appears: lowercase when off, uppercase when on. Only the first four
    characters of ``fmt`` are considered.
    """
    fmt = fmt[:_INDICATOR_FMT_MAX]
    out = []
    for i, char in enumerate(fmt):
        key = char.lower()
        if key not in ("c", "n"):
            continue
        toggle_case = i + 1 >= len(fmt) or fmt[i + 1] != "?"
        is_set = bool(led_mask & (1 << (key == "n")))
        if toggle_case:
            out.append(key.upper() if is_set else key)
        elif is_set:
            out.append(char)
    return "".join(out)


def valid_layout_or_variant(sym: str) -> bool:
    """Return False for xkb symbol names that are rules, not layouts."""
    return not sym.startswith(_INVALID_SYMBOLS)


def get_layout(symbols: str, group: int) -> str | None:
    """Return the layout active in keyboard ``group`` from an xkb symbols string."""
    layout = None
    grp = 0
    for token in re.split(r"[+:]", symbols):
        if grp > group:
            break
        if not token or not valid_layout_or_variant(token):
            continue
        if len(token) == 1 and token.isdigit():
            # :2, :3, :4 mark additional layout groups
            continue
        layout = token
        grp += 1
    return layout