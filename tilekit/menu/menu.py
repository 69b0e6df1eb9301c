"""Menu state: input editing, matching, selection and paging through matches."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable

from tilekit.menu.matching import Item, match_items

VERSION = "5.3"
USAGE = (
    "usage: dmenu [-bfiv] [-l lines] [-p prompt] [-fn font] [-m monitor]\n"
    "             [-nb color] [-nf color] [-sb color] [-sf color] [-w windowid]"
)

# Characters not considered part of a word while deleting or moving by words.
WORD_DELIMITERS = " "

# Longest input text in bytes (a BUFSIZ buffer less its terminator).
_TEXT_MAX = 8191

_ATOI_RE = re.compile(r"\s*([+-]?\d+)")


class UsageError(ValueError):
    """Raised when the command line cannot be parsed."""


@dataclass
class MenuOptions:
    """Settings taken from the command line, with the built-in defaults."""

    version: bool = False
    topbar: bool = True
    fast: bool = False
    case_insensitive: bool = False
    lines: int = 0
    monitor: int = -1
    prompt: str | None = None
    font: str = "monospace:size=10"
    norm_fg: str = "#bbbbbb"
    norm_bg: str = "#222222"
    sel_fg: str = "#eeeeee"
    sel_bg: str = "#005577"
    out_fg: str = "#000000"
    out_bg: str = "#00ffff"
    embed: str | None = None


def _atoi(text: str) -> int:
    found = _ATOI_RE.match(text)
    return int(found.group(1)) if found else 0


_STRING_OPTIONS = {
    "-p": "prompt",
    "-fn": "font",
    "-nb": "norm_bg",
    "-nf": "norm_fg",
    "-sb": "sel_bg",
    "-sf": "sel_fg",
    "-w": "embed",
}


def parse_args(argv: Iterable[str]) -> MenuOptions:
    """Parse command-line arguments (without the program name) into options."""
    args = list(argv)
    options = MenuOptions()
    index = 0
    while index < len(args):
        arg = args[index]
        if arg == "-v":
            return MenuOptions(version=True)
        if arg == "-b":
            options.topbar = False
        elif arg == "-f":
            options.fast = True
        elif arg == "-i":
            options.case_insensitive = True
        elif index + 1 == len(args):
            raise UsageError(USAGE)
        elif arg == "-l":
            index += 1
            options.lines = _atoi(args[index])
        elif arg == "-m":
            index += 1
            options.monitor = _atoi(args[index])
        elif arg in _STRING_OPTIONS:
            index += 1
            setattr(options, _STRING_OPTIONS[arg], args[index])
        else:
            raise UsageError(USAGE)
        index += 1
    return options


class Menu:
    """The editable input line and the matching items, with selection and paging.

    ``sel``, ``curr``, ``next`` and ``prev`` are indices into ``matches``:
    the selected item, the first item shown, the first item of the next page
    and the first item of the previous page. ``None`` means no such item.
    """

    def __init__(
        self,
        items: Iterable[Item | str],
        lines: int = 0,
        case_insensitive: bool = False,
        width_of: Callable[[str], int] | None = None,
        menu_width: int = 0,
    ) -> None:
        self.items = [item if isinstance(item, Item) else Item(item) for item in items]
        self.lines = min(max(lines, 0), len(self.items))
        self.case_insensitive = case_insensitive
        self.width_of = width_of if width_of is not None else len
        self.menu_width = menu_width
        self.prompt_width = 0
        self.input_width = menu_width // 3
        self.text = ""
        self.cursor = 0
        self.matches: list[Item] = []
        self.sel: int | None = None
        self.curr: int | None = None
        self.next: int | None = None
        self.prev: int | None = None
        self.match()

    # matching and layout

    def match(self) -> None:
        """Recompute the matches for the current text and select the first."""
        self.matches = match_items(self.items, self.text, self.case_insensitive)
        self.curr = self.sel = 0 if self.matches else None
        self.calc_offsets()

    def _textw_clamp(self, text: str, limit: int) -> int:
        return min(self.width_of(text), max(limit, 0))

    def calc_offsets(self) -> None:
        """Work out which items begin the next and the previous page."""
        if self.curr is None:
            self.next = self.prev = None
            return
        count = len(self.matches)
        if self.lines > 0:
            following = self.curr + self.lines
            self.next = following if following < count else None
            self.prev = max(self.curr - self.lines, 0)
            return

        limit = self.menu_width - (
            self.prompt_width + self.input_width + self.width_of("<") + self.width_of(">")
        )
        used = 0
        self.next = None
        for index in range(self.curr, count):
            used += self._textw_clamp(self.matches[index].text, limit)
            if used > limit:
                self.next = index
                break
        used = 0
        self.prev = self.curr
        while self.prev > 0:
            used += self._textw_clamp(self.matches[self.prev - 1].text, limit)
            if used > limit:
                break
            self.prev -= 1

    # editing

    def insert(self, text: str) -> None:
        """Insert ``text`` at the cursor unless the input would grow too long."""
        if len(self.text.encode()) + len(text.encode()) > _TEXT_MAX:
            return
        self.text = self.text[: self.cursor] + text + self.text[self.cursor:]
        self.cursor += len(text)
        self.match()

    def _delete_to(self, position: int) -> None:
        self.text = self.text[:position] + self.text[self.cursor:]
        self.cursor = position
        self.match()

    def next_rune(self, inc: int) -> int:
        """Return the cursor position one character away in direction ``inc``."""
        return min(max(self.cursor + inc, 0), len(self.text))

    def _before_is_delimiter(self) -> bool:
        return self.text[self.next_rune(-1)] in WORD_DELIMITERS

    def _at_is_delimiter(self) -> bool:
        return self.text[self.cursor] in WORD_DELIMITERS

    def move_word_edge(self, direction: int) -> None:
        """Move the cursor to the start (direction < 0) or end of a word."""
        if direction < 0:
            while self.cursor > 0 and self._before_is_delimiter():
                self.cursor = self.next_rune(-1)
            while self.cursor > 0 and not self._before_is_delimiter():
                self.cursor = self.next_rune(-1)
        else:
            while self.cursor < len(self.text) and self._at_is_delimiter():
                self.cursor = self.next_rune(+1)
            while self.cursor < len(self.text) and not self._at_is_delimiter():
                self.cursor = self.next_rune(+1)

    def delete_word(self) -> None:
        """Delete the word before the cursor together with the delimiters after it."""
        while self.cursor > 0 and self._before_is_delimiter():
            self._delete_to(self.next_rune(-1))
        while self.cursor > 0 and not self._before_is_delimiter():
            self._delete_to(self.next_rune(-1))

    def kill_right(self) -> None:
        """Delete everything right of the cursor."""
        self.text = self.text[: self.cursor]
        self.match()

    def kill_left(self) -> None:
        """Delete everything left of the cursor."""
        self._delete_to(0)

    def backspace(self) -> None:
        """Delete the character before the cursor."""
        if self.cursor == 0:
            return
        self._delete_to(self.next_rune(-1))

    def delete_char(self) -> None:
        """Delete the character under the cursor."""
        if self.cursor >= len(self.text):
            return
        self.cursor = self.next_rune(+1)
        self.backspace()

    # navigation

    def home(self) -> None:
        """Go to the first match, or to the start of the input if already there."""
        first = 0 if self.matches else None
        if self.sel == first:
            self.cursor = 0
            return
        self.sel = self.curr = first
        self.calc_offsets()

    def end(self) -> None:
        """Go to the end of the input, or to the last match if already there."""
        if self.cursor < len(self.text):
            self.cursor = len(self.text)
            return
        count = len(self.matches)
        if self.next is not None:
            # jump to the end of the list and lay the last page out backwards
            self.curr = count - 1
            self.calc_offsets()
            self.curr = self.prev
            self.calc_offsets()
            while self.next is not None and self.curr is not None and self.curr + 1 < count:
                self.curr += 1
                self.calc_offsets()
        self.sel = count - 1 if self.matches else None

    def left(self) -> None:
        """Move the cursor left, or select the previous match in a horizontal menu."""
        if self.cursor > 0 and (not self.sel or self.lines > 0):
            self.cursor = self.next_rune(-1)
            return
        if self.lines > 0:
            return
        self.up()

    def right(self) -> None:
        """Move the cursor right, or select the next match in a horizontal menu."""
        if self.cursor < len(self.text):
            self.cursor = self.next_rune(+1)
            return
        if self.lines > 0:
            return
        self.down()

    def up(self) -> None:
        """Select the previous match, turning back a page if needed."""
        if self.sel is not None and self.sel > 0:
            self.sel -= 1
            if self.sel + 1 == self.curr:
                self.curr = self.prev
                self.calc_offsets()

    def down(self) -> None:
        """Select the next match, turning over a page if needed."""
        if self.sel is not None and self.sel + 1 < len(self.matches):
            self.sel += 1
            if self.sel == self.next:
                self.curr = self.next
                self.calc_offsets()

    def page_next(self) -> None:
        """Show and select the first item of the next page."""
        if self.next is None:
            return
        self.sel = self.curr = self.next
        self.calc_offsets()

    def page_prior(self) -> None:
        """Show and select the first item of the previous page."""
        if self.prev is None:
            return
        self.sel = self.curr = self.prev
        self.calc_offsets()

    def complete(self) -> None:
        """Replace the input with the selected item's text."""
        if self.sel is None:
            return
        raw = self.matches[self.sel].text.encode()[:_TEXT_MAX]
        self.text = raw.decode("utf-8", errors="ignore")
        self.cursor = len(self.text)
        self.match()

    def selection(self, shift: bool = False) -> str:
        """Return the text to output: the selected item, or the input with ``shift``."""
        if self.sel is not None and not shift:
            return self.matches[self.sel].text
        return self.text