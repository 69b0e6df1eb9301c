# tilekit

Small tools for a tiling window manager desktop:

- **a status line generator** that collects system readings (date and time,
  CPU and memory use, battery, disks, network, temperature and more) and
  joins them into one formatted line;
- **a file filter** that prints only those paths that pass a set of tests
  (is a directory, is executable, is newer than a file, ...), handy for
  building launcher lists;
- **a menu matching engine** that ranks items against typed input (exact
  matches first, then prefixes, then substrings), together with the editing
  and navigation state of an interactive menu.

## Installation

```
pip install tilekit
```

Python 3.10 or newer is required. Most readings come from `/proc` and `/sys`,
so Linux gives the fullest results.

## The status line

```
tilekit-status -s
```

writes the status line to standard output and refreshes it once a second.

| option | effect |
|--------|--------|
| `-s`   | write the line to standard output |
| `-1`   | write the line once and exit (implies `-s`) |
| `-v`   | print the version and exit |

Without `-s` the line is set as the root window name by running
`xsetroot -name`; this needs `DISPLAY` to be set, and the name is cleared
when the program stops. Any other argument prints a usage message and exits
with status 1. `SIGINT` and `SIGTERM` stop the loop; `SIGUSR1` forces an
immediate refresh. A reading that cannot be taken is shown as `n/a`.

The default line shows the date and time, CPU use, memory use, and the
charge and state of `BAT0`.

```
tilekit-status -1
```

### Readings from Python

Every reading is a function that returns a string, or `None` when the value
cannot be obtained:

| module | functions |
|--------|-----------|
| `tilekit.status.system` | `datetime`, `disk_free`, `disk_perc`, `disk_total`, `disk_used`, `hostname`, `kernel_release`, `load_avg`, `uptime`, `gid`, `uid`, `username` |
| `tilekit.status.cpu` | `cpu_freq`, `cpu_perc`, and the `CpuMeter` class |
| `tilekit.status.memory` | `read_meminfo`, `ram_free`, `ram_perc`, `ram_total`, `ram_used`, `swap_free`, `swap_perc`, `swap_total`, `swap_used` |
| `tilekit.status.battery` | `battery_perc`, `battery_state`, `battery_remaining` |
| `tilekit.status.network` | `ipv4`, `ipv6`, `netspeed_rx`, `netspeed_tx`, `wifi_perc`, `wifi_essid`, `rssi_to_perc`, and the `NetSpeed` class |
| `tilekit.status.files` | `cat`, `num_files`, `run_command`, `temp`, `entropy` |
| `tilekit.status.volume` | `vol_perc` (OSS mixer device such as `/dev/mixer`) |
| `tilekit.status.keyboard` | `format_indicators`, `valid_layout_or_variant`, `get_layout` |

```python
from tilekit.status.system import datetime, load_avg, uptime
from tilekit.status.memory import ram_perc
from tilekit.status.battery import battery_perc, battery_state

print(datetime("%F %T"))
print(load_avg(None))
print(ram_perc(None))
print(battery_perc("BAT0"), battery_state("BAT0"))
```

`cpu_perc`, `netspeed_rx` and `netspeed_tx` report the change since their
previous call, so the first call returns `None`.

Sizes are rendered with `fmt_human` from `tilekit.status.util`:

```python
from tilekit.status.util import fmt_human

fmt_human(1536, 1024)   # '1.5 Ki'
```

The line itself is built by `render_status` in `tilekit.status.cli` from
`Component` entries, each pairing a reading with a `%`-style format and its
argument:

```python
from tilekit.status.cli import Component, render_status
from tilekit.status.system import hostname, uptime

print(render_status([Component(hostname, "%s"), Component(uptime, " up %s")]))
```

## The file filter

```
tilekit-stest [-abcdefghlpqrsuvwx] [-n file] [-o file] [file...]
```

Each named file, or each line of standard input when no files are given, is
printed if it passes every selected test:

| flag | passes when the file ... |
|------|---------------------------|
| `-a` | may be hidden (names starting with `.` are otherwise skipped) |
| `-b` | is a block special file |
| `-c` | is a character special file |
| `-d` | is a directory |
| `-e` | exists |
| `-f` | is a regular file |
| `-g` | has its set-group-id bit set |
| `-h` | is a symbolic link |
| `-n file` | is newer than *file* |
| `-o file` | is older than *file* |
| `-p` | is a named pipe |
| `-r` | is readable |
| `-s` | is not empty |
| `-u` | has its set-user-id bit set |
| `-w` | is writable |
| `-x` | is executable |

Modifiers: `-l` tests the entries of each named directory instead of the
directory itself, `-v` inverts the result, and `-q` prints nothing and exits
at the first match. The exit status is 0 if anything matched, 1 if nothing
did, and 2 on a usage error.

List the executable files in a directory:

```
tilekit-stest -flx /usr/bin
```

From Python, `tilekit.stest.parse_args` returns an `Options` value and the
file operands, `matches` tests one path, and `run` yields the passing names.

## Menu matching

`tilekit.menu.matching` provides `Item`, `read_items` to read one entry per
line from a stream, `match_items` to rank entries against the typed text
(every space-separated word must occur in an entry; optionally ignoring
ASCII case), and `cistrstr` for case-insensitive substring search.

`tilekit.menu.menu` holds `Menu`, the state of an interactive menu: the input
text and cursor, the ranked matches, the selection and the visible page. Its
methods follow the usual key bindings — `insert`, `backspace`,
`delete_char`, `delete_word`, `kill_left`, `kill_right`, `move_word_edge`,
`home`, `end`, `left`, `right`, `up`, `down`, `page_next`, `page_prior`,
`complete` and `selection`. `parse_args` turns menu command-line arguments
into `MenuOptions` (lines, prompt, colours, font and so on).

```python
from tilekit.menu.menu import Menu

menu = Menu(["firefox", "foot", "gimp"])
menu.insert("f")
menu.down()
print(menu.selection())   # 'foot'
```

## What the package does not do

There is no menu window: the package does not open a display, draw the menu,
grab the keyboard or read key events, and it installs no menu command.
`Menu` and `MenuOptions` are the state and settings a front end would use.
The package also contains no window manager. Keyboard indicator and layout
helpers format values that are handed to them; they do not query the X
server themselves.

## Running the tests

```
pip install tilekit[test]
pytest
```