import pytest

from tilekit.status.memory import (
    ram_free,
    ram_perc,
    ram_total,
    ram_used,
    read_meminfo,
    swap_free,
    swap_perc,
    swap_total,
    swap_used,
)
from tilekit.status.util import fmt_human

MEMINFO_TEXT = (
    "MemTotal:        8000000 kB\n"
    "MemFree:         2000000 kB\n"
    "MemAvailable:    4000000 kB\n"
    "Buffers:          500000 kB\n"
    "Cached:          1500000 kB\n"
    "SwapCached:            0 kB\n"
    "SwapTotal:       2000000 kB\n"
    "SwapFree:        1000000 kB\n"
    "HugePages_Total:       0\n"
)


@pytest.fixture
def meminfo(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text(MEMINFO_TEXT)
    return str(path)


def test_read_meminfo_parses_fields(meminfo):
    info = read_meminfo(meminfo)
    assert info["MemTotal"] == 8000000
    assert info["Cached"] == 1500000
    assert info["SwapFree"] == 1000000
    assert info["HugePages_Total"] == 0


def test_read_meminfo_missing_file(tmp_path):
    assert read_meminfo(str(tmp_path / "absent")) is None


def test_ram_total(meminfo):
    assert ram_total(None, meminfo) == fmt_human(8000000 * 1024, 1024)


def test_ram_free_is_available_memory(meminfo):
    assert ram_free(None, meminfo) == fmt_human(4000000 * 1024, 1024)


def test_ram_used(meminfo):
    used = 8000000 - 2000000 - 500000 - 1500000
    assert ram_used(None, meminfo) == fmt_human(used * 1024, 1024)


def test_ram_perc(meminfo):
    assert ram_perc(None, meminfo) == "50"


def test_ram_perc_zero_total(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text(MEMINFO_TEXT.replace("8000000", "0"))
    assert ram_perc(None, str(path)) is None


def test_swap_total_and_free(meminfo):
    assert swap_total(None, meminfo) == fmt_human(2000000 * 1024, 1024)
    assert swap_free(None, meminfo) == fmt_human(1000000 * 1024, 1024)


def test_swap_used(meminfo):
    assert swap_used(None, meminfo) == fmt_human(1000000 * 1024, 1024)


def test_swap_perc(meminfo):
    assert swap_perc(None, meminfo) == "50"


def test_swap_perc_no_swap(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text("SwapTotal: 0 kB\nSwapFree: 0 kB\nSwapCached: 0 kB\n")
    assert swap_perc(None, str(path)) is None


@pytest.mark.parametrize(
    "func", [ram_free, ram_perc, ram_total, ram_used, swap_free, swap_perc, swap_total, swap_used]
)
def test_missing_file_gives_none(tmp_path, func):
    assert func(None, str(tmp_path / "absent")) is None


def test_missing_fields_give_none(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text("MemTotal: 1000 kB\n")
    assert ram_used(None, str(path)) is None
    assert swap_total(None, str(path)) is None