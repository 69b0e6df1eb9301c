import os
import pwd
import re
import socket
import time

from tilekit.status import system


def test_datetime_year():
    before = time.localtime().tm_year
    result = int(system.datetime("%Y"))
    after = time.localtime().tm_year
    assert before <= result <= after


def test_datetime_literal_text():
    assert system.datetime("status") == "status"


def test_datetime_empty_result():
    assert system.datetime("") is None


def test_disk_perc_in_range(tmp_path):
    assert 0 <= int(system.disk_perc(str(tmp_path))) <= 100


def test_disk_sizes_have_binary_prefix(tmp_path):
    prefixes = ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi")
    for func in (system.disk_free, system.disk_total, system.disk_used):
        value, prefix = func(str(tmp_path)).split(" ")
        assert prefix in prefixes
        assert 0 <= float(value) < 1024


def test_disk_missing_path(tmp_path):
    missing = str(tmp_path / "missing")
    assert system.disk_free(missing) is None
    assert system.disk_perc(missing) is None
    assert system.disk_total(missing) is None
    assert system.disk_used(missing) is None


def test_hostname():
    assert system.hostname() == socket.gethostname()


def test_kernel_release():
    assert system.kernel_release() == os.uname().release


def test_load_avg_format():
    result = system.load_avg()
    parts = result.split(" ")
    assert len(parts) == 3
    for part in parts:
        assert re.fullmatch(r"\d+\.\d\d", part) is not None
        assert float(part) >= 0


def test_uptime_format():
    assert re.fullmatch(r"\d+h \d+m", system.uptime())
    minutes = int(system.uptime().split()[1][:-1])
    assert 0 <= minutes < 60


def test_ids():
    assert system.gid() == str(os.getgid())
    assert system.uid() == str(os.geteuid())


def test_username_maps_back_to_uid():
    name = system.username()
    assert pwd.getpwnam(name).pw_uid == os.geteuid()