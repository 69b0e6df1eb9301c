import pytest

from tilekit.status.battery import battery_perc, battery_remaining, battery_state


def make_battery(root, **files):
    bat = root / "BAT0"
    bat.mkdir()
    for name, content in files.items():
        (bat / name).write_text(content)
    return str(root)


def test_perc_reads_capacity(tmp_path):
    sysfs = make_battery(tmp_path, capacity="87\n")
    assert battery_perc("BAT0", sysfs) == "87"


def test_perc_missing(tmp_path):
    assert battery_perc("BAT0", str(tmp_path)) is None


@pytest.mark.parametrize(
    "status,symbol",
    [
        ("Charging\n", "+"),
        ("Discharging\n", "-"),
        ("Full\n", "o"),
        ("Not charging\n", "o"),
        ("Unknown\n", "?"),
    ],
)
def test_state_symbols(tmp_path, status, symbol):
    sysfs = make_battery(tmp_path, status=status)
    assert battery_state("BAT0", sysfs) == symbol


def test_state_missing(tmp_path):
    assert battery_state("BAT0", str(tmp_path)) is None


def test_remaining_not_discharging(tmp_path):
    sysfs = make_battery(tmp_path, status="Charging\n", charge_now="5000\n")
    assert battery_remaining("BAT0", sysfs) == ""


def test_remaining_whole_hours(tmp_path):
    sysfs = make_battery(
        tmp_path, status="Discharging\n", charge_now="3000000\n", current_now="1500000\n"
    )
    assert battery_remaining("BAT0", sysfs) == "2h 0m"


def test_remaining_half_hour(tmp_path):
    sysfs = make_battery(
        tmp_path, status="Discharging\n", charge_now="5000\n", current_now="2000\n"
    )
    assert battery_remaining("BAT0", sysfs) == "2h 30m"


def test_remaining_energy_power_fallback(tmp_path):
    sysfs = make_battery(
        tmp_path, status="Discharging\n", energy_now="1000\n", power_now="1000\n"
    )
    assert battery_remaining("BAT0", sysfs) == "1h 0m"


def test_remaining_zero_current(tmp_path):
    sysfs = make_battery(
        tmp_path, status="Discharging\n", charge_now="5000\n", current_now="0\n"
    )
    assert battery_remaining("BAT0", sysfs) is None


def test_remaining_no_charge_file(tmp_path):
    sysfs = make_battery(tmp_path, status="Discharging\n")
    assert battery_remaining("BAT0", sysfs) is None