import fcntl

from tilekit.status import volume
from tilekit.status.volume import vol_perc


def test_missing_device_returns_none(tmp_path):
    assert vol_perc(str(tmp_path / "no-mixer")) is None


def test_regular_file_is_not_a_mixer(tmp_path):
    path = tmp_path / "mixer"
    path.write_bytes(b"")
    assert vol_perc(str(path)) is None


def _fake_mixer(devmask, level):
    def fake_ioctl(fd, request, buf, mutate=True):
        if request == volume._SOUND_MIXER_READ_DEVMASK:
            buf[0] = devmask
        else:
            buf[0] = (level << 8) | level
        return 0

    return fake_ioctl


def test_reads_master_volume(tmp_path, monkeypatch):
    path = tmp_path / "mixer"
    path.write_bytes(b"")
    level = 75
    monkeypatch.setattr(fcntl, "ioctl", _fake_mixer(0b1, level))
    assert vol_perc(str(path)) == str(level)


def test_no_master_channel_returns_none(tmp_path, monkeypatch):
    path = tmp_path / "mixer"
    path.write_bytes(b"")
    monkeypatch.setattr(fcntl, "ioctl", _fake_mixer(0b10, 40))
    assert vol_perc(str(path)) is None