import sys

import pytest

from systeminfo_lite.hardware import sources
from systeminfo_lite.hardware.sources import _decode_sysctl_value, attempt, read_text_file


def test_attempt_returns_value():
    assert attempt(lambda: "value", "default") == "value"


@pytest.mark.parametrize("error", [OSError("missing"), ValueError("bad int"), FileNotFoundError(2, "absent")])
def test_attempt_absorbs_source_errors(error):
    def failing():
        raise error

    assert attempt(failing, "default") == "default"


def test_attempt_propagates_programming_errors():
    def broken():
        raise TypeError("not a source failure")

    with pytest.raises(TypeError):
        attempt(broken, "default")


def test_decode_sysctl_string():
    assert _decode_sysctl_value("machdep.cpu.brand_string", b"Apple M2\x00") == "Apple M2"


def test_decode_sysctl_uint64():
    assert _decode_sysctl_value("hw.memsize", (17179869184).to_bytes(8, "little")) == "17179869184"


def test_read_text_file(tmp_path):
    path = tmp_path / "version"
    path.write_text("Linux version 6.5.0\n")

    assert read_text_file(str(path)) == "Linux version 6.5.0\n"


def test_read_text_file_missing(tmp_path):
    with pytest.raises(OSError):
        read_text_file(str(tmp_path / "missing"))


@pytest.mark.skipif(sys.platform == "darwin", reason="sysctlbyname exists on macOS")
def test_read_sysctl_unavailable():
    with pytest.raises(OSError):
        sources.read_sysctl("hw.memsize")


def test_logical_cpu_count_without_psutil(monkeypatch):
    monkeypatch.setattr(sources, "safe_import", lambda name: None)
    monkeypatch.setattr(sources.os, "cpu_count", lambda: 4)

    assert sources.logical_cpu_count() == 4


def test_logical_cpu_count_prefers_psutil(monkeypatch):
    class FakePsutil:
        @staticmethod
        def cpu_count(logical=True):
            return 12

    monkeypatch.setattr(sources, "safe_import", lambda name: FakePsutil)

    assert sources.logical_cpu_count() == 12


def test_logical_cpu_count_psutil_error_falls_back(monkeypatch):
    class BrokenPsutil:
        @staticmethod
        def cpu_count(logical=True):
            raise OSError("cannot read /sys/devices/system/cpu")

    monkeypatch.setattr(sources, "safe_import", lambda name: BrokenPsutil)
    monkeypatch.setattr(sources.os, "cpu_count", lambda: 2)

    assert sources.logical_cpu_count() == 2
