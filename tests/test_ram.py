import pytest

from systeminfo_lite.hardware import ram
from systeminfo_lite.hardware.platform_selector import Platform
from systeminfo_lite.hardware.ram import get_ram_info, parse_meminfo_total_kb

from conftest import MEMINFO


def test_parse_meminfo_total():
    assert parse_meminfo_total_kb(MEMINFO) == 16777216


@pytest.mark.parametrize(
    "text",
    [
        "",
        "MemFree:  1024 kB\n",
        "MemTotal:\n",
        "MemTotal:   lots kB\n",
    ],
)
def test_parse_meminfo_malformed(text):
    assert parse_meminfo_total_kb(text) == 0


def test_linux_total_in_gb(linux_files):
    info = get_ram_info(Platform.LINUX, meminfo_path=linux_files["meminfo_path"])

    assert info.total == 16


def test_linux_truncates_sub_gb_remainder(tmp_path):
    meminfo = tmp_path / "meminfo"
    # 15.99 GB
    meminfo.write_text("MemTotal:       16776000 kB\n")

    assert get_ram_info(Platform.LINUX, meminfo_path=str(meminfo)).total == 15


def test_linux_missing_file(tmp_path):
    info = get_ram_info(Platform.LINUX, meminfo_path=str(tmp_path / "missing"))

    assert info.total == 0


def test_macos_memsize(monkeypatch):
    monkeypatch.setattr(ram, "read_sysctl", lambda name: str(32 * 1024 ** 3) if name == "hw.memsize" else "")

    assert get_ram_info(Platform.MACOS).total == 32


def test_macos_unparsable_memsize(monkeypatch):
    monkeypatch.setattr(ram, "read_sysctl", lambda name: "not-a-number")

    assert get_ram_info(Platform.MACOS).total == 0


def test_macos_sysctl_failure(monkeypatch):
    def failing_sysctl(name):
        raise OSError("sysctlbyname is not available on this platform")

    monkeypatch.setattr(ram, "read_sysctl", failing_sysctl)

    assert get_ram_info(Platform.MACOS).total == 0


def test_other_platform():
    assert get_ram_info(Platform.OTHER).total == 0
