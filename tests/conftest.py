import subprocess

import pytest


SYSTEM_PROFILER_M2 = """Graphics/Displays:

    Apple M2:

      Chipset Model: Apple M2
      Type: GPU
      Bus: Built-In
      Total Number of Cores: 10
      Vendor: Apple (0x106b)
      Metal Support: Metal 3
      Displays:
        Color LCD:
          Display Type: Built-In Liquid Retina Display
          Resolution: 2560 x 1664 Retina
"""

NVIDIA_SMI_TWO_GPUS = """NVIDIA GeForce RTX 4090, 24564
NVIDIA A100-SXM4-80GB, 81920
"""

LSHW_DISPLAY = """  *-display
       description: VGA compatible controller
       product: Radeon RX 6800
       vendor: Advanced Micro Devices, Inc. [AMD/ATI]
       physical id: 0
       bus info: pci@0000:03:00.0
  *-display
       description: VGA compatible controller
       product: UHD Graphics 770
       vendor: Intel Corporation
       physical id: 2
"""

MEMINFO = """MemTotal:       16777216 kB
MemFree:         8123456 kB
MemAvailable:   12345678 kB
Buffers:          234567 kB
"""

OS_RELEASE = """NAME="Ubuntu"
VERSION="22.04.3 LTS (Jammy Jellyfish)"
ID=ubuntu
PRETTY_NAME="Ubuntu 22.04.3 LTS"
VERSION_ID="22.04"
"""

PROC_VERSION = "Linux version 6.5.0-21-generic (buildd@lcy02-amd64-091) (gcc 11.4.0) #21~22.04.1-Ubuntu SMP\n"


class FakeCommands:
    """
    Stand-in for sources.run_command.

    Register canned results per program; unregistered programs raise
    FileNotFoundError like a missing executable. Every call is recorded.
    """

    def __init__(self):
        self.results = {}
        self.calls = []

    def add(self, program, stdout="", returncode=0, stderr="", args=None):
        stdout = stdout.encode("utf-8") if isinstance(stdout, str) else stdout
        self.results[(program, tuple(args) if args is not None else None)] = (returncode, stdout, stderr.encode("utf-8"))

    def __call__(self, program, args):
        self.calls.append((program, list(args)))
        result = self.results.get((program, tuple(args))) or self.results.get((program, None))
        if result is None:
            raise FileNotFoundError(2, "No such file or directory", program)
        returncode, stdout, stderr = result
        return subprocess.CompletedProcess([program, *args], returncode, stdout, stderr)

    def programs(self):
        return [program for program, _ in self.calls]


@pytest.fixture
def fake_commands(monkeypatch):
    """Route GPU tool invocations through a FakeCommands instance."""
    commands = FakeCommands()
    monkeypatch.setattr("systeminfo_lite.hardware.gpu.run_command", commands)
    return commands


@pytest.fixture
def linux_files(tmp_path):
    """Write sample Linux source files and return their paths."""
    meminfo = tmp_path / "meminfo"
    meminfo.write_text(MEMINFO)
    os_release = tmp_path / "os-release"
    os_release.write_text(OS_RELEASE)
    proc_version = tmp_path / "version"
    proc_version.write_text(PROC_VERSION)
    return {
        "meminfo_path": str(meminfo),
        "os_release_path": str(os_release),
        "proc_version_path": str(proc_version),
    }


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep SYSINFO_LITE_* variables from the developer's shell out of tests."""
    import os

    for name in list(os.environ):
        if name.startswith("SYSINFO_LITE_"):
            monkeypatch.delenv(name)
