#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Operating system detection.

Name, version and architecture are resolved independently: a failure to read
one source leaves the other two fields untouched.
"""

import logging
from typing import Callable, Dict, Optional

from .hardware_schema import OSInfo, UNKNOWN
from .platform_selector import Platform, current_platform
from .sources import attempt, machine_architecture, read_sysctl, read_text_file

logger = logging.getLogger(__name__)

DEFAULT_LINUX_NAME = "Linux"


def parse_pretty_name(os_release: str) -> Optional[str]:
    """
    Extract PRETTY_NAME from /etc/os-release text.

    Takes everything after the first '=' of the first line starting with
    PRETTY_NAME and removes all double quotes, so
    'PRETTY_NAME="Ubuntu 22.04.3 LTS"' gives 'Ubuntu 22.04.3 LTS'.

    Returns:
        The name, or None if no PRETTY_NAME line with a value exists
    """
    for line in os_release.splitlines():
        if line.startswith("PRETTY_NAME"):
            _, sep, value = line.partition("=")
            if not sep:
                return None
            return value.replace('"', "")
    return None


def _macos_os(os_release_path: str, proc_version_path: str) -> OSInfo:
    return OSInfo(
        name="macOS",
        version=attempt(lambda: read_sysctl("kern.osrelease"), UNKNOWN),
        architecture=attempt(lambda: read_sysctl("hw.machine"), UNKNOWN),
    )


def _linux_os(os_release_path: str, proc_version_path: str) -> OSInfo:
    os_release = attempt(lambda: read_text_file(os_release_path), "")
    return OSInfo(
        name=parse_pretty_name(os_release) or DEFAULT_LINUX_NAME,
        # Raw kernel banner, trailing newline included
        version=attempt(lambda: read_text_file(proc_version_path), UNKNOWN),
        architecture=attempt(machine_architecture, "") or UNKNOWN,
    )


def _other_os(os_release_path: str, proc_version_path: str) -> OSInfo:
    return OSInfo(name=UNKNOWN, version=UNKNOWN, architecture=UNKNOWN)


_OS_STRATEGIES: Dict[Platform, Callable[[str, str], OSInfo]] = {
    Platform.MACOS: _macos_os,
    Platform.LINUX: _linux_os,
    Platform.OTHER: _other_os,
}


def get_os_info(
    platform: Optional[Platform] = None,
    os_release_path: str = "/etc/os-release",
    proc_version_path: str = "/proc/version",
) -> OSInfo:
    """
    Get OS display name, version string and machine architecture.

    Args:
        platform: Platform branch to use (detected when None)
        os_release_path: Linux OS release metadata file
        proc_version_path: Linux kernel version pseudo-file

    Returns:
        OSInfo with "Unknown" in any field whose source was unavailable
        (Linux name falls back to "Linux" instead)
    """
    platform = current_platform(platform)
    info = _OS_STRATEGIES[platform](os_release_path, proc_version_path)
    logger.debug(f"OS: {info.name} ({info.architecture})")
    return info
