#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
RAM detection.

macOS reads the hw.memsize kernel parameter (bytes); Linux parses the
MemTotal line of /proc/meminfo (kB). Both are reduced to whole gigabytes by
truncating division, so sub-GB remainders are dropped.
"""

import logging
from typing import Callable, Dict, Optional

from .hardware_schema import RAMInfo
from .platform_selector import Platform, current_platform
from .sources import attempt, read_sysctl, read_text_file

logger = logging.getLogger(__name__)

BYTES_PER_GB = 1024 ** 3
KB_PER_GB = 1024 ** 2


def parse_meminfo_total_kb(meminfo: str) -> int:
    """
    Extract MemTotal from /proc/meminfo text.

    Expected line format: "MemTotal:       16777216 kB". The second
    whitespace-delimited token is the value in kB.

    Args:
        meminfo: Full contents of /proc/meminfo

    Returns:
        Total memory in kB, or 0 if the line is missing or malformed
    """
    for line in meminfo.splitlines():
        if line.startswith("MemTotal"):
            parts = line.split()
            if len(parts) < 2:
                return 0
            try:
                total_kb = int(parts[1])
            except ValueError:
                return 0
            return max(total_kb, 0)
    return 0


def _macos_total_gb(meminfo_path: str) -> int:
    total_bytes = attempt(lambda: int(read_sysctl("hw.memsize")), 0)
    return max(total_bytes, 0) // BYTES_PER_GB


def _linux_total_gb(meminfo_path: str) -> int:
    total_kb = parse_meminfo_total_kb(attempt(lambda: read_text_file(meminfo_path), ""))
    return total_kb // KB_PER_GB


def _other_total_gb(meminfo_path: str) -> int:
    return 0


_RAM_STRATEGIES: Dict[Platform, Callable[[str], int]] = {
    Platform.MACOS: _macos_total_gb,
    Platform.LINUX: _linux_total_gb,
    Platform.OTHER: _other_total_gb,
}


def get_ram_info(platform: Optional[Platform] = None, meminfo_path: str = "/proc/meminfo") -> RAMInfo:
    """
    Get total physical memory in whole GB.

    Args:
        platform: Platform branch to use (detected when None)
        meminfo_path: Location of the Linux memory statistics file

    Returns:
        RAMInfo: total is 0 when the source was unavailable or unparsable
    """
    platform = current_platform(platform)
    total = _RAM_STRATEGIES[platform](meminfo_path)
    logger.debug(f"RAM: {total} GB")
    return RAMInfo(total=total)
