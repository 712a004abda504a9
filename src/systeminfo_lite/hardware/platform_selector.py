"""
Platform classification.

Every detector dispatches on exactly one of three platform branches. The
classification never fails: anything that is not macOS or Linux is OTHER.
"""

import functools
import platform
from enum import Enum
from typing import Optional


class Platform(str, Enum):
    """Operating-system branch that governs detector behaviour."""
    MACOS = "macos"
    LINUX = "linux"
    OTHER = "other"


_SYSTEM_NAMES = {
    "Darwin": Platform.MACOS,
    "Linux": Platform.LINUX,
}


def classify(system_name: str) -> Platform:
    """
    Map a `platform.system()` style name onto a Platform branch.

    Args:
        system_name: e.g. "Darwin", "Linux", "Windows"

    Returns:
        Platform: MACOS, LINUX, or OTHER for anything unrecognized
    """
    return _SYSTEM_NAMES.get(system_name, Platform.OTHER)


@functools.lru_cache(maxsize=None)
def _detected_platform() -> Platform:
    return classify(platform.system())


def current_platform(override: Optional[Platform] = None) -> Platform:
    """
    Return the platform branch for the running process.

    Detection runs once per process. An explicit override (system_info()
    passes DetectionConfig.platform, i.e. SYSINFO_LITE_PLATFORM) takes
    precedence; the environment is never read here.
    """
    if override is not None:
        return override
    return _detected_platform()
