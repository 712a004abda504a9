"""CPU detection."""

import logging
from typing import Callable, Dict, Optional, Tuple

from .hardware_schema import CPUInfo, UNKNOWN
from .platform_selector import Platform, current_platform
from .sources import attempt, logical_cpu_count, read_sysctl

logger = logging.getLogger(__name__)


def _macos_identity() -> Tuple[str, str]:
    model = attempt(lambda: read_sysctl("machdep.cpu.brand_string"), UNKNOWN)
    return "Apple", model


def _linux_identity() -> Tuple[str, str]:
    # Fixed placeholders: Linux CPU identity is not probed
    return "Intel/AMD", "Generic Model"


def _other_identity() -> Tuple[str, str]:
    return UNKNOWN, UNKNOWN


_IDENTITY_STRATEGIES: Dict[Platform, Callable[[], Tuple[str, str]]] = {
    Platform.MACOS: _macos_identity,
    Platform.LINUX: _linux_identity,
    Platform.OTHER: _other_identity,
}


def get_cpu_info(platform: Optional[Platform] = None) -> CPUInfo:
    """
    Get CPU manufacturer, model and logical core count.

    Never raises: an unreadable model becomes "Unknown" and an unknown core
    count becomes 1.
    """
    platform = current_platform(platform)
    manufacturer, model = _IDENTITY_STRATEGIES[platform]()
    cores = attempt(logical_cpu_count, None) or 1
    logger.debug(f"CPU: {manufacturer} {model} ({cores} cores)")
    return CPUInfo(manufacturer=manufacturer, model=model, cores=cores)
