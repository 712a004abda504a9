"""
Hardware detection.

Provides CPU, GPU, RAM and OS detectors and the system_info() aggregate.
"""

from .system_info import system_info, get_system_info
from .cpu import get_cpu_info
from .gpu import get_gpu_info, get_linux_gpu_info, get_macos_gpu_info
from .ram import get_ram_info
from .os_info import get_os_info
from .exceptions import GPUDetectionError
from .platform_selector import Platform, classify, current_platform
from .hardware_schema import (
    SystemInfo,
    CPUInfo,
    GPUInfo,
    RAMInfo,
    OSInfo,
)

__all__ = [
    # Aggregate
    "system_info",
    "get_system_info",

    # Detectors
    "get_cpu_info",
    "get_gpu_info",
    "get_linux_gpu_info",
    "get_macos_gpu_info",
    "get_ram_info",
    "get_os_info",

    # Platform selection
    "Platform",
    "classify",
    "current_platform",

    # Schemas
    "SystemInfo",
    "CPUInfo",
    "GPUInfo",
    "RAMInfo",
    "OSInfo",

    # Errors
    "GPUDetectionError",
]
