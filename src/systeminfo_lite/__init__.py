"""
systeminfo_lite - CPU, GPU, RAM and OS detection for macOS and Linux.

Submodules:
    - systeminfo_lite.hardware: Platform selection, detectors and schemas
    - systeminfo_lite.config: Detection settings from SYSINFO_LITE_* variables
"""

from . import hardware

# Top-level convenience exports (most common operations)
from .hardware import (
    system_info,
    get_system_info,
    get_cpu_info,
    get_gpu_info,
    get_ram_info,
    get_os_info,
    SystemInfo,
    CPUInfo,
    GPUInfo,
    RAMInfo,
    OSInfo,
    GPUDetectionError,
    Platform,
)
from .config import DetectionConfig, load_config

__version__ = "0.1.0"

__all__ = [
    # Submodules
    "hardware",

    # Primary API
    "system_info",
    "get_system_info",
    "get_cpu_info",
    "get_gpu_info",
    "get_ram_info",
    "get_os_info",
    "SystemInfo",
    "CPUInfo",
    "GPUInfo",
    "RAMInfo",
    "OSInfo",
    "GPUDetectionError",
    "Platform",
    "DetectionConfig",
    "load_config",
]
