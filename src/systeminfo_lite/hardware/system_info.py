#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
System Information Module

Provides a simple interface to get CPU, GPU, RAM and OS information as a
validated Pydantic BaseModel.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from ..config import DetectionConfig, load_config
from .cpu import get_cpu_info
from .exceptions import GPUDetectionError
from .gpu import get_gpu_info
from .hardware_schema import SystemInfo
from .os_info import get_os_info
from .platform_selector import current_platform
from .ram import get_ram_info

logger = logging.getLogger(__name__)


def system_info(config: Optional[DetectionConfig] = None) -> SystemInfo:
    """
    Get CPU, GPU, RAM and OS information for this machine.

    Never raises for detection problems: CPU, RAM and OS fall back to their
    defaults, and a GPU tool failure is logged and reported as no GPUs.

    Args:
        config: Detection settings (defaults to load_config())

    Returns:
        SystemInfo: A frozen record; `gpu` is None when nothing was detected

    Example:
        >>> info = system_info()
        >>> print(f"CPU: {info.cpu.model} ({info.cpu.cores} cores)")
        >>> print(f"RAM: {info.ram.total} GB")
        >>> print(info.to_json(indent=2))
    """
    if config is None:
        try:
            config = load_config()
        except ValidationError as e:
            logger.warning(f"Ignoring invalid SYSINFO_LITE_* settings: {e}")
            config = DetectionConfig()
    platform = current_platform(config.platform)
    logger.debug(f"Collecting system information for platform {platform.value}")

    cpu = get_cpu_info(platform)
    ram = get_ram_info(platform, meminfo_path=config.meminfo_path)
    os_info = get_os_info(
        platform,
        os_release_path=config.os_release_path,
        proc_version_path=config.proc_version_path,
    )

    try:
        gpus = get_gpu_info(platform, linux_strategy=config.linux_gpu_strategy)
    except GPUDetectionError as e:
        logger.warning(f"GPU detection failed, reporting no GPUs: {e}")
        gpus = []

    return SystemInfo(cpu=cpu, gpu=gpus, ram=ram, os=os_info)


get_system_info = system_info
