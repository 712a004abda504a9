#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Detection Configuration

Pydantic model holding the few knobs that change how detection runs:
platform override, Linux GPU tool policy, source file locations, and the
log level used by the command line entry point.

Values come from SYSINFO_LITE_* environment variables via load_config().
"""

import os
from typing import Dict, Literal, Mapping, Optional

from pydantic import BaseModel, Field

from .hardware.platform_selector import Platform

ENV_PREFIX = "SYSINFO_LITE_"

LinuxGPUStrategy = Literal["auto", "nvidia-smi", "lshw"]


class DetectionConfig(BaseModel):
    """Settings for a system information query."""
    platform: Optional[Platform] = Field(None, description="Force a platform branch instead of detecting it")
    linux_gpu_strategy: LinuxGPUStrategy = Field(
        "auto",
        description="'auto' probes nvidia-smi and falls back to lshw; the other values force one tool",
    )
    meminfo_path: str = Field("/proc/meminfo", description="Kernel memory statistics pseudo-file")
    os_release_path: str = Field("/etc/os-release", description="OS release metadata file")
    proc_version_path: str = Field("/proc/version", description="Kernel version pseudo-file")
    log_level: str = Field("WARNING", description="Log level for the command line entry point")

    class Config:
        """Pydantic configuration."""
        frozen = True
        extra = "forbid"


_ENV_FIELDS = {
    "PLATFORM": "platform",
    "LINUX_GPU_STRATEGY": "linux_gpu_strategy",
    "MEMINFO_PATH": "meminfo_path",
    "OS_RELEASE_PATH": "os_release_path",
    "PROC_VERSION_PATH": "proc_version_path",
    "LOG_LEVEL": "log_level",
}


def load_config(env: Optional[Mapping[str, str]] = None, **overrides) -> DetectionConfig:
    """
    Build a DetectionConfig from environment variables.

    Args:
        env: Mapping to read from (defaults to os.environ)
        **overrides: Explicit field values; these win over the environment

    Returns:
        DetectionConfig instance

    Raises:
        ValidationError: If a variable holds an invalid value
            (e.g. SYSINFO_LITE_LINUX_GPU_STRATEGY=cuda)
    """
    env = os.environ if env is None else env
    values: Dict[str, str] = {}
    for suffix, field_name in _ENV_FIELDS.items():
        value = env.get(ENV_PREFIX + suffix)
        if value:
            values[field_name] = value.lower() if field_name in ("platform", "linux_gpu_strategy") else value
    values.update({k: v for k, v in overrides.items() if v is not None})
    return DetectionConfig(**values)
