#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Hardware Schema Definitions

Pydantic BaseModel schemas for the system information record returned by
system_info(). All records are frozen value objects, built fresh per query.

Serialization drops fields without a value: an undetermined GPU memory or
core count is omitted (never rendered as null or 0), and the gpu list is
omitted entirely when no GPU was detected.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

UNKNOWN = "Unknown"


class _Record(BaseModel):
    class Config:
        """Pydantic configuration."""
        frozen = True

    def to_dict(self) -> Dict[str, Any]:
        """Field-name-to-value mapping with absent fields omitted."""
        return self.model_dump(exclude_none=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        """JSON rendering with absent fields omitted."""
        return self.model_dump_json(exclude_none=True, indent=indent)


class CPUInfo(_Record):
    """CPU information."""
    manufacturer: str = Field(..., description="CPU manufacturer")
    model: str = Field(..., description="CPU model string")
    cores: int = Field(..., ge=1, description="Number of logical CPU cores")


class GPUInfo(_Record):
    """GPU information."""
    manufacturer: str = Field(..., description="GPU vendor")
    model: str = Field(..., description="GPU model name")
    memory: Optional[int] = Field(None, ge=0, description="GPU memory in GB (nvidia-smi MiB / 1024, truncated)")
    cores: Optional[int] = Field(None, ge=0, description="Number of GPU cores, if reported")


class RAMInfo(_Record):
    """Random Access Memory information."""
    total: int = Field(..., ge=0, description="Total RAM in whole GB; 0 means it could not be determined")


class OSInfo(_Record):
    """Operating system information."""
    name: str = Field(UNKNOWN, description="OS display name (e.g., 'macOS', 'Ubuntu 22.04.3 LTS')")
    version: str = Field(UNKNOWN, description="OS release or kernel version string")
    architecture: str = Field(UNKNOWN, description="Machine architecture (e.g., 'x86_64', 'arm64')")


class SystemInfo(_Record):
    """
    Complete system information record.

    GPUs keep detection order. An empty GPU list is stored as None so that it
    is left out of serialized output.
    """
    cpu: CPUInfo = Field(..., description="CPU information")
    gpu: Optional[List[GPUInfo]] = Field(None, description="Detected GPUs, omitted when none")
    ram: RAMInfo = Field(..., description="Random access memory information")
    os: OSInfo = Field(..., description="Operating system information")

    @field_validator("gpu")
    @classmethod
    def _empty_gpu_list_is_absent(cls, value: Optional[List[GPUInfo]]) -> Optional[List[GPUInfo]]:
        return value or None
