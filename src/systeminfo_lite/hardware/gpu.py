#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GPU detection.

Unlike the CPU, RAM and OS detectors, this one shells out to external tools
and parses their text output:

- macOS: `system_profiler SPDisplaysDataType`
- Linux: `nvidia-smi` when it is installed, otherwise `lshw -C display`

Parsing lives in pure functions (parse_system_profiler, parse_nvidia_smi,
parse_lshw) that skip lines they do not understand instead of raising. Tool
failures (cannot launch, non-zero exit, undecodable output) raise
GPUDetectionError; system_info() turns that into an absent GPU list.
"""

import functools
import logging
import re
from typing import Any, Callable, Dict, List, Optional

from .exceptions import GPUDetectionError
from .hardware_schema import GPUInfo, UNKNOWN
from .platform_selector import Platform, current_platform
from .sources import run_command

logger = logging.getLogger(__name__)

SYSTEM_PROFILER = "system_profiler"
NVIDIA_SMI = "nvidia-smi"
LSHW = "lshw"

NVIDIA_SMI_QUERY_ARGS = ["--query-gpu=name,memory.total", "--format=csv,noheader,nounits"]

# nvidia-smi reports memory.total in MiB; GPUInfo.memory is in GB
MIB_PER_GB = 1024

# Checked in this order; the first pattern that matches a line wins
_SYSTEM_PROFILER_PATTERNS = (
    ("model", re.compile(r"Chipset Model: (.+)")),
    ("cores", re.compile(r"Total Number of Cores: (\d+)")),
    ("manufacturer", re.compile(r"Vendor: (.+)")),
)


def _run_tool(program: str, args: List[str], strict_decode: bool = True) -> str:
    """Run a GPU query tool and return its stdout, raising GPUDetectionError on any failure."""
    try:
        result = run_command(program, args)
    except OSError as e:
        raise GPUDetectionError(f"could not execute {program}: {e}", tool=program) from e

    stderr = result.stderr.decode("utf-8", errors="replace")
    if result.returncode != 0:
        raise GPUDetectionError(
            f"{program} exited with status {result.returncode}: {stderr.strip()}",
            tool=program,
            returncode=result.returncode,
            stderr=stderr,
        )

    try:
        return result.stdout.decode("utf-8", errors="strict" if strict_decode else "replace")
    except UnicodeDecodeError as e:
        raise GPUDetectionError(f"{program} produced non UTF-8 output", tool=program) from e


# --- Parsers ---

def _fold_system_profiler_line(fields: Dict[str, Any], line: str) -> Dict[str, Any]:
    for field_name, pattern in _SYSTEM_PROFILER_PATTERNS:
        match = pattern.search(line)
        if match:
            value = match.group(1).strip()
            return {**fields, field_name: int(value) if field_name == "cores" else value}
    return fields


def parse_system_profiler(output: str) -> GPUInfo:
    """
    Parse `system_profiler SPDisplaysDataType` text into a single GPU record.

    Expected format: indented "Key: value" lines, e.g.

        Chipset Model: Apple M2
        Type: GPU
        Total Number of Cores: 10
        Vendor: Apple (0x106b)

    Matches accumulate across all lines and a later match overwrites an
    earlier one, so on a machine with several GPUs the record mixes the last
    value seen for each field. Missing keys leave "Unknown" (or no cores).
    """
    initial = {"manufacturer": UNKNOWN, "model": UNKNOWN, "cores": None}
    fields = functools.reduce(_fold_system_profiler_line, output.splitlines(), initial)
    return GPUInfo(**fields)


def parse_nvidia_smi(output: str) -> List[GPUInfo]:
    """
    Parse `nvidia-smi --query-gpu=name,memory.total --format=csv,noheader,nounits`.

    Expected format: one "name, memory_mib" line per GPU, e.g.
    "NVIDIA GeForce RTX 4090, 24564". Memory is converted from MiB to GB by
    dividing by 1024 and truncating (24564 -> 23). Lines without exactly two
    fields are skipped; an unparsable memory value leaves memory unset.
    """
    gpus = []
    for line in output.splitlines():
        fields = [field.strip() for field in line.split(",")]
        if len(fields) != 2:
            continue
        name, memory_mib = fields
        try:
            memory = max(int(float(memory_mib) / MIB_PER_GB), 0)
        except (ValueError, OverflowError):
            memory = None
        gpus.append(GPUInfo(manufacturer="NVIDIA", model=name, memory=memory))
    return gpus


def parse_lshw(output: str) -> List[GPUInfo]:
    """
    Parse `lshw -C display` text.

    Expected format: blocks of indented "key: value" lines per device, each
    containing "vendor:" and "product:" lines. A record is emitted as soon as
    both a vendor and a product are pending, then both are cleared for the
    next device. lshw reports neither memory size nor core count.
    """
    gpus = []
    vendor: Optional[str] = None
    product: Optional[str] = None

    for line in output.splitlines():
        line = line.strip()
        if line.startswith("vendor:"):
            vendor = line[len("vendor:"):].strip()
        if line.startswith("product:"):
            product = line[len("product:"):].strip()

        if vendor is not None and product is not None:
            gpus.append(GPUInfo(manufacturer=vendor, model=product))
            vendor = None
            product = None

    return gpus


# --- Tools ---

def get_macos_gpu_info() -> List[GPUInfo]:
    """Get GPU information on macOS; always a one-element list."""
    output = _run_tool(SYSTEM_PROFILER, ["SPDisplaysDataType"], strict_decode=False)
    return [parse_system_profiler(output)]


def is_nvidia_smi_installed() -> bool:
    """True if `nvidia-smi --version` launches and exits successfully."""
    try:
        result = run_command(NVIDIA_SMI, ["--version"])
    except OSError as e:
        logger.debug(f"{NVIDIA_SMI} not available: {e}")
        return False
    return result.returncode == 0


def get_gpu_info_from_nvidia_smi() -> List[GPUInfo]:
    """Get NVIDIA GPUs with memory via nvidia-smi."""
    return parse_nvidia_smi(_run_tool(NVIDIA_SMI, NVIDIA_SMI_QUERY_ARGS))


def get_gpu_info_from_lshw() -> List[GPUInfo]:
    """Get display devices via lshw; memory and cores are never set."""
    return parse_lshw(_run_tool(LSHW, ["-C", "display"]))


def get_linux_gpu_info(strategy: str = "auto") -> List[GPUInfo]:
    """
    Get GPU information on Linux.

    Args:
        strategy: "auto" uses nvidia-smi when is_nvidia_smi_installed() and
            lshw otherwise; "nvidia-smi" or "lshw" force one tool

    Raises:
        GPUDetectionError: If the chosen tool fails
        ValueError: If strategy is not one of the above
    """
    if strategy == "auto":
        strategy = NVIDIA_SMI if is_nvidia_smi_installed() else LSHW
        logger.debug(f"Linux GPU strategy resolved to {strategy}")

    if strategy == NVIDIA_SMI:
        return get_gpu_info_from_nvidia_smi()
    if strategy == LSHW:
        return get_gpu_info_from_lshw()
    raise ValueError(f"Unknown Linux GPU strategy: {strategy!r}")


_GPU_STRATEGIES: Dict[Platform, Callable[[str], List[GPUInfo]]] = {
    Platform.MACOS: lambda linux_strategy: get_macos_gpu_info(),
    Platform.LINUX: get_linux_gpu_info,
    Platform.OTHER: lambda linux_strategy: [],
}


def get_gpu_info(platform: Optional[Platform] = None, linux_strategy: str = "auto") -> List[GPUInfo]:
    """
    Get GPUs for the current platform, in detection order.

    Raises:
        GPUDetectionError: If an external tool fails; callers that need a
            result regardless should use system_info()
    """
    platform = current_platform(platform)
    gpus = _GPU_STRATEGIES[platform](linux_strategy)
    logger.debug(f"GPU: {len(gpus)} device(s) detected")
    return gpus
