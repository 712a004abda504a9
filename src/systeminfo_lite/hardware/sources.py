#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Data sources consumed by the detectors.

Each function here is a thin capability over the host: run an external
program, read a kernel parameter (macOS sysctl), read a text file, or ask the
runtime for CPU count and machine architecture. They raise on failure; the
detectors decide what a failure means (see attempt()).
"""

import ctypes
import ctypes.util
import logging
import os
import platform
import subprocess
from ctypes import byref, c_size_t, create_string_buffer
from typing import Callable, List, Optional, TypeVar

from ..utils import safe_import

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Failure kinds that mean "source unavailable or malformed"
SOURCE_ERRORS = (OSError, ValueError, UnicodeDecodeError, subprocess.SubprocessError)

_libc = None


def attempt(func: Callable[[], T], default: T) -> T:
    """
    Call func() and return its result, or default if the source failed.

    Only source errors (missing file, unknown sysctl key, unparsable text,
    failed subprocess) are absorbed; programming errors still propagate.
    """
    try:
        return func()
    except SOURCE_ERRORS as e:
        logger.debug(f"Source unavailable, using default {default!r}: {e}")
        return default


def run_command(program: str, args: List[str]) -> subprocess.CompletedProcess:
    """
    Run an external program synchronously and capture its output.

    Args:
        program: Executable name, resolved on PATH
        args: Argument list

    Returns:
        CompletedProcess with returncode and raw bytes stdout/stderr

    Raises:
        OSError: If the program cannot be launched (e.g. FileNotFoundError)
    """
    logger.debug(f"Running {program} {' '.join(args)}")
    return subprocess.run([program, *args], capture_output=True, check=False)


def _load_libc():
    global _libc
    if _libc is None:
        path = ctypes.util.find_library("c")
        if path is None:
            raise OSError("C library not found")
        _libc = ctypes.CDLL(path, use_errno=True)
    return _libc


# Parameters stored as native integers rather than NUL-terminated strings
INTEGER_SYSCTLS = {"hw.memsize", "hw.pagesize", "hw.ncpu", "hw.logicalcpu", "hw.physicalcpu"}


def _decode_sysctl_value(name: str, raw: bytes) -> str:
    """
    Render a raw sysctl value as text.

    Integer parameters (e.g. hw.memsize) are little-endian 4 or 8 byte
    values; everything else is a NUL-terminated UTF-8 string.
    """
    if name in INTEGER_SYSCTLS:
        return str(int.from_bytes(raw, "little"))
    return raw.split(b"\x00", 1)[0].decode("utf-8")


def read_sysctl(name: str) -> str:
    """
    Read a kernel parameter by dotted name via sysctlbyname(3).

    Args:
        name: Parameter name, e.g. "hw.memsize" or "kern.osrelease"

    Returns:
        The parameter value as text

    Raises:
        OSError: If sysctlbyname is unavailable or the key does not exist
    """
    libc = _load_libc()
    if not hasattr(libc, "sysctlbyname"):
        raise OSError("sysctlbyname is not available on this platform")

    key = name.encode("ascii")
    size = c_size_t(0)
    # First call reports the buffer size needed
    if libc.sysctlbyname(key, None, byref(size), None, 0) != 0:
        errno = ctypes.get_errno()
        raise OSError(errno, f"sysctl {name} failed: {os.strerror(errno)}")

    buf = create_string_buffer(size.value)
    if libc.sysctlbyname(key, buf, byref(size), None, 0) != 0:
        errno = ctypes.get_errno()
        raise OSError(errno, f"sysctl {name} failed: {os.strerror(errno)}")
    return _decode_sysctl_value(name, buf.raw[:size.value])


def read_text_file(path: str) -> str:
    """
    Return the full contents of a text file.

    Raises:
        OSError: If the file is absent or unreadable
    """
    with open(path, "r") as f:
        return f.read()


def logical_cpu_count() -> Optional[int]:
    """Number of logical CPUs, or None if the runtime cannot tell."""
    psutil = safe_import("psutil")
    if psutil:
        try:
            count = psutil.cpu_count(logical=True)
            if count:
                return count
        except SOURCE_ERRORS as e:
            logger.debug(f"psutil failed to report CPU count: {e}")
    return os.cpu_count()


def machine_architecture() -> str:
    """Machine instruction-set identifier (e.g. 'x86_64', 'arm64'); '' if unknown."""
    return platform.machine()
