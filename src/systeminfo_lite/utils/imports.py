"""Safe import utilities for optional dependencies."""

import logging

logger = logging.getLogger(__name__)


def safe_import(module_name: str):
    """
    Safely import a module, returning None if unavailable.

    Use this for optional dependencies that may not be installed on every
    host (psutil is the main one here).

    Args:
        module_name: The module to import (e.g., "psutil")

    Returns:
        The imported module, or None if import fails

    Examples:
        >>> psutil = safe_import("psutil")
        >>> if psutil:
        ...     psutil.cpu_count(logical=True)
    """
    try:
        return __import__(module_name, fromlist=[''])
    except ImportError:
        logger.debug(f"Optional module {module_name} is not installed")
        return None
