"""Utility functions for systeminfo_lite."""

from .imports import safe_import

__all__ = ["safe_import"]
