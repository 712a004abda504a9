"""
Custom exceptions for systeminfo_lite hardware detection.
"""

from typing import Optional


class GPUDetectionError(RuntimeError):
    """Raised when an external GPU query tool cannot be run or its output cannot be read."""

    def __init__(self, message: str, tool: Optional[str] = None, returncode: Optional[int] = None, stderr: str = ""):
        """
        Initialize GPUDetectionError.

        Args:
            message: Error message describing what went wrong
            tool: Name of the external program that failed
            returncode: Exit status of the program, if it was launched
            stderr: Captured standard error of the program
        """
        self.tool = tool
        self.returncode = returncode
        self.stderr = stderr
        full_message = f"GPU detection failed: {message}"
        if tool:
            full_message += f" (tool: {tool})"
        super().__init__(full_message)
