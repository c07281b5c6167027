"""Utility modules for tagdirs.

This module exports commonly used utility functions.
"""

from tagdirs.utils.formatting import (
    console,
    err_console,
    print_error,
    print_info,
    print_success,
)
from tagdirs.utils.logging import setup_logging

__all__ = [
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "setup_logging",
]
