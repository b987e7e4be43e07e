"""Utility modules for sandboxctl.

This module exports commonly used utility functions.
"""

from sandboxctl.utils.formatting import (
    configure_logging,
    console,
    err_console,
    print_error,
    print_success,
    print_warning,
)

__all__ = [
    "configure_logging",
    "console",
    "err_console",
    "print_error",
    "print_success",
    "print_warning",
]
