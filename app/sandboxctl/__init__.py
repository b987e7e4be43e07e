"""sandboxctl - Locate and clean up sandboxed application containers."""

__version__ = "0.1.0"
