"""Core infrastructure: paths, settings, and theming."""
