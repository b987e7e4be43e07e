"""Bundled data files for sandboxctl."""
