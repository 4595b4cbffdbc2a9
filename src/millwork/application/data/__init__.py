"""Bundled data files (material catalog)."""
