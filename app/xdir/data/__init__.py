"""Bundled data files for xdir."""
