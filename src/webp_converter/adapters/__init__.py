"""Filesystem and codec adapters implementing application ports."""
