"""Manifest discovery and import scanning."""
