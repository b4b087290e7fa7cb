"""Utility modules for routegraph."""
