"""Packaged calendar data assets."""
