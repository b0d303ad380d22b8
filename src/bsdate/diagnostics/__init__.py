"""Diagnostics package.

Light-weight checks over the calendar table and converter (no extras needed).
"""

__all__ = ["pretty_month", "round_trip"]
