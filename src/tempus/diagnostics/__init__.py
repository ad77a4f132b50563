"""Diagnostics package.

- round_trip: randomized fields <-> rata die self check
"""

__all__ = ["round_trip"]
