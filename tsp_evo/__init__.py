"""
Evolutionary search for short round-trip tours over a fixed set of 2-D locations.
"""

__all__ = [
    "data",
    "evaluation",
    "evolutionary",
    "operators",
    "selection",
    "tour",
]
