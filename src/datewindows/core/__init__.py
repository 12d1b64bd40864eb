"""Core value types shared by the engine layer.

This package provides the building blocks the engine composes into
windows. By isolating them here, we maintain a clean dependency graph:

    core <- engine

Exports:
    DateRange: Immutable inclusive range of instants
    Quarter: The four calendar quarters with cyclic navigation

Python 3.13+.
"""

from .daterange import DateRange
from .quarter import Quarter

__all__ = ["DateRange", "Quarter"]
