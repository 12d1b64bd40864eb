"""Fuzz testing infrastructure for datewindows.

This package contains:
- test_windows_property: Window invariants swept across whole calendar ranges
- test_resolve_property: Named-window dispatch agrees with direct calls

Python 3.13+.
"""
