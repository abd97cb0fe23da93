"""
FinTrack - Source Package

A personal and business finance dashboard: accounts, transactions,
savings pots, pensions and projections over one local JSON document.

DESIGN PRINCIPLES:
1. One immutable snapshot, changed only by pure commands
2. Every figure on screen is derived, never stored
3. Storage failures are logged, never shown
4. Storage layer is swappable
"""

__version__ = "2.0.0"
__author__ = "FinTrack Team"
