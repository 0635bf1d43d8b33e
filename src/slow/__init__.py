"""
slow: replay a byte stream at serial-terminal speed.

Design goals:
- bytes pass through untouched, one at a time, in order
- fixed pacing derived from a single rate (bytes per second)
- screen reset before the copy, cursor parked on line 24 after it
"""

__version__ = "0.1.0"
