"""
Core module exports.
"""

from dategetter.core.clock import Clock, SystemClock, FixedClock
from dategetter.core.formatter import DateFormatter, format_date

__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
    "DateFormatter",
    "format_date",
]
