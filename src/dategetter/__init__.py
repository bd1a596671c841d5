"""
DateGetter - Format the current or a given timestamp through a format pattern.
"""

__version__ = "0.1.0"
__author__ = "DateGetter Team"

# Core components
from dategetter.core.clock import Clock, SystemClock, FixedClock
from dategetter.core.formatter import DateFormatter, format_date

# Dialects
from dategetter.dialects import PatternDialect, render, to_strftime

# Configuration
from dategetter.config import Settings, get_settings

__all__ = [
    # Version
    "__version__",
    
    # Core
    "Clock",
    "SystemClock",
    "FixedClock",
    "DateFormatter",
    "format_date",
    
    # Dialects
    "PatternDialect",
    "render",
    "to_strftime",
    
    # Config
    "Settings",
    "get_settings",
]
