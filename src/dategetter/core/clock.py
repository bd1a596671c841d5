"""
Clock abstractions.

The formatter asks a ``Clock`` for "now" instead of calling the system clock
directly, so tests pin time by passing a ``FixedClock``.
"""

import time
from dataclasses import dataclass
from typing import Protocol


class Clock(Protocol):
    """Source of the current time as integer epoch seconds."""
    
    def now(self) -> int:
        ...


class SystemClock:
    """Clock backed by the host's wall clock."""
    
    def now(self) -> int:
        return int(time.time())


@dataclass
class FixedClock:
    """Clock that always returns ``timestamp`` until moved."""
    
    timestamp: int = 0
    
    def now(self) -> int:
        return self.timestamp
    
    def advance(self, seconds: int) -> int:
        """Move the clock forward by ``seconds`` and return the new reading."""
        self.timestamp += seconds
        return self.timestamp
