"""
DateFormatter - Renders a point in time through a format pattern.

The instant is either supplied as integer epoch seconds or read from the
injected clock. Tokens are rendered by ``datetime.strftime``; literal text
in a ``tokens`` pattern is copied through untouched.
"""

from datetime import datetime, timezone
from typing import Optional, Union
from zoneinfo import ZoneInfo

from loguru import logger

from dategetter.config import Settings, get_settings
from dategetter.core.clock import Clock, SystemClock
from dategetter.dialects import PatternDialect, render


class DateFormatter:
    """
    Formats epoch seconds, or the clock's current reading, as a string.
    
    Defaults for pattern, dialect and timezone come from settings; each call
    may override them.
    """
    
    def __init__(
        self,
        settings: Optional[Settings] = None,
        clock: Optional[Clock] = None,
    ):
        self.settings = settings or get_settings()
        self.clock = clock or SystemClock()
    
    def to_datetime(self, at: Optional[int] = None, tz: Optional[str] = None) -> datetime:
        """
        Resolve ``at`` to a timezone-aware datetime.
        
        Args:
            at: Epoch seconds, or None to read the clock
            tz: IANA zone name, defaults to the configured timezone
            
        Returns:
            The instant in the requested zone
        """
        if at is None:
            at = self.clock.now()
        zone = _zone(tz or self.settings.timezone)
        return datetime.fromtimestamp(at, tz=zone)
    
    def format_date(
        self,
        pattern: Optional[str] = None,
        at: Optional[int] = None,
        *,
        dialect: Optional[Union[PatternDialect, str]] = None,
        tz: Optional[str] = None,
    ) -> str:
        """
        Render ``at`` (or now) using ``pattern``.
        
        Args:
            pattern: Format pattern, defaults to the configured pattern
            at: Epoch seconds, or None for the clock's current reading
            dialect: Pattern dialect, defaults to the configured dialect
            tz: IANA zone name, defaults to the configured timezone
            
        Returns:
            The formatted string
        """
        if pattern is None:
            pattern = self.settings.default_pattern
        dialect = PatternDialect(dialect or self.settings.dialect)
        
        moment = self.to_datetime(at, tz)
        rendered = render(moment, pattern, dialect)
        
        logger.debug(f"Formatted {moment.isoformat()} with {pattern!r} ({dialect.value}) -> {rendered!r}")
        return rendered


def _zone(name: str):
    if name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


def format_date(
    pattern: Optional[str] = None,
    at: Optional[int] = None,
    *,
    dialect: Optional[Union[PatternDialect, str]] = None,
    tz: Optional[str] = None,
    clock: Optional[Clock] = None,
) -> str:
    """Format ``at`` (or now) with a formatter built from the global settings."""
    return DateFormatter(clock=clock).format_date(pattern, at, dialect=dialect, tz=tz)
