"""
Pattern dialects understood by the date formatter.

A pattern is always rendered by ``datetime.strftime``; a dialect only decides
how the caller's pattern is translated into strftime directives first.
"""

import re
from datetime import datetime
from enum import Enum
from typing import Dict, List, Tuple


class PatternDialect(str, Enum):
    """Token mini-languages a format pattern may be written in."""
    
    TOKENS = "tokens"       # YYYY-MM-DD hh:mm:ss
    STRFTIME = "strftime"   # %Y-%m-%d %H:%M:%S


# Ordered longest first so MMMM wins over MMM and MM
TOKEN_DIRECTIVES: List[Tuple[str, str, str]] = [
    ("YYYY", "%Y", "Four-digit year"),
    ("YY", "%y", "Two-digit year"),
    ("MMMM", "%B", "Full month name"),
    ("MMM", "%b", "Abbreviated month name"),
    ("MM", "%m", "Month, 01-12"),
    ("DD", "%d", "Day of month, 01-31"),
    ("dddd", "%A", "Full weekday name"),
    ("ddd", "%a", "Abbreviated weekday name"),
    ("hh", "%H", "Hour, 00-23"),
    ("mm", "%M", "Minute, 00-59"),
    ("ss", "%S", "Second, 00-59"),
]

_DIRECTIVES: Dict[str, str] = {token: directive for token, directive, _ in TOKEN_DIRECTIVES}

# A bracketed literal, a known token, or a single other character
_TOKEN_RE = re.compile(
    r"\[([^\]]*)\]|(" + "|".join(re.escape(token) for token, _, _ in TOKEN_DIRECTIVES) + r")|(.)",
    re.DOTALL,
)


def _escape(text: str) -> str:
    return text.replace("%", "%%")


def tokens_to_strftime(pattern: str) -> str:
    """
    Translate a ``tokens`` dialect pattern into strftime directives.
    
    Unknown characters, including ``%``, are kept verbatim. Text inside
    square brackets is emitted literally without the brackets.
    """
    parts = []
    for match in _TOKEN_RE.finditer(pattern):
        literal, token, other = match.groups()
        if token is not None:
            parts.append(_DIRECTIVES[token])
        elif literal is not None:
            parts.append(_escape(literal))
        else:
            parts.append(_escape(other))
    return "".join(parts)


def to_strftime(pattern: str, dialect: PatternDialect = PatternDialect.TOKENS) -> str:
    """Translate ``pattern`` written in ``dialect`` into an strftime string."""
    dialect = PatternDialect(dialect)
    if dialect is PatternDialect.STRFTIME:
        return pattern
    return tokens_to_strftime(pattern)


def _render_token(moment: datetime, token: str) -> str:
    # %Y is not zero-padded below year 1000 on glibc
    if token == "YYYY":
        return f"{moment.year:04d}"
    return moment.strftime(_DIRECTIVES[token])


def render_tokens(moment: datetime, pattern: str) -> str:
    """
    Render a ``tokens`` dialect pattern for ``moment``.

    Only the tokens go through strftime. Literal text is joined as-is, so
    NUL characters and lone surrogates come through unchanged.
    """
    parts = []
    for match in _TOKEN_RE.finditer(pattern):
        literal, token, other = match.groups()
        if token is not None:
            parts.append(_render_token(moment, token))
        elif literal is not None:
            parts.append(literal)
        else:
            parts.append(other)
    return "".join(parts)


def render(moment: datetime, pattern: str, dialect: PatternDialect = PatternDialect.TOKENS) -> str:
    """Render ``moment`` with ``pattern`` written in ``dialect``."""
    dialect = PatternDialect(dialect)
    if dialect is PatternDialect.STRFTIME:
        return moment.strftime(pattern)
    return render_tokens(moment, pattern)
