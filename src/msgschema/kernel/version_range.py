"""Version range grammar for message schema attributes.

A version range is written as one of:

    "3+"    open-ended, versions 3 and up
    "0-4"   closed, versions 0 through 4 inclusive
    "7"     exactly version 7
    "none"  not applicable

The token may additionally be wrapped in one pair of double quotes.
"""

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from msgschema.errors import MalformedRangeError


class RangeKind(str, Enum):
    EXACT = "exact"
    OPEN_ENDED = "open_ended"
    CLOSED = "closed"
    NONE = "none"


# Alternatives are tried left to right; this order is the grammar precedence.
_RANGE_RE = re.compile(
    r"(?P<open>[0-9]+)\+"
    r"|(?P<begin>[0-9]+)-(?P<end>[0-9]+)"
    r"|(?P<exact>[0-9]+)"
    r"|(?P<none>none)"
)


class VersionRange(BaseModel):
    """An inclusive interval of protocol versions."""
    raw: str = ""  # Token as written, quotes removed; "" when the attribute was absent
    begin: int = Field(0, ge=0)
    end: Optional[int] = Field(None, ge=0)  # None: unbounded (OPEN_ENDED) or no bounds (NONE)
    kind: RangeKind = RangeKind.NONE

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def absent(cls) -> "VersionRange":
        """Zero value used when a range attribute is not present."""
        return cls()

    @property
    def is_absent(self) -> bool:
        return self.raw == ""

    def __str__(self) -> str:
        return self.raw


def _strip_quotes(token: str) -> str:
    if len(token) >= 2 and token[0] == '"' and token[-1] == '"':
        return token[1:-1]
    return token


def parse_range(token: str) -> VersionRange:
    """
    Parse a version range token.

    Args:
        token: Range text, optionally wrapped in double quotes

    Returns:
        VersionRange with raw set to the unquoted token

    Raises:
        MalformedRangeError: If the token matches none of the four forms
    """
    text = _strip_quotes(token)
    match = _RANGE_RE.fullmatch(text)
    if match is None:
        raise MalformedRangeError(token)

    try:
        if match.group("open") is not None:
            return VersionRange(raw=text, begin=int(match.group("open")), kind=RangeKind.OPEN_ENDED)
        if match.group("begin") is not None:
            # No ordering check: "5-2" is grammatical, its meaning is the caller's business
            return VersionRange(
                raw=text,
                begin=int(match.group("begin")),
                end=int(match.group("end")),
                kind=RangeKind.CLOSED,
            )
        if match.group("exact") is not None:
            version = int(match.group("exact"))
            return VersionRange(raw=text, begin=version, end=version, kind=RangeKind.EXACT)
    except ValueError as e:
        raise MalformedRangeError(token) from e

    return VersionRange(raw=text, kind=RangeKind.NONE)
