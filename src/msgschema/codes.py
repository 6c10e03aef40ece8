"""Error kind constants for msgschema decode and traversal failures.

These constants prevent stringly-typed error kinds and ensure
client code branches on the correct failure categories.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Structural error kinds reported for a schema document."""

    # Core decode errors
    UNKNOWN_ATTRIBUTE = "UNKNOWN_ATTRIBUTE"
    TYPE_MISMATCH = "TYPE_MISMATCH"
    MALFORMED_RANGE = "MALFORMED_RANGE"

    # Collaborator errors (surfaced unchanged)
    NORMALIZATION_ERROR = "NORMALIZATION_ERROR"
    IO_ERROR = "IO_ERROR"
