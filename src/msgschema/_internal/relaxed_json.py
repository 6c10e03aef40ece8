"""Relaxed JSON loading for hand-written schema files.

Schema files are JSON with comments (`//` to end of line and `/* ... */`
blocks) and trailing commas before `]` or `}`. Parsing is delegated to the
`json5` library, which accepts both; a comma with no element before it, as in
`[,]` or `{,}`, is still a syntax error.
"""

import re
from typing import Any, Optional, Tuple

import json5

from msgschema.errors import NormalizationError

# json5 reports positions as "<string>:LINE ... at column COL"
_POSITION_RE = re.compile(r":(?P<line>[0-9]+)\b.*\bcolumn (?P<column>[0-9]+)")


def _position(message: str) -> Tuple[Optional[int], Optional[int]]:
    match = _POSITION_RE.search(message)
    if match is None:
        return None, None
    return int(match.group("line")), int(match.group("column"))


def load_relaxed_json(text: str) -> Any:
    """
    Parse relaxed JSON text into Python values.

    Args:
        text: Source text that may contain comments and trailing commas

    Returns:
        Parsed document (dicts, lists, str, int, float, bool, None)

    Raises:
        NormalizationError: If the text is not valid relaxed JSON
    """
    try:
        return json5.loads(text)
    except RecursionError as e:
        raise NormalizationError("document nested too deeply") from e
    except ValueError as e:
        message = str(e)
        line, column = _position(message)
        raise NormalizationError(message, line, column) from e
