"""Canonical JSON serialization for decoded schemas.

One function used for every JSON the CLI prints, so output is byte-stable
across runs and platforms.
"""

import json
from typing import Any


def canonical_dumps(obj: Any, indent: int | None = None) -> str:
    """
    Canonical JSON serialization.

    Rules:
    - UTF-8 (no ASCII escaping)
    - Sorted keys
    - Stable separators (",", ":") when not indented
    - No trailing whitespace

    Args:
        obj: Python object to serialize
        indent: Optional indentation for human-facing output

    Returns:
        Canonical JSON string
    """
    separators = (",", ":") if indent is None else (",", ": ")
    return json.dumps(
        obj,
        sort_keys=True,
        separators=separators,
        indent=indent,
        ensure_ascii=False
    )
