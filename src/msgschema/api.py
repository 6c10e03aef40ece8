"""Public API for msgschema.

High-level functions that load, decode and check schema documents.
Tooling should use these functions instead of importing from _internal.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from msgschema.codes import ErrorKind
from msgschema.errors import NormalizationError, SchemaDecodeError
from msgschema.kernel.decoder import decode_message
from msgschema.kernel.message import Message
from msgschema._internal.io.documents import DEFAULT_EXTENSIONS, iter_schema_files, read_document
from msgschema._internal.relaxed_json import load_relaxed_json

logger = logging.getLogger(__name__)


def _normalize_path(path: Union[str, os.PathLike, Path]) -> Path:
    """Normalize path input to Path object."""
    return Path(path) if not isinstance(path, Path) else path


class TraversalPolicy(BaseModel):
    """How a batch of documents is checked and reported."""
    fail_fast: bool = False  # Stop at the first failing document
    only_failures: bool = False  # Keep only failing documents in the report
    extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS

    model_config = ConfigDict(frozen=True, extra="forbid")


class DocumentResult(BaseModel):
    """Outcome of checking one schema document."""
    path: str
    ok: bool
    message_name: Optional[str] = None  # Decoded Message name (success only)
    kind: Optional[ErrorKind] = None  # Failure kind
    error_path: Optional[str] = None  # Attribute path inside the document, for decode errors
    error: Optional[str] = None  # Human-readable failure message


class CheckReport(BaseModel):
    """Aggregated outcome of checking a directory of schema documents."""
    ok: bool
    checked: int
    failed: int
    results: List[DocumentResult] = Field(default_factory=list)


def load_message(source: Union[str, os.PathLike, Path, Dict[str, Any]]) -> Message:
    """
    Load a Message from a schema file path or an already parsed document.

    Args:
        source: Path to a relaxed-JSON schema file, or a dict of strict JSON data

    Returns:
        Decoded Message

    Raises:
        OSError: If the file cannot be read
        NormalizationError: If the file is not valid relaxed JSON
        SchemaDecodeError: If the document is structurally invalid
    """
    if isinstance(source, dict):
        return decode_message(source)
    return decode_message(read_document(_normalize_path(source)))


def loads_message(text: str) -> Message:
    """Decode a Message from relaxed-JSON text."""
    return decode_message(load_relaxed_json(text))


def check_file(path: Union[str, os.PathLike, Path]) -> DocumentResult:
    """Check one schema file; document problems are reported, never raised."""
    path = _normalize_path(path)
    try:
        message = load_message(path)
    except SchemaDecodeError as e:
        return DocumentResult(
            path=str(path), ok=False, kind=e.kind, error_path=e.path, error=str(e)
        )
    except NormalizationError as e:
        return DocumentResult(path=str(path), ok=False, kind=e.kind, error=str(e))
    except UnicodeDecodeError as e:
        return DocumentResult(
            path=str(path), ok=False, kind=ErrorKind.NORMALIZATION_ERROR, error=f"not UTF-8 text: {e}"
        )
    except OSError as e:
        return DocumentResult(path=str(path), ok=False, kind=ErrorKind.IO_ERROR, error=str(e))
    return DocumentResult(path=str(path), ok=True, message_name=message.name)


def check_directory(
    root: Union[str, os.PathLike, Path],
    policy: Optional[TraversalPolicy] = None,
) -> CheckReport:
    """
    Check every schema document below `root`.

    Args:
        root: Directory to walk (or a single schema file)
        policy: Traversal policy (defaults: collect all failures, keep all results)

    Returns:
        CheckReport; ok is False if any checked document failed

    Raises:
        FileNotFoundError: If root does not exist
    """
    policy = policy or TraversalPolicy()
    results: List[DocumentResult] = []
    checked = 0
    failed = 0

    for path in iter_schema_files(_normalize_path(root), policy.extensions):
        result = check_file(path)
        checked += 1
        if result.ok:
            logger.debug("decoded %s (%s)", path, result.message_name)
            if not policy.only_failures:
                results.append(result)
            continue

        failed += 1
        results.append(result)
        if policy.fail_fast:
            logger.debug("stopping after first failure: %s", path)
            break

    return CheckReport(ok=failed == 0, checked=checked, failed=failed, results=results)
