"""msgschema: strict decoding and validation of protocol message schema files."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("msgschema")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from msgschema.api import (
    CheckReport,
    DocumentResult,
    TraversalPolicy,
    check_directory,
    check_file,
    load_message,
    loads_message,
)
from msgschema.codes import ErrorKind
from msgschema.errors import (
    MalformedRangeDecodeError,
    MalformedRangeError,
    NormalizationError,
    SchemaDecodeError,
    TypeMismatchError,
    UnknownAttributeError,
)
from msgschema.kernel.decoder import decode_message
from msgschema.kernel.message import Field, Message
from msgschema.kernel.version_range import RangeKind, VersionRange, parse_range

__all__ = [
    "__version__",
    "decode_message",
    "parse_range",
    "load_message",
    "loads_message",
    "check_file",
    "check_directory",
    "TraversalPolicy",
    "DocumentResult",
    "CheckReport",
    "Message",
    "Field",
    "VersionRange",
    "RangeKind",
    "ErrorKind",
    "SchemaDecodeError",
    "UnknownAttributeError",
    "TypeMismatchError",
    "MalformedRangeDecodeError",
    "MalformedRangeError",
    "NormalizationError",
]
