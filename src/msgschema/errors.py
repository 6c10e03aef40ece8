"""Exceptions raised by the range parser, the schema decoder and the loaders."""

from typing import Optional

from msgschema.codes import ErrorKind


class MalformedRangeError(ValueError):
    """A version-range token matched none of the recognized grammars."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"invalid range: {token}")


class SchemaDecodeError(ValueError):
    """Base class for structural errors found while decoding a document.

    Attributes:
        kind: ErrorKind of the failure
        entity_path: path of the enclosing Message/Field ("" for the message itself)
        attribute: offending attribute name ("" when the entity itself is wrong)
        message: human-readable description
    """

    kind: ErrorKind

    def __init__(self, entity_path: str, attribute: str, message: str):
        self.entity_path = entity_path
        self.attribute = attribute
        self.message = message
        super().__init__(f"{self.path or '<document>'}: {message}")

    @property
    def path(self) -> str:
        """Full dot/bracket path of the offending attribute."""
        return join_path(self.entity_path, self.attribute)


class UnknownAttributeError(SchemaDecodeError):
    kind = ErrorKind.UNKNOWN_ATTRIBUTE

    def __init__(self, entity_path: str, attribute: str, entity: str):
        self.entity = entity
        super().__init__(
            entity_path,
            attribute,
            f"unknown attribute '{attribute}' in {entity}",
        )


class TypeMismatchError(SchemaDecodeError):
    kind = ErrorKind.TYPE_MISMATCH

    def __init__(self, entity_path: str, attribute: str, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(
            entity_path,
            attribute,
            f"expected {expected}, got {actual}",
        )


class MalformedRangeDecodeError(SchemaDecodeError):
    """A range-valued attribute held a token the range parser rejected."""

    kind = ErrorKind.MALFORMED_RANGE

    def __init__(self, entity_path: str, attribute: str, token: str):
        self.token = token
        super().__init__(entity_path, attribute, f"invalid range: {token}")


class NormalizationError(ValueError):
    """Relaxed JSON text could not be parsed."""

    kind = ErrorKind.NORMALIZATION_ERROR

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.message = message
        self.line = line
        self.column = column
        location = f" (line {line}, column {column})" if line is not None else ""
        super().__init__(f"{message}{location}")


def join_path(entity_path: str, attribute: str) -> str:
    """Append an attribute name to an entity path using dot notation."""
    if not entity_path:
        return attribute
    if not attribute:
        return entity_path
    return f"{entity_path}.{attribute}"
