"""Pydantic models for decoded message schemas.

Models are immutable once built. Attribute names are snake_case in Python and
serialize with the camelCase names used in schema documents.
"""

from typing import Iterator, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, NonNegativeInt, StrictBool, StrictFloat, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

from .version_range import VersionRange

# Opaque `default` attribute: kept as written, never interpreted against the field type.
# None means the attribute was absent.
DefaultValue = Union[StrictBool, StrictInt, StrictFloat, StrictStr, None]

_MODEL_CONFIG = ConfigDict(
    frozen=True,
    extra="forbid",
    alias_generator=to_camel,
    populate_by_name=True,
)


class Field(BaseModel):
    """One message field, possibly holding nested fields."""
    name: str = ""
    type: str = ""

    versions: VersionRange = VersionRange()
    tagged_versions: VersionRange = VersionRange()
    nullable_versions: VersionRange = VersionRange()
    flexible_versions: VersionRange = VersionRange()

    ignorable: bool = False
    about: str = ""

    tag: Optional[NonNegativeInt] = None  # Only meaningful with tagged_versions
    map_key: bool = False

    fields: Tuple["Field", ...] = ()

    default: DefaultValue = None
    entity_type: str = ""
    zero_copy: bool = False

    model_config = _MODEL_CONFIG

    @property
    def is_leaf(self) -> bool:
        return not self.fields

    def iter_fields(self, path: str = "") -> Iterator[Tuple[str, "Field"]]:
        """Walk nested fields depth-first, yielding (path, field) pairs."""
        yield from _walk(self.fields, f"{path}.fields" if path else "fields")


class Message(BaseModel):
    """Top-level schema unit: one protocol request or response."""
    api_key: Optional[int] = None
    type: str = ""
    listeners: Tuple[str, ...] = ()
    name: str = ""
    valid_versions: VersionRange = VersionRange()
    latest_version_unstable: bool = False
    flexible_versions: VersionRange = VersionRange()
    fields: Tuple[Field, ...] = ()
    common_structs: Tuple[Field, ...] = ()  # Not resolved against field types

    model_config = _MODEL_CONFIG

    def iter_fields(self) -> Iterator[Tuple[str, Field]]:
        """Walk body fields, then common structs, depth-first."""
        yield from _walk(self.fields, "fields")
        yield from _walk(self.common_structs, "commonStructs")


def _walk(fields: Tuple[Field, ...], prefix: str) -> Iterator[Tuple[str, Field]]:
    # Pre-order with an explicit stack; parents come before their children
    stack = [(f"{prefix}[{index}]", field) for index, field in reversed(list(enumerate(fields)))]
    while stack:
        path, field = stack.pop()
        yield path, field
        stack.extend(
            (f"{path}.fields[{index}]", child) for index, child in reversed(list(enumerate(field.fields)))
        )
