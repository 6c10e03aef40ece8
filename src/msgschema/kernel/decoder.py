"""Strict decoder for message schema documents.

Input is a strict JSON value (already normalized, already parsed). Output is an
immutable Message, or the first structural error found. Every Message and Field
object is checked against its recognized attribute set; unknown attributes are
rejected at every nesting level.

Nested fields are decoded with an explicit work stack, so nesting depth is not
bounded by the interpreter recursion limit. An object's own attributes are
checked before its nested fields, depth-first, in document order.
"""

from typing import Any, Dict, Iterator, List, Optional, Tuple

from msgschema.errors import (
    MalformedRangeDecodeError,
    MalformedRangeError,
    TypeMismatchError,
    UnknownAttributeError,
    join_path,
)
from .message import DefaultValue, Field, Message
from .version_range import VersionRange, parse_range

MESSAGE_ATTRIBUTES = frozenset({
    "apiKey",
    "type",
    "listeners",
    "name",
    "validVersions",
    "latestVersionUnstable",
    "flexibleVersions",
    "fields",
    "commonStructs",
})

FIELD_ATTRIBUTES = frozenset({
    "name",
    "type",
    "versions",
    "taggedVersions",
    "nullableVersions",
    "flexibleVersions",
    "ignorable",
    "about",
    "tag",
    "mapKey",
    "fields",
    "default",
    "entityType",
    "zeroCopy",
})


def json_kind(value: Any) -> str:
    """Name the JSON shape of a decoded value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def check_attributes(obj: Dict[str, Any], recognized: frozenset, entity_path: str, entity: str) -> None:
    """Reject the first attribute (in document order) not in the recognized set."""
    for key in obj:
        if key not in recognized:
            raise UnknownAttributeError(entity_path, key, entity)


class _ObjectReader:
    """Typed accessors over one JSON object.

    Absent attributes yield defaults. JSON null is also treated as absent, except
    on range attributes, where it is a malformed range token.
    """

    def __init__(self, obj: Dict[str, Any], entity_path: str):
        self.obj = obj
        self.entity_path = entity_path

    def _get(self, attribute: str) -> Any:
        return self.obj.get(attribute)

    def _mismatch(self, attribute: str, expected: str, value: Any) -> TypeMismatchError:
        return TypeMismatchError(self.entity_path, attribute, expected, json_kind(value))

    def string(self, attribute: str) -> str:
        value = self._get(attribute)
        if value is None:
            return ""
        if not isinstance(value, str):
            raise self._mismatch(attribute, "string", value)
        return value

    def boolean(self, attribute: str) -> bool:
        value = self._get(attribute)
        if value is None:
            return False
        if not isinstance(value, bool):
            raise self._mismatch(attribute, "boolean", value)
        return value

    def integer(self, attribute: str, non_negative: bool = False) -> Optional[int]:
        value = self._get(attribute)
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, int):
            raise self._mismatch(attribute, "integer", value)
        if non_negative and value < 0:
            raise TypeMismatchError(self.entity_path, attribute, "non-negative integer", "negative integer")
        return value

    def version_range(self, attribute: str) -> VersionRange:
        if attribute not in self.obj:
            return VersionRange.absent()
        value = self.obj[attribute]
        if value is None:
            raise MalformedRangeDecodeError(self.entity_path, attribute, "null")
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            raise self._mismatch(attribute, "version range string", value)
        # Unquoted integers are read as their decimal text: 3 decodes like "3"
        token = value if isinstance(value, str) else str(value)
        try:
            return parse_range(token)
        except MalformedRangeError as e:
            raise MalformedRangeDecodeError(self.entity_path, attribute, e.token) from e

    def strings(self, attribute: str) -> Tuple[str, ...]:
        value = self._get(attribute)
        if value is None:
            return ()
        if not isinstance(value, list):
            raise self._mismatch(attribute, "array of strings", value)
        for index, item in enumerate(value):
            if not isinstance(item, str):
                raise TypeMismatchError(self.entity_path, f"{attribute}[{index}]", "string", json_kind(item))
        return tuple(value)

    def opaque_scalar(self, attribute: str) -> DefaultValue:
        value = self._get(attribute)
        if isinstance(value, (list, dict)):
            raise self._mismatch(attribute, "string, boolean or number", value)
        return value

    def field_items(self, attribute: str) -> List[Tuple[str, Any]]:
        """Validate a field list and pair each raw item with its path."""
        value = self._get(attribute)
        if value is None:
            return []
        if not isinstance(value, list):
            raise self._mismatch(attribute, "array of objects", value)
        list_path = join_path(self.entity_path, attribute)
        return [(f"{list_path}[{index}]", item) for index, item in enumerate(value)]


def _expect_object(value: Any, path: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise TypeMismatchError(path, "", "object", json_kind(value))
    return value


def _field_attributes(value: Any, path: str) -> Tuple[Dict[str, Any], List[Tuple[str, Any]]]:
    """Read one Field object's own attributes; nested fields come back undecoded."""
    obj = _expect_object(value, path)
    check_attributes(obj, FIELD_ATTRIBUTES, path, "Field")
    r = _ObjectReader(obj, path)
    attributes = dict(
        name=r.string("name"),
        type=r.string("type"),
        versions=r.version_range("versions"),
        tagged_versions=r.version_range("taggedVersions"),
        nullable_versions=r.version_range("nullableVersions"),
        flexible_versions=r.version_range("flexibleVersions"),
        ignorable=r.boolean("ignorable"),
        about=r.string("about"),
        tag=r.integer("tag", non_negative=True),
        map_key=r.boolean("mapKey"),
        default=r.opaque_scalar("default"),
        entity_type=r.string("entityType"),
        zero_copy=r.boolean("zeroCopy"),
    )
    return attributes, r.field_items("fields")


def _decode_fields(items: List[Tuple[str, Any]]) -> Tuple[Field, ...]:
    """Decode a list of raw Field objects, depth-first, without recursion."""
    top: List[Field] = []
    # Each frame: remaining items, decoded siblings, attributes of the owning Field
    stack: List[Tuple[Iterator[Tuple[str, Any]], List[Field], Optional[Dict[str, Any]]]] = [
        (iter(items), top, None)
    ]
    while stack:
        remaining, decoded, _ = stack[-1]
        item = next(remaining, None)
        if item is None:
            _, children, owner = stack.pop()
            if owner is not None:
                stack[-1][1].append(Field(**owner, fields=tuple(children)))
            continue
        path, value = item
        attributes, nested = _field_attributes(value, path)
        if nested:
            stack.append((iter(nested), [], attributes))
        else:
            decoded.append(Field(**attributes))
    return tuple(top)


def decode_field(value: Any, path: str) -> Field:
    """Decode one Field object (and its nested fields) found at `path`."""
    return _decode_fields([(path, value)])[0]


def decode_message(document: Any) -> Message:
    """
    Decode one schema document into a Message.

    Args:
        document: Strict JSON value (dict) for one message definition

    Returns:
        Fully populated, immutable Message

    Raises:
        UnknownAttributeError: If any Message or Field holds an unrecognized attribute
        TypeMismatchError: If an attribute has the wrong JSON shape
        MalformedRangeDecodeError: If a range attribute fails to parse
    """
    obj = _expect_object(document, "")
    check_attributes(obj, MESSAGE_ATTRIBUTES, "", "Message")
    r = _ObjectReader(obj, "")
    api_key = r.integer("apiKey")
    type_ = r.string("type")
    listeners = r.strings("listeners")
    name = r.string("name")
    valid_versions = r.version_range("validVersions")
    latest_version_unstable = r.boolean("latestVersionUnstable")
    flexible_versions = r.version_range("flexibleVersions")
    fields = _decode_fields(r.field_items("fields"))
    common_structs = _decode_fields(r.field_items("commonStructs"))
    return Message(
        api_key=api_key,
        type=type_,
        listeners=listeners,
        name=name,
        valid_versions=valid_versions,
        latest_version_unstable=latest_version_unstable,
        flexible_versions=flexible_versions,
        fields=fields,
        common_structs=common_structs,
    )
