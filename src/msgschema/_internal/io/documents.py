"""Schema document discovery and loading (internal)."""

from pathlib import Path
from typing import Any, Iterable, Iterator, Union

from msgschema._internal.relaxed_json import load_relaxed_json

DEFAULT_EXTENSIONS = (".json",)


def iter_schema_files(
    root: Union[str, Path],
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> Iterator[Path]:
    """
    Yield schema files below `root` in sorted order.

    A file passed as `root` is yielded as-is, whatever its extension.

    Raises:
        FileNotFoundError: If root does not exist
    """
    root_path = Path(root)
    if not root_path.exists():
        raise FileNotFoundError(f"No such file or directory: {root_path}")
    if root_path.is_file():
        yield root_path
        return

    wanted = {ext.lower() for ext in extensions}
    for path in sorted(root_path.rglob("*")):
        if path.is_file() and path.suffix.lower() in wanted:
            yield path


def read_document(path: Union[str, Path]) -> Any:
    """Read a relaxed-JSON schema file and return its strict JSON value."""
    text = Path(path).read_text(encoding="utf-8")
    return load_relaxed_json(text)
