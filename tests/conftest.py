"""Pytest configuration for tests.

No sys.path hacks - tests should import from installed msgschema package.
"""

import logging
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parent.parent
FIXTURES = REPO_ROOT / "fixtures"


@pytest.fixture
def messages_dir() -> Path:
    """Directory of well-formed Kafka message schemas."""
    return FIXTURES / "messages"


@pytest.fixture
def broken_dir() -> Path:
    """Directory of schemas that must fail to decode."""
    return FIXTURES / "broken"


@pytest.fixture
def mixed_dir(tmp_path, messages_dir, broken_dir) -> Path:
    """Temporary tree mixing good and bad schemas, plus non-schema files."""
    root = tmp_path / "mixed"
    (root / "nested").mkdir(parents=True)
    for name in ("ApiVersionsRequest.json", "CreateTopicsRequest.json"):
        (root / name).write_text((messages_dir / name).read_text(encoding="utf-8"), encoding="utf-8")
    for name in ("BadRangeResponse.json", "UnknownAttributeRequest.json"):
        (root / "nested" / name).write_text((broken_dir / name).read_text(encoding="utf-8"), encoding="utf-8")
    (root / "README.md").write_text("not a schema", encoding="utf-8")
    return root


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """CLI runs reconfigure root logging; put the previous handlers back."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
