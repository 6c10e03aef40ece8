"""Packaging regression tests.

Tests that verify the package structure and public surface.
"""

from pathlib import Path


def test_source_layout():
    """Test that the src layout holds the package, its kernel and _internal."""
    here = Path(__file__).resolve().parent
    repo_root = here.parent
    src_pkg = repo_root / "src" / "msgschema"

    assert src_pkg.exists(), "msgschema package should exist in src/"
    assert (src_pkg / "kernel").exists(), "msgschema.kernel should exist"
    assert (src_pkg / "_internal").exists(), "msgschema._internal should exist"
    assert (repo_root / "pyproject.toml").exists()


def test_import_boundary():
    """Test that the package and kernel import and expose a version."""
    import msgschema
    import msgschema.kernel  # noqa: F401

    assert msgschema.__version__ in ("0.1.0", "dev")


def test_public_exports():
    """Test that every name in __all__ resolves."""
    import msgschema

    for name in msgschema.__all__:
        assert hasattr(msgschema, name), name

    assert callable(msgschema.decode_message)
    assert callable(msgschema.parse_range)
    assert msgschema.parse_range("2+").begin == 2


def test_subpackages_have_no_init_files():
    """Test that kernel and _internal are namespace packages and still import."""
    src_pkg = Path(__file__).resolve().parents[1] / "src" / "msgschema"
    for sub in ("kernel", "_internal", "_internal/io"):
        assert not (src_pkg / sub / "__init__.py").exists(), sub

    from msgschema.kernel.decoder import decode_message
    from msgschema._internal.io.documents import read_document  # noqa: F401

    assert decode_message({"name": "X"}).name == "X"
