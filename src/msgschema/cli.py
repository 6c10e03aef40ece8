"""msgschema CLI: check message schema documents."""

import argparse
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path

logger = logging.getLogger("msgschema")


def main():
    """Main CLI entry point for msgschema commands."""
    try:
        msgschema_version = get_version("msgschema")
    except PackageNotFoundError:
        msgschema_version = "dev"

    parser = argparse.ArgumentParser(
        prog="msgschema",
        description="msgschema: strict validation of protocol message schema files"
    )
    parser.add_argument("--version", action="version", version=f"msgschema {msgschema_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    parent_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug traces."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # check command
    check_parser = subparsers.add_parser(
        "check",
        help="Decode every schema file below a directory",
        parents=[parent_parser]
    )
    check_parser.add_argument(
        "dir",
        type=Path,
        nargs="?",
        default=Path("."),
        help="Directory to search for schema files (defaults to the current directory)"
    )
    check_parser.add_argument(
        "--fail-on-first",
        action="store_true",
        help="Stop at the first failing document"
    )
    check_parser.add_argument(
        "--only-failures",
        action="store_true",
        help="Report failures only"
    )
    check_parser.add_argument(
        "--ext",
        dest="extensions",
        action="append",
        default=None,
        help="Schema file extension to match (repeatable, defaults to .json)"
    )

    # show command
    show_parser = subparsers.add_parser(
        "show",
        help="Decode one schema file and print it as canonical JSON",
        parents=[parent_parser]
    )
    show_parser.add_argument(
        "file",
        type=Path,
        help="Path to schema file"
    )
    show_parser.add_argument(
        "--compact",
        action="store_true",
        help="Print compact JSON instead of indented JSON"
    )
    show_parser.add_argument(
        "--tree",
        action="store_true",
        help="Print one line per field (path, name, type, versions, struct or leaf) instead of JSON"
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )

    if args.command == "check":
        from .api import TraversalPolicy, check_directory

        policy = TraversalPolicy(
            fail_fast=args.fail_on_first,
            only_failures=args.only_failures,
            extensions=tuple(args.extensions) if args.extensions else (".json",),
        )
        try:
            report = check_directory(args.dir, policy)
        except FileNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        for result in report.results:
            if result.ok:
                if not args.quiet:
                    print(f"Successfully loaded: {result.path}")
            else:
                logger.error("processing error: %s: %s", result.path, result.error)

        if not args.quiet:
            print(f"Status: {'OK' if report.ok else 'FAILED'}")
            print(f"  Checked: {report.checked}")
            print(f"  Failed: {report.failed}")
        if not report.ok:
            sys.exit(1)

    elif args.command == "show":
        from .api import load_message
        from .errors import NormalizationError, SchemaDecodeError
        from ._internal.canonical_json import canonical_dumps

        try:
            message = load_message(args.file)
        except (SchemaDecodeError, NormalizationError, OSError, UnicodeDecodeError) as e:
            print(f"Error: {args.file}: {e}", file=sys.stderr)
            sys.exit(1)

        if args.tree:
            for path, field in message.iter_fields():
                versions = "-" if field.versions.is_absent else str(field.versions)
                shape = "leaf" if field.is_leaf else "struct"
                print(f"{path}\t{field.name}\t{field.type}\t{versions}\t{shape}")
            return

        data = message.model_dump(mode="json", by_alias=True)
        print(canonical_dumps(data, indent=None if args.compact else 2))


if __name__ == "__main__":
    main()
