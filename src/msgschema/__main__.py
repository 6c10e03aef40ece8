"""Allow `python -m msgschema`."""

from msgschema.cli import main

main()
