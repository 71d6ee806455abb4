"""Command line entry point: ``python -m designlib <url-or-name>``.

Prints the resolved library as JSON on stdout; progress goes to stderr.
Exit status is 1 when nothing could be resolved.
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from designlib.config import Settings
from designlib.logging_config import configure_logging
from designlib.models.library import ResolveStatus
from designlib.registry import built_in_entries
from designlib.resolver import resolve_library


def _print_status(status: ResolveStatus, message: str) -> None:
    print(f"[{status.value}] {message}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="designlib",
        description="Resolve a URL or library name into a design-system component catalog.",
    )
    parser.add_argument("identifier", nargs="?", help="library name, docs URL, GitHub or Figma URL")
    parser.add_argument("--list", action="store_true", help="list the curated libraries and exit")
    args = parser.parse_args(argv)

    settings = Settings()
    configure_logging(settings)

    if args.list:
        for entry in built_in_entries():
            print(f"{entry.name}\t{entry.component_count}\t{entry.source_url}")
        return 0
    if not args.identifier:
        parser.error("identifier is required unless --list is given")

    library = asyncio.run(resolve_library(args.identifier, _print_status, settings=settings))
    if library is None:
        return 1
    print(library.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
