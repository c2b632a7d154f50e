"""Perch CLI: inspect layout lookup order.

Entry point registered as ``perch`` in ``pyproject.toml``::

    [project.scripts]
    perch = "perch.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``perch`` command."""
    parser = argparse.ArgumentParser(
        prog="perch",
        description="perch: layout candidate resolution for template lookups.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- perch layouts ----------------------------------------------------
    layouts_parser = subparsers.add_parser(
        "layouts", help="List layout candidates in lookup order"
    )
    layouts_parser.add_argument(
        "kind",
        help="Page kind (home, page, section, taxonomy, term, 404) or hook id with --hook",
    )
    layouts_parser.add_argument("--section", default="", help="Section name")
    layouts_parser.add_argument("--type", default="", help="Content type (may be nested)")
    layouts_parser.add_argument("--layout", default="", help="Explicit layout override")
    layouts_parser.add_argument("--lang", default="", help="Language tag")
    layouts_parser.add_argument(
        "--format",
        default="html",
        help="Built-in output format name (default: html)",
    )
    layouts_parser.add_argument(
        "--hook",
        action="store_true",
        help="Treat KIND as a render hook identifier (e.g. render-link)",
    )
    layouts_parser.add_argument(
        "--baseof",
        action="store_true",
        help="Resolve the layered base template instead",
    )
    layouts_parser.add_argument(
        "--numbered",
        action="store_true",
        help="Prefix each candidate with its lookup position",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "layouts":
        from perch.cli._layouts import run_layouts

        run_layouts(args)
