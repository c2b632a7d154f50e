"""``perch layouts``: print layout candidates in lookup order."""

import argparse
import sys

from perch.errors import UnknownFormatError, UnsupportedKindError
from perch.formats import get_format
from perch.layouts.descriptor import LayoutDescriptor
from perch.layouts.resolver import resolve_layouts


def run_layouts(args: argparse.Namespace) -> None:
    """Resolve and print candidates for the descriptor given on the command line.

    Exits with code 1 on an unknown kind or format.
    """
    descriptor = LayoutDescriptor(
        kind=args.kind,
        type=args.type,
        section=args.section,
        layout=args.layout,
        lang=args.lang,
        rendering_hook=args.hook,
        baseof=args.baseof,
    )
    try:
        fmt = get_format(args.format)
        layouts = resolve_layouts(descriptor, fmt)
    except (UnknownFormatError, UnsupportedKindError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    width = len(str(len(layouts)))
    for i, name in enumerate(layouts, start=1):
        if args.numbered:
            print(f"{i:>{width}}  {name}")
        else:
            print(name)
