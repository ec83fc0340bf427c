"""
Command line front end.

    lodash-swap src/app.ts                 # print rewritten source
    lodash-swap --in-place src/*.ts        # rewrite files
    lodash-swap --check src/*.ts           # list files that would change
    lodash-swap --list-supported           # print replaceable functions
"""

import argparse
import logging
import sys
from typing import List, Optional

from lodash_swap.config import RewriteConfig, load_config
from lodash_swap.engine import ImportRewriter
from lodash_swap.errors import LodashSwapError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lodash-swap",
        description="Rewrite lodash imports to es-toolkit/compat where every used function is supported",
    )
    parser.add_argument("files", nargs="*", help="Source files to rewrite")
    parser.add_argument("--config", help="YAML configuration file")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--in-place", action="store_true", help="Write results back to the files")
    mode.add_argument("--check", action="store_true", help="Only report files that would change")
    parser.add_argument("--list-supported", action="store_true", help="Print the replaceable function names")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else RewriteConfig()
        rewriter = ImportRewriter(config=config)
    except (FileNotFoundError, LodashSwapError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.list_supported:
        for name in rewriter.supported_functions():
            print(name)
        return 0

    if not args.files:
        parser.error("no input files")

    would_change = []
    for path in args.files:
        try:
            with open(path, "r", encoding="utf-8") as f:
                source = f.read()
        except FileNotFoundError:
            print(f"error: file not found: {path}", file=sys.stderr)
            return 2

        result = rewriter.transform(source, path)
        if result is None or not result.changed(source):
            if not (args.in_place or args.check):
                sys.stdout.write(source)
            continue

        would_change.append(path)
        if args.check:
            print(path)
        elif args.in_place:
            with open(path, "w", encoding="utf-8") as f:
                f.write(result.code)
        else:
            sys.stdout.write(result.code)

    if args.check and would_change:
        return 1
    return 0


__all__ = ["build_parser", "main"]
