"""
Format command for sexp-engine CLI.

Parses an expression and prints its canonical form.

Usage:
    sexp-engine format "(1 . (2 . nil))"     # prints (1 2)
    sexp-engine format "(1 2" --lenient      # prints an empty line (nil)
"""

from __future__ import annotations

import argparse
import sys

from sexp_engine.config import Config
from sexp_engine.exceptions import ConfigurationError, ParseError
from sexp_engine.log import enable_verbose
from sexp_engine.parser import parse_string
from sexp_engine.printer import render


def main(argv: list[str] | None = None) -> int:
    """Main entry point for format command."""
    parser = argparse.ArgumentParser(
        prog="sexp-engine format",
        description="Print the canonical form of an S-expression",
    )
    parser.add_argument("text", help="S-expression text")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument("--strict", dest="strict", action="store_true", default=None)
    mode_group.add_argument("--lenient", dest="strict", action="store_false")
    args = parser.parse_args(argv)

    try:
        config = Config.load()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.verbose or config.defaults.verbose:
        enable_verbose("DEBUG")

    strict = config.parser.strict if args.strict is None else args.strict

    try:
        tree = parse_string(args.text, strict=strict)
    except ParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(render(tree))
    return 0
