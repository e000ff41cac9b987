"""
Command-line interface for sexp-engine.

Provides CLI commands via the `sexp-engine` command:

    sexp-engine selftest          - Run the built-in parser/printer checks
    sexp-engine format <text>     - Print the canonical form of an expression
    sexp-engine config            - Show or initialize configuration

Examples:
    sexp-engine selftest
    sexp-engine format "(1 . (2 . nil))"
    sexp-engine format "(1 2" --lenient
    sexp-engine config --show
"""

import argparse
from typing import List, Optional

from sexp_engine import __version__

__all__ = ["main"]


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for sexp-engine CLI."""
    parser = argparse.ArgumentParser(
        prog="sexp-engine",
        description="S-expression parser and canonical printer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--version", action="version", version=f"sexp-engine {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Selftest subcommand
    selftest_parser = subparsers.add_parser("selftest", help="Run built-in self-test")
    selftest_parser.add_argument("-q", "--quiet", action="store_true", help="Only show mismatches")

    # Format subcommand
    format_parser = subparsers.add_parser("format", help="Print canonical form of an expression")
    format_parser.add_argument("text", help="S-expression text")
    mode_group = format_parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        "--strict",
        dest="strict",
        action="store_true",
        default=None,
        help="Fail on malformed input (default)",
    )
    mode_group.add_argument(
        "--lenient",
        dest="strict",
        action="store_false",
        help="Treat malformed input as nil",
    )

    # Config subcommand
    config_parser = subparsers.add_parser("config", help="Show or initialize configuration")
    config_action = config_parser.add_mutually_exclusive_group()
    config_action.add_argument("--show", action="store_true", help="Show effective configuration")
    config_action.add_argument("--init", action="store_true", help="Create template config file")
    config_action.add_argument("--paths", action="store_true", help="Show config file paths")
    config_parser.add_argument("--user", action="store_true", help="Use user config for --init")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    if args.command == "selftest":
        from .selftest_cmd import main as selftest_main

        sub_argv = []
        if args.verbose:
            sub_argv.append("--verbose")
        if args.quiet:
            sub_argv.append("--quiet")
        return selftest_main(sub_argv)

    elif args.command == "format":
        from .format_cmd import main as format_main

        sub_argv = [args.text]
        if args.verbose:
            sub_argv.append("--verbose")
        if args.strict is True:
            sub_argv.append("--strict")
        elif args.strict is False:
            sub_argv.append("--lenient")
        return format_main(sub_argv)

    elif args.command == "config":
        from .config_cmd import main as config_main

        sub_argv = []
        if args.show:
            sub_argv.append("--show")
        elif args.init:
            sub_argv.append("--init")
        elif args.paths:
            sub_argv.append("--paths")
        if args.user:
            sub_argv.append("--user")
        return config_main(sub_argv)

    return 1
