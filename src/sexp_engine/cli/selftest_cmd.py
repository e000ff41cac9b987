"""
Self-test command for sexp-engine CLI.

Usage:
    sexp-engine selftest
    sexp-engine selftest --quiet
"""

from __future__ import annotations

import argparse
import sys

from rich.console import Console
from rich.table import Table

from sexp_engine.config import Config
from sexp_engine.exceptions import ConfigurationError
from sexp_engine.log import enable_verbose
from sexp_engine.selftest import run_self_test


def main(argv: list[str] | None = None) -> int:
    """Main entry point for selftest command."""
    parser = argparse.ArgumentParser(
        prog="sexp-engine selftest",
        description="Run the built-in parser and printer checks",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Only show mismatches")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    try:
        config = Config.load()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.verbose or config.defaults.verbose:
        enable_verbose("DEBUG")
    quiet = args.quiet or config.defaults.quiet

    report = run_self_test()
    console = Console()

    if report.passed:
        if not quiet:
            console.print(f"[green]All {report.total} self-test cases passed[/green]")
        return 0

    table = Table(title=f"Self-test mismatches ({len(report.failures)}/{report.total})")
    table.add_column("Kind")
    table.add_column("Input")
    table.add_column("Expected")
    table.add_column("Actual")
    for failure in report.failures:
        table.add_row(failure.kind, failure.input, failure.expected, failure.actual)
    console.print(table)
    return 1
