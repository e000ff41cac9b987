"""
Built-in self-test.

Checks the printer against hand-built trees and the parser against
literal inputs, reporting every case whose canonical form differs from
the expected text.

Usage:
    from sexp_engine.selftest import run_self_test

    report = run_self_test()
    if not report.passed:
        for failure in report.failures:
            print(failure)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from .exceptions import ParseError
from .nodes import Integer, Node, Pair, Symbol, Text
from .parser import parse_string
from .printer import render

logger = logging.getLogger(__name__)

_ONE = Integer(1)

PRINTER_CASES: list[tuple[Optional[Node], str]] = [
    (Integer(123), "123"),
    (Text("abc"), '"abc"'),
    (Symbol("xyz"), "xyz"),
    (Pair(), "()"),
    (Pair(_ONE), "(1)"),
    (Pair(None, _ONE), "(nil . 1)"),
    (Pair(_ONE, _ONE), "(1 . 1)"),
    (Pair(_ONE, Pair(_ONE)), "(1 1)"),
    (Pair(_ONE, Pair(None, _ONE)), "(1 nil . 1)"),
]

PARSER_CASES: list[tuple[str, str]] = [
    ("1", "1"),
    ("abc", "abc"),
    ('"x"', '"x"'),
    (" 1 ", "1"),
    ("(1 . 1)", "(1 . 1)"),
    ("(1)", "(1)"),
    ("(1 2)", "(1 2)"),
    ("(1 2 . 3)", "(1 2 . 3)"),
    ('(1 a "b" (1 . 2))', '(1 a "b" (1 . 2))'),
    ("(1 . (2 3))", "(1 2 3)"),
    ("(1 . (2 . nil))", "(1 2)"),
    ("((1) 2 ())", "((1) 2 ())"),
]


@dataclass
class SelfTestFailure:
    """A single mismatching case."""

    kind: str  # "render" or "parse"
    input: str
    expected: str
    actual: str

    def __str__(self) -> str:
        if self.kind == "parse":
            return f"parsing {self.input!r} resulted in {self.actual!r}, not {self.expected!r}"
        return f"rendering {self.input} resulted in {self.actual!r}, not {self.expected!r}"


@dataclass
class SelfTestReport:
    """Outcome of a self-test run."""

    total: int = 0
    failures: list[SelfTestFailure] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.failures


def run_self_test(
    printer_cases: Optional[list[tuple[Optional[Node], str]]] = None,
    parser_cases: Optional[list[tuple[str, str]]] = None,
) -> SelfTestReport:
    """
    Run the printer and parser cases.

    Args:
        printer_cases: (tree, expected) pairs, default PRINTER_CASES
        parser_cases: (input, expected) pairs, default PARSER_CASES

    Returns:
        SelfTestReport listing every mismatch
    """
    if printer_cases is None:
        printer_cases = PRINTER_CASES
    if parser_cases is None:
        parser_cases = PARSER_CASES

    report = SelfTestReport()

    for tree, expected in printer_cases:
        report.total += 1
        result = render(tree)
        if result != expected:
            _record(report, SelfTestFailure("render", repr(tree), expected, result))

    for text, expected in parser_cases:
        report.total += 1
        try:
            tree = parse_string(text)
        except ParseError as e:
            _record(report, SelfTestFailure("parse", text, expected, f"<error: {e.message}>"))
            continue
        if tree is None:
            _record(report, SelfTestFailure("parse", text, expected, "<nil>"))
            continue
        result = render(tree)
        if result != expected:
            _record(report, SelfTestFailure("parse", text, expected, result))

    logger.info(f"Self-test: {report.total - len(report.failures)}/{report.total} passed")
    return report


def _record(report: SelfTestReport, failure: SelfTestFailure) -> None:
    logger.warning(f"Self-test mismatch: {failure}")
    report.failures.append(failure)


__all__ = [
    "PARSER_CASES",
    "PRINTER_CASES",
    "SelfTestFailure",
    "SelfTestReport",
    "run_self_test",
]
