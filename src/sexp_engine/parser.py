"""
S-expression parser.

A recursive descent parser over a single forward-only cursor. One
character of lookahead picks every branch, so there is no backtracking:

    expr      := '(' pair_body ')' | integer | identifier | string
    pair_body := expr ( '.' expr | list_tail )
    list_tail := /* empty */ | expr list_tail

Lists desugar into nested pairs, so ``(1 2 3)`` parses as
``Pair(1, Pair(2, Pair(3, None)))``. The identifier ``nil`` parses as
``None``.

Usage:
    from sexp_engine.parser import parse_string

    tree = parse_string('(1 a "b" (1 . 2))')

    # Lenient mode: malformed input becomes None instead of raising
    tree = parse_string("(1 2", strict=False)
"""

from __future__ import annotations

import logging
from typing import Optional

from .exceptions import ParseError
from .nodes import DIGITS, LETTERS, NIL_NAME, Integer, Node, Pair, Symbol, Text

logger = logging.getLogger(__name__)

WHITESPACE = frozenset(" \t\n")


class Parser:
    """S-expression parser holding the input text and cursor position."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.length = len(text)

    def parse(self) -> Optional[Node]:
        """Parse the entire input, rejecting trailing content."""
        result = self.parse_prefix()
        self._skip_whitespace()
        if self.pos < self.length:
            raise self._error(
                f"Unexpected content after expression: {self.text[self.pos]!r}",
                suggestions=["Wrap multiple expressions in a list"],
            )
        return result

    def parse_prefix(self) -> Optional[Node]:
        """Parse one expression, leaving any trailing content unread."""
        self._skip_whitespace()
        if self.pos >= self.length:
            # Empty document is nil
            return None
        return self._parse_expr()

    def _parse_expr(self) -> Optional[Node]:
        """Parse a single S-expression."""
        self._skip_whitespace()

        if self.pos >= self.length:
            raise self._error("Unexpected end of input, expected an expression")

        char = self.text[self.pos]

        if char == "(":
            return self._parse_pair()
        elif char in DIGITS:
            return self._parse_integer()
        elif char in LETTERS:
            return self._parse_identifier()
        elif char == '"':
            return self._parse_string()

        raise self._error(
            f"Unexpected character {char!r}, expected an expression",
            suggestions=["Expressions start with '(', a digit, a letter or '\"'"],
        )

    def _parse_pair(self) -> Pair:
        """Parse a parenthesized list or dotted pair."""
        start = self.pos
        self.pos += 1

        self._skip_whitespace()
        if self._peek() == ")":
            self.pos += 1
            return Pair()

        heads = [self._parse_expr()]
        tail = None

        # Remaining elements, up to ')' or a dotted tail
        while True:
            self._skip_whitespace()
            char = self._peek()

            if char is None or char == ")":
                break
            if char == ".":
                self.pos += 1
                tail = self._parse_expr()
                break

            heads.append(self._parse_expr())

        self._expect_close(start)

        # (1 2 3) is Pair(1, Pair(2, Pair(3, None)))
        for head in reversed(heads):
            tail = Pair(head, tail)
        return tail

    def _expect_close(self, start: int) -> None:
        """Consume the ')' closing the list opened at ``start``."""
        self._skip_whitespace()
        if self._peek() == ")":
            self.pos += 1
            return

        line, column = self._line_column(start)
        if self.pos >= self.length:
            message = f"Unexpected end of input, expected ')' to close '(' at line {line}, column {column}"
        else:
            message = f"Expected ')' but found {self.text[self.pos]!r}"
        raise self._error(message, suggestions=["Check for missing parentheses"])

    def _parse_integer(self) -> Integer:
        """Parse a run of ASCII digits."""
        value = 0
        while self.pos < self.length and self.text[self.pos] in DIGITS:
            value = value * 10 + (ord(self.text[self.pos]) - ord("0"))
            self.pos += 1
        return Integer(value)

    def _parse_identifier(self) -> Optional[Symbol]:
        """Parse a letter followed by letters and digits; ``nil`` is None."""
        start = self.pos
        while self.pos < self.length and (
            self.text[self.pos] in LETTERS or self.text[self.pos] in DIGITS
        ):
            self.pos += 1

        name = self.text[start : self.pos]
        if name == NIL_NAME:
            return None
        return Symbol(name)

    def _parse_string(self) -> Text:
        """Parse a double-quoted string with no escape sequences."""
        start = self.pos
        self.pos += 1

        end = self.text.find('"', self.pos)
        if end < 0:
            self.pos = self.length
            line, column = self._line_column(start)
            raise self._error(
                f"Unterminated string starting at line {line}, column {column}",
                suggestions=["Close the string with a matching '\"'"],
            )

        value = self.text[self.pos : end]
        self.pos = end + 1
        return Text(value)

    def _peek(self) -> Optional[str]:
        if self.pos < self.length:
            return self.text[self.pos]
        return None

    def _skip_whitespace(self) -> None:
        while self.pos < self.length and self.text[self.pos] in WHITESPACE:
            self.pos += 1

    def _line_column(self, pos: int) -> tuple[int, int]:
        """One-based line and column of ``pos``."""
        line = self.text.count("\n", 0, pos) + 1
        column = pos - (self.text.rfind("\n", 0, pos) + 1) + 1
        return line, column

    def _error(self, message: str, suggestions: Optional[list[str]] = None) -> ParseError:
        line, column = self._line_column(self.pos)
        return ParseError(
            message,
            suggestions=suggestions,
            position=self.pos,
            line=line,
            column=column,
        )


def parse_string(text: str, strict: bool = True) -> Optional[Node]:
    """
    Parse an S-expression string.

    Args:
        text: Input text
        strict: If True, malformed input raises ParseError. If False,
            malformed input yields None and trailing content is ignored.

    Returns:
        The parsed tree, or None for nil (and for malformed input when
        not strict)

    Raises:
        ParseError: If ``strict`` and the input violates the grammar
    """
    parser = Parser(text)
    if strict:
        return parser.parse()

    try:
        return parser.parse_prefix()
    except ParseError as e:
        logger.debug(f"Lenient parse coerced malformed input to nil: {e.message}")
        return None


__all__ = ["Parser", "parse_string"]
