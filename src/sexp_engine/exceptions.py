"""
Custom exception hierarchy for sexp-engine.

Provides consistent error handling with context and suggestions.
All exceptions include:
- Context information (input position, line, column)
- Suggestions for how to fix the issue
- Clear, formatted error messages

Example::

    from sexp_engine.exceptions import ParseError

    raise ParseError(
        "Unterminated string",
        position=7,
        line=1,
        column=8,
        suggestions=['Close the string with a matching \\'"\\''],
    )
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class SexpEngineError(Exception):
    """
    Base exception for all sexp-engine errors.

    Provides consistent formatting with context and suggestions.

    Attributes:
        context: Dictionary of contextual information (position, line, etc.)
        suggestions: List of actionable suggestions for fixing the error
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.message = message
        self.context = context or {}
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context and suggestions."""
        parts = [self.message]

        if self.context:
            parts.append("\n\nContext:")
            for key, value in self.context.items():
                parts.append(f"\n  {key}: {value}")

        if self.suggestions:
            parts.append("\n\nSuggestions:")
            for suggestion in self.suggestions:
                parts.append(f"\n  - {suggestion}")

        return "".join(parts)

    def __str__(self) -> str:
        return self._format_message()


class ParseError(SexpEngineError):
    """
    S-expression parsing failed.

    Raised when input text violates the grammar: a missing closing
    parenthesis, an unterminated string, or a character where no
    expression can start.

    Example::

        raise ParseError(
            "Expected ')'",
            position=6,
            line=1,
            column=7,
            suggestions=["Check for missing parentheses"],
        )

    Attributes:
        position: Zero-based offset into the input, if known
        line: One-based line number, if known
        column: One-based column number, if known
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        position: Optional[int] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        self.position = position
        self.line = line
        self.column = column

        # Build context from convenience parameters
        ctx = context or {}
        if position is not None and "position" not in ctx:
            ctx["position"] = position
        if line is not None and "line" not in ctx:
            ctx["line"] = line
        if column is not None and "column" not in ctx:
            ctx["column"] = column

        super().__init__(message, ctx, suggestions)


class ConfigurationError(SexpEngineError):
    """
    Configuration or settings error.

    Raised when a config file is unreadable or is not valid TOML.

    Example::

        raise ConfigurationError(
            "Invalid TOML in .sexp-engine.toml",
            context={"file": ".sexp-engine.toml"},
            suggestions=["Run 'sexp-engine config --init' to generate a template"],
        )
    """

    pass


__all__ = [
    "SexpEngineError",
    "ParseError",
    "ConfigurationError",
]
