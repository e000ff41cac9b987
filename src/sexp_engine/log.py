"""
Console logging for sexp-engine.

Library code logs through ``logging.getLogger(__name__)`` under the
``sexp_engine`` namespace and stays silent until a caller opts in. The
CLI opts in for ``-v`` or ``defaults.verbose``:

    from sexp_engine.log import enable_verbose

    enable_verbose("DEBUG")
    parse_string("(1 2", strict=False)
    # [DEBUG] sexp_engine.parser: Lenient parse coerced malformed input to nil: ...
"""

import logging

PACKAGE_LOGGER = "sexp_engine"
DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_package_logger = logging.getLogger(PACKAGE_LOGGER)
_package_logger.addHandler(logging.NullHandler())

# Handler installed by enable_verbose, if any
_console_handler = None


def enable_verbose(level: str = "INFO", format: str = None) -> None:
    """Send package log records at ``level`` and above to stderr.

    Calling it again replaces the previous console handler, so records
    are never printed twice.
    """
    global _console_handler

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown logging level: {level}")

    disable_verbose()

    _console_handler = logging.StreamHandler()
    _console_handler.setFormatter(logging.Formatter(format or DEFAULT_FORMAT))
    _package_logger.addHandler(_console_handler)
    _package_logger.setLevel(numeric_level)


def disable_verbose() -> None:
    """Drop the console handler and go back to warnings only."""
    global _console_handler

    if _console_handler is not None:
        _package_logger.removeHandler(_console_handler)
        _console_handler.close()
        _console_handler = None
    _package_logger.setLevel(logging.WARNING)
