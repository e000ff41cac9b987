"""Tests for sexp_engine.log."""

import logging

import pytest

from sexp_engine.log import disable_verbose, enable_verbose


def _stream_handlers(logger):
    return [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]


class TestVerboseLogging:
    """Tests for enable_verbose() and disable_verbose()."""

    def test_enable_adds_single_handler(self):
        """Enabling twice leaves one console handler."""
        logger = logging.getLogger("sexp_engine")
        enable_verbose("DEBUG")
        enable_verbose("DEBUG")

        assert logger.level == logging.DEBUG
        assert len(_stream_handlers(logger)) == 1

    def test_disable_removes_handler(self):
        """Disabling restores the silent default."""
        logger = logging.getLogger("sexp_engine")
        enable_verbose("INFO")
        disable_verbose()

        assert logger.level == logging.WARNING
        assert _stream_handlers(logger) == []
        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)

    def test_custom_format(self):
        """A custom format string is applied to the handler."""
        enable_verbose("INFO", format="%(name)s: %(message)s")
        handler = _stream_handlers(logging.getLogger("sexp_engine"))[0]

        assert handler.formatter._fmt == "%(name)s: %(message)s"

    def test_reenable_replaces_handler(self):
        """Enabling again swaps in a new handler with the new format and level."""
        logger = logging.getLogger("sexp_engine")
        enable_verbose("DEBUG", format="first %(message)s")
        enable_verbose("INFO", format="second %(message)s")
        handlers = _stream_handlers(logger)

        assert logger.level == logging.INFO
        assert len(handlers) == 1
        assert handlers[0].formatter._fmt == "second %(message)s"

    def test_unknown_level_raises(self):
        """An unknown level name is rejected before any handler is installed."""
        logger = logging.getLogger("sexp_engine")
        with pytest.raises(ValueError, match="Unknown logging level"):
            enable_verbose("LOUD")

        assert _stream_handlers(logger) == []
