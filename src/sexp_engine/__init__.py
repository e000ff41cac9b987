"""
sexp-engine: a minimal S-expression parser and canonical printer.

Parses LISP-style text (lists, dotted pairs, integers, strings and
identifiers) into an immutable tree of pairs and atoms, and prints trees
back in canonical list notation.

Modules:
    nodes: Pair, Integer, Text and Symbol node types (None is nil)
    parser: Recursive descent parser
    printer: Canonical printer
    builders: Helpers for building and walking pair chains
    selftest: Built-in parser/printer checks
    config: TOML configuration loading

Quick Start::

    from sexp_engine import parse_string, render

    tree = parse_string("(1 . (2 . nil))")
    render(tree)  # '(1 2)'
"""

__version__ = "0.1.0"

from sexp_engine.builders import cons, is_proper_list, iter_list, list_tail, make_list
from sexp_engine.exceptions import ConfigurationError, ParseError, SexpEngineError
from sexp_engine.log import disable_verbose, enable_verbose
from sexp_engine.nodes import Integer, Node, Pair, Symbol, Text
from sexp_engine.parser import Parser, parse_string
from sexp_engine.printer import render
from sexp_engine.selftest import run_self_test

__all__ = [
    # Version
    "__version__",
    # Nodes
    "Node",
    "Pair",
    "Integer",
    "Text",
    "Symbol",
    # Parse / render
    "Parser",
    "parse_string",
    "render",
    # Builders
    "cons",
    "make_list",
    "iter_list",
    "list_tail",
    "is_proper_list",
    # Errors
    "SexpEngineError",
    "ParseError",
    "ConfigurationError",
    # Self-test
    "run_self_test",
    # Logging
    "enable_verbose",
    "disable_verbose",
]
