"""
S-expression node model.

A parsed tree is built from four immutable node types:

    Pair     a cons cell with a head (car) and a tail (cdr)
    Integer  a non-negative integer atom
    Text     a double-quoted string atom
    Symbol   an identifier atom

``None`` stands for ``nil`` wherever a node may appear. There is no
separate Nil node: an absent head or tail *is* nil, and an empty list is
``Pair(None, None)``.

Examples:
    (1 2)      → Pair(Integer(1), Pair(Integer(2), None))
    (1 . 2)    → Pair(Integer(1), Integer(2))
    ()         → Pair(None, None)
    nil        → None
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Optional, Union

DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)

# Identifier that always denotes absence, never a Symbol
NIL_NAME = "nil"


@dataclass(frozen=True)
class Pair:
    """A cons cell. ``tail`` is another Pair for lists, an atom for dotted pairs."""

    head: Optional[Node] = None
    tail: Optional[Node] = None

    def __post_init__(self):
        for slot in ("head", "tail"):
            value = getattr(self, slot)
            if value is not None and not isinstance(value, (Pair, Integer, Text, Symbol)):
                raise TypeError(
                    f"Pair {slot} must be a node or None, got {type(value).__name__}"
                )

    def __str__(self) -> str:
        from .printer import render

        return render(self)


@dataclass(frozen=True)
class Integer:
    """Non-negative integer atom."""

    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Integer value must be an int, got {type(self.value).__name__}")
        if self.value < 0:
            raise ValueError(f"Integer value must be non-negative, got {self.value}")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Text:
    """String atom. The grammar has no escapes, so ``"`` cannot appear in ``value``."""

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise TypeError(f"Text value must be a str, got {type(self.value).__name__}")
        if '"' in self.value:
            raise ValueError("Text value cannot contain '\"'")

    def __str__(self) -> str:
        return f'"{self.value}"'


@dataclass(frozen=True)
class Symbol:
    """Identifier atom: an ASCII letter followed by ASCII letters or digits."""

    name: str

    def __post_init__(self):
        if not is_identifier(self.name):
            raise ValueError(f"Invalid symbol name: {self.name!r}")
        if self.name == NIL_NAME:
            raise ValueError("'nil' is reserved and cannot be a symbol; use None")

    def __str__(self) -> str:
        return self.name


Node = Union[Pair, Integer, Text, Symbol]
ATOM_TYPES = (Integer, Text, Symbol)


def is_identifier(name: object) -> bool:
    """Check if ``name`` is spelled like an identifier (``nil`` included)."""
    if not isinstance(name, str) or not name:
        return False
    if name[0] not in LETTERS:
        return False
    return all(c in LETTERS or c in DIGITS for c in name[1:])


def is_atom(node: Optional[Node]) -> bool:
    """True for Integer, Text and Symbol nodes."""
    return isinstance(node, ATOM_TYPES)


__all__ = [
    "Node",
    "Pair",
    "Integer",
    "Text",
    "Symbol",
    "NIL_NAME",
    "is_atom",
    "is_identifier",
]
