"""
S-expression builders.

Convenience functions for building and walking pair chains without
spelling out every Pair by hand.

Usage:
    from sexp_engine.builders import make_list, atom

    tree = make_list(1, "a", make_list(1, tail=2))
    render(tree)  # '(1 "a" (1 . 2))'
"""

from __future__ import annotations

from typing import Iterator, Optional, Union

from .nodes import Integer, Node, Pair, Symbol, Text

Buildable = Union[Node, int, str, None]


def atom(value: Buildable) -> Optional[Node]:
    """Wrap an int as Integer and a str as Text; nodes and None pass through."""
    if value is None or isinstance(value, (Pair, Integer, Text, Symbol)):
        return value
    if isinstance(value, bool):
        raise TypeError("Cannot build an atom from a bool")
    if isinstance(value, int):
        return Integer(value)
    if isinstance(value, str):
        return Text(value)
    raise TypeError(f"Cannot build an atom from {type(value).__name__}")


def cons(head: Buildable, tail: Buildable = None) -> Pair:
    """Build a single pair."""
    return Pair(atom(head), atom(tail))


def make_list(*items: Buildable, tail: Buildable = None) -> Optional[Node]:
    """
    Build a chain of pairs holding ``items``.

    The chain ends in ``tail``: None gives a proper list, anything else a
    dotted one. With no items the result is ``tail`` itself.
    """
    result = atom(tail)
    for item in reversed(items):
        result = Pair(atom(item), result)
    return result


def iter_list(node: Optional[Node]) -> Iterator[Optional[Node]]:
    """
    Yield the heads along a chain of pairs.

    Every pair contributes its head, so ``Pair(None, None)`` yields a
    single None.
    """
    while isinstance(node, Pair):
        yield node.head
        node = node.tail


def list_tail(node: Optional[Node]) -> Optional[Node]:
    """Return what a chain of pairs ends in: None for a proper list."""
    while isinstance(node, Pair):
        node = node.tail
    return node


def is_proper_list(node: Optional[Node]) -> bool:
    """True if ``node`` is None or a chain of pairs ending in None."""
    return list_tail(node) is None


__all__ = [
    "atom",
    "cons",
    "make_list",
    "iter_list",
    "list_tail",
    "is_proper_list",
]
