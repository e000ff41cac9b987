"""
Canonical S-expression printer.

Lists are printed in list notation rather than as nested dotted pairs,
so ``Pair(1, Pair(2, None))`` prints as ``(1 2)`` and not
``(1 . (2 . nil))``. A chain that ends in an atom keeps a single dot
before its last element: ``(1 2 . 3)``.

Two functions carry the rule:

    render                a node standing alone; a Pair opens its own parens
    _render_continuation  a Pair continuing an already-open list; it never
                          re-opens parens and only appends its elements

Usage:
    from sexp_engine.printer import render

    render(Pair(Integer(1), Pair(Integer(2), Integer(3))))  # '(1 2 . 3)'
"""

from __future__ import annotations

from typing import Optional

from .nodes import Integer, Node, Pair, Symbol, Text

NIL_TEXT = "nil"


def render(node: Optional[Node]) -> str:
    """
    Render a node in canonical form.

    ``None`` as the whole value renders as an empty string. Inside a
    pair an absent element renders as ``nil``, except for the head of a
    pair with no tail: ``Pair(None, None)`` is ``()``.
    """
    if node is None:
        return ""
    if isinstance(node, Pair):
        if node.tail is None:
            return f"({render(node.head)})"
        return f"({_render_continuation(node)})"
    if isinstance(node, Integer):
        return str(node.value)
    if isinstance(node, Text):
        return f'"{node.value}"'
    if isinstance(node, Symbol):
        return node.name
    raise TypeError(f"Cannot render {type(node).__name__}")


def _render_continuation(pair: Pair) -> str:
    """
    Render the elements of ``pair`` and every Pair along its tail chain,
    without parens. A chain ending in an atom gets ``. atom`` appended.
    """
    parts = []
    node = pair
    while isinstance(node, Pair):
        parts.append(_render_element(node.head))
        node = node.tail

    if node is not None:
        parts.append(".")
        parts.append(render(node))
    return " ".join(parts)


def _render_element(node: Optional[Node]) -> str:
    """Render a list element, spelling absence as ``nil``."""
    if node is None:
        return NIL_TEXT
    return render(node)


__all__ = ["render"]
