"""Alias generation: every dotted suffix a reader may use to name a symbol."""

from __future__ import annotations

from typing import TYPE_CHECKING

from linkmap.paths import full_path

if TYPE_CHECKING:
    from linkmap.paths import SymbolLike

CONSTRUCTOR_NAME = "constructor"


def is_constructor_leaf(
    node: SymbolLike, constructor_name: str = CONSTRUCTOR_NAME
) -> bool:
    """True for a childless member named like a constructor."""
    return node.name == constructor_name and not node.children


def aliases(node: SymbolLike, *, constructor_name: str = CONSTRUCTOR_NAME) -> list[str]:
    """Return the aliases for ``node``, longest first.

    For a path ``A.B.c`` this is ``["A.B.c", "B.c", "c"]``. A childless
    constructor leaf drops the bare final segment, since ``constructor`` on
    its own would match every class. The project root has no aliases.
    """
    if node.is_project:
        return []

    parts = full_path(node).split(".")
    upper_bound = len(parts)
    if is_constructor_leaf(node, constructor_name):
        upper_bound -= 1

    return [".".join(parts[i:]) for i in range(upper_bound)]


__all__ = ["CONSTRUCTOR_NAME", "aliases", "is_constructor_leaf"]
