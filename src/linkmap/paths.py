"""Fully-qualified dotted paths for symbols."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from reflection.kinds import ReflectionKind


class SymbolLike(Protocol):
    """Capability set the link-mapping core reads from a symbol."""

    name: str
    kind: ReflectionKind
    parent: SymbolLike | None
    children: Sequence[SymbolLike]
    url: str | None

    @property
    def is_project(self) -> bool: ...


def full_path(node: SymbolLike) -> str:
    """Return ``node``'s dotted path from just below the project root.

    Examples:
        A method ``render`` on class ``Widget`` in the project yields
        ``"Widget.render"``. A node without a parent yields its own name.
    """
    segments = [node.name]
    current = node.parent
    while current is not None and not current.is_project:
        segments.append(current.name)
        current = current.parent
    segments.reverse()
    return ".".join(segments)


__all__ = ["SymbolLike", "full_path"]
