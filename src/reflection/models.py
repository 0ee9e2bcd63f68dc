"""Symbol tree models.

``ReflectionJSON`` validates the raw reflection document. ``SymbolNode`` is
the in-memory tree the link-mapping core walks: one node shape exposing
``name``, ``kind``, ``parent``, ``children`` and ``url`` regardless of what
kind of declaration it represents.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field

from reflection.kinds import ReflectionKind


class ReflectionJSON(BaseModel):
    """A single reflection as serialized in the JSON document."""

    model_config = ConfigDict(extra="ignore")

    id: int | None = None
    name: str
    kind: ReflectionKind
    url: str | None = Field(
        default=None, description="URL pre-assigned by an external generator"
    )
    children: list[ReflectionJSON] = Field(default_factory=list)


@dataclass(eq=False)
class SymbolNode:
    """A documented symbol with a back reference to its enclosing node."""

    name: str
    kind: ReflectionKind
    parent: SymbolNode | None = field(default=None, repr=False)
    children: list[SymbolNode] = field(default_factory=list, repr=False)
    url: str | None = None
    id: int | None = None

    @property
    def is_project(self) -> bool:
        """True for the synthetic project root, which is never an alias target."""
        return self.kind == ReflectionKind.PROJECT

    def add_child(self, child: SymbolNode) -> SymbolNode:
        child.parent = self
        self.children.append(child)
        return child


@dataclass(frozen=True)
class UrlMapping:
    """A rendered page and the symbol it documents."""

    url: str
    model: SymbolNode


__all__ = ["ReflectionJSON", "SymbolNode", "UrlMapping"]
