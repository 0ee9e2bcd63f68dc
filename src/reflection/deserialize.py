"""Revive a symbol tree from a reflection JSON document."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from reflection.kinds import ReflectionKind
from reflection.models import ReflectionJSON, SymbolNode

logger = logging.getLogger(__name__)


class ReflectionError(Exception):
    """Raised when a reflection document cannot be turned into a symbol tree."""


def _build_node(raw: ReflectionJSON, parent: SymbolNode | None) -> SymbolNode:
    if not raw.name and raw.kind != ReflectionKind.PROJECT:
        location = f"id {raw.id}" if raw.id is not None else "unknown id"
        parent_name = parent.name if parent is not None else None
        msg = (
            f"Reflection ({location}, kind {int(raw.kind)}) under "
            f"{parent_name!r} has an empty name"
        )
        raise ReflectionError(msg)

    node = SymbolNode(name=raw.name, kind=raw.kind, url=raw.url, id=raw.id)
    if parent is not None:
        parent.add_child(node)
    for raw_child in raw.children:
        _build_node(raw_child, node)
    return node


def load_project(data: Any) -> SymbolNode:
    """Validate ``data`` and return the project root of the symbol tree.

    Args:
        data: Parsed JSON object (typically the output of ``typedoc --json``).

    Returns:
        The project ``SymbolNode`` with ``parent`` links wired for every
        descendant. Children keep document order.

    Raises:
        ReflectionError: If the document is not a valid project reflection.
    """
    if not isinstance(data, dict):
        msg = f"Reflection document must be a JSON object, got {type(data).__name__}"
        raise ReflectionError(msg)

    try:
        raw = ReflectionJSON.model_validate(data)
    except ValidationError as exc:
        msg = f"Invalid reflection document: {exc}"
        raise ReflectionError(msg) from exc

    if raw.kind != ReflectionKind.PROJECT:
        msg = (
            "Top-level reflection must be a project "
            f"(kind {int(ReflectionKind.PROJECT)}), got kind {int(raw.kind)}"
        )
        raise ReflectionError(msg)

    project = _build_node(raw, None)
    logger.debug(
        "Loaded project %r with %d top-level children",
        project.name,
        len(project.children),
    )
    return project


__all__ = ["ReflectionError", "load_project"]
