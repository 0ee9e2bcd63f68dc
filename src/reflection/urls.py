"""Assign relative URLs to symbols, following the default theme's page layout."""

from __future__ import annotations

import logging
import re

from reflection.kinds import PAGE_DIRECTORIES, ReflectionKind
from reflection.models import SymbolNode, UrlMapping

logger = logging.getLogger(__name__)

PROJECT_URL = "index.html"

_ANCHOR_UNSAFE = re.compile(r"[^a-z0-9_-]")


def anchor_for(name: str) -> str:
    """Return the in-page anchor slug for a member name."""
    return _ANCHOR_UNSAFE.sub("_", name.lower()) or "_"


class _Page:
    def __init__(self, url: str) -> None:
        self.url = url.split("#", 1)[0]
        self._anchors: set[str] = set()

    def claim_anchor(self, name: str) -> str:
        base = anchor_for(name)
        anchor = base
        suffix = 0
        while anchor in self._anchors:
            suffix += 1
            anchor = f"{base}-{suffix}"
        self._anchors.add(anchor)
        return anchor


def _assign(
    node: SymbolNode,
    prefix: str,
    page: _Page,
    mappings: list[UrlMapping],
) -> None:
    dotted = f"{prefix}.{node.name}" if prefix else node.name

    if node.kind == ReflectionKind.REFERENCE:
        # Re-exports point at a symbol documented elsewhere.
        child_page = page
    elif node.kind in PAGE_DIRECTORIES:
        if node.url is None:
            node.url = f"{PAGE_DIRECTORIES[node.kind]}/{dotted}.html"
        mappings.append(UrlMapping(url=node.url, model=node))
        child_page = _Page(node.url)
    else:
        if node.url is None:
            node.url = f"{page.url}#{page.claim_anchor(node.name)}"
        child_page = page

    for child in node.children:
        _assign(child, dotted, child_page, mappings)


def assign_urls(project: SymbolNode) -> list[UrlMapping]:
    """Attach a URL to every documented symbol under ``project``.

    URLs that are already present are kept as-is. Returns one mapping per
    rendered page, project first, remaining pages in pre-order. Each
    mapping's model is the root of the subtree documented on that page.
    """
    if project.url is None:
        project.url = PROJECT_URL

    mappings = [UrlMapping(url=project.url, model=project)]
    page = _Page(project.url)
    for child in project.children:
        _assign(child, "", page, mappings)

    logger.debug("Assigned URLs across %d pages", len(mappings))
    return mappings


__all__ = ["PROJECT_URL", "anchor_for", "assign_urls"]
