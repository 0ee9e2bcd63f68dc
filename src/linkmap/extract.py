"""Walk a symbol tree and emit de-duplicated link mappings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from artifacts.models.link_mappings import LinkMapping
from linkmap.aliases import CONSTRUCTOR_NAME, aliases

if TYPE_CHECKING:
    from collections.abc import Iterable

    from linkmap.paths import SymbolLike

logger = logging.getLogger(__name__)


class LinkMappingExtractor:
    """Collects link mappings over one or more traversal roots.

    The set of emitted ``(alias, url)`` pairs lives on the instance, so one
    extractor corresponds to one output document.
    """

    def __init__(self, *, constructor_name: str = CONSTRUCTOR_NAME) -> None:
        self.constructor_name = constructor_name
        self.mappings: list[LinkMapping] = []
        self._seen: set[tuple[str, str]] = set()
        self.skipped = 0

    def visit(self, node: SymbolLike) -> None:
        """Emit mappings for ``node`` and its descendants in pre-order."""
        stack = [node]
        while stack:
            current = stack.pop()
            if current.url:
                self._emit(current, current.url)
            stack.extend(reversed(current.children))

    def _emit(self, node: SymbolLike, url: str) -> None:
        for alias in aliases(node, constructor_name=self.constructor_name):
            key = (alias, url)
            if key in self._seen:
                self.skipped += 1
                logger.debug("Skipping duplicate mapping %s -> %s", alias, url)
                continue
            self._seen.add(key)
            self.mappings.append(
                LinkMapping(
                    link_destination=alias,
                    relative_url=url,
                    default_label=node.name,
                )
            )


def extract_link_mappings(
    roots: Iterable[SymbolLike],
    *,
    constructor_name: str = CONSTRUCTOR_NAME,
) -> list[LinkMapping]:
    """Return the link mappings for every root, in traversal order.

    Each root is walked as an independent pre-order traversal; roots whose
    subtrees overlap contribute each ``(alias, url)`` pair only once.
    """
    extractor = LinkMappingExtractor(constructor_name=constructor_name)
    for root in roots:
        extractor.visit(root)
    if extractor.skipped:
        logger.debug("Dropped %d duplicate mappings", extractor.skipped)
    return extractor.mappings


__all__ = ["LinkMappingExtractor", "extract_link_mappings"]
