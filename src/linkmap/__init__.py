"""Alias generation and link-mapping extraction over a symbol tree."""

from linkmap.aliases import CONSTRUCTOR_NAME, aliases, is_constructor_leaf
from linkmap.extract import LinkMappingExtractor, extract_link_mappings
from linkmap.paths import SymbolLike, full_path

__all__ = [
    "CONSTRUCTOR_NAME",
    "LinkMappingExtractor",
    "SymbolLike",
    "aliases",
    "extract_link_mappings",
    "full_path",
    "is_constructor_leaf",
]
