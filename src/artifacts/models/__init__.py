"""Model namespace for link-mapping artifact schemas."""

from artifacts.models.link_mappings import (
    LegacyLinkMapping,
    LinkMapping,
    LinkMappingDoc,
)

__all__ = ["LegacyLinkMapping", "LinkMapping", "LinkMappingDoc"]
