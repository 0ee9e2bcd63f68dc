"""Link-mapping models exposed at the document contract boundary."""

from artifacts.models.link_mappings import (
    LegacyLinkMapping,
    LinkMapping,
    LinkMappingDoc,
)

__all__ = ["LegacyLinkMapping", "LinkMapping", "LinkMappingDoc"]
