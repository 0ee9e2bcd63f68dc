"""Link-mapping document contract definitions.

This module defines the stable boundary with the link rewriter that consumes
the generated document.
"""

from __future__ import annotations

from dataclasses import dataclass

# Forward-compatibility tag read by the link rewriter.
LINK_MAPPING_VERSION = 0

# Symbol-naming ecosystems the mappings apply to (fixed, not derived from input).
DEFAULT_NAMESPACES: tuple[str, ...] = ("typescript", "ts", "typedoc")

# Default output filename.
LINK_MAPPING_JSON = "link_mapping.json"


@dataclass(frozen=True)
class LinkMappingDocSpec:
    """Top-level keys of the link-mapping document, in serialization order."""

    version_key: str = "version"
    namespaces_key: str = "namespaces"
    mappings_key: str = "linkMappings"

    @property
    def keys(self) -> tuple[str, ...]:
        return (self.version_key, self.namespaces_key, self.mappings_key)


LINK_MAPPING_DOC_SPEC = LinkMappingDocSpec()
