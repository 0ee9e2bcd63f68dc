"""Link-mapping record models.

This module contains the records written to the link-mapping document and
the document envelope itself.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from contract.artifacts import DEFAULT_NAMESPACES, LINK_MAPPING_VERSION


class LegacyLinkMapping(BaseModel):
    """Lean record shape without a default label (compatibility variant)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    link_destination: str = Field(alias="linkDestination", min_length=1)
    relative_url: str = Field(alias="relativeURL", min_length=1)


class LinkMapping(LegacyLinkMapping):
    """Maps one alias a reader may write to the page documenting the symbol."""

    default_label: str = Field(
        alias="defaultLabel",
        description="Local name of the symbol, used as link text",
    )

    def to_legacy(self) -> LegacyLinkMapping:
        return LegacyLinkMapping(
            link_destination=self.link_destination,
            relative_url=self.relative_url,
        )


class LinkMappingDoc(BaseModel):
    """Versioned envelope around the flat list of link mappings."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    version: int = Field(default=LINK_MAPPING_VERSION)
    namespaces: list[str] = Field(
        default_factory=lambda: list(DEFAULT_NAMESPACES), min_length=1
    )
    link_mappings: list[LinkMapping | LegacyLinkMapping] = Field(
        default_factory=list, alias="linkMappings"
    )

    def to_json_dict(self) -> dict[str, object]:
        return self.model_dump(by_alias=True)


__all__ = ["LegacyLinkMapping", "LinkMapping", "LinkMappingDoc"]
