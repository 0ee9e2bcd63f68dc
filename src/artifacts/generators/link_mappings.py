"""Link-mapping artifact generator."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from artifacts.models.link_mappings import LinkMapping, LinkMappingDoc
from artifacts.utils import _load_json, _write_json
from contract.artifacts import LINK_MAPPING_VERSION
from linkmap.extract import LinkMappingExtractor
from reflection.deserialize import load_project
from reflection.urls import assign_urls
from rules.config import LinkMapConfig

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class LinkMappingsGenerator:
    """Generates a link-mapping document from a reflection JSON file."""

    @property
    def name(self) -> str:
        """Generator name for logging and identification."""
        return "link_mappings"

    def build(
        self, data: Any, config: LinkMapConfig | None = None
    ) -> tuple[LinkMappingDoc, dict[str, Any]]:
        """Build the document for already-parsed reflection JSON."""
        if config is None:
            config = LinkMapConfig()

        project = load_project(data)
        url_mappings = assign_urls(project)

        extractor = LinkMappingExtractor(
            constructor_name=config.constructor_name,
        )
        for mapping in url_mappings:
            extractor.visit(mapping.model)

        records: list[LinkMapping] = extractor.mappings
        doc = LinkMappingDoc(
            version=LINK_MAPPING_VERSION,
            namespaces=list(config.namespaces),
            link_mappings=(
                list(records)
                if config.include_default_label
                else [record.to_legacy() for record in records]
            ),
        )
        summary = {
            "project": project.name,
            "page_count": len(url_mappings),
            "mapping_count": len(records),
            "duplicate_count": extractor.skipped,
        }
        return doc, summary

    def generate(
        self,
        input_path: Path,
        output_path: Path,
        **kwargs: Any,
    ) -> tuple[list[dict[str, Any]], dict[str, Any]]:
        """Generate the link-mapping artifact."""
        config: LinkMapConfig | None = kwargs.get("config")

        data = _load_json(input_path)
        doc, summary = self.build(data, config)

        _write_json(output_path, doc)
        logger.info(
            "%s: wrote %d mappings for %r to %s",
            self.name,
            summary["mapping_count"],
            summary["project"],
            output_path,
        )

        mapping_dicts = [m.model_dump(by_alias=True) for m in doc.link_mappings]
        return mapping_dicts, summary
