"""Artifact generators for linkmap-typedoc."""

from artifacts.generators.link_mappings import LinkMappingsGenerator

__all__ = ["LinkMappingsGenerator"]
