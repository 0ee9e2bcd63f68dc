"""Artifact generation entry points."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from rules.config import LinkMapConfig


def generate_link_mappings(
    *,
    input_path: Path,
    output_path: Path,
    root: Path | None = None,
    config: LinkMapConfig | None = None,
) -> dict[str, object]:
    """Generate link mappings via lazy import to avoid package import cycles."""
    from artifacts.write import generate_link_mappings as _generate_link_mappings

    return _generate_link_mappings(
        input_path=input_path, output_path=output_path, root=root, config=config
    )


__all__ = ["generate_link_mappings"]
