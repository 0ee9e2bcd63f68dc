from __future__ import annotations

from typing import TYPE_CHECKING

from artifacts.generators import LinkMappingsGenerator
from rules.config import load_config

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
    """Generate the link-mapping document for a reflection JSON file.

    Args:
        input_path: Reflection JSON document to read
        output_path: Where to write the link-mapping document
        root: Directory holding linkmap.toml (default: input file's directory)
        config: Optional configuration; loaded from ``root`` when omitted

    Returns:
        Dictionary with counts and the written output path.
    """
    if config is None:
        config = load_config(root if root is not None else input_path.parent)

    _, summary = LinkMappingsGenerator().generate(
        input_path=input_path,
        output_path=output_path,
        config=config,
    )

    return {**summary, "output": str(output_path)}
