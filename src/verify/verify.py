"""Determinism verification for link-mapping documents."""

from __future__ import annotations

import filecmp
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from artifacts.write import generate_link_mappings

if TYPE_CHECKING:
    from rules.config import LinkMapConfig


@dataclass(frozen=True)
class DeterminismResult:
    ok: bool
    output_path: str
    regenerated_count: int = 0


def verify_determinism(
    *,
    input_path: Path,
    output_path: Path,
    root: Path | None = None,
    config: LinkMapConfig | None = None,
) -> DeterminismResult:
    """Verify that a written link-mapping document is reproducible.

    Regenerates the document from ``input_path`` into a temporary file and
    compares it byte-for-byte against ``output_path``.

    Args:
        input_path: Reflection JSON document the output was generated from.
        output_path: Existing link-mapping document to verify.
        root: Directory holding linkmap.toml.
        config: Optional configuration; loaded from ``root`` when omitted.

    Returns:
        DeterminismResult with ok status and the number of regenerated
        mappings.

    Raises:
        FileNotFoundError: If output_path does not exist.
        IsADirectoryError: If output_path is a directory.
    """
    if not output_path.exists():
        msg = f"Link-mapping file does not exist: {output_path}"
        raise FileNotFoundError(msg)
    if output_path.is_dir():
        msg = f"Link-mapping path is a directory: {output_path}"
        raise IsADirectoryError(msg)

    with tempfile.TemporaryDirectory() as temp_dir:
        regenerated_path = Path(temp_dir) / output_path.name
        summary = generate_link_mappings(
            input_path=input_path,
            output_path=regenerated_path,
            root=root,
            config=config,
        )
        ok = filecmp.cmp(output_path, regenerated_path, shallow=False)

    mapping_count = summary.get("mapping_count", 0)
    return DeterminismResult(
        ok=ok,
        output_path=str(output_path),
        regenerated_count=mapping_count if isinstance(mapping_count, int) else 0,
    )
