from __future__ import annotations

import json
from pathlib import Path

import pytest

from artifacts.generators import LinkMappingsGenerator
from artifacts.write import generate_link_mappings
from contract.artifacts import DEFAULT_NAMESPACES, LINK_MAPPING_VERSION
from contract.validation import validate_link_mapping_doc
from rules.config import LinkMapConfig

FIXTURE = Path(__file__).parent / "fixtures" / "widgets.json"

EXPECTED_DESTINATIONS = [
    ("Widget", "classes/Widget.html"),
    ("Widget.constructor", "classes/Widget.html#constructor"),
    ("Widget.render", "classes/Widget.html#render"),
    ("render", "classes/Widget.html#render"),
    ("Widget.size", "classes/Widget.html#size"),
    ("size", "classes/Widget.html#size"),
    ("shapes", "modules/shapes.html"),
    ("shapes.Circle", "classes/shapes.Circle.html"),
    ("Circle", "classes/shapes.Circle.html"),
    ("shapes.Circle.radius", "classes/shapes.Circle.html#radius"),
    ("Circle.radius", "classes/shapes.Circle.html#radius"),
    ("radius", "classes/shapes.Circle.html#radius"),
    ("shapes.Circle.render", "classes/shapes.Circle.html#render"),
    ("Circle.render", "classes/shapes.Circle.html#render"),
    ("render", "classes/shapes.Circle.html#render"),
    ("Color", "enums/Color.html"),
    ("Color.Red", "enums/Color.html#red"),
    ("Red", "enums/Color.html#red"),
    ("createWidget", "functions/createWidget.html"),
]


def _read(path: Path) -> dict[str, object]:
    return json.loads(path.read_text(encoding="utf-8"))


def test_generate_from_fixture(tmp_path: Path) -> None:
    out = tmp_path / "docs" / "link_mapping.json"

    summary = generate_link_mappings(input_path=FIXTURE, output_path=out, root=tmp_path)

    doc = _read(out)
    assert list(doc) == ["version", "namespaces", "linkMappings"]
    assert doc["version"] == LINK_MAPPING_VERSION
    assert doc["namespaces"] == list(DEFAULT_NAMESPACES)

    mappings = doc["linkMappings"]
    assert isinstance(mappings, list)
    assert [(m["linkDestination"], m["relativeURL"]) for m in mappings] == (
        EXPECTED_DESTINATIONS
    )
    assert all(
        list(m) == ["linkDestination", "relativeURL", "defaultLabel"] for m in mappings
    )
    assert mappings[1]["defaultLabel"] == "constructor"

    assert summary["mapping_count"] == len(EXPECTED_DESTINATIONS)
    assert summary["page_count"] == 6
    assert summary["duplicate_count"] == 27
    assert summary["output"] == str(out)

    assert validate_link_mapping_doc(out).ok


def test_generate_writes_two_space_indent(tmp_path: Path) -> None:
    out = tmp_path / "link_mapping.json"

    generate_link_mappings(input_path=FIXTURE, output_path=out, root=tmp_path)

    text = out.read_text(encoding="utf-8")
    assert text.startswith('{\n  "version": 0,\n  "namespaces": [\n    "typescript",')


def test_generate_never_emits_bare_constructor(tmp_path: Path) -> None:
    out = tmp_path / "link_mapping.json"

    generator = LinkMappingsGenerator()
    records, _ = generator.generate(input_path=FIXTURE, output_path=out)

    assert generator.name == "link_mappings"
    assert all(r["linkDestination"] != "constructor" for r in records)


def test_generate_legacy_shape(tmp_path: Path) -> None:
    out = tmp_path / "link_mapping.json"
    config = LinkMapConfig(include_default_label=False, namespaces=["ts"])

    generate_link_mappings(input_path=FIXTURE, output_path=out, config=config)

    doc = _read(out)
    assert doc["namespaces"] == ["ts"]
    mappings = doc["linkMappings"]
    assert isinstance(mappings, list)
    assert all(list(m) == ["linkDestination", "relativeURL"] for m in mappings)
    assert not validate_link_mapping_doc(out).ok
    assert validate_link_mapping_doc(out, allow_legacy=True).ok


def test_build_is_deterministic() -> None:
    data = _read(FIXTURE)
    generator = LinkMappingsGenerator()

    first, _ = generator.build(data)
    second, _ = generator.build(_read(FIXTURE))

    assert first.to_json_dict() == second.to_json_dict()


def test_generate_reads_config_from_root(tmp_path: Path) -> None:
    (tmp_path / "linkmap.toml").write_text(
        'namespaces = ["typescript"]\n', encoding="utf-8"
    )
    out = tmp_path / "link_mapping.json"

    generate_link_mappings(input_path=FIXTURE, output_path=out, root=tmp_path)

    assert _read(out)["namespaces"] == ["typescript"]


def test_generate_malformed_json_propagates(tmp_path: Path) -> None:
    bad = tmp_path / "types.json"
    bad.write_text("{not json", encoding="utf-8")

    with pytest.raises(ValueError):
        generate_link_mappings(
            input_path=bad, output_path=tmp_path / "out.json", root=tmp_path
        )
    assert not (tmp_path / "out.json").exists()
