from __future__ import annotations

import json
from pathlib import Path

import pytest

from reflection.deserialize import ReflectionError, load_project
from reflection.kinds import ReflectionKind
from reflection.models import SymbolNode
from reflection.urls import anchor_for, assign_urls

FIXTURE = Path(__file__).parent / "fixtures" / "widgets.json"


def _load_fixture() -> dict[str, object]:
    return json.loads(FIXTURE.read_text(encoding="utf-8"))


def _by_name(node: SymbolNode, name: str) -> SymbolNode:
    return next(child for child in node.children if child.name == name)


def test_load_project_wires_parents_and_keeps_order() -> None:
    project = load_project(_load_fixture())

    assert project.kind == ReflectionKind.PROJECT
    assert project.is_project
    assert project.parent is None
    assert [c.name for c in project.children] == [
        "Widget",
        "shapes",
        "Color",
        "createWidget",
        "Shape",
    ]

    widget = _by_name(project, "Widget")
    assert widget.parent is project
    assert [c.name for c in widget.children] == ["constructor", "render", "size"]
    assert all(c.parent is widget for c in widget.children)
    assert widget.id == 1


def test_load_project_rejects_non_project_root() -> None:
    with pytest.raises(ReflectionError, match="must be a project"):
        load_project({"id": 1, "name": "Widget", "kind": 128})


def test_load_project_rejects_non_object() -> None:
    with pytest.raises(ReflectionError, match="JSON object"):
        load_project([1, 2, 3])


def test_load_project_rejects_unknown_kind() -> None:
    with pytest.raises(ReflectionError, match="Invalid reflection document"):
        load_project({"name": "p", "kind": 1, "children": [{"name": "x", "kind": 3}]})


def test_load_project_keeps_preassigned_urls() -> None:
    project = load_project(
        {
            "name": "p",
            "kind": 1,
            "children": [{"name": "A", "kind": 128, "url": "custom/A.html"}],
        }
    )

    mappings = assign_urls(project)

    assert project.children[0].url == "custom/A.html"
    assert [m.url for m in mappings] == ["index.html", "custom/A.html"]


def test_assign_urls_pages_and_anchors() -> None:
    project = load_project(_load_fixture())

    mappings = assign_urls(project)

    assert [m.url for m in mappings] == [
        "index.html",
        "classes/Widget.html",
        "modules/shapes.html",
        "classes/shapes.Circle.html",
        "enums/Color.html",
        "functions/createWidget.html",
    ]
    assert mappings[0].model is project

    widget = _by_name(project, "Widget")
    assert [c.url for c in widget.children] == [
        "classes/Widget.html#constructor",
        "classes/Widget.html#render",
        "classes/Widget.html#size",
    ]
    circle = _by_name(_by_name(project, "shapes"), "Circle")
    assert _by_name(circle, "radius").url == "classes/shapes.Circle.html#radius"
    assert _by_name(_by_name(project, "Color"), "Red").url == "enums/Color.html#red"


def test_assign_urls_leaves_references_undocumented() -> None:
    project = load_project(_load_fixture())

    assign_urls(project)

    assert _by_name(project, "Shape").url is None


def test_assign_urls_deduplicates_anchors_within_page() -> None:
    project = load_project(
        {
            "name": "p",
            "kind": 1,
            "children": [
                {
                    "name": "A",
                    "kind": 128,
                    "children": [
                        {"name": "get", "kind": 2048},
                        {"name": "Get", "kind": 1024},
                    ],
                }
            ],
        }
    )

    assign_urls(project)

    assert [c.url for c in project.children[0].children] == [
        "classes/A.html#get",
        "classes/A.html#get-1",
    ]


def test_anchor_for_replaces_unsafe_characters() -> None:
    assert anchor_for("[Symbol.iterator]") == "_symbol_iterator_"
    assert anchor_for("") == "_"


def test_load_project_requires_name() -> None:
    with pytest.raises(ReflectionError, match="Invalid reflection document"):
        load_project({"name": "p", "kind": 1, "children": [{"id": 3, "kind": 128}]})


def test_load_project_rejects_empty_member_name() -> None:
    data = {
        "name": "p",
        "kind": 1,
        "children": [
            {
                "id": 1,
                "name": "A",
                "kind": 128,
                "children": [{"id": 2, "name": "", "kind": 1024}],
            }
        ],
    }

    with pytest.raises(ReflectionError, match="id 2.*empty name"):
        load_project(data)


def test_load_project_allows_unnamed_project() -> None:
    project = load_project({"name": "", "kind": 1})

    assert project.name == ""
    assert project.is_project
