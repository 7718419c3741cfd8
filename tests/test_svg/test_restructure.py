"""Tests for structural tree rewrites and removable-markup detection."""

from __future__ import annotations

from svgprep.svg.cleanup import find_removable_spans
from svgprep.svg.parser import parse_svg
from svgprep.svg.primitives import Circle, Group, Path, Rect
from svgprep.svg.restructure import GROUP_MARKER, flatten_single_child_groups, group_sibling_paths
from tests.conftest import TRACED_SVG


class TestFlattenGroups:
    def test_single_child_group_unwrapped(self):
        doc = parse_svg(TRACED_SVG)
        shapes, removed = flatten_single_child_groups(doc.shapes)
        assert isinstance(shapes[0], Path)
        assert [g.id for g in removed] == ["anim_g_0"]

    def test_group_with_attributes_kept(self):
        doc = parse_svg('<svg><g id="keep"><rect width="1" height="1"/></g></svg>')
        shapes, removed = flatten_single_child_groups(doc.shapes)
        assert isinstance(shapes[0], Group)
        assert removed == []

    def test_multi_child_group_kept(self):
        doc = parse_svg(TRACED_SVG)
        shapes, _ = flatten_single_child_groups(doc.shapes)
        assert isinstance(shapes[1], Group)
        assert len(shapes[1].children) == 2

    def test_nested_wrappers_collapse_bottom_up(self):
        doc = parse_svg("<svg><g><g><g><rect width='2' height='2'/></g></g></g></svg>")
        shapes, removed = flatten_single_child_groups(doc.shapes)
        assert len(shapes) == 1 and isinstance(shapes[0], Rect)
        assert len(removed) == 3
        assert removed[-1].id == "anim_g_0"

    def test_input_not_mutated(self):
        doc = parse_svg(TRACED_SVG)
        before = doc.shapes
        flatten_single_child_groups(doc.shapes)
        assert doc.shapes is before
        assert isinstance(doc.shapes[0], Group)

    def test_empty_group_kept(self):
        doc = parse_svg("<svg><g/></svg>")
        shapes, removed = flatten_single_child_groups(doc.shapes)
        assert isinstance(shapes[0], Group) and removed == []

    def test_group_with_title_kept(self):
        doc = parse_svg('<svg><g><title>Wheel</title><circle cx="5" cy="5" r="3"/></g></svg>')
        shapes, removed = flatten_single_child_groups(doc.shapes)
        assert isinstance(shapes[0], Group)
        assert removed == []

    def test_group_with_skipped_sibling_kept(self):
        doc = parse_svg('<svg><g><circle r="-1"/><rect width="2" height="2"/></g></svg>')
        assert len(doc.shapes[0].children) == 1
        shapes, removed = flatten_single_child_groups(doc.shapes)
        assert isinstance(shapes[0], Group) and removed == []

    def test_outer_wrapper_around_titled_group_kept(self):
        doc = parse_svg("<svg><g><g><desc>wheel</desc><rect width='2' height='2'/></g></g></svg>")
        shapes, removed = flatten_single_child_groups(doc.shapes)
        # the outer wrapper holds a single group element and collapses onto it
        assert [g.id for g in removed] == ["anim_g_0"]
        assert isinstance(shapes[0], Group) and shapes[0].id == "anim_g_1"


class TestRemovableSpans:
    def test_comment_metadata_and_empty_title(self):
        spans = find_removable_spans(TRACED_SVG)
        removed = [TRACED_SVG[a:b] for a, b in spans]
        assert removed[0] == "<!-- Generator: tracer 1.0 -->"
        assert removed[1].startswith("<metadata>") and removed[1].endswith("</metadata>")
        assert removed[2] == "<title></title>"
        assert len(spans) == 3

    def test_non_empty_title_kept(self):
        assert find_removable_spans("<svg><title>Logo</title><desc/></svg>") == [(24, 31)]

    def test_nested_spans_merged(self):
        svg = "<svg><metadata><!-- note --></metadata></svg>"
        assert find_removable_spans(svg) == [(5, 39)]


def _by_fill(path: Path) -> str:
    return path.fill or "none"


def _make_group(key: str, members: tuple[Path, ...]) -> Group:
    return Group(id=f"group-{key}", tag="g", attributes={"id": f"group-{key}", GROUP_MARKER: "color"}, children=members)


class TestGroupSiblingPaths:
    SVG = (
        "<svg>"
        '<path id="a" d="M0 0 L1 1" fill="red"/>'
        '<circle id="c" r="1"/>'
        '<path id="b" d="M0 0 L2 2" fill="blue"/>'
        '<g id="inner" transform="scale(2)"><path id="d" d="M0 0 L3 3" fill="red"/></g>'
        '<path id="e" d="M0 0 L4 4" fill="red"/>'
        "</svg>"
    )

    def test_groups_take_first_member_position(self):
        shapes, created = group_sibling_paths(parse_svg(self.SVG).shapes, _by_fill, _make_group)
        assert [s.id for s in shapes] == ["group-red", "c", "group-blue", "inner"]
        assert [m.id for m in shapes[0].children] == ["a", "e"]
        assert isinstance(shapes[1], Circle)

    def test_paths_only_join_siblings(self):
        shapes, created = group_sibling_paths(parse_svg(self.SVG).shapes, _by_fill, _make_group)
        inner = shapes[3]
        assert [child.id for child in inner.children] == ["group-red"]
        assert [m.id for m in inner.children[0].children] == ["d"]
        # document order: root groups, then the nested one
        assert [[m.id for m in g.children] for g in created] == [["a", "e"], ["b"], ["d"]]

    def test_marked_groups_left_alone(self):
        svg = f'<svg><g id="done" {GROUP_MARKER}="color"><path id="a" d="M0 0 L1 1"/></g></svg>'
        doc = parse_svg(svg)
        shapes, created = group_sibling_paths(doc.shapes, _by_fill, _make_group)
        assert created == []
        assert shapes == doc.shapes
