"""Tests for the surgical SVG edit applier."""

from __future__ import annotations

from svgprep.models.edit_ops import ROOT_TARGET, EditOp
from svgprep.svg.edit_applier import apply_edits
from svgprep.svg.parser import parse_svg
from tests.conftest import BAR_CHART_SVG, SMILEY_SVG, TRACED_SVG


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _apply(svg: str, ops: list[EditOp]) -> str:
    return apply_edits(svg, ops, parse_svg(svg))


# ---------------------------------------------------------------------------
# 1. Attribute edits
# ---------------------------------------------------------------------------

class TestSetAndRemove:
    def test_set_adds_attribute(self):
        doc = parse_svg(BAR_CHART_SVG)
        target = doc.shapes[0].id
        result = apply_edits(BAR_CHART_SVG, [EditOp(action="set", target=target, attributes={"id": target})], doc)
        assert f'<line x1="18" x2="18" y1="20" y2="10" id="{target}" />' in result

    def test_untouched_elements_byte_identical(self):
        doc = parse_svg(BAR_CHART_SVG)
        target = doc.shapes[0].id
        result = apply_edits(BAR_CHART_SVG, [EditOp(action="set", target=target, attributes={"stroke": "red"})], doc)
        assert '<line x1="12" x2="12" y1="20" y2="4"/>' in result
        assert '<line x1="6" x2="6" y1="20" y2="14"/>' in result

    def test_ops_on_same_target_merge(self):
        ops = [
            EditOp(action="set", target=ROOT_TARGET, attributes={"viewBox": "0 0 24 24"}),
            EditOp(action="remove", target=ROOT_TARGET, names=["width", "height"]),
            EditOp(action="set", target=ROOT_TARGET, attributes={"class": "icon"}),
        ]
        result = _apply(SMILEY_SVG, ops)
        root = parse_svg(result).root_attributes
        assert "width" not in root and "height" not in root
        assert root["class"] == "icon"
        assert result.count("<svg") == 1

    def test_no_op_edit_leaves_text_alone(self):
        ops = [EditOp(action="set", target=ROOT_TARGET, attributes={"viewBox": "0 0 24 24"})]
        assert _apply(SMILEY_SVG, ops) == SMILEY_SVG

    def test_value_escaping(self):
        doc = parse_svg(BAR_CHART_SVG)
        target = doc.shapes[0].id
        result = apply_edits(
            BAR_CHART_SVG, [EditOp(action="set", target=target, attributes={"data-label": 'a "b" & <c>'})], doc
        )
        assert 'data-label="a &quot;b&quot; &amp; &lt;c>"' in result
        assert parse_svg(result).shapes[0].attributes["data-label"] == 'a "b" & <c>'

    def test_unknown_target_skipped(self):
        ops = [EditOp(action="set", target="nope", attributes={"x": "1"})]
        assert _apply(SMILEY_SVG, ops) == SMILEY_SVG


# ---------------------------------------------------------------------------
# 2. Structural edits
# ---------------------------------------------------------------------------

class TestUnwrapAndDelete:
    def test_unwrap_removes_group_tags_only(self):
        result = _apply(TRACED_SVG, [EditOp(action="unwrap", target="anim_g_0")])
        assert '<path d="M10 10 L90 10 L90 90 Z" fill="#FF6B6B"/>' in result
        doc = parse_svg(result)
        assert [s.tag for s in doc.shapes] == ["path", "g"]

    def test_unwrap_wins_over_set(self):
        ops = [
            EditOp(action="set", target="anim_g_0", attributes={"id": "anim_g_0"}),
            EditOp(action="unwrap", target="anim_g_0"),
        ]
        result = _apply(TRACED_SVG, ops)
        assert "anim_g_0" not in result

    def test_unwrap_non_group_skipped(self):
        doc = parse_svg(TRACED_SVG)
        assert apply_edits(TRACED_SVG, [EditOp(action="unwrap", target="anim_path_1")], doc) == TRACED_SVG

    def test_delete_span(self):
        start = TRACED_SVG.index("<title>")
        end = start + len("<title></title>")
        result = _apply(TRACED_SVG, [EditOp(action="delete_span", span=(start, end))])
        assert "<title>" not in result

    def test_invalid_span_skipped(self):
        result = _apply(TRACED_SVG, [EditOp(action="delete_span", span=(10, 5))])
        assert result == TRACED_SVG

    def test_overlapping_splices_keep_the_later_one(self):
        doc = parse_svg(TRACED_SVG)
        start, end = doc.shapes[0].source_span
        ops = [
            EditOp(action="delete_span", span=(start - 2, end)),
            EditOp(action="delete_span", span=(start, end + 2)),
        ]
        result = apply_edits(TRACED_SVG, ops, doc)
        assert len(result) == len(TRACED_SVG) - (end + 2 - start)


# ---------------------------------------------------------------------------
# 3. Grouping
# ---------------------------------------------------------------------------

LAYERS_SVG = (
    '<svg viewBox="0 0 10 10">'
    '<path id="a" d="M0 0 L1 1" fill="red"/>'
    '<circle id="c" r="1"/>'
    '<path id="b" d="M0 0 L2 2" fill="red"><title>b</title><!-- x --></path>'
    "</svg>"
)


class TestGroup:
    def test_members_move_into_new_group(self):
        op = EditOp(action="group", names=["a", "b"], attributes={"id": "g0", "fill": "red"})
        result = _apply(LAYERS_SVG, [op])
        assert result == (
            '<svg viewBox="0 0 10 10">'
            '<g id="g0" fill="red"><path id="a" d="M0 0 L1 1" fill="red"/>'
            '<path id="b" d="M0 0 L2 2" fill="red"><title>b</title><!-- x --></path></g>'
            '<circle id="c" r="1"/>'
            "</svg>"
        )

    def test_member_edits_carried_into_group(self):
        ops = [
            EditOp(action="group", names=["b", "a"], attributes={"id": "g0"}),
            EditOp(action="remove", target="a", names=["fill"]),
            EditOp(action="set", target="b", attributes={"data-length": "2.83"}),
        ]
        doc = parse_svg(_apply(LAYERS_SVG, ops))
        group = doc.get_element("g0")
        assert [child.id for child in group.children] == ["a", "b"]
        assert "fill" not in group.children[0].attributes
        assert group.children[1].attributes["data-length"] == "2.83"

    def test_deletions_inside_members_applied(self):
        doc = parse_svg(LAYERS_SVG)
        comment = LAYERS_SVG.index("<!-- x -->")
        ops = [
            EditOp(action="delete_span", span=(comment, comment + len("<!-- x -->"))),
            EditOp(action="group", names=["a", "b"], attributes={"id": "g0"}),
        ]
        result = apply_edits(LAYERS_SVG, ops, doc)
        assert "<!--" not in result
        assert result.count("<path") == 2

    def test_unknown_members_skipped(self):
        result = _apply(LAYERS_SVG, [EditOp(action="group", names=["nope"], attributes={"id": "g0"})])
        assert result == LAYERS_SVG
