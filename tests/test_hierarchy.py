"""
Unit Tests — UI Hierarchy Renderer
===================================
Hierarchy presence law: the section appears iff hierarchy text is present,
and always carries the three legend markers in fixed order.
"""
from failreport.core.constants import (
    HIERARCHY_AX_MARKER,
    HIERARCHY_HEADER,
    HIERARCHY_UIE_MARKER,
    HIERARCHY_WINDOW_MARKER,
)
from failreport.utils.hierarchy import format_legend, render_hierarchy

HIERARCHY = "========== Window 1 ==========\n<UIWindow:0x1; AX=N; AX.frame={{0, 0}, {375, 812}}>"

EXPECTED_LEGEND = (
    "Legend: {\n"
    '  "[Window 1]" : "Back-Most Window",\n'
    '  "[AX]" : "Accessibility",\n'
    '  "[UIE]" : "User Interaction Enabled"\n'
    "}\n"
)


class TestLegend:

    def test_exact_legend(self):
        assert format_legend(indent=2) == EXPECTED_LEGEND

    def test_marker_order(self):
        legend = format_legend(indent=2)
        assert (
            legend.index(HIERARCHY_WINDOW_MARKER)
            < legend.index(HIERARCHY_AX_MARKER)
            < legend.index(HIERARCHY_UIE_MARKER)
        )


class TestRenderHierarchy:

    def test_absent_hierarchy_returns_none(self):
        assert render_hierarchy(None) is None

    def test_empty_hierarchy_returns_none(self):
        assert render_hierarchy("") is None

    def test_exact_section(self):
        expected = (
            "UI Hierarchy (ordered by window level, back to front):\n"
            "\n"
            + EXPECTED_LEGEND
            + "\n"
            + HIERARCHY
        )
        assert render_hierarchy(HIERARCHY, indent=2) == expected

    def test_starts_with_header(self):
        assert render_hierarchy(HIERARCHY).startswith(HIERARCHY_HEADER)

    def test_hierarchy_text_verbatim_at_end(self):
        assert render_hierarchy(HIERARCHY).endswith(HIERARCHY)

    def test_windows_not_reordered(self):
        text = "== Window 1 ==\nback\n== Window 2 ==\nfront"
        out = render_hierarchy(text)
        assert out.index("Window 1 ==") < out.index("Window 2 ==")
