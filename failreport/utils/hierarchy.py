"""
UI Hierarchy Renderer
=====================
Wraps a captured UI hierarchy snapshot with a header and a fixed marker legend.

Output (parts joined by a single newline):
    UI Hierarchy (ordered by window level, back to front):
    <blank>
    Legend: {
      "[Window 1]" : "Back-Most Window",
      "[AX]" : "Accessibility",
      "[UIE]" : "User Interaction Enabled"
    }
    <blank>
    <hierarchy text, verbatim>

Windows arrive already ordered back to front from the capture layer and are
never reordered here.
"""
from typing import Optional

from failreport.core.config import OBJECT_FORMAT_INDENT
from failreport.core.constants import (
    HIERARCHY_HEADER,
    HIERARCHY_LEGEND,
    HIERARCHY_LEGEND_LABEL,
)
from failreport.utils.object_formatter import format_dictionary


def format_legend(indent: int = OBJECT_FORMAT_INDENT) -> str:
    """Return the 'Legend: {...}' line listing the three hierarchy markers."""
    labels = dict(HIERARCHY_LEGEND)
    key_order = [marker for marker, _ in HIERARCHY_LEGEND]
    legend = format_dictionary(labels, indent=indent, hide_empty=False, key_order=key_order)
    return f"{HIERARCHY_LEGEND_LABEL}: {legend}\n"


def render_hierarchy(
    hierarchy_text: Optional[str],
    indent: int = OBJECT_FORMAT_INDENT,
) -> Optional[str]:
    """
    Render the UI hierarchy section.

    Returns None when no hierarchy was captured, so the caller omits the
    header, legend and body together.
    """
    if not hierarchy_text:
        return None
    return "\n".join([HIERARCHY_HEADER, format_legend(indent), hierarchy_text])
