"""
Object Formatter
================
Pretty-prints dictionaries as brace-delimited key/value blocks for console output.

Output shape (indent=2):
    {
      "key" : "value",
      "count" : 3,
      "items" : [
        "first",
        "second"
      ]
    }

Rules:
    - Strings are wrapped in double quotes and NOT escaped, so multi-line
      values (hierarchies, stack frames) stay readable.
    - Numbers are printed bare; None prints as null.
    - Nested dicts and lists are rendered recursively one level deeper.
    - Given the same inputs, the output is always identical.
"""
from typing import Any, Iterable, Mapping, Optional

from failreport.core.config import OBJECT_FORMAT_INDENT


def _is_empty(value: Any) -> bool:
    """Return True for values hidden by hide_empty (None, "", empty containers)."""
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


def _ordered_keys(dictionary: Mapping, key_order: Optional[Iterable[str]]) -> list:
    if key_order is None:
        return list(dictionary.keys())
    ordered = [key for key in key_order if key in dictionary]
    remaining = sorted((key for key in dictionary if key not in ordered), key=str)
    return ordered + remaining


def _format_value(value: Any, indent: int, depth: int, hide_empty: bool) -> str:
    if isinstance(value, Mapping):
        return _format_mapping(value, indent, depth, hide_empty, None)
    if isinstance(value, (list, tuple)):
        return _format_sequence(value, indent, depth, hide_empty)
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return f'"{value}"'


def _format_sequence(items, indent: int, depth: int, hide_empty: bool) -> str:
    if not items:
        return "[]"
    pad = " " * (indent * (depth + 1))
    close_pad = " " * (indent * depth)
    lines = [pad + _format_value(item, indent, depth + 1, hide_empty) for item in items]
    return "[\n" + ",\n".join(lines) + "\n" + close_pad + "]"


def _format_mapping(
    dictionary: Mapping,
    indent: int,
    depth: int,
    hide_empty: bool,
    key_order: Optional[Iterable[str]],
) -> str:
    pad = " " * (indent * (depth + 1))
    close_pad = " " * (indent * depth)
    lines = []
    for key in _ordered_keys(dictionary, key_order):
        value = dictionary[key]
        if hide_empty and _is_empty(value):
            continue
        lines.append(f'{pad}"{key}" : {_format_value(value, indent, depth + 1, hide_empty)}')
    if not lines:
        return "{}"
    return "{\n" + ",\n".join(lines) + "\n" + close_pad + "}"


def format_dictionary(
    dictionary: Optional[Mapping],
    indent: int = OBJECT_FORMAT_INDENT,
    hide_empty: bool = False,
    key_order: Optional[Iterable[str]] = None,
) -> str:
    """
    Render a mapping as a brace-delimited block of "key" : value lines.

    Parameters
    ----------
    dictionary : Mapping | None
        The mapping to render. None renders the same as an empty mapping.
    indent : int
        Spaces added per nesting level.
    hide_empty : bool
        Drop keys whose value is None, "" or an empty container, at every level.
    key_order : Iterable[str] | None
        Keys printed first, in this order. Keys missing from the mapping are
        skipped. Remaining keys follow in sorted order. When None, the
        mapping's own insertion order is kept.

    Returns
    -------
    str
        The formatted block, or "{}" when nothing is left to print.
    """
    if indent < 0:
        raise ValueError(f"indent must be >= 0, got {indent}")
    if not dictionary:
        return "{}"
    return _format_mapping(dictionary, indent, 0, hide_empty, key_order)
