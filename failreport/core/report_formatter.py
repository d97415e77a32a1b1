"""
Report Formatter
================
THE SINGLE SOURCE OF TRUTH for structured interaction-failure reports.

STRICT DETERMINISM CONTRACT:
  - This module NEVER mutates the ErrorRecord it is given.
  - This module NEVER holds state between calls.
  - Given the same record, it ALWAYS returns the exact same output string.

INTEGRATION CONTRACT:
  Callers supply an ErrorRecord. classify() selects the ordered fields for its
  (domain, code); assemble() renders each field whose evidence is present.

  Block rendering:
    reason               → {message}
    recovery_suggestion  → {recovery_suggestion}
    element_matcher      → Element Matcher:\\n{matcher}
    criteria             → Assertion Criteria: {criteria}   (own block)
                           Action Name: {action}            (own block)
    search_action_info   → Search API Info\\n{info}
    matched_elements     → Elements Matched:\\n\\n1. {d0}\\n2. {d1}...
    failed_constraints   → Failed Constraint(s):\\n{constraints}
    element_description  → Element Description:\\n{element}
    nested_error         → Underlying Error:\\n{nested.describe()}
    ui_hierarchy         → header + legend + hierarchy (see utils/hierarchy.py)

  Blocks are joined by exactly one blank line; the report ends with one "\\n".
"""
import logging
from typing import Callable

from failreport.core.config import OBJECT_FORMAT_INDENT
from failreport.core.constants import ErrorDetailKey
from failreport.models.error_record import ErrorRecord
from failreport.parser.classification import (
    FieldFlags,
    ReportField,
    classify,
    should_use_error_formatter,
)
from failreport.utils.hierarchy import render_hierarchy
from failreport.utils.object_formatter import format_dictionary

logger = logging.getLogger(__name__)

BLOCK_SEPARATOR = "\n\n"


# ---------------------------------------------------------------------------
# Block Renderers
# ---------------------------------------------------------------------------
# Each renderer returns the blocks for one field; an empty list means the
# evidence is absent and the field is skipped.
def _reason_blocks(record: ErrorRecord) -> list[str]:
    # The reason is the one field that is never omitted.
    return [record.message]


def _recovery_suggestion_blocks(record: ErrorRecord) -> list[str]:
    return [record.recovery_suggestion] if record.recovery_suggestion else []


def _element_matcher_blocks(record: ErrorRecord) -> list[str]:
    if not record.element_matcher_description:
        return []
    return [f"{ErrorDetailKey.ELEMENT_MATCHER}:\n{record.element_matcher_description}"]


def _criteria_blocks(record: ErrorRecord) -> list[str]:
    blocks = []
    if record.assertion_criteria:
        blocks.append(f"{ErrorDetailKey.ASSERTION_CRITERIA}: {record.assertion_criteria}")
    if record.action_name:
        blocks.append(f"{ErrorDetailKey.ACTION_NAME}: {record.action_name}")
    return blocks


def _search_action_info_blocks(record: ErrorRecord) -> list[str]:
    if not record.search_action_info:
        return []
    return [f"{ErrorDetailKey.SEARCH_ACTION_INFO}\n{record.search_action_info}"]


def _matched_elements_blocks(record: ErrorRecord) -> list[str]:
    """
    One-based numbered list in discovery order.

    The blank line after the list is the block separator, so when this is the
    last block the report ends "N. dN\\n" with no extra blank line.
    """
    if not record.matched_element_descriptions:
        return []
    numbered = "\n".join(
        f"{index}. {description}"
        for index, description in enumerate(record.matched_element_descriptions, start=1)
    )
    return [f"{ErrorDetailKey.ELEMENTS_MATCHED}:\n\n{numbered}"]


def _failed_constraints_blocks(record: ErrorRecord) -> list[str]:
    if not record.failed_constraint_descriptions:
        return []
    return [f"{ErrorDetailKey.FAILED_CONSTRAINTS}:\n{record.failed_constraint_descriptions}"]


def _element_description_blocks(record: ErrorRecord) -> list[str]:
    if not record.element_description:
        return []
    return [f"{ErrorDetailKey.ELEMENT_DESCRIPTION}:\n{record.element_description}"]


def _nested_error_blocks(record: ErrorRecord) -> list[str]:
    if record.nested_error is None:
        return []
    # Display form only; the nested record is never re-classified.
    return [f"{ErrorDetailKey.UNDERLYING_ERROR}:\n{record.nested_error.describe()}"]


def _ui_hierarchy_blocks(record: ErrorRecord) -> list[str]:
    hierarchy = render_hierarchy(record.ui_hierarchy_text)
    return [hierarchy] if hierarchy else []


_BLOCK_RENDERERS: dict[str, Callable[[ErrorRecord], list[str]]] = {
    ReportField.REASON:              _reason_blocks,
    ReportField.RECOVERY_SUGGESTION: _recovery_suggestion_blocks,
    ReportField.ELEMENT_MATCHER:     _element_matcher_blocks,
    ReportField.CRITERIA:            _criteria_blocks,
    ReportField.SEARCH_ACTION_INFO:  _search_action_info_blocks,
    ReportField.MATCHED_ELEMENTS:    _matched_elements_blocks,
    ReportField.FAILED_CONSTRAINTS:  _failed_constraints_blocks,
    ReportField.ELEMENT_DESCRIPTION: _element_description_blocks,
    ReportField.NESTED_ERROR:        _nested_error_blocks,
    ReportField.UI_HIERARCHY:        _ui_hierarchy_blocks,
}


# ---------------------------------------------------------------------------
# Core Assembly
# ---------------------------------------------------------------------------
def render_blocks(flags: FieldFlags, record: ErrorRecord) -> list[str]:
    """
    Render the present blocks for the given field set, in field-set order.

    Parameters
    ----------
    flags  : FieldFlags  — ordered fields from classify().
    record : ErrorRecord — evidence bag, read only.

    Returns
    -------
    list[str]
        One entry per emitted block; absent evidence contributes nothing.
    """
    blocks: list[str] = []
    for field in flags.fields:
        blocks.extend(_BLOCK_RENDERERS[field](record))
    return blocks


def assemble(flags: FieldFlags, record: ErrorRecord) -> str:
    """
    Assemble the structured report for a classified error.

    Output format:
        {block 1}\\n\\n{block 2}\\n\\n ... {block N}\\n

    Parameters
    ----------
    flags  : FieldFlags  — ordered fields from classify().
    record : ErrorRecord — evidence bag, read only.

    Returns
    -------
    str
        The report, terminated by a single trailing newline.
    """
    blocks = render_blocks(flags, record)
    logger.debug("Assembled %s report with %d block(s)", flags.category, len(blocks))
    return BLOCK_SEPARATOR.join(blocks) + "\n"


# ---------------------------------------------------------------------------
# Convenience: End-to-End Helpers
# ---------------------------------------------------------------------------
def format_error_report(record: ErrorRecord) -> str:
    """
    Classify the record and assemble its structured report.

    Raises UnsupportedClassificationError for any (domain, code) outside the
    three structured categories.
    """
    return assemble(classify(record.domain, record.code), record)


def formatted_description_for_error(
    record: ErrorRecord,
    indent: int = OBJECT_FORMAT_INDENT,
) -> str:
    """
    Describe any error: structured report when supported, generic dump otherwise.

    Upstream failure handlers should call THIS function rather than choosing
    between format_error_report() and the dictionary dump themselves.
    """
    if should_use_error_formatter(record.domain, record.code):
        return format_error_report(record)
    logger.debug(
        "No structured field set for (%s, %s); using generic dump", record.domain, record.code
    )
    return format_dictionary(
        record.description_dictionary(),
        indent=indent,
        hide_empty=True,
    )
