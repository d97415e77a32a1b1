"""
Failure Formatter
=================
Generic failure description for errors outside the structured categories, and
for simple hand-built failures raised from test code.

Field sequence (each part joined by a single newline, each excludable):
    {label}: {name}                       — always
    File: {file_path}                     — ErrorKey.FILE_PATH (if present)
    Line: {line}                          — ErrorKey.LINE (if present)
    Function: {function_name}             — ErrorKey.FUNCTION_NAME (if present)
    {error_description}                   — ErrorKey.DESCRIPTION (if present)
    Stack Trace:\\n{frames}               — ErrorKey.STACK_TRACE (if present)
    Screenshots: {screenshot dump}        — ErrorKey.APP_SCREENSHOTS (if present)
    UI hierarchy + legend                 — ErrorKey.APP_UI_HIERARCHY (if present)
"""
import logging
from typing import Collection, Dict, List, Optional

from failreport.core.config import OBJECT_FORMAT_INDENT
from failreport.core.constants import (
    DEFAULT_FAILURE_LABEL,
    GENERIC_ERROR_CODE,
    GENERIC_ERROR_DOMAIN,
    SCREENSHOT_KEY_ORDER,
    ErrorKey,
)
from failreport.models.error_record import ErrorRecord
from failreport.utils.hierarchy import render_hierarchy
from failreport.utils.object_formatter import format_dictionary

logger = logging.getLogger(__name__)

# Parts left out of hand-built failures by format_failure().
DEFAULT_EXCLUSIONS: tuple[str, ...] = (ErrorKey.FILE_PATH, ErrorKey.LINE)


def format_failure_for_error(
    record: ErrorRecord,
    excluding: Collection[str] = (),
    failure_label: Optional[str] = None,
    failure_name: str = "",
    error_description: Optional[str] = None,
    indent: int = OBJECT_FORMAT_INDENT,
) -> str:
    """
    Render the generic failure description for a record.

    Parameters
    ----------
    record : ErrorRecord
        Source of file/line/function, stack trace, screenshots and hierarchy.
    excluding : Collection[str]
        ErrorKey tokens whose parts must be left out.
    failure_label : str | None
        Leading label; empty or None becomes "Failure".
    failure_name : str
        Short name of the failure, printed after the label.
    error_description : str | None
        Free-text description inserted after the location lines.
    indent : int
        Indent for the screenshot and legend dictionary dumps.

    Returns
    -------
    str
        The formatted failure description.
    """
    excluded = frozenset(excluding)
    label = failure_label or DEFAULT_FAILURE_LABEL

    parts: list[str] = [f"{label}: {failure_name}\n"]

    if ErrorKey.FILE_PATH not in excluded and record.file_path:
        parts.append(f"File: {record.file_path}\n")
    if ErrorKey.LINE not in excluded and record.line is not None:
        parts.append(f"Line: {record.line}\n")

    if ErrorKey.FUNCTION_NAME not in excluded and record.function_name:
        parts.append(f"Function: {record.function_name}\n")

    if ErrorKey.DESCRIPTION not in excluded and error_description:
        parts.append(error_description)

    if ErrorKey.STACK_TRACE not in excluded and record.stack_trace:
        frames = "\n".join(record.stack_trace)
        parts.append(f"{ErrorKey.STACK_TRACE}:\n{frames}\n")

    if ErrorKey.APP_SCREENSHOTS not in excluded and record.screenshots:
        screenshots = format_dictionary(
            record.screenshots,
            indent=indent,
            hide_empty=True,
            key_order=SCREENSHOT_KEY_ORDER,
        )
        parts.append(f"Screenshots: {screenshots}\n")

    if ErrorKey.APP_UI_HIERARCHY not in excluded:
        hierarchy = render_hierarchy(record.ui_hierarchy_text, indent=indent)
        if hierarchy:
            parts.append(hierarchy)

    logger.debug("Formatted generic failure '%s' with %d part(s)", failure_name, len(parts))
    return "\n".join(parts)


def format_failure(
    failure_label: Optional[str],
    failure_name: str,
    error_description: Optional[str],
    *,
    file_path: Optional[str] = None,
    line_number: Optional[int] = None,
    function_name: Optional[str] = None,
    stack_trace: Optional[List[str]] = None,
    screenshots: Optional[Dict[str, str]] = None,
    hierarchy: Optional[str] = None,
    test_case_class_name: Optional[str] = None,
    test_case_method_name: Optional[str] = None,
) -> str:
    """
    Convenience wrapper for hand-built failures that have no ErrorRecord yet.

    Builds a generic-domain record from the supplied evidence and formats it
    with file path and line excluded.
    """
    record = ErrorRecord(
        domain=GENERIC_ERROR_DOMAIN,
        code=GENERIC_ERROR_CODE,
        message=error_description or "",
        file_path=file_path,
        line=line_number,
        function_name=function_name,
        stack_trace=stack_trace,
        screenshots=screenshots,
        ui_hierarchy_text=hierarchy,
        test_case_class_name=test_case_class_name,
        test_case_method_name=test_case_method_name,
    )
    return format_failure_for_error(
        record,
        excluding=DEFAULT_EXCLUSIONS,
        failure_label=failure_label,
        failure_name=failure_name,
        error_description=error_description,
    )
