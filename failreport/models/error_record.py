"""
Error Record Model
==================
Pydantic model for the evidence bag attached to a UI-interaction failure.
This is the contract between the interaction layer that detects a failure and
every formatter that renders it.

Fields:
    domain                          — origin of the failure (e.g. INTERACTION_ERROR_DOMAIN)
    code                            — category code within the domain
    message                         — primary human-readable description (the "reason")
    recovery_suggestion             — how the test author might fix the failure
    element_matcher_description     — description of the matcher used to select the element
    search_action_info              — pre-formatted sub-report from a failed search action
    matched_element_descriptions    — one entry per matched element, discovery order
    failed_constraint_descriptions  — constraints the element did not satisfy
    element_description             — description of the element involved
    assertion_criteria / action_name — what was being asserted or performed
    nested_error                    — causally-prior ErrorRecord (single owner, never cyclic)
    stack_trace                     — call stack frames at the failure
    screenshots                     — ScreenshotKey label → image reference
    ui_hierarchy_text               — pre-rendered UI hierarchy snapshot

Invocation Site Fields:
    file_path / line / function_name — where the failing call was made
    test_case_class_name / test_case_method_name

Records are frozen: formatters treat them as read-only snapshots.
"""
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from failreport.core.config import OBJECT_FORMAT_INDENT
from failreport.core.constants import (
    SCREENSHOT_KEY_ORDER,
    SCREENSHOT_KEYS,
    ErrorDetailKey,
    ErrorKey,
)
from failreport.utils.object_formatter import format_dictionary


class ErrorRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    # --- Classification ---
    domain: str
    code: int
    message: str

    # --- Interaction evidence ---
    recovery_suggestion: Optional[str] = None
    element_matcher_description: Optional[str] = None
    search_action_info: Optional[str] = None
    matched_element_descriptions: Optional[List[str]] = None
    failed_constraint_descriptions: Optional[str] = None
    element_description: Optional[str] = None
    assertion_criteria: Optional[str] = None
    action_name: Optional[str] = None
    nested_error: Optional["ErrorRecord"] = None

    # --- Capture artefacts ---
    stack_trace: Optional[List[str]] = None
    screenshots: Optional[Dict[str, str]] = None
    ui_hierarchy_text: Optional[str] = None

    # --- Invocation site ---
    file_path: Optional[str] = None
    line: Optional[int] = None
    function_name: Optional[str] = None
    test_case_class_name: Optional[str] = None
    test_case_method_name: Optional[str] = None

    @field_validator("screenshots")
    @classmethod
    def validate_screenshot_keys(cls, v: Optional[Dict[str, str]]) -> Optional[Dict[str, str]]:
        if v is None:
            return v
        unknown = sorted(key for key in v if key not in SCREENSHOT_KEYS)
        if unknown:
            raise ValueError(
                f"Unknown screenshot key(s) {unknown}. "
                f"Allowed keys: {list(SCREENSHOT_KEY_ORDER)}"
            )
        return v

    def ordered_screenshots(self) -> Optional[Dict[str, str]]:
        """Screenshots re-keyed into the canonical display order."""
        if self.screenshots is None:
            return None
        return {key: self.screenshots[key] for key in SCREENSHOT_KEY_ORDER if key in self.screenshots}

    def description_dictionary(self) -> dict:
        """
        Ordered display-key → value mapping of everything this record carries.

        A nested error contributes its own description dictionary, so a chain
        of any depth dumps as nested blocks without re-classification.
        """
        return {
            ErrorKey.DOMAIN: self.domain,
            ErrorKey.CODE: self.code,
            ErrorKey.DESCRIPTION: self.message,
            ErrorDetailKey.RECOVERY_SUGGESTION: self.recovery_suggestion,
            ErrorDetailKey.ELEMENT_MATCHER: self.element_matcher_description,
            ErrorDetailKey.ASSERTION_CRITERIA: self.assertion_criteria,
            ErrorDetailKey.ACTION_NAME: self.action_name,
            ErrorDetailKey.SEARCH_ACTION_INFO: self.search_action_info,
            ErrorDetailKey.ELEMENTS_MATCHED: self.matched_element_descriptions,
            ErrorDetailKey.FAILED_CONSTRAINTS: self.failed_constraint_descriptions,
            ErrorDetailKey.ELEMENT_DESCRIPTION: self.element_description,
            ErrorKey.FILE_PATH: self.file_path,
            ErrorKey.LINE: self.line,
            ErrorKey.FUNCTION_NAME: self.function_name,
            ErrorKey.TEST_CASE_CLASS: self.test_case_class_name,
            ErrorKey.TEST_CASE_METHOD: self.test_case_method_name,
            ErrorKey.STACK_TRACE: self.stack_trace,
            ErrorKey.APP_SCREENSHOTS: self.ordered_screenshots(),
            ErrorKey.APP_UI_HIERARCHY: self.ui_hierarchy_text,
            ErrorKey.NESTED_ERROR: (
                self.nested_error.description_dictionary() if self.nested_error else None
            ),
        }

    def describe(self, indent: int = OBJECT_FORMAT_INDENT) -> str:
        """Plain-text display form: the description dictionary with empty values hidden."""
        return format_dictionary(self.description_dictionary(), indent=indent, hide_empty=True)


ErrorRecord.model_rebuild()
