"""
Classification
==============
Maps an error's (domain, code) to the ordered set of report fields that must
be rendered for it.

Supported Categories (all within INTERACTION_ERROR_DOMAIN):
    ELEMENT_NOT_FOUND, MULTIPLE_ELEMENTS_MATCHED, CONSTRAINTS_FAILED

Classification Strategy:
    1. EXPLICIT TABLE — (domain, code) lookup, nothing else
    2. REASON SCAN    — substring check on free-text exception reasons, used
                        only to decide whether the structured formatter applies
    3. Anything else is a caller bug: classify() raises, never degrades

Field order inside each FieldFlags is the order blocks appear in the report.
"""
import logging
from dataclasses import dataclass

from failreport.core.constants import INTERACTION_ERROR_DOMAIN, InteractionErrorCode

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Report Fields
# ---------------------------------------------------------------------------
class ReportField:
    """Identifiers for each optional section of a structured report."""
    REASON              = "reason"
    RECOVERY_SUGGESTION = "recovery_suggestion"
    ELEMENT_MATCHER     = "element_matcher"
    CRITERIA            = "criteria"
    SEARCH_ACTION_INFO  = "search_action_info"
    MATCHED_ELEMENTS    = "matched_elements"
    FAILED_CONSTRAINTS  = "failed_constraints"
    ELEMENT_DESCRIPTION = "element_description"
    NESTED_ERROR        = "nested_error"
    UI_HIERARCHY        = "ui_hierarchy"


class Category:
    ELEMENT_NOT_FOUND         = "element_not_found"
    MULTIPLE_ELEMENTS_MATCHED = "multiple_elements_matched"
    CONSTRAINTS_FAILED        = "constraints_failed"


# ---------------------------------------------------------------------------
# Classification Result
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class FieldFlags:
    """Immutable, ordered set of report fields selected for one error category."""
    category: str
    fields: tuple[str, ...]

    def __contains__(self, field: str) -> bool:
        return field in self.fields


class UnsupportedClassificationError(ValueError):
    """Raised when classify() is handed a (domain, code) with no field set.

    This is a programming error in the caller: route unknown categories to the
    generic dump instead of the structured formatter.
    """


# ---------------------------------------------------------------------------
# 1. Explicit Field-Set Table
# ---------------------------------------------------------------------------
_FIELD_SETS: dict[tuple[str, int], FieldFlags] = {
    (INTERACTION_ERROR_DOMAIN, InteractionErrorCode.ELEMENT_NOT_FOUND): FieldFlags(
        category=Category.ELEMENT_NOT_FOUND,
        fields=(
            ReportField.REASON,
            ReportField.RECOVERY_SUGGESTION,
            ReportField.ELEMENT_MATCHER,
            ReportField.CRITERIA,
            ReportField.SEARCH_ACTION_INFO,
            ReportField.NESTED_ERROR,
            ReportField.UI_HIERARCHY,
        ),
    ),
    (INTERACTION_ERROR_DOMAIN, InteractionErrorCode.MULTIPLE_ELEMENTS_MATCHED): FieldFlags(
        category=Category.MULTIPLE_ELEMENTS_MATCHED,
        fields=(
            ReportField.REASON,
            ReportField.RECOVERY_SUGGESTION,
            ReportField.ELEMENT_MATCHER,
            ReportField.MATCHED_ELEMENTS,
            ReportField.NESTED_ERROR,
            ReportField.UI_HIERARCHY,
        ),
    ),
    (INTERACTION_ERROR_DOMAIN, InteractionErrorCode.CONSTRAINTS_FAILED): FieldFlags(
        category=Category.CONSTRAINTS_FAILED,
        fields=(
            ReportField.REASON,
            ReportField.CRITERIA,
            ReportField.RECOVERY_SUGGESTION,
            ReportField.FAILED_CONSTRAINTS,
            ReportField.ELEMENT_DESCRIPTION,
            ReportField.NESTED_ERROR,
            ReportField.UI_HIERARCHY,
        ),
    ),
}


# ---------------------------------------------------------------------------
# 2. Known Exception Reason Phrases
# ---------------------------------------------------------------------------
ELEMENT_NOT_FOUND_PHRASE = "the desired element was not found"
MULTIPLE_MATCHED_PHRASE = "Multiple elements were matched"
CONSTRAINT_FAILURE_PHRASE = "Cannot perform action due to constraint"

_REASON_PHRASES: tuple[str, ...] = (
    ELEMENT_NOT_FOUND_PHRASE,
    MULTIPLE_MATCHED_PHRASE,
    CONSTRAINT_FAILURE_PHRASE,
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def should_use_error_formatter(domain: str, code: int) -> bool:
    """Return True if (domain, code) has a structured field set."""
    return (domain, code) in _FIELD_SETS


def classify(domain: str, code: int) -> FieldFlags:
    """
    Select the ordered report fields for an error.

    Parameters
    ----------
    domain : str
        The error domain (e.g. INTERACTION_ERROR_DOMAIN).
    code : int
        The error code within that domain.

    Returns
    -------
    FieldFlags
        Frozen dataclass with the category name and its ordered fields.

    Raises
    ------
    UnsupportedClassificationError
        If (domain, code) is not one of the three supported categories.
    """
    flags = _FIELD_SETS.get((domain, code))
    if flags is None:
        logger.error("Error domain %r and code %r not yet supported for formatting", domain, code)
        raise UnsupportedClassificationError(
            f"Error domain '{domain}' and code {code} not yet supported for formatting. "
            f"Supported: domain '{INTERACTION_ERROR_DOMAIN}' with codes "
            f"{sorted(c for _, c in _FIELD_SETS)}"
        )
    logger.debug("Classified (%s, %s) as %s", domain, code, flags.category)
    return flags


def classify_by_reason(reason: str) -> bool:
    """
    Return True if a free-text exception reason belongs to a structured category.

    Used for hand-built errors that carry no domain/code metadata. Matching is
    a case-sensitive substring check against the three known phrases.
    """
    if not reason:
        return False
    return any(phrase in reason for phrase in _REASON_PHRASES)
