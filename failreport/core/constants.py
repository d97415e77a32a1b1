"""
Constants
Centralised storage for error domains, error codes, and the display keys used
in every rendered report. Downstream assertions match these strings verbatim.
"""

# ---------------------------------------------------------------------------
# Error Domains
# ---------------------------------------------------------------------------
INTERACTION_ERROR_DOMAIN = "ElementInteractionErrorDomain"
GENERIC_ERROR_DOMAIN = "GenericErrorDomain"
GENERIC_ERROR_CODE = 0


class InteractionErrorCode:
    """Error codes raised within INTERACTION_ERROR_DOMAIN."""
    ELEMENT_NOT_FOUND           = 0
    ACTION_FAILED               = 1
    ASSERTION_FAILED            = 2
    MATCHED_INDEX_OUT_OF_BOUNDS = 3
    MULTIPLE_ELEMENTS_MATCHED   = 4
    TIMEOUT                     = 5
    CONSTRAINTS_FAILED          = 6


# ---------------------------------------------------------------------------
# Error Detail Keys (labels of the structured report blocks)
# ---------------------------------------------------------------------------
class ErrorDetailKey:
    RECOVERY_SUGGESTION = "Recovery Suggestion"
    ELEMENT_MATCHER     = "Element Matcher"
    ASSERTION_CRITERIA  = "Assertion Criteria"
    ACTION_NAME         = "Action Name"
    SEARCH_ACTION_INFO  = "Search API Info"
    ELEMENTS_MATCHED    = "Elements Matched"
    FAILED_CONSTRAINTS  = "Failed Constraint(s)"
    ELEMENT_DESCRIPTION = "Element Description"
    UNDERLYING_ERROR    = "Underlying Error"


# ---------------------------------------------------------------------------
# Error Keys (description dictionary keys and fallback exclusion tokens)
# ---------------------------------------------------------------------------
class ErrorKey:
    DOMAIN            = "Error Domain"
    CODE              = "Error Code"
    DESCRIPTION       = "Description"
    FILE_PATH         = "File Path"
    LINE              = "Line"
    FUNCTION_NAME     = "Function Name"
    TEST_CASE_CLASS   = "TestCase Class"
    TEST_CASE_METHOD  = "TestCase Method"
    STACK_TRACE       = "Stack Trace"
    APP_SCREENSHOTS   = "App Screenshots"
    APP_UI_HIERARCHY  = "App UI Hierarchy"
    NESTED_ERROR      = "Nested Error"


# ---------------------------------------------------------------------------
# Screenshot Keys
# ---------------------------------------------------------------------------
class ScreenshotKey:
    BEFORE_ACTION       = "Visible Screenshot Before Action"
    EXPECTED_AFTER      = "Expected Screenshot After Action"
    ACTUAL_AFTER        = "Actual Screenshot After Action"
    APP_AT_FAILURE      = "App Screenshot At Failure"
    TEST_AT_FAILURE     = "Test Screenshot At Failure"


# Display order is fixed regardless of how the screenshots were collected.
SCREENSHOT_KEY_ORDER: tuple[str, ...] = (
    ScreenshotKey.APP_AT_FAILURE,
    ScreenshotKey.TEST_AT_FAILURE,
    ScreenshotKey.BEFORE_ACTION,
    ScreenshotKey.EXPECTED_AFTER,
    ScreenshotKey.ACTUAL_AFTER,
)

SCREENSHOT_KEYS = frozenset(SCREENSHOT_KEY_ORDER)


# ---------------------------------------------------------------------------
# UI Hierarchy Legend
# ---------------------------------------------------------------------------
HIERARCHY_HEADER = "UI Hierarchy (ordered by window level, back to front):\n"
HIERARCHY_LEGEND_LABEL = "Legend"

HIERARCHY_WINDOW_MARKER = "[Window 1]"
HIERARCHY_AX_MARKER = "[AX]"
HIERARCHY_UIE_MARKER = "[UIE]"

HIERARCHY_LEGEND: tuple[tuple[str, str], ...] = (
    (HIERARCHY_WINDOW_MARKER, "Back-Most Window"),
    (HIERARCHY_AX_MARKER,     "Accessibility"),
    (HIERARCHY_UIE_MARKER,    "User Interaction Enabled"),
)

DEFAULT_FAILURE_LABEL = "Failure"
