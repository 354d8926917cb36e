import logging
from enum import Enum
from itertools import combinations
from typing import List

from pydantic import BaseModel

from x12_delimiters import Delimiters

logger = logging.getLogger(__name__)


class DelimiterIssueCode(str, Enum):
    DUPLICATE_DELIMITERS = "duplicate_delimiters"
    INVALID_ELEMENT_SEPARATOR = "invalid_element_separator"
    INVALID_SEGMENT_TERMINATOR = "invalid_segment_terminator"
    INVALID_COMPONENT_SEPARATOR = "invalid_component_separator"


class DelimiterIssue(BaseModel):
    """A reason a delimiter set cannot be used to tokenize an interchange."""
    code: DelimiterIssueCode
    message: str


def _is_alphanumeric(char: str) -> bool:
    return char.isascii() and char.isalnum()


def check_delimiters(delimiters: Delimiters) -> List[DelimiterIssue]:
    """
    Performs interchange-level checks on a delimiter set, the way TA1 validation
    inspects the ISA delimiters before trusting anything else in the envelope.
    Returns an empty list when the set is usable.
    """
    issues: List[DelimiterIssue] = []

    def add_issue(code: DelimiterIssueCode, message: str):
        issues.append(DelimiterIssue(code=code, message=message))

    roles = [
        ("segment terminator", delimiters.segment_terminator_char),
        ("element separator", delimiters.element_separator_char),
        ("sub-element separator", delimiters.sub_element_separator_char),
    ]
    for (first_role, first_char), (second_role, second_char) in combinations(roles, 2):
        if first_char == second_char:
            add_issue(
                DelimiterIssueCode.DUPLICATE_DELIMITERS,
                f"The {first_role} and {second_role} are both {first_char!r}.",
            )

    element_sep = delimiters.element_separator_char
    if _is_alphanumeric(element_sep) or element_sep in ('\r', '\n'):
        add_issue(
            DelimiterIssueCode.INVALID_ELEMENT_SEPARATOR,
            f"Element separator {element_sep!r} must not be alphanumeric or a line break.",
        )
    if _is_alphanumeric(delimiters.segment_terminator_char):
        add_issue(
            DelimiterIssueCode.INVALID_SEGMENT_TERMINATOR,
            f"Segment terminator {delimiters.segment_terminator_char!r} must not be alphanumeric.",
        )
    if _is_alphanumeric(delimiters.sub_element_separator_char):
        add_issue(
            DelimiterIssueCode.INVALID_COMPONENT_SEPARATOR,
            f"Sub-element separator {delimiters.sub_element_separator_char!r} must not be alphanumeric.",
        )

    if issues:
        logger.debug(f"Delimiter checks found {len(issues)} issues: {[i.code.value for i in issues]}")
    return issues
