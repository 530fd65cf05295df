"""
Enumerations for the challenge planner.

This module defines the closed set of outcome scenarios and the CLI output
formats. Both inherit from str so they serialize to JSON without extra work.
"""

from enum import Enum


class OutcomeScenario(str, Enum):
    """
    Fixed scenario leaves of the outcome tree.

    The set is domain-fixed: each member carries a narrative (how many hedge
    wins or losses it assumes) that the payout arithmetic depends on.

    Attributes:
        FULL_PASS: Pass phase 1 and phase 2, two hedge wins.
        PARTIAL_PASS: Pass phase 1, fail phase 2, one hedge win and one loss.
        FULL_FAIL: Fail phase 1, two hedge losses.
        BREAK_EVEN: Fee refunded and hedge flat.
        BEST_CASE: Fast pass with three consecutive hedge wins.

    Examples:
        >>> OutcomeScenario.BEST_CASE.value
        'best_case'
        >>> OutcomeScenario.FULL_FAIL == "full_fail"
        True
    """

    FULL_PASS = "full_pass"
    PARTIAL_PASS = "partial_pass"
    FULL_FAIL = "full_fail"
    BREAK_EVEN = "break_even"
    BEST_CASE = "best_case"


class OutputFormat(str, Enum):
    """
    Report output format enumeration.

    Attributes:
        TEXT: Rich tables for the terminal (default).
        JSON: Machine-readable JSON document.

    Examples:
        >>> OutputFormat.JSON.value
        'json'
        >>> OutputFormat.TEXT == "text"
        True
    """

    TEXT = "text"
    JSON = "json"
