"""WCAG conformance levels and the outcome of checking a colour pair."""


from enum import Enum
from typing import Optional, Text


class AccessibilityLevel(Enum):
    """
    A WCAG 2.x contrast target.

    Large text is at least 18pt, or 14pt bold.

    >>> AccessibilityLevel.AA_NORMAL.threshold
    4.5
    >>> AccessibilityLevel.of("AAA", large=True)
    <AccessibilityLevel.AAA_LARGE: ('AAA', True, 4.5)>
    """

    AA_NORMAL = ("AA", False, 4.5)
    AA_LARGE = ("AA", True, 3.0)
    AAA_NORMAL = ("AAA", False, 7.0)
    AAA_LARGE = ("AAA", True, 4.5)

    def __init__(self, conformance: Text, large: bool, threshold: float) -> None:
        self.conformance = conformance
        self.large = large
        self.threshold = threshold

    @classmethod
    def of(cls, conformance: Text, large: bool) -> "AccessibilityLevel":
        """Return the level for a conformance name and text size."""
        for level in cls:
            if level.conformance == conformance.upper() and level.large == large:
                return level
        raise ValueError(f"{conformance!r} is not a WCAG conformance level")

    def is_met_by(self, ratio: float) -> bool:
        """
        Return True if the contrast ratio is strictly above the threshold.

        >>> AccessibilityLevel.AA_NORMAL.is_met_by(4.5)
        False
        """
        return ratio > self.threshold


class Accessibility(Enum):
    """The three-valued outcome of an accessibility check."""

    PASS = "pass"
    FAIL = "fail"
    UNDEFINED = "undefined"

    @classmethod
    def from_passed(cls, passed: Optional[bool]) -> "Accessibility":
        """Return the outcome for True, False or None."""
        if passed is None:
            return cls.UNDEFINED
        return cls.PASS if passed else cls.FAIL

    @property
    def passed(self) -> Optional[bool]:
        """Return True, False, or None when the outcome is undefined."""
        if self is Accessibility.UNDEFINED:
            return None
        return self is Accessibility.PASS

    def __bool__(self) -> bool:
        raise TypeError(
            f"{self!r} has no truth value, compare it with Accessibility.PASS "
            "or use .passed"
        )
