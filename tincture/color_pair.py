"""A colour pair of foreground and background colours."""


from dataclasses import dataclass, replace
from typing import Dict, Optional

from . import colorsys
from .levels import Accessibility, AccessibilityLevel
from .spaces import Color, is_indeterminate, relative_luminance


@dataclass(frozen=True)
class ColorPair:
    """
    A colour pair of foreground and background colours.

    The foreground is the primary colour (usually text), the background the
    secondary one. Either may be None or CLEAR, in which case the pair cannot
    be assessed.

    >>> from tincture.spaces import BLUE, GREEN
    >>> pair = ColorPair(BLUE, GREEN)
    >>> pair.contrast_ratio  # doctest: +NUMBER
    6.26
    >>> pair.is_accessible(AccessibilityLevel.AAA_NORMAL)
    <Accessibility.FAIL: 'fail'>
    """

    foreground: Optional[Color] = None
    background: Optional[Color] = None

    @property
    def primary(self) -> Optional[Color]:
        return self.foreground

    @property
    def secondary(self) -> Optional[Color]:
        return self.background

    @property
    def is_indeterminate(self) -> bool:
        """Return True if either colour is unset or clear."""
        return is_indeterminate(self.foreground) or is_indeterminate(self.background)

    @property
    def contrast_ratio(self) -> Optional[float]:
        """
        Return the contrast ratio of the colour pair as defined in WCAG 2.x.

        None is returned when either relative luminance is undefined.
        """
        l1 = relative_luminance(self.foreground)
        l2 = relative_luminance(self.background)
        if l1 is None or l2 is None:
            return None
        return colorsys.contrast_ratio(l1, l2)

    def is_accessible(self, level: AccessibilityLevel) -> Accessibility:
        """Return whether the pair meets the given level."""
        if self.is_indeterminate:
            return Accessibility.UNDEFINED
        ratio = self.contrast_ratio
        if ratio is None:
            return Accessibility.UNDEFINED
        return Accessibility.from_passed(level.is_met_by(ratio))

    def assess(self) -> Dict[AccessibilityLevel, Accessibility]:
        """Return the outcome for every level."""
        return {level: self.is_accessible(level) for level in AccessibilityLevel}

    def swapped(self) -> "ColorPair":
        """Return the pair with foreground and background exchanged."""
        return replace(self, foreground=self.background, background=self.foreground)
