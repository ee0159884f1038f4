"""Free-function forms of the contrast checks.

Examples
--------
>>> from tincture import contrast
>>> from tincture.spaces import BLACK, WHITE

>>> contrast.contrast_ratio(contrast.ColorPair(BLACK, WHITE))  # doctest: +NUMBER
21.0
>>> contrast.is_accessible(contrast.ColorPair(WHITE, WHITE), AccessibilityLevel.AA_LARGE)
<Accessibility.FAIL: 'fail'>
"""


from typing import Dict, Optional

from .color_pair import ColorPair
from .levels import Accessibility, AccessibilityLevel
from .spaces import relative_luminance

__all__ = [
    "ColorPair",
    "assess",
    "contrast_ratio",
    "is_accessible",
    "relative_luminance",
]


def contrast_ratio(pair: ColorPair) -> Optional[float]:
    """Return the contrast ratio of the pair, or None if it is not computable."""
    return pair.contrast_ratio


def is_accessible(pair: ColorPair, level: AccessibilityLevel) -> Accessibility:
    """Return PASS or FAIL for the level, or UNDEFINED for an indeterminate pair."""
    return pair.is_accessible(level)


def assess(pair: ColorPair) -> Dict[AccessibilityLevel, Accessibility]:
    """Return the outcome of the pair for every level."""
    return pair.assess()
