"""WCAG 2.x colour contrast checks."""


__version__ = "0.1.0"


__all__ = [
    "BLACK",
    "BLUE",
    "CLEAR",
    "GREEN",
    "RED",
    "RGB",
    "WHITE",
    "Accessibility",
    "AccessibilityLevel",
    "Button",
    "Clear",
    "Color",
    "ColorPair",
    "ControlState",
    "Label",
    "assess",
    "contrast_ratio",
    "is_accessible",
    "relative_luminance",
]


from .color_pair import ColorPair
from .contrast import assess, contrast_ratio, is_accessible
from .levels import Accessibility, AccessibilityLevel
from .spaces import BLACK, BLUE, CLEAR, GREEN, RED, RGB, WHITE, Clear, Color, relative_luminance
from .widgets import Button, ControlState, Label
