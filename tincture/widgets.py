"""Contrast checks bound to UI widget-like values.

These are plain immutable descriptions of a widget's colours, not live
widgets. Toolkit-specific code builds them from its own widgets.
"""


from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from .color_pair import ColorPair
from .levels import Accessibility, AccessibilityLevel
from .spaces import Color


class ControlState(Enum):
    """Interaction states of a control."""

    NORMAL = "normal"
    HIGHLIGHTED = "highlighted"
    DISABLED = "disabled"
    SELECTED = "selected"
    FOCUSED = "focused"


@dataclass(frozen=True)
class Label:
    """
    A text label with a text colour and a background colour.

    >>> from tincture.spaces import BLUE, GREEN
    >>> Label(BLUE, GREEN).is_accessible(AccessibilityLevel.AA_NORMAL)
    <Accessibility.PASS: 'pass'>
    >>> Label(BLUE, None).is_accessible(AccessibilityLevel.AA_NORMAL)
    <Accessibility.UNDEFINED: 'undefined'>
    """

    text_color: Optional[Color] = None
    background_color: Optional[Color] = None

    @property
    def color_pair(self) -> Optional[ColorPair]:
        """Return the text/background pair, or None if either colour is unset."""
        if self.text_color is None or self.background_color is None:
            return None
        return ColorPair(self.text_color, self.background_color)

    def is_accessible(self, level: AccessibilityLevel) -> Accessibility:
        pair = self.color_pair
        if pair is None:
            return Accessibility.UNDEFINED
        return pair.is_accessible(level)


@dataclass(frozen=True)
class Button:
    """
    A control with one background colour and a title colour per state.

    A state without its own title colour uses the NORMAL one. The title
    colours are copied into a read-only mapping, so changing the mapping the
    button was built from does not change the button.
    """

    background_color: Optional[Color] = None
    title_colors: Mapping[ControlState, Color] = field(
        default_factory=dict, hash=False
    )

    def __post_init__(self) -> None:
        """Freeze the title colours."""
        object.__setattr__(
            self, "title_colors", MappingProxyType(dict(self.title_colors))
        )

    def title_color(self, state: ControlState) -> Optional[Color]:
        """Return the title colour shown in the given state."""
        color = self.title_colors.get(state)
        if color is None:
            color = self.title_colors.get(ControlState.NORMAL)
        return color

    def with_title_color(self, color: Color, state: ControlState) -> "Button":
        """Return a copy of the button with the title colour set for a state."""
        return replace(self, title_colors={**self.title_colors, state: color})

    def color_pair(self, state: ControlState) -> Optional[ColorPair]:
        """Return the title/background pair for a state, or None if unset."""
        title_color = self.title_color(state)
        if title_color is None or self.background_color is None:
            return None
        return ColorPair(title_color, self.background_color)

    def is_accessible(
        self, level: AccessibilityLevel, state: ControlState
    ) -> Accessibility:
        """Return whether the button meets the level in the given state."""
        pair = self.color_pair(state)
        if pair is None:
            return Accessibility.UNDEFINED
        return pair.is_accessible(level)
