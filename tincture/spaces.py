"""Objects representing opaque colours and the clear marker."""


from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from . import colorsys


class Color(ABC, Iterable[float]):
    """Abstract base class for colours."""

    @property
    @abstractmethod
    def rgb(self) -> Optional["RGB"]:
        """Return the colour as an RGB object, or None if it has no channels."""
        raise NotImplementedError()

    @property
    def is_clear(self) -> bool:
        """Return True if the colour cannot be resolved to channel values."""
        return self.rgb is None

    def __eq__(self, other: object) -> bool:
        """Return True if both colours resolve to the same RGB channels."""
        if not isinstance(other, Color):
            return NotImplemented
        self_rgb, other_rgb = self.rgb, other.rgb
        if self_rgb is None or other_rgb is None:
            return self_rgb is other_rgb
        return tuple(self_rgb) == tuple(other_rgb)

    def __hash__(self) -> int:
        """Return the hash of the colour."""
        self_rgb = self.rgb
        return hash(None if self_rgb is None else tuple(self_rgb))

    def __iter__(self) -> Iterator[float]:
        """Return an iterator over the colour's RGB channels."""
        self_rgb = self.rgb
        if self_rgb is None:
            raise ValueError(f"{self!r} has no channel values")
        yield self_rgb.red
        yield self_rgb.green
        yield self_rgb.blue

    @property
    def relative_luminance(self) -> Optional[float]:
        """Return the relative luminance of the colour as defined in WCAG 2.x."""
        self_rgb = self.rgb
        if self_rgb is None:
            return None
        return colorsys.rgb_to_relative_luminance(*self_rgb)


@dataclass(frozen=True, eq=False)
class RGB(Color):
    """
    An opaque sRGB colour.

    Channels are nominally in the range `[0, 1]`. They are neither clamped nor
    rounded, so out-of-range values are extrapolated by the luminance formula.

    >>> RGB(0, 0, 1).relative_luminance  # doctest: +NUMBER
    0.0722
    """

    red: float
    green: float
    blue: float

    @property
    def rgb(self) -> "RGB":
        """Return the colour as an RGB object."""
        return self


@dataclass(frozen=True, eq=False)
class Clear(Color):
    """
    A colour with no resolvable channels, such as an unset or transparent one.

    >>> CLEAR.relative_luminance is None
    True
    """

    def __repr__(self) -> str:
        return "CLEAR"

    @property
    def rgb(self) -> None:
        """Return None, the clear colour has no channels."""
        return None


CLEAR = Clear()

BLACK = RGB(0.0, 0.0, 0.0)
WHITE = RGB(1.0, 1.0, 1.0)
RED = RGB(1.0, 0.0, 0.0)
GREEN = RGB(0.0, 1.0, 0.0)
BLUE = RGB(0.0, 0.0, 1.0)


def is_indeterminate(color: Optional[Color]) -> bool:
    """Return True for an unset (None) or clear colour."""
    return color is None or color.is_clear


def relative_luminance(color: Optional[Color]) -> Optional[float]:
    """
    Return the relative luminance of a colour, or None if it is undefined.

    >>> relative_luminance(WHITE)  # doctest: +NUMBER
    1.0
    >>> relative_luminance(None) is None
    True
    """
    if color is None:
        return None
    return color.relative_luminance
