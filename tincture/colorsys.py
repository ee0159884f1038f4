"""Scalar colour conversions used by the contrast checks.

Everything here works on plain channel floats, like the standard
[`colorsys` module](https://docs.python.org/3/library/colorsys.html), which is
re-exported for convenience.

Examples
--------
>>> from tincture import colorsys

sRGB channels are decoded to linear light with the WCAG 2.x transfer function:

>>> colorsys.srgb_to_linear(0.0)
0.0
>>> colorsys.srgb_to_linear(1.0)  # doctest: +NUMBER
1.0
>>> colorsys.srgb_to_linear(0.5)  # doctest: +NUMBER
0.214

and combined into a relative luminance:

>>> colorsys.rgb_to_relative_luminance(1.0, 1.0, 1.0)  # doctest: +NUMBER
1.0
>>> colorsys.rgb_to_relative_luminance(0.0, 0.0, 1.0)  # doctest: +NUMBER
0.0722
"""


from __future__ import annotations

from colorsys import (
    hls_to_rgb,
    hsv_to_rgb,
    rgb_to_hls,
    rgb_to_hsv,
    rgb_to_yiq,
    yiq_to_rgb,
)

__all__ = [
    # Implemented in this module
    "contrast_ratio",
    "rgb_to_relative_luminance",
    "srgb_to_linear",
    # Re-exported from colorsys
    "hls_to_rgb",
    "hsv_to_rgb",
    "rgb_to_hls",
    "rgb_to_hsv",
    "rgb_to_yiq",
    "yiq_to_rgb",
]


def srgb_to_linear(c: float) -> float:
    """Decode an sRGB channel to linear light as defined in WCAG 2.x."""
    if c <= LINEAR_THRESHOLD:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** GAMMA


def rgb_to_relative_luminance(r: float, g: float, b: float) -> float:
    """Return the relative luminance of sRGB coordinates as defined in WCAG 2.x."""
    return (
        RED_WEIGHT * srgb_to_linear(r)
        + GREEN_WEIGHT * srgb_to_linear(g)
        + BLUE_WEIGHT * srgb_to_linear(b)
    )


def contrast_ratio(l1: float, l2: float) -> float:
    """
    Return the contrast ratio between two relative luminances.

    The order of the arguments does not matter.

    >>> contrast_ratio(0.0, 1.0)  # doctest: +NUMBER
    21.0
    >>> contrast_ratio(0.3, 0.3)
    1.0
    """
    if l1 < l2:
        l1, l2 = l2, l1
    return (l1 + FLARE) / (l2 + FLARE)


# WCAG 2.x uses the 0.03928 breakpoint, not the 0.04045 of IEC 61966-2-1.
LINEAR_THRESHOLD = 0.03928
GAMMA = 2.4

# ITU-R BT.709 luma coefficients.
RED_WEIGHT = 0.2126
GREEN_WEIGHT = 0.7152
BLUE_WEIGHT = 0.0722

FLARE = 0.05
