# termcontrast - WCAG contrast checks for ANSI-styled terminal text.
# Copyright (C) 2026 The tincture authors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>
from __future__ import annotations

import logging

from attr import dataclass
from ochre import Color as AnsiColor
from stransi import Ansi, SetAttribute, SetColor
from stransi.attribute import Attribute
from stransi.color import ColorRole

from tincture import RGB, Accessibility, AccessibilityLevel, ColorPair, Color

log = logging.getLogger(__name__)


def _to_rgb(color: AnsiColor | None) -> Color | None:
    if color is None:
        return None
    return RGB(*color)


@dataclass(frozen=True, eq=False)
class StyledSpan:
    text: str
    foreground: Color | None = None
    background: Color | None = None
    reverse: bool = False
    hidden: bool = False

    @property
    def color_pair(self) -> ColorPair:
        # Default terminal colours are unknown, they stay None after reversing.
        if self.reverse:
            return ColorPair(self.background, self.foreground)
        return ColorPair(self.foreground, self.background)


@dataclass
class SGRState:
    fg: Color | None = None
    bg: Color | None = None
    reverse: bool = False
    hidden: bool = False

    def update_attribute(self, attr: Attribute) -> None:
        if attr == Attribute.NORMAL:
            self.fg = None
            self.bg = None
            self.reverse = False
            self.hidden = False
        elif attr == Attribute.REVERSE:
            self.reverse = True
        elif attr == Attribute.NOT_REVERSE:
            self.reverse = False
        elif attr == Attribute.HIDDEN:
            self.hidden = True
        elif attr == Attribute.NOT_HIDDEN:
            self.hidden = False

    def span(self, text: str) -> StyledSpan:
        return StyledSpan(
            text=text,
            foreground=self.fg,
            background=self.bg,
            reverse=self.reverse,
            hidden=self.hidden,
        )


def _ansi_spans(text: str) -> list[StyledSpan]:
    spans = []
    state = SGRState()
    for instruction in Ansi(text).instructions():
        if isinstance(instruction, str):
            spans.append(state.span(instruction))
        elif isinstance(instruction, SetColor):
            if instruction.role == ColorRole.FOREGROUND:
                state.fg = _to_rgb(instruction.color)
            elif instruction.role == ColorRole.BACKGROUND:
                state.bg = _to_rgb(instruction.color)
        elif isinstance(instruction, SetAttribute):
            state.update_attribute(instruction.attribute)
    return spans


def ansi_spans(text: str) -> list[StyledSpan]:
    try:
        return _ansi_spans(text)
    except Exception:
        log.warning("Failed to parse ANSI escapes, treating text as unstyled", exc_info=True)
        return [StyledSpan(text)]


def check_ansi(
    text: str, level: AccessibilityLevel
) -> list[tuple[StyledSpan, Accessibility]]:
    results = []
    for span in ansi_spans(text):
        if span.hidden or not span.text:
            continue
        result = span.color_pair.is_accessible(level)
        log.debug("Span %r is %s at %s", span.text, result.value, level.name)
        results.append((span, result))
    return results


def failing_spans(text: str, level: AccessibilityLevel) -> list[StyledSpan]:
    return [
        span for span, result in check_ansi(text, level) if result == Accessibility.FAIL
    ]
