"""Tests for contrast checks on ANSI-styled text."""

from __future__ import annotations

import logging
from unittest.mock import patch

from termcontrast import ansi_spans, check_ansi, failing_spans
from termcontrast.spans import StyledSpan
from tincture import BLACK, WHITE, Accessibility, AccessibilityLevel

FG_BLACK = "\x1b[38;2;0;0;0m"
FG_WHITE = "\x1b[38;2;255;255;255m"
BG_WHITE = "\x1b[48;2;255;255;255m"
RESET = "\x1b[0m"
REVERSE = "\x1b[7m"
HIDDEN = "\x1b[8m"


class TestAnsiSpans:
    """Splitting styled text into runs."""

    def test_plain_text_has_no_colours(self):
        spans = ansi_spans("hello")
        assert [span.text for span in spans] == ["hello"]
        assert spans[0].foreground is None
        assert spans[0].background is None

    def test_colours_are_tracked(self):
        spans = ansi_spans(f"{FG_BLACK}{BG_WHITE}dark{RESET}plain")
        assert [span.text for span in spans] == ["dark", "plain"]
        assert spans[0].foreground == BLACK
        assert spans[0].background == WHITE
        assert spans[1].foreground is None
        assert spans[1].background is None

    def test_reverse_swaps_roles(self):
        span = StyledSpan("x", foreground=BLACK, background=WHITE, reverse=True)
        assert span.color_pair.foreground == WHITE
        assert span.color_pair.background == BLACK

    def test_reverse_keeps_default_colours_unset(self):
        span = StyledSpan("x", foreground=BLACK, reverse=True)
        assert span.color_pair.foreground is None
        assert span.color_pair.background == BLACK

    def test_bold_does_not_change_colours(self):
        spans = ansi_spans(f"{FG_BLACK}{BG_WHITE}\x1b[1mbold")
        assert [span.text for span in spans] == ["bold"]
        assert spans[0].foreground == BLACK
        assert spans[0].background == WHITE
        assert not hasattr(spans[0], "bold")

    def test_parse_failure_falls_back_to_plain_text(self, caplog):
        with patch("termcontrast.spans.Ansi", side_effect=RuntimeError("boom")):
            with caplog.at_level(logging.WARNING, logger="termcontrast.spans"):
                spans = ansi_spans("\x1b[31mred")
        assert len(spans) == 1
        assert spans[0].text == "\x1b[31mred"
        assert "Failed to parse ANSI escapes" in caplog.text


class TestCheckAnsi:
    """Assessing every visible run."""

    def test_black_on_white_passes(self):
        results = check_ansi(f"{FG_BLACK}{BG_WHITE}text", AccessibilityLevel.AAA_NORMAL)
        assert [result for _, result in results] == [Accessibility.PASS]

    def test_default_colours_are_undefined(self):
        results = check_ansi("text", AccessibilityLevel.AA_NORMAL)
        assert [result for _, result in results] == [Accessibility.UNDEFINED]

    def test_reverse_with_one_default_colour_is_undefined(self):
        results = check_ansi(f"{REVERSE}{FG_BLACK}text", AccessibilityLevel.AA_NORMAL)
        assert [result for _, result in results] == [Accessibility.UNDEFINED]

    def test_hidden_text_is_skipped(self):
        results = check_ansi(
            f"{FG_WHITE}{BG_WHITE}{HIDDEN}secret", AccessibilityLevel.AA_NORMAL
        )
        assert results == []

    def test_failing_spans(self):
        text = f"{FG_BLACK}{BG_WHITE}ok{FG_WHITE}invisible{RESET}plain"
        failing = failing_spans(text, AccessibilityLevel.AA_LARGE)
        assert [span.text for span in failing] == ["invisible"]
