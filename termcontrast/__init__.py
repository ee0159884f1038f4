from .spans import StyledSpan, ansi_spans, check_ansi, failing_spans

__all__ = ["StyledSpan", "ansi_spans", "check_ansi", "failing_spans"]
