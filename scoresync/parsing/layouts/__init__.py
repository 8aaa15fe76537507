"""
Fixed-width frame layouts and the ordered table that dispatches frames to them.
"""
from scoresync.parsing.layouts.decode import (
    CLOCK_FIELDS,
    CLOCK_TAG,
    FULL_FIELDS,
    FULL_TAG,
    ClockFormat,
    build_pattern_table,
    clock_frame_pattern,
    decode_clock_frame,
    decode_full_frame,
    format_clock,
    full_frame_pattern,
)
from scoresync.parsing.layouts.pattern import FieldPattern, FieldSpec, PatternTable

__all__ = [
    "CLOCK_FIELDS",
    "CLOCK_TAG",
    "FULL_FIELDS",
    "FULL_TAG",
    "ClockFormat",
    "FieldPattern",
    "FieldSpec",
    "PatternTable",
    "build_pattern_table",
    "clock_frame_pattern",
    "decode_clock_frame",
    "decode_full_frame",
    "format_clock",
    "full_frame_pattern",
]
