"""
Fixed-width layouts sent by the scoreboard controller.

Full frame (``F`` + 33 characters)::

    filler(10) home_score(2) home_timeouts(1) filler(10) away_score(2)
    away_timeouts(1) down(1) to_go(2) ball_on(2) possession(1)

Clock frame (``C`` + 8 characters)::

    clock(5) period(1) shot_clock(2)

The five clock digits are ``MMSST``; the tenths digit is only shown by the
``mmss_tenths`` format.
"""
from __future__ import annotations

from enum import Enum
from typing import Mapping

from scoresync.parsing.layouts.pattern import FieldPattern, FieldSpec, FieldUpdates, PatternTable

FULL_TAG = "F"
CLOCK_TAG = "C"

FULL_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("filler_home", 10),
    FieldSpec("score_home", 2),
    FieldSpec("timeouts_home", 1),
    FieldSpec("filler_away", 10),
    FieldSpec("score_away", 2),
    FieldSpec("timeouts_away", 1),
    FieldSpec("downs", 1),
    FieldSpec("yards", 2),
    FieldSpec("los", 2),
    FieldSpec("possession", 1),
)

CLOCK_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("clock", 5),
    FieldSpec("period", 1),
    FieldSpec("shot_clock", 2),
)


class ClockFormat(str, Enum):
    MMSS = "mmss"
    MMSS_TENTHS = "mmss_tenths"


def format_clock(digits: str, clock_format: ClockFormat | str = ClockFormat.MMSS) -> str:
    clock_format = ClockFormat(clock_format)
    text = f"{digits[0:2]}:{digits[2:4]}"
    if clock_format is ClockFormat.MMSS_TENTHS:
        text += f".{digits[4:5]}"
    return text


def decode_full_frame(groups: Mapping[str, str], trim: bool = True) -> FieldUpdates:
    names = ("score_home", "score_away", "timeouts_home", "timeouts_away", "downs", "yards", "los")
    updates: FieldUpdates = {name: groups[name].strip() if trim else groups[name] for name in names}
    updates["possession"] = groups["possession"]
    return updates


def decode_clock_frame(groups: Mapping[str, str], clock_format: ClockFormat | str = ClockFormat.MMSS) -> FieldUpdates:
    return {
        "game_clock": format_clock(groups["clock"], clock_format),
        "period": groups["period"],
        "shot_clock": groups["shot_clock"],
    }


def full_frame_pattern(trim: bool = True) -> FieldPattern:
    return FieldPattern(
        name="full",
        tag=FULL_TAG,
        fields=FULL_FIELDS,
        decode=lambda groups: decode_full_frame(groups, trim=trim),
    )


def clock_frame_pattern(clock_format: ClockFormat | str = ClockFormat.MMSS) -> FieldPattern:
    clock_format = ClockFormat(clock_format)
    return FieldPattern(
        name="clock",
        tag=CLOCK_TAG,
        fields=CLOCK_FIELDS,
        decode=lambda groups: decode_clock_frame(groups, clock_format),
    )


def build_pattern_table(clock_format: ClockFormat | str = ClockFormat.MMSS, trim_fields: bool = True) -> PatternTable:
    """
    Build the standard dispatch table: full frame first, then clock frame.

    Args:
        clock_format: ``mmss`` for ``MM:SS`` or ``mmss_tenths`` for ``MM:SS.T``.
        trim_fields: Strip fixed-width padding while carving fields. When
            False the raw padded text is handed to the state, whose numeric
            coercion tolerates surrounding whitespace.
    """
    return PatternTable([full_frame_pattern(trim=trim_fields), clock_frame_pattern(clock_format)])
