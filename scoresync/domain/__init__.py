"""
Domain model for the scoreboard: the normalized state snapshot and the
field tables that describe it.
"""
from scoresync.domain.state import (
    FIELD_ALIASES,
    NUMERIC_FIELDS,
    WIRE_NAMES,
    ScoreboardState,
    field_normalizer,
)

__all__ = ["FIELD_ALIASES", "NUMERIC_FIELDS", "WIRE_NAMES", "ScoreboardState", "field_normalizer"]
