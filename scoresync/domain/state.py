"""
Normalized running snapshot of the scoreboard.

Every write goes through :meth:`ScoreboardState.update`, which routes each
field through the normalizer for its kind. Nothing else assigns to the
underlying storage, so the numeric invariant (always an integer string,
``"0"`` by default) holds after every mutation.
"""
from __future__ import annotations

from typing import Any, Callable, Iterator, Mapping, Optional

from scoresync.core.text import coerce_numeric, trim_text

NUMERIC_FIELDS: tuple[str, ...] = (
    "period",
    "score_home",
    "score_away",
    "fouls_home",
    "fouls_away",
    "timeouts_home",
    "timeouts_away",
    "downs",
    "yards",
    "los",
)

# Alternative names used by other sports.
FIELD_ALIASES: dict[str, str] = {
    "quarter": "period",
    "play_clock": "shot_clock",
}

POSSESSION_HOME = "H"
POSSESSION_AWAY = "V"

# Attribute name -> wire name, in document order.
WIRE_NAMES: dict[str, str] = {
    "game_clock": "GameClock",
    "period": "Period",
    "shot_clock": "ShotClock",
    "score_away": "ScoreAway",
    "score_home": "ScoreHome",
    "fouls_away": "FoulsAway",
    "fouls_home": "FoulsHome",
    "timeouts_away": "TimeoutsAway",
    "timeouts_home": "TimeoutsHome",
    "downs": "Downs",
    "yards": "Yards",
    "los": "LOS",
    "possession": "Possession",
    "possession_away": "PossessionAway",
    "possession_home": "PossessionHome",
}

DERIVED_FIELDS: frozenset[str] = frozenset({"possession_home", "possession_away"})


def _verbatim(value: Optional[str]) -> str:
    return "" if value is None else str(value)


def field_normalizer(name: str) -> Callable[[Optional[str]], str]:
    """Return the pure normalization rule for a (canonical) field name."""
    if name in NUMERIC_FIELDS:
        return coerce_numeric
    if name == "shot_clock":
        return trim_text
    if name in ("game_clock", "possession"):
        return _verbatim
    raise KeyError(f"Unknown scoreboard field: {name}")


def canonical_field(name: str) -> str:
    name = FIELD_ALIASES.get(name, name)
    if name in DERIVED_FIELDS:
        raise KeyError(f"Scoreboard field '{name}' is derived and read-only")
    if name not in WIRE_NAMES:
        raise KeyError(f"Unknown scoreboard field: {name}")
    return name


class ScoreboardState:
    """
    Mutable scoreboard snapshot shared by the decode and publish stages.

    Attributes are read-only properties; use :meth:`update` to change them.
    """

    def __init__(self) -> None:
        self._values: dict[str, str] = {name: "0" for name in NUMERIC_FIELDS}
        self._values["game_clock"] = "00:00"
        self._values["shot_clock"] = "0"
        self._values["possession"] = ""

    def update(self, updates: Mapping[str, Optional[str]] | None = None, **fields: Optional[str]) -> None:
        """
        Apply a set of field updates, normalizing each value.

        Args:
            updates: Mapping of field name (or alias) to raw text.
            **fields: Further updates given as keyword arguments.

        Raises:
            KeyError: If a field name is unknown or derived. No field is
                changed in that case.
        """
        merged: dict[str, Optional[str]] = dict(updates or {})
        merged.update(fields)
        normalized: dict[str, str] = {}
        for name, value in merged.items():
            canonical = canonical_field(name)
            normalized[canonical] = field_normalizer(canonical)(value)
        self._values.update(normalized)

    # --- stored fields ---
    @property
    def game_clock(self) -> str:
        return self._values["game_clock"]

    @property
    def period(self) -> str:
        return self._values["period"]

    quarter = period

    @property
    def shot_clock(self) -> str:
        return self._values["shot_clock"]

    play_clock = shot_clock

    @property
    def score_home(self) -> str:
        return self._values["score_home"]

    @property
    def score_away(self) -> str:
        return self._values["score_away"]

    @property
    def fouls_home(self) -> str:
        return self._values["fouls_home"]

    @property
    def fouls_away(self) -> str:
        return self._values["fouls_away"]

    @property
    def timeouts_home(self) -> str:
        return self._values["timeouts_home"]

    @property
    def timeouts_away(self) -> str:
        return self._values["timeouts_away"]

    @property
    def downs(self) -> str:
        return self._values["downs"]

    @property
    def yards(self) -> str:
        return self._values["yards"]

    @property
    def los(self) -> str:
        return self._values["los"]

    @property
    def possession(self) -> str:
        return self._values["possession"]

    # --- derived fields ---
    @property
    def possession_home(self) -> str:
        return "1" if self.possession == POSSESSION_HOME else ""

    @property
    def possession_away(self) -> str:
        return "1" if self.possession == POSSESSION_AWAY else ""

    def values(self) -> dict[str, str]:
        """All fields keyed by wire name, in document order."""
        return {wire: getattr(self, name) for name, wire in WIRE_NAMES.items()}

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.values().items())

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ScoreboardState):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in self._values.items())
        return f"{self.__class__.__name__}({fields})"
