from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Iterable, Mapping, Optional

from scoresync.domain.state import ScoreboardState

FieldUpdates = dict[str, Optional[str]]
DecodeFn = Callable[[Mapping[str, str]], FieldUpdates]


@dataclass(frozen=True)
class FieldSpec:
    name: str
    width: int

    def __post_init__(self) -> None:
        if self.width < 1:
            raise ValueError(f"field '{self.name}' must be at least one character wide")


@dataclass(frozen=True)
class FieldPattern:
    """
    A fixed-width frame layout.

    Attributes:
        name: Human-readable layout name, used in logs.
        tag: Leading character identifying the layout.
        fields: Positional fields following the tag.
        decode: Pure function turning the carved sub-fields into state updates.
    """
    name: str
    tag: str
    fields: tuple[FieldSpec, ...]
    decode: DecodeFn
    _regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.tag) != 1:
            raise ValueError("layout tag must be a single character")
        groups = "".join(f"(?P<{spec.name}>.{{{spec.width}}})" for spec in self.fields)
        object.__setattr__(self, "_regex", re.compile(re.escape(self.tag) + groups, re.DOTALL))

    @property
    def length(self) -> int:
        """Frame length including the tag."""
        return 1 + sum(spec.width for spec in self.fields)

    def match(self, frame: str) -> Optional[dict[str, str]]:
        """
        Carve ``frame`` into named sub-fields.

        The tag must be the first character of the frame; a frame with
        leading characters before the tag does not match. Characters after
        the last field are ignored.
        """
        m = self._regex.match(frame)
        return m.groupdict() if m else None

    def updates_for(self, frame: str) -> Optional[FieldUpdates]:
        groups = self.match(frame)
        if groups is None:
            return None
        return self.decode(groups)


class PatternTable:
    """Ordered layout dispatch; the first layout that matches a frame wins."""

    def __init__(self, patterns: Iterable[FieldPattern]) -> None:
        self.patterns: tuple[FieldPattern, ...] = tuple(patterns)

    def resolve(self, frame: str) -> Optional[tuple[FieldPattern, FieldUpdates]]:
        for pattern in self.patterns:
            updates = pattern.updates_for(frame)
            if updates is not None:
                return pattern, updates
        return None

    def dispatch(self, frame: str, state: ScoreboardState) -> bool:
        resolved = self.resolve(frame)
        if resolved is None:
            return False
        _, updates = resolved
        state.update(updates)
        return True

    def __len__(self) -> int:
        return len(self.patterns)
