from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from scoresync.domain.state import ScoreboardState

DOCUMENT_TYPE = "ocr"


class OcrValues(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    game_clock: str = Field("00:00", alias="GameClock")
    period: str = Field("0", alias="Period")
    shot_clock: str = Field("0", alias="ShotClock")
    score_away: str = Field("0", alias="ScoreAway")
    score_home: str = Field("0", alias="ScoreHome")
    fouls_away: str = Field("0", alias="FoulsAway")
    fouls_home: str = Field("0", alias="FoulsHome")
    timeouts_away: str = Field("0", alias="TimeoutsAway")
    timeouts_home: str = Field("0", alias="TimeoutsHome")
    downs: str = Field("0", alias="Downs")
    yards: str = Field("0", alias="Yards")
    los: str = Field("0", alias="LOS")
    possession: str = Field("", alias="Possession")
    possession_away: str = Field("", alias="PossessionAway")
    possession_home: str = Field("", alias="PossessionHome")


class OcrDocument(BaseModel):
    type: Literal["ocr"] = DOCUMENT_TYPE
    values: OcrValues

    @classmethod
    def from_state(cls, state: ScoreboardState) -> "OcrDocument":
        return cls(values=OcrValues.model_validate(state.values()))


def serialize_state(state: ScoreboardState) -> str:
    """
    Render the canonical wire document for ``state``.

    The output is compact JSON with keys in a fixed order and a trailing
    newline, so two states with the same contents always produce the same
    text.
    """
    return OcrDocument.from_state(state).model_dump_json(by_alias=True) + "\n"
