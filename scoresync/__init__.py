from scoresync.domain import ScoreboardState
from scoresync.parsing.framing import FrameReader, FrameReadError, read_frame
from scoresync.parsing.layouts import ClockFormat, PatternTable, build_pattern_table
from scoresync.publishing import ChangeGate, publish_if_changed, serialize_state
from scoresync.sync_app import SyncPipeline, SyncSettings
from scoresync.sync import SyncRunner
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "ChangeGate",
    "ClockFormat",
    "FrameReadError",
    "FrameReader",
    "PatternTable",
    "ScoreboardState",
    "SyncPipeline",
    "SyncRunner",
    "SyncSettings",
    "build_pattern_table",
    "publish_if_changed",
    "read_frame",
    "serialize_state",
]

try:
    __version__ = version("scoresync")
except PackageNotFoundError:
    __version__ = "0.0.0"
