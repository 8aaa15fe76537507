from scoresync.sync_app.config import SyncSettings, get_settings
from scoresync.sync_app.logging import RingBufferHandler, create_logger
from scoresync.sync_app.pipeline import SyncPipeline

__all__ = ["RingBufferHandler", "SyncPipeline", "SyncSettings", "create_logger", "get_settings"]
