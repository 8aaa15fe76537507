from scoresync.publishing.document import DOCUMENT_TYPE, OcrDocument, OcrValues, serialize_state
from scoresync.publishing.gate import ChangeGate, publish_if_changed

__all__ = ["DOCUMENT_TYPE", "ChangeGate", "OcrDocument", "OcrValues", "publish_if_changed", "serialize_state"]
