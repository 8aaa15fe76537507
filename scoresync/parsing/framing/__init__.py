from scoresync.parsing.framing.reader import ETX, STX, ByteSource, FrameReadError, FrameReader, read_frame

__all__ = ["ByteSource", "ETX", "FrameReadError", "FrameReader", "STX", "read_frame"]
