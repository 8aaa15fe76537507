from scoresync.transports.tcp.transport import DISABLED_TARGET, TcpPublisher, create_publisher, is_disabled_target

__all__ = ["DISABLED_TARGET", "TcpPublisher", "create_publisher", "is_disabled_target"]
