import argparse
import sys
from typing import Optional

from scoresync.parsing.framing import FrameReadError
from scoresync.parsing.layouts import ClockFormat
from scoresync.sync_app import SyncPipeline, SyncSettings, create_logger, get_settings
from scoresync.transports.serial_port import SerialByteSource, port_available


class SyncRunner:
    def __init__(self, settings: SyncSettings) -> None:
        self.settings = settings
        self.logger = create_logger(
            "scoresync",
            ring_size=settings.log_ring_size,
            level=settings.log_level,
            stream=True,
        )

    def start(self) -> int:
        port = self.settings.serial_port
        if not port or not port_available(port):
            print(f"Serial port {port} is not available.", file=sys.stderr)
            return 1

        with SerialByteSource(port, baud_rate=self.settings.baud_rate) as source:
            self.logger.info("serial_open", extra={"details": {"port": port, "baud": self.settings.baud_rate}})
            pipeline = SyncPipeline.from_settings(self.settings, source, self.logger)
            try:
                pipeline.run()
            except FrameReadError as exc:
                self.logger.error("serial_read_failed", extra={"details": {"port": port, "error": str(exc)}})
                return 1
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scoresync",
        description="Forward scoreboard controller frames to a TCP consumer as JSON.",
    )
    parser.add_argument("serial_port", type=str, help="Serial port the scoreboard controller is attached to.")
    parser.add_argument("server_address", type=str, help="Target host, or 'none' to disable publishing.")
    parser.add_argument("server_port", type=int, help="Target TCP port.")
    parser.add_argument(
        "--clock-format",
        choices=[fmt.value for fmt in ClockFormat],
        default=None,
        help="Game clock format: MM:SS or MM:SS.T (default: CLOCK_FORMAT or mmss).",
    )
    parser.add_argument(
        "--no-trim",
        dest="trim_fields",
        action="store_const",
        const=False,
        default=None,
        help="Do not strip padding from numeric fields while decoding.",
    )
    parser.add_argument("--log-level", type=str, default=None, help="Logging level (default: LOG_LEVEL or INFO).")
    return parser


def settings_from_args(args: argparse.Namespace, base: Optional[SyncSettings] = None) -> SyncSettings:
    """Layer the positional arguments and any flags given onto the environment settings."""
    base = base if base is not None else get_settings()
    overrides = {
        "serial_port": args.serial_port,
        "target_host": args.server_address,
        "target_port": args.server_port,
    }
    for name in ("clock_format", "trim_fields", "log_level"):
        value = getattr(args, name)
        if value is not None:
            overrides[name] = value
    return SyncSettings.model_validate({**base.model_dump(), **overrides})


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    runner = SyncRunner(settings_from_args(args))
    return runner.start()


if __name__ == "__main__":
    sys.exit(main())
