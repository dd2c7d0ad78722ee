import sys

from .config import LoggingConfig, StreamType


class ConsoleSink:
    """Writes each message on its own line to stdout or stderr."""

    def __init__(self, output: StreamType | None = None) -> None:
        self._output = output

    def log(self, message: str) -> None:
        output = self._output or LoggingConfig().output
        stream = sys.stderr if output == StreamType.STDERR else sys.stdout

        stream.write(f"{message}\n")
        stream.flush()
