import sys
from enum import Enum
from typing import TextIO

from lps.channel import ChannelClosed, Receiver
from lps.models import FileWithMatches, SearchResult


class PrinterState(Enum):
    IDLE = "idle"
    DRAINING = "draining"


def format_result(result: SearchResult) -> list[str]:
    lines = [result.path]
    if isinstance(result, FileWithMatches):
        for match in result.matches:
            lines.append(f"  {match.line}:{match.column} {match.content}")
    return lines


class ReportPrinter:
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self.state = PrinterState.IDLE

    def write(self, result: SearchResult) -> None:
        stream = self._stream or sys.stdout
        for line in format_result(result):
            print(line, file=stream)

    def drain(self, receiver: Receiver) -> int:
        """Print results until every sender is gone. Returns the number of files printed."""
        self.state = PrinterState.DRAINING
        reported = 0
        try:
            while True:
                try:
                    result = receiver.recv()
                except ChannelClosed:
                    break
                self.write(result)
                reported += 1
        finally:
            self.state = PrinterState.IDLE
        return reported
