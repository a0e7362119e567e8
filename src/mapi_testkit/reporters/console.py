import sys
from typing import Iterable, Optional, TextIO
from ..stats.dump import stat_dump

class ConsoleReporter:
    def __init__(self, stream: Optional[TextIO] = None, line_len: int = 64,
                 title_delim: str = "#", end_delim: str = "="):
        self.stream = stream
        self.line_len = line_len
        self.title_delim = title_delim
        self.end_delim = end_delim

    def _write(self, text: str) -> None:
        print(text, file=self.stream or sys.stdout)

    def title(self, text: str) -> None:
        self._write(self.title_delim * self.line_len)
        self._write(text)
        self._write(self.title_delim * self.line_len)

    def title_end(self) -> None:
        self._write(self.end_delim * self.line_len)
        self._write("")

    def failure(self, suite: str, test: str) -> None:
        self._write(f"* {suite}: {test}")

    def line(self, text: str) -> None:
        self._write(text)

    def emit(self, suites: Iterable) -> int:
        return stat_dump(suites, self)
