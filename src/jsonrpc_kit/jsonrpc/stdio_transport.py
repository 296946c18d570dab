from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Callable, Iterator, TextIO


PayloadHandler = Callable[[str], "str | None"]


@dataclass
class StdioTransport:
    """Line-delimited JSON-RPC 2.0 server transport over stdio."""

    stdin: TextIO = field(default_factory=lambda: sys.stdin)
    stdout: TextIO = field(default_factory=lambda: sys.stdout)

    def serve(self, handler: PayloadHandler) -> None:
        """
        Read payloads from stdin until EOF, pass each one to handler, and write
        the reply (if any) to stdout.

        - Blank lines are skipped.
        - A None reply (notifications only) writes nothing.
        """
        for line in self._iter_lines():
            line = line.strip()
            if not line:
                continue
            reply = handler(line)
            if reply is not None:
                self._write(reply)

    def _iter_lines(self) -> Iterator[str]:
        while True:
            line = self.stdin.readline()
            if line == "":
                break
            yield line

    def _write(self, payload: str) -> None:
        self.stdout.write(payload + "\n")
        self.stdout.flush()
