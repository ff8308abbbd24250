"""Thread-safe text progress bar."""

from __future__ import annotations

import sys
import threading
from typing import TextIO

_SCALE = "0%   10   20   30   40   50   60   70   80   90   100%\n"
_RULER = "|----|----|----|----|----|----|----|----|----|----|"


class ParallelProgress:
    """A progress bar that several threads may advance at once.

    Nothing is shown and increments are ignored until :meth:`start` is called.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._lock = threading.Lock()
        self._started = False
        self._expected = 0
        self._count = 0
        self._tic = 0
        self._next_tic_count = 0

    @property
    def count(self) -> int:
        return self._count

    def start(self, total: int) -> None:
        """Print the scale and ruler and reset the bar for ``total`` steps."""
        with self._lock:
            out = self._out()
            out.write("\n" + _SCALE + _RULER + "\n")
            out.flush()
            self._expected = total if total else 1
            self._count = 0
            self._tic = 0
            self._next_tic_count = 0
            self._started = True

    def increment(self) -> None:
        """Advance the bar by one step."""
        if not self._started:
            return
        with self._lock:
            self._count += 1
            if self._count >= self._next_tic_count:
                self._display_tic()

    def _out(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _display_tic(self) -> None:
        out = self._out()
        needed = int(self._count / self._expected * 50.0)
        while True:
            out.write("*")
            self._tic += 1
            if self._tic >= needed:
                break
        out.flush()
        self._next_tic_count = int(self._tic / 50.0 * self._expected)
        if self._count == self._expected:
            if self._tic < 51:
                out.write("*")
            out.write("\n")
            out.flush()