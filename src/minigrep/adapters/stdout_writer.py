"""Text stream line writer."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO


class StreamLineWriter:
    """Write each line followed by a newline to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def write_lines(self, lines: Iterable[str]) -> None:
        # Resolve stdout lazily so redirection (and pytest capture) applies.
        stream = self._stream if self._stream is not None else sys.stdout
        for line in lines:
            stream.write(f"{line}\n")
        stream.flush()
