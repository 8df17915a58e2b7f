"""File-backed content reader."""

from __future__ import annotations

import logging

from minigrep import MinigrepError

LOGGER = logging.getLogger(__name__)


class ReadError(MinigrepError):
    """Raised when the target file cannot be opened or decoded."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class FileContentReader:
    """Read a whole file as text.

    Newline translation is disabled so the matcher sees the file's own line
    breaks and handles CRLF itself.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def read(self, path: str) -> str:
        LOGGER.debug("Reading %s as %s", path, self._encoding)
        try:
            with open(path, "r", encoding=self._encoding, newline="") as handle:
                return handle.read()
        except UnicodeDecodeError as exc:
            raise ReadError(path, f"not valid {self._encoding} text") from exc
        except OSError as exc:
            raise ReadError(path, exc.strerror or str(exc)) from exc
