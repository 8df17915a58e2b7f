"""Core search run.

This module is I/O-agnostic. It only relies on ports for reading content and
writing lines, so tests and other frontends can swap them freely.
"""

from __future__ import annotations

import logging

from minigrep.core.config import SearchConfig
from minigrep.core.matcher import find_matches
from minigrep.core.ports import ContentReader, LineWriter

LOGGER = logging.getLogger(__name__)


class SearchRunner:
    """Reads content, matches lines, and hands them to the writer."""

    def __init__(self, reader: ContentReader, writer: LineWriter) -> None:
        self._reader = reader
        self._writer = writer

    def run(self, config: SearchConfig) -> int:
        """Run one search and return the number of lines written."""

        # Content is read in full before anything is written, so a read
        # failure never leaves partial output behind.
        content = self._reader.read(config.file_path)
        LOGGER.debug("Read %s characters from %s", len(content), config.file_path)

        lines = find_matches(config.query, content, ignore_case=config.ignore_case)
        self._writer.write_lines(lines)

        LOGGER.info(
            "Search complete: file=%s, ignore_case=%s, matches=%s",
            config.file_path,
            config.ignore_case,
            len(lines),
        )
        return len(lines)
