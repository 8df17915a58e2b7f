"""Line matching logic (core domain)."""

from __future__ import annotations

from typing import List


def _split_lines(content: str) -> List[str]:
    """Split content on newlines, treating CRLF as a single line break.

    A newline at the very end of the content does not start another line, and
    a lone CR with no newline after it stays part of the last line.
    """

    lines = content.split("\n")
    last = lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    if last:
        lines.append(last)
    return lines


def search(query: str, content: str) -> List[str]:
    """Return the lines of content containing query, case for case."""

    return [line for line in _split_lines(content) if query in line]


def search_case_insensitive(query: str, content: str) -> List[str]:
    """Return the lines of content containing query, ignoring case.

    Only the comparison is lowercased; matched lines keep their original text.
    """

    lowered_query = query.lower()
    return [line for line in _split_lines(content) if lowered_query in line.lower()]


def find_matches(query: str, content: str, ignore_case: bool = False) -> List[str]:
    if ignore_case:
        return search_case_insensitive(query, content)
    return search(query, content)
