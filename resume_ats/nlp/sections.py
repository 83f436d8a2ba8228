"""
Section locator for resume text.

Sections are found by plain keyword search on the lowercased document,
not by layout. The earliest occurrence wins and a missing boundary means
the section runs to the end of the text.
"""

import re
from collections.abc import Iterable

NOT_FOUND = -1

# "Experience: ...", "Experience - ..."
INLINE_HEADER_SEPARATOR = re.compile(r"[ \t]*[:\-–—][ \t]*")


def find_any_section_start(lower_text: str, keys: Iterable[str]) -> int:
    """
    Return the offset of the earliest occurring keyword, or ``NOT_FOUND``.

    Args:
        lower_text: Lowercased full resume text
        keys: Candidate header keywords (lowercase)
    """
    pos = NOT_FOUND
    for key in keys:
        i = lower_text.find(key)
        if i != NOT_FOUND and (pos == NOT_FOUND or i < pos):
            pos = i
    return pos


def find_section_header(lower_text: str, keys: Iterable[str]) -> tuple[int, str]:
    """
    Like ``find_any_section_start`` but also return the keyword that matched.

    Ties at the same offset keep the keyword listed first.
    """
    pos = NOT_FOUND
    matched = ""
    for key in keys:
        i = lower_text.find(key)
        if i != NOT_FOUND and (pos == NOT_FOUND or i < pos):
            pos = i
            matched = key
    return pos, matched


def get_next_section_index(lower_text: str, start: int, section_keys: Iterable[str]) -> int:
    """
    Return the offset of the nearest keyword at or after ``start``, or ``NOT_FOUND``.
    """
    nearest = NOT_FOUND
    for key in section_keys:
        i = lower_text.find(key, start)
        if i != NOT_FOUND and (nearest == NOT_FOUND or i < nearest):
            nearest = i
    return nearest


def section_end(lower_text: str, start: int, section_keys: Iterable[str]) -> int:
    """Resolve the next-section boundary, falling back to end of text."""
    end = get_next_section_index(lower_text, start, section_keys)
    return len(lower_text) if end == NOT_FOUND else end


def block_window(text: str, start: int, fallback: int) -> str:
    """
    Slice from ``start`` to the next blank line, or ``fallback`` characters.
    """
    end = text.find("\n\n", start)
    if end == NOT_FOUND:
        end = start + fallback
    return text[start:end]


def skip_header_line(text: str, start: int) -> int:
    """Return the offset just past the line containing ``start``."""
    newline = text.find("\n", start)
    return len(text) if newline == NOT_FOUND else newline + 1


def header_body_start(text: str, start: int, keyword: str) -> int:
    """
    Return the offset where a section body begins.

    A header that opens its line and is followed by a colon or dash keeps the
    rest of that line as body text; any other header line is skipped whole.
    """
    line_start = text.rfind("\n", 0, start) + 1
    if not text[line_start:start].strip():
        separator = INLINE_HEADER_SEPARATOR.match(text, start + len(keyword))
        if separator and separator.group().strip():
            line_end = text.find("\n", separator.end())
            if line_end == NOT_FOUND:
                line_end = len(text)
            if text[separator.end():line_end].strip():
                return separator.end()
    return skip_header_line(text, start)
