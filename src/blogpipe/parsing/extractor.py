"""Title and summary extraction for a single markdown post.

Declared front matter wins; otherwise the body is scanned for the first
``# Heading`` and the first prose paragraph.
"""

from __future__ import annotations

import re
from typing import Optional

from blogpipe.models import ExtractedRecord
from blogpipe.parsing.frontmatter import parse_front_matter
from blogpipe.parsing.metadata import meta_str
from blogpipe.utils.text import collapse_whitespace, single_line, truncate

_HEADING = re.compile(r"^#\s+(.*)")
_BLOCK_SEPARATOR = re.compile(r"\r?\n\r?\n")
_IMAGE_ONLY = re.compile(r"!\[.*\]\(.*\)")


def first_heading(content: str) -> Optional[str]:
    """Return the text of the first top-level ``#`` heading line."""
    for line in content.splitlines():
        match = _HEADING.match(line)
        if match:
            return match.group(1).strip()
    return None


def first_paragraph(content: str) -> Optional[str]:
    """Return the first block that is neither a heading nor a lone image."""
    for block in _BLOCK_SEPARATOR.split(content):
        trimmed = block.strip()
        if not trimmed:
            continue
        if trimmed.startswith("#"):
            continue
        if _IMAGE_ONLY.fullmatch(trimmed):
            continue
        return collapse_whitespace(trimmed)
    return None


def normalize_summary(summary: str, max_chars: int = 300) -> str:
    return truncate(single_line(summary), max_chars)


def extract_record(raw: str, filename: str, *, max_chars: int = 300) -> ExtractedRecord:
    """Build the title/summary record used by notifications."""
    data, body = parse_front_matter(raw)

    title = meta_str(data, "title") or first_heading(body) or filename
    summary = (
        meta_str(data, "description", "excerpt")
        or first_paragraph(body)
        or ""
    )
    return ExtractedRecord(title=title, summary=normalize_summary(summary, max_chars))
