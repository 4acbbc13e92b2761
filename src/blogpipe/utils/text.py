"""Text helpers for summaries and word counts."""

from __future__ import annotations

import math
import re

_NEWLINES = re.compile(r"(?:\r?\n)+")
_WHITESPACE = re.compile(r"\s+")

ELLIPSIS = "..."


def collapse_whitespace(text: str) -> str:
    """Collapse every whitespace run to a single space and trim."""
    return _WHITESPACE.sub(" ", text).strip()


def single_line(text: str) -> str:
    return _NEWLINES.sub(" ", text.strip())


def truncate(text: str, max_chars: int = 300) -> str:
    """Cut ``text`` to ``max_chars``, ending with an ellipsis when shortened."""
    if len(text) <= max_chars:
        return text
    return text[: max_chars - len(ELLIPSIS)] + ELLIPSIS


def count_words(text: str) -> int:
    return len(text.split())


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
