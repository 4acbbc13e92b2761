"""Reading time estimation."""

from __future__ import annotations

from blogpipe.models import ReadTime
from blogpipe.utils.text import count_words, round_half_up

DEFAULT_WORDS_PER_MINUTE = 200


def format_duration(seconds: int) -> str:
    """Render ``seconds`` as seconds, whole minutes or tenths of hours."""
    if seconds < 60:
        return f"{seconds} seconds"
    if seconds < 3600:
        minutes = round_half_up(seconds / 60)
        return f"{minutes} minute{'' if minutes == 1 else 's'}"
    hours = round_half_up(seconds / 360) / 10
    return f"{hours:.1f} hours"


def estimate_read_time(
    summary: str,
    body_prefix: str,
    *,
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
) -> ReadTime:
    words = count_words(f"{summary}\n{body_prefix}")
    seconds = round_half_up(words / words_per_minute * 60)
    return ReadTime(seconds=seconds, human=format_duration(seconds))
