"""Utility helpers for working with files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from blogpipe.models import POST_SUFFIX


def iter_post_paths(posts_dir: Path) -> Iterator[Path]:
    """Yield markdown posts directly inside ``posts_dir``, sorted by name."""
    for item in sorted(posts_dir.iterdir()):
        if item.is_file() and item.name.endswith(POST_SUFFIX):
            yield item


def read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")
