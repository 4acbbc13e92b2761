"""Post index building pipeline."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from blogpipe.config import AppConfig
from blogpipe.index.read_time import estimate_read_time
from blogpipe.models import Document, IndexEntry
from blogpipe.parsing.frontmatter import FrontMatterError, load_document
from blogpipe.parsing.metadata import meta_date, meta_str, meta_tags, parse_timestamp
from blogpipe.utils.files import iter_post_paths

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class BuildStats:
    indexed: int = 0
    skipped: int = 0
    skipped_files: list[Path] = field(default_factory=list)

    def skip(self, path: Path) -> None:
        self.skipped += 1
        self.skipped_files.append(path)


def sort_entries(entries: Sequence[IndexEntry]) -> List[IndexEntry]:
    """Order entries newest first; undated or unparseable dates go last.

    Python's sort is stable, so equal dates keep their enumeration order.
    """

    def key(entry: IndexEntry) -> tuple[bool, float]:
        timestamp = parse_timestamp(entry.date)
        if timestamp is None:
            return (False, 0.0)
        return (True, timestamp)

    return sorted(entries, key=key, reverse=True)


class IndexBuilder:
    """Turns a directory of markdown posts into index entries."""

    def __init__(self, config: Optional[AppConfig] = None) -> None:
        self.config = config or AppConfig()
        self.stats = BuildStats()

    def build(self, posts_dir: Optional[Path] = None) -> List[IndexEntry]:
        directory = Path(posts_dir) if posts_dir is not None else self.config.posts_dir
        self.stats = BuildStats()

        entries: List[IndexEntry] = []
        for path in iter_post_paths(directory):
            try:
                document = load_document(path, strict=True)
            except (FrontMatterError, OSError, UnicodeDecodeError) as exc:
                LOGGER.warning("Skipping %s: %s", path, exc)
                self.stats.skip(path)
                continue
            LOGGER.debug("Indexed %s", path)
            entries.append(self.entry_for(document))
            self.stats.indexed += 1

        return sort_entries(entries)

    def entry_for(self, document: Document) -> IndexEntry:
        data = document.data
        summary = meta_str(data, "summary")
        body = document.body[: self.config.body_read_limit]
        read_time = estimate_read_time(
            summary, body, words_per_minute=self.config.words_per_minute
        )
        return IndexEntry(
            slug=document.slug,
            post_title=meta_str(data, "post_title"),
            date=meta_date(data),
            tags=meta_tags(data),
            summary=summary,
            read_time_seconds=read_time.seconds,
            read_time_human=read_time.human,
        )


def write_index(entries: Sequence[IndexEntry], output_path: Path) -> Path:
    """Write ``entries`` as a 2-space indented JSON array, replacing the file."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = [entry.to_dict() for entry in entries]
    output_path.write_text(
        json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8"
    )
    return output_path
