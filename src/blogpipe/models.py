"""Core blogpipe data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

POST_SUFFIX = ".md"


@dataclass(frozen=True, slots=True)
class Document:
    """A markdown file split into declared metadata and body text."""

    path: Path
    data: Mapping[str, Any]
    body: str

    @property
    def slug(self) -> str:
        name = self.path.name
        if name.endswith(POST_SUFFIX):
            return name[: -len(POST_SUFFIX)]
        return name


@dataclass(frozen=True, slots=True)
class ExtractedRecord:
    title: str
    summary: str


@dataclass(frozen=True, slots=True)
class ReadTime:
    seconds: int
    human: str


@dataclass(frozen=True, slots=True)
class IndexEntry:
    """One post in the generated index."""

    slug: str
    post_title: str
    date: Optional[str]
    tags: List[str]
    summary: str
    read_time_seconds: int
    read_time_human: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "slug": self.slug,
            "post_title": self.post_title,
            "date": self.date,
            "tags": list(self.tags),
            "summary": self.summary,
            "read_time_seconds": self.read_time_seconds,
            "read_time_human": self.read_time_human,
        }


@dataclass(slots=True)
class Embed:
    title: str
    description: str
    url: str
    timestamp: str
    footer: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "url": self.url,
            "timestamp": self.timestamp,
            "footer": dict(self.footer),
        }


@dataclass(slots=True)
class NotificationPayload:
    """Body of a Discord webhook call."""

    username: str
    embeds: List[Embed] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "username": self.username,
            "embeds": [embed.to_dict() for embed in self.embeds],
        }
