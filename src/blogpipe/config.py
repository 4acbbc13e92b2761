"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_PLACEHOLDER = "A new blog post was published, check it out!"


@dataclass(slots=True)
class AppConfig:
    posts_dir: Path = field(default_factory=lambda: Path("posts"))
    output_path: Path = field(default_factory=lambda: Path("index.json"))
    body_read_limit: int = 2048
    words_per_minute: int = 200
    summary_max_chars: int = 300
    username: str = "Blog Notifier"
    placeholder_description: str = DEFAULT_PLACEHOLDER
    default_branch: str = "main"
    browse_base_url: str = "https://github.com"

    def resolve_posts_dir(self, base_dir: Path | None = None) -> Path:
        return _resolve(self.posts_dir, base_dir)

    def resolve_output_path(self, base_dir: Path | None = None) -> Path:
        return _resolve(self.output_path, base_dir)


def _resolve(path: Path, base_dir: Path | None) -> Path:
    if Path(path).is_absolute() or base_dir is None:
        return Path(path)
    return base_dir / path
