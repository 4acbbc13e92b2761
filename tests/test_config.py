"""Tests for application configuration."""

from __future__ import annotations

from pathlib import Path

from blogpipe.config import DEFAULT_PLACEHOLDER, AppConfig


class TestAppConfig:
    """Test AppConfig dataclass."""

    def test_default_config(self) -> None:
        """Should create config with default values."""
        config = AppConfig()

        assert config.posts_dir == Path("posts")
        assert config.output_path == Path("index.json")
        assert config.body_read_limit == 2048
        assert config.words_per_minute == 200
        assert config.summary_max_chars == 300
        assert config.username == "Blog Notifier"
        assert config.placeholder_description == DEFAULT_PLACEHOLDER
        assert config.default_branch == "main"

    def test_custom_config(self) -> None:
        """Should create config with custom values."""
        config = AppConfig(
            posts_dir=Path("content"),
            output_path=Path("out/posts.json"),
            body_read_limit=100,
            words_per_minute=300,
        )

        assert config.posts_dir == Path("content")
        assert config.output_path == Path("out/posts.json")
        assert config.body_read_limit == 100
        assert config.words_per_minute == 300

    def test_resolve_absolute_paths(self) -> None:
        """Should return absolute paths as-is."""
        config = AppConfig(posts_dir=Path("/srv/posts"), output_path=Path("/srv/index.json"))

        assert config.resolve_posts_dir(Path("/base")) == Path("/srv/posts")
        assert config.resolve_output_path(Path("/base")) == Path("/srv/index.json")

    def test_resolve_relative_no_base(self) -> None:
        """Should return relative path when no base_dir provided."""
        config = AppConfig()

        assert config.resolve_posts_dir() == Path("posts")
        assert config.resolve_output_path(None) == Path("index.json")

    def test_resolve_relative_with_base(self) -> None:
        """Should resolve relative paths against base_dir."""
        config = AppConfig()
        base = Path("/project")

        assert config.resolve_posts_dir(base) == Path("/project/posts")
        assert config.resolve_output_path(base) == Path("/project/index.json")
