"""Command line interface for blogpipe."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from blogpipe.config import AppConfig
from blogpipe.index.builder import IndexBuilder, write_index
from blogpipe.notify.discord import DeliveryError, notify_post

LOGGER = logging.getLogger(__name__)
console = Console()
err_console = Console(stderr=True)
app = typer.Typer(help="blogpipe - static blog index and release notifications")

NOTIFY_USAGE = "Usage: blogpipe notify <filePath> <webhookUrl> <repo> <branch> <sha>"


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


@app.command()
def index(
    posts_dir: Path = typer.Option(AppConfig().posts_dir, "--posts-dir", help="Directory of markdown posts"),
    output: Path = typer.Option(AppConfig().output_path, "--output", "-o", help="Index JSON path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Build the JSON index of all posts, newest first."""
    _setup_logging(verbose)
    config = AppConfig(posts_dir=posts_dir, output_path=output)

    resolved_posts = config.resolve_posts_dir(Path.cwd())
    if not resolved_posts.is_dir():
        err_console.print(f"[red]Posts directory not found: {resolved_posts}[/red]")
        raise typer.Exit(code=1)

    builder = IndexBuilder(config)
    entries = builder.build(resolved_posts)
    written = write_index(entries, config.resolve_output_path(Path.cwd()))
    console.print(
        f"Indexed: {builder.stats.indexed}, skipped: {builder.stats.skipped} -> {written}"
    )


@app.command()
def notify(
    file_path: Optional[str] = typer.Argument(None, help="Markdown file that was published"),
    webhook_url: Optional[str] = typer.Argument(
        None, envvar="DISCORD_WEBHOOK_URL", help="Discord webhook URL"
    ),
    repo: str = typer.Argument("", help="GitHub repository as owner/name"),
    branch: Optional[str] = typer.Argument(None, help="Branch name, defaults to main"),
    sha: Optional[str] = typer.Argument(None, help="Commit SHA, informational only"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Post a Discord embed announcing a published post."""
    if not file_path or not webhook_url:
        err_console.print(NOTIFY_USAGE, markup=False)
        raise typer.Exit(code=2)

    _setup_logging(verbose)
    try:
        notify_post(file_path, webhook_url, repo, branch, sha, config=AppConfig())
    except FileNotFoundError:
        err_console.print(f"File not found: {file_path}", markup=False)
        raise typer.Exit(code=1)
    except (OSError, UnicodeDecodeError) as exc:
        err_console.print(f"Cannot read {file_path}: {exc}", markup=False)
        raise typer.Exit(code=1)
    except DeliveryError as exc:
        LOGGER.error("%s %s", exc, exc.body)
        err_console.print(str(exc), markup=False)
        raise typer.Exit(code=1)

    console.print(f"Sent webhook for {file_path}", markup=False)
