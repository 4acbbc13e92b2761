"""YAML front matter splitting for markdown posts."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

from blogpipe.models import Document
from blogpipe.utils.files import read_text

LOGGER = logging.getLogger(__name__)

_FRONT_MATTER = re.compile(
    r"\A---[ \t]*\r?\n(.*?)(?:\r?\n)?^---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)


class FrontMatterError(ValueError):
    """Raised when a metadata block exists but cannot be parsed."""


def split_front_matter(raw: str) -> Tuple[Dict[str, Any], str]:
    """Return ``(data, body)`` for ``raw``.

    Documents without a leading ``---`` block come back as ``({}, raw)``.
    A block that is not valid YAML, or does not hold a mapping, raises
    :class:`FrontMatterError`.
    """
    text = raw[1:] if raw.startswith("\ufeff") else raw
    match = _FRONT_MATTER.match(text)
    if match is None:
        return {}, raw

    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as exc:
        raise FrontMatterError(f"Invalid front matter: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FrontMatterError(
            f"Front matter must be a mapping, got {type(data).__name__}"
        )
    return {str(key): value for key, value in data.items()}, text[match.end() :]


def parse_front_matter(raw: str, *, strict: bool = False) -> Tuple[Dict[str, Any], str]:
    """Split ``raw`` into metadata and body.

    In lenient mode a broken metadata block is ignored and the whole text is
    treated as body.
    """
    try:
        return split_front_matter(raw)
    except FrontMatterError as exc:
        if strict:
            raise
        LOGGER.debug("Ignoring front matter: %s", exc)
        return {}, raw


def load_document(path: Path, *, strict: bool = False) -> Document:
    data, body = parse_front_matter(read_text(path), strict=strict)
    return Document(path=path, data=data, body=body)
