"""Discord webhook notifications for newly published posts."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import requests

from blogpipe.config import AppConfig
from blogpipe.models import Embed, ExtractedRecord, NotificationPayload
from blogpipe.parsing.extractor import extract_record
from blogpipe.parsing.metadata import iso_utc
from blogpipe.utils.files import read_text

LOGGER = logging.getLogger(__name__)


class DeliveryError(RuntimeError):
    """The webhook call failed or returned a non-2xx status."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        reason: str = "",
        body: str = "",
    ) -> None:
        super().__init__(message)
        self.status = status
        self.reason = reason
        self.body = body


def build_browse_url(
    repo: str,
    branch: Optional[str],
    file_path: str,
    *,
    base_url: str = "https://github.com",
    default_branch: str = "main",
) -> str:
    return f"{base_url}/{repo}/blob/{branch or default_branch}/{file_path}"


def build_payload(
    record: ExtractedRecord,
    url: str,
    repo: str,
    *,
    username: str,
    placeholder: str,
    now: Optional[datetime] = None,
) -> NotificationPayload:
    embed = Embed(
        title=record.title,
        description=record.summary or placeholder,
        url=url,
        timestamp=iso_utc(now or datetime.now(timezone.utc)),
        footer={"text": f"Repository: {repo}"},
    )
    return NotificationPayload(username=username, embeds=[embed])


def send_webhook(
    webhook_url: str,
    payload: NotificationPayload,
    *,
    session: Optional[requests.Session] = None,
) -> requests.Response:
    """POST ``payload`` once. Raises :class:`DeliveryError` on any failure."""
    http = session or requests
    try:
        response = http.post(
            webhook_url,
            data=json.dumps(payload.to_dict()),
            headers={"Content-Type": "application/json"},
        )
    except requests.RequestException as exc:
        raise DeliveryError(f"Error sending webhook: {exc}") from exc

    if not 200 <= response.status_code < 300:
        raise DeliveryError(
            f"Failed to post webhook: {response.status_code} {response.reason}",
            status=response.status_code,
            reason=response.reason or "",
            body=response.text,
        )
    return response


def notify_post(
    file_path: str,
    webhook_url: str,
    repo: str = "",
    branch: Optional[str] = None,
    sha: Optional[str] = None,
    *,
    config: Optional[AppConfig] = None,
    session: Optional[requests.Session] = None,
) -> NotificationPayload:
    """Announce the post at ``file_path`` on the Discord webhook."""
    config = config or AppConfig()
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(file_path)

    record = extract_record(
        read_text(path), path.name, max_chars=config.summary_max_chars
    )
    url = build_browse_url(
        repo,
        branch,
        file_path,
        base_url=config.browse_base_url,
        default_branch=config.default_branch,
    )
    payload = build_payload(
        record,
        url,
        repo,
        username=config.username,
        placeholder=config.placeholder_description,
    )
    LOGGER.debug("Posting %r for commit %s", record.title, sha or "unknown")
    send_webhook(webhook_url, payload, session=session)
    return payload
