from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .models import Headline
from .text import strip_html, truncate


TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
TRACKING_MARKER = "?utm_"


def format_timestamp(dt: datetime) -> str:
    """Render `dt` as an RFC 3339 UTC timestamp; naive values are taken as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


def canonical_url(link: str) -> str:
    """Cut the `?utm_...` tracking query off an article link."""
    link = (link or "").strip()
    idx = link.find(TRACKING_MARKER)
    if idx > 0:
        return link[:idx]
    return link


def extract_excerpt(entry: Dict[str, Any]) -> str:
    """Plain-text body: content, else description, else empty."""
    for key in ("content", "description"):
        raw = entry.get(key) or ""
        if raw:
            return strip_html(raw)
    return ""


def extract_published_at(entry: Dict[str, Any], collected_at: datetime) -> str:
    dt = entry.get("published_at") or entry.get("updated_at") or collected_at
    return format_timestamp(dt)


def to_headline(
    entry: Dict[str, Any],
    *,
    source: str,
    collected_at: datetime,
    strip_tracking: bool = False,
    max_excerpt: int = 0,
    excerpt: Optional[str] = None,
) -> Optional[Headline]:
    """
    Convert a parsed entry dict into a Headline.

    Returns None when the entry has no usable title. `excerpt` may be passed
    when the caller already extracted it (e.g. for keyword filtering).
    """
    title = (entry.get("title") or "").strip()
    if not title:
        return None

    link = entry.get("link") or ""
    url = canonical_url(link) if strip_tracking else link.strip()

    if excerpt is None:
        excerpt = extract_excerpt(entry)
    if max_excerpt > 0:
        excerpt = truncate(excerpt, max_excerpt)

    return Headline(
        source=source,
        title=title,
        url=url,
        published_at=extract_published_at(entry, collected_at),
        excerpt=excerpt,
        is_headline=True,
    )
