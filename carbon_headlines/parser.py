from __future__ import annotations

import calendar
import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


def _to_datetime(entry: Dict[str, Any], key: str) -> Optional[datetime]:
    """
    Convert a feedparser `*_parsed` field (a UTC struct_time) to an aware datetime.
    """
    val = entry.get(key)
    if isinstance(val, time.struct_time):
        try:
            return datetime.fromtimestamp(calendar.timegm(val), tz=timezone.utc)
        except (OverflowError, ValueError, OSError):
            return None
    return None


def _get_content(entry: Dict[str, Any]) -> str:
    # feedparser exposes content:encoded / atom:content as a list of dicts
    content = entry.get("content")
    if isinstance(content, list):
        for c in content:
            if isinstance(c, dict):
                value = c.get("value")
                if isinstance(value, str) and value.strip():
                    return value
    return ""


def _get_categories(entry: Dict[str, Any]) -> List[str]:
    out: List[str] = []
    tags = entry.get("tags")
    if isinstance(tags, list):
        for t in tags:
            if isinstance(t, dict):
                term = t.get("term")
                if isinstance(term, str) and term.strip():
                    out.append(term.strip())
    return out


def parse_entry(entry: Dict[str, Any]) -> Dict[str, Any]:
    """
    Map a raw feed entry (from feedparser) to a plain dict with the fields adapters use.
    Fields: title, link, content, description, published_at, updated_at (datetime|None), categories
    """
    description = entry.get("summary") or entry.get("description") or ""
    return {
        "title": entry.get("title") or "",
        "link": entry.get("link") or "",
        "content": _get_content(entry),
        "description": description if isinstance(description, str) else "",
        "published_at": _to_datetime(entry, "published_parsed"),
        "updated_at": _to_datetime(entry, "updated_parsed"),
        "categories": _get_categories(entry),
    }
