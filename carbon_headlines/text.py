from __future__ import annotations

import warnings
from typing import Iterable, List, Optional

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning


# Feed descriptions are sometimes a bare URL; bs4 warns about those.
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

_DROP_TAGS = ("script", "style")


def strip_html(s: Optional[str]) -> str:
    """
    Return `s` as plain text: tags removed, entities decoded, ends trimmed.

    Contents of <script> and <style> are dropped entirely.
    """
    if not s:
        return ""
    if "<" not in s and "&" not in s:
        return s.strip()
    soup = BeautifulSoup(s, "html.parser")
    for tag in soup(_DROP_TAGS):
        tag.decompose()
    return soup.get_text().strip()


def normalize_whitespace(s: str) -> str:
    return " ".join(s.split())


def sort_strings(items: Iterable[str]) -> List[str]:
    """Alphabetically sorted copy; the input is left untouched."""
    return sorted(items)


def uniq_strings(items: Iterable[str]) -> List[str]:
    """Drop duplicates and empty strings, keeping first-seen order."""
    seen = set()
    out: List[str] = []
    for s in items:
        if not s or s in seen:
            continue
        seen.add(s)
        out.append(s)
    return out


def truncate(s: str, limit: int) -> str:
    if limit <= 0 or len(s) <= limit:
        return s
    if limit <= 3:
        return s[:limit]
    return s[: limit - 3] + "..."
