from __future__ import annotations

from typing import Iterable, List, Set

from .models import Headline


def unique_by_url(items: Iterable[Headline]) -> List[Headline]:
    """
    Remove duplicates by URL, keeping the first occurrence and original order.
    Headlines with an empty URL are dropped.
    """
    seen: Set[str] = set()
    out: List[Headline] = []
    for it in items:
        if not it.url or it.url in seen:
            continue
        seen.add(it.url)
        out.append(it)
    return out
