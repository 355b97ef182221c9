from __future__ import annotations

from typing import Iterable, Sequence


# Topic vocabulary for feeds that are not carbon/climate scoped.
# A bare "ets" is left out: it matches "markets", "bets", "Metsola".
CARBON_KEYWORDS: Sequence[str] = (
    "carbon", "emission", "climate", "co2", "greenhouse",
    "net zero", "net-zero", "decarbonisation", "decarbonization",
    "green deal", "fit for 55", "cbam", "carbon border",
    "renewable", "energy transition", "paris agreement",
    "methane", "carbon market", "carbon price", "carbon tax",
    "energy", "environment", "sustainability",
    "eu ets", "ets2", "emissions trading", "uk ets",
)


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    t = text.lower()
    return any(k.lower() in t for k in keywords)


def matches_keywords(title: str, excerpt: str, keywords: Iterable[str]) -> bool:
    """
    True when at least one keyword occurs in the title or the excerpt.

    Matching is a case-insensitive substring test.
    """
    keywords = [k for k in keywords if k]
    if not keywords:
        return False
    return _contains_any(title or "", keywords) or _contains_any(excerpt or "", keywords)
