"""
Per-source collectors.

Every collector has the same shape, `collector(limit, cfg) -> List[Headline]`,
and raises FetchError / ParseError / EmptyFeedError when its feed is unusable.
A feed whose items are all filtered away yields an empty list, not an error.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Dict, Iterable, List, Optional

from .classifier import CARBON_KEYWORDS, matches_keywords
from .exceptions import EmptyFeedError
from .fetcher import fetch_feed_entries
from .logging import get_logger
from .models import Headline, HeadlineSourceConfig
from .normalizer import extract_excerpt, to_headline
from .parser import parse_entry

logger = get_logger(component="sources")

HeadlineCollector = Callable[[int, HeadlineSourceConfig], List[Headline]]

POLITICO_EU_FEED = "https://www.politico.eu/section/energy/feed/"
EURACTIV_FEED = "https://www.euractiv.com/feed/"
UK_ETS_FEED = "https://www.gov.uk/government/publications.atom?topics%5B%5D=uk-emissions-trading-scheme"
UN_NEWS_FEED = "https://news.un.org/feed/subscribe/en/news/topic/climate-change/feed/rss.xml"
CARBON_BRIEF_FEED = "https://www.carbonbrief.org/feed/"
CARBON_MARKET_WATCH_FEED = "https://carbonmarketwatch.org/feed/"

CARBON_BRIEF_MAX_EXCERPT = 1000


def collect_feed_headlines(
    feed_url: str,
    source: str,
    limit: int,
    cfg: HeadlineSourceConfig,
    *,
    strip_tracking: bool = False,
    keywords: Optional[Iterable[str]] = None,
    max_excerpt: int = 0,
    now: Optional[datetime] = None,
) -> List[Headline]:
    """
    Fetch one feed and map its entries to at most `limit` headlines.

    Entries without a title are skipped and do not count toward `limit`. When
    `keywords` is given, only entries whose title, excerpt or categories match
    one of them are kept. Entries without a date get the collection time.
    """
    entries = fetch_feed_entries(feed_url, cfg)
    if not entries:
        raise EmptyFeedError(f"no items in {source} feed: {feed_url}")

    vocabulary = list(keywords) if keywords is not None else None
    collected_at = now or datetime.now(timezone.utc)
    out: List[Headline] = []

    for raw in entries:
        if len(out) >= limit:
            break

        entry = parse_entry(raw)
        if not entry["title"].strip():
            continue

        excerpt = extract_excerpt(entry)
        if vocabulary is not None:
            haystack = " ".join([excerpt] + entry["categories"])
            if not matches_keywords(entry["title"], haystack, vocabulary):
                continue

        headline = to_headline(
            entry,
            source=source,
            collected_at=collected_at,
            strip_tracking=strip_tracking,
            max_excerpt=max_excerpt,
            excerpt=excerpt,
        )
        if headline is not None:
            out.append(headline)

    logger.info("collected headlines", source=source, count=len(out), entries=len(entries))
    return out


def collect_politico_eu(limit: int, cfg: HeadlineSourceConfig) -> List[Headline]:
    """Politico EU, Energy & Climate section."""
    return collect_feed_headlines(POLITICO_EU_FEED, "Politico EU", limit, cfg, strip_tracking=True)


def collect_euractiv(limit: int, cfg: HeadlineSourceConfig) -> List[Headline]:
    """
    Euractiv main feed, filtered down to carbon/climate items.

    The section feeds sit behind bot protection, so the general feed is used
    and relevance comes from CARBON_KEYWORDS.
    """
    return collect_feed_headlines(
        EURACTIV_FEED, "Euractiv", limit, cfg,
        strip_tracking=True,
        keywords=CARBON_KEYWORDS,
    )


def collect_uk_ets(limit: int, cfg: HeadlineSourceConfig) -> List[Headline]:
    """GOV.UK publications tagged with the UK Emissions Trading Scheme (Atom)."""
    return collect_feed_headlines(UK_ETS_FEED, "UK ETS", limit, cfg)


def collect_un_news(limit: int, cfg: HeadlineSourceConfig) -> List[Headline]:
    return collect_feed_headlines(UN_NEWS_FEED, "UN News", limit, cfg)


def collect_carbon_brief(limit: int, cfg: HeadlineSourceConfig) -> List[Headline]:
    # full articles come through content:encoded; keep excerpts short
    return collect_feed_headlines(
        CARBON_BRIEF_FEED, "Carbon Brief", limit, cfg,
        max_excerpt=CARBON_BRIEF_MAX_EXCERPT,
    )


def collect_carbon_market_watch(limit: int, cfg: HeadlineSourceConfig) -> List[Headline]:
    return collect_feed_headlines(CARBON_MARKET_WATCH_FEED, "Carbon Market Watch", limit, cfg)


# Registration order is aggregation order, which decides dedup ties.
SOURCE_COLLECTORS: Dict[str, HeadlineCollector] = {
    "politico-eu": collect_politico_eu,
    "euractiv": collect_euractiv,
    "uk-ets": collect_uk_ets,
    "un-news": collect_un_news,
    "carbon-brief": collect_carbon_brief,
    "carbon-market-watch": collect_carbon_market_watch,
}


def available_sources() -> List[str]:
    return list(SOURCE_COLLECTORS)
