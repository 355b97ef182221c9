from __future__ import annotations

import concurrent.futures as _fut
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .config import DEFAULT_PER_SOURCE, default_config
from .dedup import unique_by_url
from .logging import get_logger
from .models import Headline, HeadlineSourceConfig
from .sources import SOURCE_COLLECTORS, HeadlineCollector

logger = get_logger(component="aggregator")

_DATE_FORMATS = (
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d",
)


@dataclass
class CollectResult:
    headlines: List[Headline] = field(default_factory=list)
    errors: Dict[str, str] = field(default_factory=dict)


def _run_one(
    name: str, collector: HeadlineCollector, limit: int, cfg: HeadlineSourceConfig,
) -> Tuple[List[Headline], Optional[str]]:
    try:
        return collector(limit, cfg), None
    except Exception as e:
        # One broken site must not take the whole run down.
        logger.warning("source failed", source=name, error=f"{type(e).__name__}: {e}")
        return [], str(e) or type(e).__name__


def collect_from_sources(
    sources: Optional[Iterable[str]],
    limit: int,
    cfg: HeadlineSourceConfig,
    *,
    registry: Optional[Mapping[str, HeadlineCollector]] = None,
    max_workers: int = 1,
) -> CollectResult:
    """
    Run the requested collectors and merge their output.

    Results are concatenated in request order (registry order when `sources`
    is None) and deduplicated by URL, first occurrence winning. Failed or
    unknown sources are logged, recorded in `errors` and skipped.
    """
    registry = SOURCE_COLLECTORS if registry is None else registry
    names = list(registry) if sources is None else list(sources)
    result = CollectResult()

    jobs: List[Tuple[str, HeadlineCollector]] = []
    for name in names:
        collector = registry.get(name)
        if collector is None:
            logger.warning("unknown source", source=name)
            result.errors[name] = f"unknown source: {name}"
            continue
        jobs.append((name, collector))

    workers = max(1, int(max_workers or 1))
    if workers == 1 or len(jobs) <= 1:
        outcomes = [_run_one(name, c, limit, cfg) for name, c in jobs]
    else:
        with _fut.ThreadPoolExecutor(max_workers=workers) as ex:
            futures = [ex.submit(_run_one, name, c, limit, cfg) for name, c in jobs]
            # collected in submission order so dedup matches a sequential run
            outcomes = [fu.result() for fu in futures]

    merged: List[Headline] = []
    for (name, _), (headlines, error) in zip(jobs, outcomes):
        if error is not None:
            result.errors[name] = error
            continue
        merged.extend(headlines)

    result.headlines = unique_by_url(merged)
    logger.info(
        "collection finished",
        headlines=len(result.headlines),
        sources_ok=len(jobs) - sum(1 for n, _ in jobs if n in result.errors),
        sources_failed=len(result.errors),
    )
    return result


def _parse_published(value: str) -> Optional[datetime]:
    for fmt in _DATE_FORMATS:
        try:
            dt = datetime.strptime(value, fmt)
        except ValueError:
            continue
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt
    return None


def filter_by_hours(
    headlines: Sequence[Headline], hours: int, *, now: Optional[datetime] = None,
) -> List[Headline]:
    """
    Keep headlines published within the last `hours` hours.

    `hours <= 0` disables the filter. Headlines without a date are kept;
    headlines whose date cannot be parsed are dropped.
    """
    if hours <= 0:
        return list(headlines)

    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    cutoff = now - timedelta(hours=hours)

    out: List[Headline] = []
    for h in headlines:
        if not h.published_at:
            out.append(h)
            continue
        dt = _parse_published(h.published_at)
        if dt is None:
            logger.debug("unparseable date", title=h.title, published_at=h.published_at)
            continue
        if dt > cutoff:
            out.append(h)
    return out


@dataclass
class CollectOptions:
    sources: Optional[Sequence[str]] = None
    limit: int = DEFAULT_PER_SOURCE
    hours_back: int = 0
    max_workers: int = 1


class HeadlineAggregator:
    """
    High-level API: collect headlines from the registered sources.

    Pipeline: per-source fetch → parse → filter → normalize, then concat → dedup by URL
    """

    def __init__(
        self,
        *,
        config: Optional[HeadlineSourceConfig] = None,
        sources: Optional[Sequence[str]] = None,
        limit: int = DEFAULT_PER_SOURCE,
        hours_back: int = 0,
        max_workers: int = 1,
        registry: Optional[Mapping[str, HeadlineCollector]] = None,
    ) -> None:
        self.config = config or default_config()
        self.registry = registry
        self.options = CollectOptions(
            sources=sources,
            limit=limit,
            hours_back=hours_back,
            max_workers=max_workers,
        )

    def collect(self) -> CollectResult:
        result = collect_from_sources(
            self.options.sources,
            self.options.limit,
            self.config,
            registry=self.registry,
            max_workers=self.options.max_workers,
        )
        if self.options.hours_back > 0:
            result.headlines = filter_by_hours(result.headlines, self.options.hours_back)
        return result
