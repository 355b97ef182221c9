from __future__ import annotations

import io
from typing import Any, Dict, List

import feedparser
import httpx

from .exceptions import FetchError, ParseError
from .logging import get_logger
from .models import HeadlineSourceConfig

logger = get_logger(component="fetcher")


def fetch_feed_entries(url: str, cfg: HeadlineSourceConfig) -> List[Dict[str, Any]]:
    """
    Fetch a single RSS/Atom feed and return its raw entries in feed order.

    One GET is issued with the configured timeout and User-Agent; the client and
    response are released on every exit path.

    Raises FetchError on request/transport failure or a non-200 status, and
    ParseError when the body is not a recognisable feed. An empty entry list is
    returned as-is; deciding whether that is an error is up to the caller.
    """
    try:
        with httpx.Client(
            timeout=cfg.timeout,
            headers={"User-Agent": cfg.user_agent},
            follow_redirects=True,
        ) as client:
            resp = client.get(url)
            if resp.status_code != 200:
                raise FetchError(
                    f"unexpected status {resp.status_code} for {url}",
                    url=url,
                    status_code=resp.status_code,
                )
            body = resp.content
    except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
        raise FetchError(f"request creation failed for {url}: {e}", url=url) from e
    except httpx.HTTPError as e:
        raise FetchError(f"request failed for {url}: {e}", url=url) from e

    # a stream keeps feedparser from treating the body as a path or URL
    feed = feedparser.parse(io.BytesIO(body))

    entries = getattr(feed, "entries", None)
    if not isinstance(entries, list):
        raise ParseError(f"Feed has no entry list: {url}")

    bozo = getattr(feed, "bozo", 0)
    version = feed.get("version") or ""
    if not entries and (bozo or not version):
        msg = f"Invalid RSS/Atom feed: {url}"
        exc = getattr(feed, "bozo_exception", None)
        if exc:
            msg += f" ({exc})"
        raise ParseError(msg)

    if bozo:
        # Recoverable: feedparser still produced entries (e.g. charset mismatch).
        logger.info("feed parsed with warnings", url=url, reason=str(getattr(feed, "bozo_exception", "")))

    return entries
