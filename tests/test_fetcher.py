from __future__ import annotations

import httpx
import pytest

from carbon_headlines.exceptions import FetchError, ParseError
from carbon_headlines.fetcher import fetch_feed_entries

from feeds import rss_feed, rss_item

FEED_URL = "https://feeds.example.com/rss"


def test_fetch_returns_entries_in_order(httpx_mock, cfg):
    httpx_mock.add_response(
        url=FEED_URL,
        content=rss_feed(
            rss_item("First", "https://example.com/1"),
            rss_item("Second", "https://example.com/2"),
        ),
        headers={"content-type": "application/rss+xml; charset=utf-8"},
    )

    entries = fetch_feed_entries(FEED_URL, cfg)

    assert [e["title"] for e in entries] == ["First", "Second"]
    request = httpx_mock.get_requests()[0]
    assert request.headers["User-Agent"] == "carbon-headlines-test/1.0"


def test_fetch_empty_but_valid_feed_returns_empty_list(httpx_mock, cfg):
    httpx_mock.add_response(url=FEED_URL, content=rss_feed())
    assert fetch_feed_entries(FEED_URL, cfg) == []


def test_non_200_status_is_fetch_error(httpx_mock, cfg):
    httpx_mock.add_response(url=FEED_URL, status_code=403)

    with pytest.raises(FetchError) as exc_info:
        fetch_feed_entries(FEED_URL, cfg)

    assert exc_info.value.status_code == 403
    assert exc_info.value.url == FEED_URL


def test_transport_failure_is_fetch_error(httpx_mock, cfg):
    httpx_mock.add_exception(httpx.ConnectError("connection refused"), url=FEED_URL)

    with pytest.raises(FetchError) as exc_info:
        fetch_feed_entries(FEED_URL, cfg)

    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


def test_invalid_url_is_fetch_error(cfg):
    with pytest.raises(FetchError):
        fetch_feed_entries("not a url", cfg)


def test_unparseable_body_is_parse_error(httpx_mock, cfg):
    httpx_mock.add_response(url=FEED_URL, content=b"this is not a feed")

    with pytest.raises(ParseError):
        fetch_feed_entries(FEED_URL, cfg)
