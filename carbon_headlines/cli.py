from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from .config import DEFAULT_PER_SOURCE, load_config
from .core import HeadlineAggregator
from .exceptions import HeadlineError
from .logging import configure_logging, get_logger
from .serialization import write_json, write_json_file
from .sources import available_sources
from .text import sort_strings, uniq_strings


def _parse_sources(raw: str) -> Optional[List[str]]:
    names = uniq_strings(s.strip().lower() for s in raw.split(","))
    if not names or "all" in names:
        return None
    return names


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="carbon-headlines",
        description="Collect carbon-market headlines from RSS/Atom feeds and print them as JSON.",
    )
    parser.add_argument(
        "--sources", default="all",
        help=f"comma-separated source keys, or 'all' (available: {', '.join(sort_strings(available_sources()))})",
    )
    parser.add_argument("--per-source", type=int, default=DEFAULT_PER_SOURCE,
                        help="max headlines per source")
    parser.add_argument("--hours-back", type=int, default=0,
                        help="keep only headlines from the last N hours (0 = no filter)")
    parser.add_argument("--out", default="", help="write JSON to this file instead of stdout")
    parser.add_argument("--workers", type=int, default=1,
                        help="fetch this many sources in parallel")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=logging.DEBUG if args.verbose else logging.INFO)
    logger = get_logger(component="cli")

    try:
        cfg = load_config()
        result = HeadlineAggregator(
            config=cfg,
            sources=_parse_sources(args.sources),
            limit=args.per_source,
            hours_back=args.hours_back,
            max_workers=args.workers,
        ).collect()

        if args.out:
            write_json_file(args.out, result.headlines)
            logger.info("wrote headlines", path=args.out, count=len(result.headlines))
        else:
            write_json(result.headlines)
    except (HeadlineError, OSError) as e:
        logger.error("run failed", error=str(e))
        return 1
    return 0
