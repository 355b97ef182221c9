"""
carbon_headlines

Collects carbon-market and climate-policy headlines from several RSS/Atom feeds
and returns them as one deduplicated list.

Core ideas:
- Input: a fixed registry of feed sources, a per-source limit, a shared config
- Process: per source fetch → parse → (keyword filter) → normalize; then concat → dedup by URL
- Output: List[Headline], serializable as a JSON array

Example
-------
from carbon_headlines import HeadlineAggregator, write_json

result = HeadlineAggregator(limit=10).collect()
for name, error in result.errors.items():
    print(name, error)

write_json(result.headlines)
"""
from .models import Headline, HeadlineSourceConfig
from .core import CollectResult, HeadlineAggregator, collect_from_sources, filter_by_hours
from .serialization import read_json_file, write_json, write_json_file

__all__ = [
    "Headline",
    "HeadlineSourceConfig",
    "CollectResult",
    "HeadlineAggregator",
    "collect_from_sources",
    "filter_by_hours",
    "read_json_file",
    "write_json",
    "write_json_file",
]
