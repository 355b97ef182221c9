from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List


DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; carbon-relay/1.0; +https://example.invalid)"


@dataclass(frozen=True)
class Headline:
    """
    Stable public model representing one collected headline.

    WARNING: Do not change fields lightly. The JSON keys produced by `to_dict`
    are consumed by downstream document stores.
    """
    source: str
    title: str
    url: str
    published_at: str
    excerpt: str = ""
    is_headline: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "title": self.title,
            "url": self.url,
            "publishedAt": self.published_at,
            "excerpt": self.excerpt,
            "isHeadline": self.is_headline,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Headline":
        return cls(
            source=data.get("source") or "",
            title=data.get("title") or "",
            url=data.get("url") or "",
            published_at=data.get("publishedAt") or "",
            excerpt=data.get("excerpt") or "",
            is_headline=bool(data.get("isHeadline", False)),
        )

    @classmethod
    def list_from_json(cls, data: Iterable[Dict[str, Any]]) -> List["Headline"]:
        """Decode a JSON array (already parsed) into headlines."""
        return [cls.from_dict(d) for d in data]


@dataclass(frozen=True)
class HeadlineSourceConfig:
    """Per-run settings shared read-only by every source adapter."""
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
