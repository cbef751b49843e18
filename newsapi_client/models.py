"""Typed records decoded from NewsAPI responses."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .exceptions import ArticleParseFail


class Endpoint(Enum):
    """API resource selector, rendered as a URL path segment."""

    TOP_HEADLINES = "top-headlines"

    def __str__(self) -> str:
        return self.value


class Country(Enum):
    """Country filter, rendered as the ``country`` query value."""

    US = "us"
    FR = "fr"
    GB = "gb"
    DE = "de"
    IT = "it"
    CA = "ca"
    AU = "au"
    IN = "in"

    def __str__(self) -> str:
        return self.value


def _optional_str(data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ArticleParseFail(f"Article parsing failed: '{key}' must be a string or null")
    return value


def _required_str(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ArticleParseFail(f"Article parsing failed: missing or invalid '{key}'")
    return value


@dataclass(frozen=True)
class Article:
    """A single headline returned by the API."""

    title: str
    url: str
    description: Optional[str] = None
    author: Optional[str] = None
    source: Optional[str] = None
    url_to_image: Optional[str] = None
    published_at: Optional[str] = None
    content: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Article":
        if not isinstance(data, dict):
            raise ArticleParseFail("Article parsing failed: article is not an object")
        source = data.get("source")
        source_name = None
        if isinstance(source, dict):
            source_name = _optional_str(source, "name")
        elif source is not None:
            raise ArticleParseFail("Article parsing failed: 'source' must be an object or null")
        return cls(
            title=_required_str(data, "title"),
            url=_required_str(data, "url"),
            description=_optional_str(data, "description"),
            author=_optional_str(data, "author"),
            source=source_name,
            url_to_image=_optional_str(data, "urlToImage"),
            published_at=_optional_str(data, "publishedAt"),
            content=_optional_str(data, "content"),
        )


@dataclass(frozen=True)
class NewsAPIResponse:
    """
    Decoded body of a NewsAPI call.

    ``code`` and ``message`` are only set by the server on failure. ``articles``
    is mandatory on successful responses; error bodies omit it and decode to
    an empty tuple.
    """

    status: str
    articles: Tuple[Article, ...] = ()
    code: Optional[str] = None
    message: Optional[str] = None
    total_results: Optional[int] = None

    @property
    def is_ok(self) -> bool:
        return self.status == "ok"

    @classmethod
    def from_dict(cls, data: Any) -> "NewsAPIResponse":
        """Build a response from a decoded JSON object, raising ArticleParseFail on bad shape."""
        if not isinstance(data, dict):
            raise ArticleParseFail("Article parsing failed: payload is not an object")
        status = _required_str(data, "status")

        raw_articles = data.get("articles")
        if raw_articles is None and status != "ok":
            raw_articles = []
        if not isinstance(raw_articles, list):
            raise ArticleParseFail("Article parsing failed: missing or invalid 'articles'")

        total = data.get("totalResults")
        if total is not None and (isinstance(total, bool) or not isinstance(total, int)):
            raise ArticleParseFail("Article parsing failed: 'totalResults' must be an integer")

        return cls(
            status=status,
            articles=tuple(Article.from_dict(item) for item in raw_articles),
            code=_optional_str(data, "code"),
            message=_optional_str(data, "message"),
            total_results=total,
        )

    @classmethod
    def from_json(cls, text: str) -> "NewsAPIResponse":
        try:
            data = json.loads(text)
        except ValueError as exc:
            raise ArticleParseFail() from exc
        return cls.from_dict(data)
