"""Request configuration and the fetch entry points."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from urllib.parse import quote, urlencode, urlsplit, urlunsplit

from . import mapper
from .config import DEFAULT_BASE_URL, load_settings
from .exceptions import UrlParsing
from .models import Country, Endpoint, NewsAPIResponse
from .transports import asynchronous, blocking, browser

if TYPE_CHECKING:
    import aiohttp
    import requests


class NewsAPI:
    """Fluent request builder for NewsAPI.

    >>> api = NewsAPI("key").set_country(Country.FR)
    >>> api.prepare_url()
    'https://newsapi.org/v2/top-headlines?country=fr'
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = None,
        browser_ws: Optional[str] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.browser_ws = browser_ws
        self._endpoint = Endpoint.TOP_HEADLINES
        self._country = Country.US
        self.logger = logging.getLogger(self.__class__.__name__)

    @classmethod
    def from_env(cls) -> "NewsAPI":
        settings = load_settings()
        return cls(
            settings.api_key,
            base_url=settings.base_url,
            timeout=settings.timeout,
            browser_ws=settings.browser_ws,
        )

    @property
    def endpoint(self) -> Endpoint:
        return self._endpoint

    @property
    def country(self) -> Country:
        return self._country

    def set_endpoint(self, endpoint: Endpoint) -> "NewsAPI":
        self._endpoint = endpoint
        return self

    def set_country(self, country: Country) -> "NewsAPI":
        self._country = country
        return self

    def prepare_url(self) -> str:
        """Compose ``<base>/<endpoint>?country=<country>``; raises UrlParsing on a bad base URL."""
        try:
            parts = urlsplit(self.base_url)
            # accessing .port validates the netloc
            parts.port
        except ValueError as exc:
            raise UrlParsing() from exc
        if parts.scheme not in ("http", "https") or not parts.hostname:
            raise UrlParsing(f"Url parsing failed: {self.base_url!r} cannot be a base URL")

        path = f"{parts.path.rstrip('/')}/{quote(str(self._endpoint), safe='')}"
        query = urlencode({"country": str(self._country)})
        return urlunsplit((parts.scheme, parts.netloc, path, query, parts.fragment))

    def fetch(self, session: Optional[requests.Session] = None) -> NewsAPIResponse:
        """Fetch articles with a blocking request."""
        url = self.prepare_url()
        self.logger.info("GET %s", url)
        response = blocking.fetch_json(url, self.api_key, session=session, timeout=self.timeout)
        return mapper.classify(response)

    async def fetch_async(self, session: Optional[aiohttp.ClientSession] = None) -> NewsAPIResponse:
        """Fetch articles with aiohttp."""
        url = self.prepare_url()
        self.logger.info("GET %s (async)", url)
        response = await asynchronous.fetch_json(url, self.api_key, session=session, timeout=self.timeout)
        return mapper.classify(response)

    async def fetch_web(self) -> NewsAPIResponse:
        """Fetch articles from inside a browser context."""
        url = self.prepare_url()
        self.logger.info("GET %s (browser)", url)
        response = await browser.fetch_json(url, self.api_key, browser_ws=self.browser_ws)
        return mapper.classify(response)
