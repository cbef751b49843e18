"""
newsapi_client

Small client for the NewsAPI ``/v2`` HTTP API.

Flow: configure → compose URL → GET (blocking, async or browser) → decode →
classify.

Example
-------
from newsapi_client import NewsAPI, Country

api = NewsAPI("my-key").set_country(Country.FR)
for article in api.fetch().articles:
    print(article.title, article.url)
"""
import logging

from .client import NewsAPI
from .exceptions import (
    ArticleParseFail,
    AsyncRequestFailed,
    BadRequest,
    FailedResponseToString,
    NewsAPIError,
    RequestFailed,
    UrlParsing,
)
from .mapper import classify, map_response_err
from .models import Article, Country, Endpoint, NewsAPIResponse

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NewsAPI",
    "Article",
    "Country",
    "Endpoint",
    "NewsAPIResponse",
    "classify",
    "map_response_err",
    "NewsAPIError",
    "RequestFailed",
    "FailedResponseToString",
    "ArticleParseFail",
    "UrlParsing",
    "BadRequest",
    "AsyncRequestFailed",
]
