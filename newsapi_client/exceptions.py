"""Exception types raised by the NewsAPI client."""

from __future__ import annotations

from typing import Optional


class NewsAPIError(Exception):
    """Base class for every error raised by the client."""

    default_message = "News API error"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)


class RequestFailed(NewsAPIError):
    """Raised when the blocking transport cannot reach the API."""

    default_message = "Failed fetching articles"


class FailedResponseToString(NewsAPIError):
    """Raised when the blocking transport cannot read the response body."""

    default_message = "Failed converting response to string"


class ArticleParseFail(NewsAPIError):
    """Raised when the JSON payload is invalid or has the wrong shape."""

    default_message = "Article parsing failed"


class UrlParsing(NewsAPIError):
    """Raised when the base URL cannot be used to build a request URL."""

    default_message = "Url parsing failed"


class BadRequest(NewsAPIError):
    """Raised for API-level failures and browser transport failures."""

    def __init__(self, reason: str, api_message: Optional[str] = None) -> None:
        self.reason = reason
        self.api_message = api_message
        super().__init__(f"Request failed: {reason}")


class AsyncRequestFailed(NewsAPIError):
    """Raised for any transport or decode failure on the async path."""

    default_message = "Async request failed"
