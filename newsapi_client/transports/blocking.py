"""Blocking transport built on requests."""

from __future__ import annotations

import logging
from typing import Optional

import requests

from ..exceptions import FailedResponseToString, RequestFailed
from ..models import NewsAPIResponse

logger = logging.getLogger(__name__)


def fetch_json(
    url: str,
    api_key: str,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
) -> NewsAPIResponse:
    """GET ``url`` and decode the body, blocking the calling thread."""
    http = session or requests
    headers = {"Authorization": api_key}
    try:
        resp = http.get(url, headers=headers, timeout=timeout, stream=True)
    except requests.RequestException as exc:
        logger.error("Request to %s failed: %s", url, exc)
        raise RequestFailed() from exc

    try:
        body = resp.content
    except (requests.RequestException, OSError) as exc:
        logger.error("Failed reading response body from %s: %s", url, exc)
        raise FailedResponseToString() from exc
    finally:
        resp.close()

    try:
        text = body.decode(resp.encoding or "utf-8")
    except (UnicodeDecodeError, LookupError) as exc:
        raise FailedResponseToString() from exc

    return NewsAPIResponse.from_json(text)
