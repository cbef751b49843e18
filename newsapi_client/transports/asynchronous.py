"""Async transport built on aiohttp."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import aiohttp

from ..exceptions import ArticleParseFail, AsyncRequestFailed
from ..models import NewsAPIResponse

logger = logging.getLogger(__name__)


async def fetch_json(
    url: str,
    api_key: str,
    session: Optional[aiohttp.ClientSession] = None,
    timeout: Optional[float] = None,
) -> NewsAPIResponse:
    """GET ``url`` and decode the body without blocking the event loop.

    A session passed by the caller is left open; otherwise one is created for
    this call and closed afterwards.
    """
    owns_session = session is None
    if owns_session:
        session = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=timeout))
    request_kwargs = {"headers": {"Authorization": api_key}}
    if timeout is not None:
        request_kwargs["timeout"] = aiohttp.ClientTimeout(total=timeout)
    try:
        async with session.get(url, **request_kwargs) as resp:
            payload = await resp.json(content_type=None)
        return NewsAPIResponse.from_dict(payload)
    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError, ArticleParseFail) as exc:
        logger.error("Async request to %s failed: %s", url, exc)
        raise AsyncRequestFailed() from exc
    finally:
        if owns_session:
            await session.close()
