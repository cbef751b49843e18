"""Browser transport: performs the request from a Chromium context via Playwright."""

from __future__ import annotations

import logging
from typing import Optional

from ..exceptions import ArticleParseFail, BadRequest
from ..models import NewsAPIResponse

try:
    from playwright.async_api import Error as PlaywrightError
    from playwright.async_api import async_playwright
except ImportError:  # pragma: no cover - optional dependency
    PlaywrightError = None
    async_playwright = None

logger = logging.getLogger(__name__)

SEND_FAILED = "failed sending request"
JSON_FAILED = "failed converting response to json"


async def fetch_json(url: str, api_key: str, browser_ws: Optional[str] = None) -> NewsAPIResponse:
    """GET ``url`` from a browser context.

    Connects to a remote browser over CDP when ``browser_ws`` is given, else
    launches a headless Chromium. Every failure is reported as BadRequest.
    """
    if async_playwright is None:
        raise RuntimeError("playwright is required for browser fetches (pip install playwright)")

    try:
        async with async_playwright() as p:
            return await _fetch_in_browser(p, url, api_key, browser_ws)
    except PlaywrightError as exc:
        # driver start/stop; errors inside the browser are already BadRequest
        logger.error("Playwright driver failed for %s: %s", url, exc)
        raise BadRequest(SEND_FAILED) from exc


async def _fetch_in_browser(p, url: str, api_key: str, browser_ws: Optional[str]) -> NewsAPIResponse:
    browser = None
    try:
        try:
            if browser_ws:
                browser = await p.chromium.connect_over_cdp(browser_ws)
            else:
                browser = await p.chromium.launch()
            context = await browser.new_context()
            response = await context.request.get(url, headers={"Authorization": api_key})
        except PlaywrightError as exc:
            logger.error("Browser fetch of %s failed: %s", url, exc)
            raise BadRequest(SEND_FAILED) from exc

        try:
            payload = await response.json()
            return NewsAPIResponse.from_dict(payload)
        except (PlaywrightError, ValueError, ArticleParseFail) as exc:
            logger.error("Browser response from %s is not valid JSON: %s", url, exc)
            raise BadRequest(JSON_FAILED) from exc
    finally:
        if browser is not None:
            await browser.close()
