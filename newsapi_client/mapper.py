"""Classify decoded responses into success or a typed error."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from .exceptions import BadRequest
from .models import NewsAPIResponse

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "Unknown error"

# NewsAPI error code -> reason reported to the caller
ERROR_REASONS: Dict[str, str] = {
    "apiKeyDisabled": "Your API key has been disabled",
}


def map_response_err(code: Optional[str], message: Optional[str] = None) -> BadRequest:
    """Return the error matching a NewsAPI error code."""
    reason = ERROR_REASONS.get(code, UNKNOWN_ERROR) if code is not None else UNKNOWN_ERROR
    return BadRequest(reason, api_message=message)


def classify(response: NewsAPIResponse) -> NewsAPIResponse:
    """Return ``response`` when its status is ok, raise BadRequest otherwise."""
    if response.status == "ok":
        return response
    logger.warning("NewsAPI returned status=%s code=%s", response.status, response.code)
    raise map_response_err(response.code, response.message)
