"""
Request builder utilities for fetch_auth_client.
"""
import logging
from typing import Dict, Optional, Union
from urllib.parse import urlparse

import httpx

from ..auth import Authorizer
from ..types import HttpMethod

logger = logging.getLogger("fetch_auth_client.request_builder")

METHOD: HttpMethod = "GET"


def validate_url(url: str) -> None:
    """Require an absolute URL (scheme and host)."""
    if not url:
        raise ValueError("url is required")

    parsed = urlparse(url)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError(f"Invalid url, expected an absolute URL: {url}")


def build_request(
    client: Union[httpx.Client, httpx.AsyncClient],
    url: str,
    headers: Optional[Dict[str, str]] = None,
) -> httpx.Request:
    """Build an unsent GET request for url."""
    validate_url(url)
    request = client.build_request(METHOD, url, headers=headers)
    logger.debug(f"build_request: {request.method} {request.url}")
    return request


def apply_authorizer(authorizer: Authorizer, request: httpx.Request) -> httpx.Request:
    """Run the request through the authorizer."""
    logger.debug(f"apply_authorizer: authorizer={type(authorizer).__name__}")
    return authorizer.authorize(request)
