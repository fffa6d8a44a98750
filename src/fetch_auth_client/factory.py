"""
Factory functions for creating authorized clients.
"""
from typing import Dict, Optional, Union

import httpx

from .auth import Authorizer
from .config import AuthConfig, ClientConfig, TimeoutConfig
from .core.base_client import AsyncAuthClient, SyncAuthClient


def _build_config(
    auth: Union[Authorizer, AuthConfig],
    timeout: Union[TimeoutConfig, float, None] = None,
    headers: Optional[Dict[str, str]] = None,
    raise_for_status: bool = False,
    trace: bool = False,
) -> ClientConfig:
    return ClientConfig(
        auth=auth,
        timeout=timeout,
        headers=headers or {},
        raise_for_status=raise_for_status,
        trace=trace,
    )


def create_async_client(
    auth: Union[Authorizer, AuthConfig],
    *,
    timeout: Union[TimeoutConfig, float, None] = None,
    headers: Optional[Dict[str, str]] = None,
    raise_for_status: bool = False,
    trace: bool = False,
    httpx_client: Optional[httpx.AsyncClient] = None,
) -> AsyncAuthClient:
    """
    Create an async client.

    Example:
        client = create_async_client(BearerTokenAuthorizer("key", "value"))
        body = await client.fetch("https://api.example.com/me")
    """
    config = _build_config(auth, timeout, headers, raise_for_status, trace)
    return AsyncAuthClient(config, httpx_client=httpx_client)


def create_sync_client(
    auth: Union[Authorizer, AuthConfig],
    *,
    timeout: Union[TimeoutConfig, float, None] = None,
    headers: Optional[Dict[str, str]] = None,
    raise_for_status: bool = False,
    trace: bool = False,
    httpx_client: Optional[httpx.Client] = None,
) -> SyncAuthClient:
    """Create a sync client."""
    config = _build_config(auth, timeout, headers, raise_for_status, trace)
    return SyncAuthClient(config, httpx_client=httpx_client)
