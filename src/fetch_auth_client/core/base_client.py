"""
Authorized GET clients using httpx.
"""
import dataclasses
import logging
from typing import Optional, Union

import httpx

from ..auth import Authorizer
from ..config import ClientConfig, ResolvedConfig, resolve_config
from ..console import print_request, print_response
from .request_builder import apply_authorizer, build_request

logger = logging.getLogger("fetch_auth_client.base_client")


def _as_client_config(config: Union[ClientConfig, Authorizer]) -> ClientConfig:
    if isinstance(config, Authorizer):
        return ClientConfig(auth=config)
    return config


class _BaseAuthClient:
    """State shared by the async and sync clients."""

    def __init__(self, config: Union[ClientConfig, Authorizer]):
        self._source_config = _as_client_config(config)
        self._config: ResolvedConfig = resolve_config(self._source_config)
        self._closed = False

    @property
    def authorizer(self) -> Authorizer:
        """The authorizer fixed at construction."""
        return self._config.authorizer

    @property
    def closed(self) -> bool:
        return self._closed

    def _shared_config(self) -> ClientConfig:
        # Copies share the resolved authorizer instead of rebuilding it
        return dataclasses.replace(self._source_config, auth=self._config.authorizer)

    def _prepare(self, client: Union[httpx.Client, httpx.AsyncClient], url: str) -> httpx.Request:
        if self._closed:
            raise RuntimeError("Client has been closed")

        request = build_request(client, url, self._config.headers or None)
        request = apply_authorizer(self._config.authorizer, request)

        if self._config.trace:
            print_request(request.method, str(request.url), request.headers)
        return request

    def _finish(self, response: httpx.Response) -> str:
        logger.debug(
            f"{type(self).__name__}.fetch: {response.status_code} {response.reason_phrase} "
            f"url={response.url} encoding={response.encoding}"
        )
        if self._config.trace:
            print_response(response.status_code, response.reason_phrase or "", str(response.url))

        if self._config.raise_for_status:
            response.raise_for_status()
        return response.text


class AsyncAuthClient(_BaseAuthClient):
    """Asynchronous authorized GET client."""

    def __init__(
        self,
        config: Union[ClientConfig, Authorizer],
        httpx_client: Optional[httpx.AsyncClient] = None,
    ):
        super().__init__(config)
        if httpx_client is not None:
            self._client = httpx_client
        else:
            self._client = httpx.AsyncClient(timeout=self._config.timeout)

    async def fetch(self, url: str) -> str:
        """GET url with credentials applied and return the decoded body text."""
        request = self._prepare(self._client, url)
        logger.debug(f"AsyncAuthClient.fetch: sending {request.method} {request.url}")
        response = await self._client.send(request)
        return self._finish(response)

    def copy(self) -> "AsyncAuthClient":
        """New client with its own transport, sharing this client's authorizer."""
        return AsyncAuthClient(self._shared_config())

    async def close(self) -> None:
        """Close the client."""
        self._closed = True
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncAuthClient":
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.close()


class SyncAuthClient(_BaseAuthClient):
    """Synchronous authorized GET client."""

    def __init__(
        self,
        config: Union[ClientConfig, Authorizer],
        httpx_client: Optional[httpx.Client] = None,
    ):
        super().__init__(config)
        if httpx_client is not None:
            self._client = httpx_client
        else:
            self._client = httpx.Client(timeout=self._config.timeout)

    def fetch(self, url: str) -> str:
        """GET url with credentials applied and return the decoded body text."""
        request = self._prepare(self._client, url)
        logger.debug(f"SyncAuthClient.fetch: sending {request.method} {request.url}")
        response = self._client.send(request)
        return self._finish(response)

    def copy(self) -> "SyncAuthClient":
        """New client with its own transport, sharing this client's authorizer."""
        return SyncAuthClient(self._shared_config())

    def close(self) -> None:
        """Close the client."""
        self._closed = True
        self._client.close()

    def __enter__(self) -> "SyncAuthClient":
        """Enter sync context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit sync context manager."""
        self.close()
