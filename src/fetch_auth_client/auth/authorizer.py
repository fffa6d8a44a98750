"""
Authorizers for fetch_auth_client.

An authorizer stamps credentials onto an outgoing ``httpx.Request``. The client
holds one without knowing which scheme it implements. Authorizers are also
``httpx.Auth`` instances, so they can be handed to plain httpx calls as ``auth=``.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Generator

import httpx

from ..config import AuthConfig, validate_auth_config
from ..console import mask_value
from ..encoding import encode_auth

logger = logging.getLogger("fetch_auth_client.auth")


class Authorizer(httpx.Auth, ABC):
    """Authorizer interface."""

    @abstractmethod
    def authorize(self, request: httpx.Request) -> httpx.Request:
        """Apply credentials to the request and return it."""
        ...

    def auth_flow(
        self, request: httpx.Request
    ) -> Generator[httpx.Request, httpx.Response, None]:
        yield self.authorize(request)


@dataclass(frozen=True, repr=False)
class BearerTokenAuthorizer(Authorizer):
    """
    Bearer token authorizer.

    ``token`` is the raw value passed in; ``token_value`` is ``"Bearer " + token``,
    computed once at construction. The prefix is applied unconditionally.
    ``token_key`` is kept as metadata only and never reaches the request.
    """

    token_key: str
    token: str
    token_value: str = field(init=False)

    def __post_init__(self):
        header = encode_auth("bearer", token=self.token)
        object.__setattr__(self, "token_value", header["Authorization"])

    def authorize(self, request: httpx.Request) -> httpx.Request:
        request.headers["Authorization"] = self.token_value
        logger.debug(
            f"BearerTokenAuthorizer.authorize: {request.method} {request.url} "
            f"Authorization={mask_value(self.token_value)}"
        )
        return request

    def __repr__(self) -> str:
        return (
            f"BearerTokenAuthorizer(token_key={self.token_key!r}, "
            f"token_value={mask_value(self.token_value)!r})"
        )


@dataclass(frozen=True, repr=False)
class BasicAuthAuthorizer(Authorizer):
    """HTTP Basic authorizer (RFC 7617)."""

    user: str
    api_token: str

    def authorize(self, request: httpx.Request) -> httpx.Request:
        header = encode_auth("basic", username=self.user, password=self.api_token)
        request.headers.update(header)
        logger.debug(
            f"BasicAuthAuthorizer.authorize: {request.method} {request.url} "
            f"user={self.user}, api_token={mask_value(self.api_token)}"
        )
        return request

    def __repr__(self) -> str:
        return (
            f"BasicAuthAuthorizer(user={self.user!r}, "
            f"api_token={mask_value(self.api_token)!r})"
        )


def create_authorizer(config: AuthConfig) -> Authorizer:
    """Create authorizer from config."""
    validate_auth_config(config)
    logger.debug(f"create_authorizer: {config!r}")

    if config.type == "bearer":
        return BearerTokenAuthorizer(config.token_key or "", config.token)
    return BasicAuthAuthorizer(config.username, config.password)
