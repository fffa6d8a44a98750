"""
Pluggable request authorization for httpx GET clients.

Attach a bearer token or HTTP Basic authorizer to a client; the client builds
the request and lets the authorizer stamp credentials onto it.
"""
from .types import AuthType, HttpMethod
from .config import (
    AuthConfig,
    TimeoutConfig,
    ClientConfig,
)
from .encoding import encode_auth
from .auth import (
    Authorizer,
    BearerTokenAuthorizer,
    BasicAuthAuthorizer,
    create_authorizer,
)
from .core.base_client import AsyncAuthClient, SyncAuthClient
from .factory import create_async_client, create_sync_client

__all__ = [
    # Types
    "AuthType",
    "HttpMethod",
    # Config
    "AuthConfig",
    "TimeoutConfig",
    "ClientConfig",
    # Encoding
    "encode_auth",
    # Auth
    "Authorizer",
    "BearerTokenAuthorizer",
    "BasicAuthAuthorizer",
    "create_authorizer",
    # Clients
    "AsyncAuthClient",
    "SyncAuthClient",
    # Factory
    "create_async_client",
    "create_sync_client",
]

__version__ = "0.1.0"
