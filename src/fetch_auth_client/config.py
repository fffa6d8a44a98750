"""
Configuration for fetch_auth_client.
"""
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Optional, Union

import httpx

from .console import mask_value
from .types import AuthType

if TYPE_CHECKING:
    from .auth import Authorizer


@dataclass
class AuthConfig:
    """Authentication configuration.

    Auth types:
    - bearer: Authorization: Bearer <token>. ``token_key`` is carried as
      metadata and does not affect the header.
    - basic: Authorization: Basic <base64(username:password)>
    """

    type: AuthType
    token_key: Optional[str] = None    # Bearer metadata
    token: Optional[str] = None        # For bearer
    username: Optional[str] = None     # For basic
    password: Optional[str] = None     # For basic (API token or password)

    def __repr__(self) -> str:
        """Safe repr that masks sensitive values."""
        return (
            f"AuthConfig(type={self.type!r}, "
            f"token_key={self.token_key!r}, "
            f"token={mask_value(self.token)!r}, "
            f"username={self.username!r}, "
            f"password={mask_value(self.password)!r})"
        )


@dataclass
class TimeoutConfig:
    """Timeout configuration in seconds."""

    connect: float = 5.0
    read: float = 5.0
    write: float = 5.0
    pool: float = 5.0


@dataclass
class ClientConfig:
    """Client configuration."""

    auth: Union["Authorizer", AuthConfig]
    timeout: Union[TimeoutConfig, float, None] = None
    headers: Dict[str, str] = field(default_factory=dict)
    raise_for_status: bool = False
    trace: bool = False


@dataclass
class ResolvedConfig:
    """Resolved client configuration with defaults applied."""

    authorizer: "Authorizer"
    timeout: httpx.Timeout
    headers: Dict[str, str]
    raise_for_status: bool
    trace: bool


DEFAULT_TIMEOUT = httpx.Timeout(5.0)


def normalize_timeout(timeout: Union[TimeoutConfig, float, None]) -> httpx.Timeout:
    """Normalize timeout config. None means 5s on every phase."""
    if timeout is None:
        return DEFAULT_TIMEOUT
    if isinstance(timeout, (int, float)):
        return httpx.Timeout(float(timeout))
    return httpx.Timeout(
        connect=timeout.connect,
        read=timeout.read,
        write=timeout.write,
        pool=timeout.pool,
    )


def validate_auth_config(auth: AuthConfig) -> None:
    """Validate auth configuration."""
    valid_types = {"bearer", "basic"}

    if auth.type not in valid_types:
        raise ValueError(f"Invalid auth type: {auth.type}. Must be one of: {sorted(valid_types)}")

    if auth.type == "bearer":
        if auth.token is None:
            raise ValueError("token is required for bearer auth type")

    elif auth.type == "basic":
        if auth.username is None:
            raise ValueError("username is required for basic auth type")
        if auth.password is None:
            raise ValueError("password is required for basic auth type")


def resolve_config(config: ClientConfig) -> ResolvedConfig:
    """Resolve client configuration with defaults."""
    from .auth import Authorizer, create_authorizer

    if isinstance(config.auth, AuthConfig):
        authorizer = create_authorizer(config.auth)
    elif isinstance(config.auth, Authorizer):
        authorizer = config.auth
    else:
        raise ValueError(
            f"auth must be an Authorizer or AuthConfig, got {type(config.auth).__name__}"
        )

    return ResolvedConfig(
        authorizer=authorizer,
        timeout=normalize_timeout(config.timeout),
        headers=dict(config.headers),
        raise_for_status=config.raise_for_status,
        trace=config.trace,
    )
