"""
Authorizers for fetch_auth_client.
"""
from .authorizer import (
    Authorizer,
    BearerTokenAuthorizer,
    BasicAuthAuthorizer,
    create_authorizer,
)

__all__ = [
    "Authorizer",
    "BearerTokenAuthorizer",
    "BasicAuthAuthorizer",
    "create_authorizer",
]
