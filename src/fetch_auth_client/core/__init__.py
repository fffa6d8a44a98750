"""
Core clients for fetch_auth_client.
"""
from .base_client import AsyncAuthClient, SyncAuthClient
from .request_builder import apply_authorizer, build_request, validate_url

__all__ = [
    "AsyncAuthClient",
    "SyncAuthClient",
    "apply_authorizer",
    "build_request",
    "validate_url",
]
