"""
Shared fixtures for fetch_auth_client tests.

The "servers" here are httpx.MockTransport handlers that enforce credentials
and answer 401 to anything else.
"""
import base64

import httpx
import pytest

from fetch_auth_client.auth import BasicAuthAuthorizer, BearerTokenAuthorizer

SERVER_URL = "https://api.example.com/resource"


def bearer_server(expected: str = "Bearer value"):
    """Handler requiring an exact Authorization header."""

    def handler(request: httpx.Request) -> httpx.Response:
        if request.headers.get("Authorization") != expected:
            return httpx.Response(401, text="unauthorized")
        return httpx.Response(200, text="bearer-ok")

    return handler


def basic_server(user: str = "user", password: str = "password"):
    """Handler requiring HTTP Basic credentials."""

    def handler(request: httpx.Request) -> httpx.Response:
        header = request.headers.get("Authorization", "")
        scheme, _, encoded = header.partition(" ")
        if scheme != "Basic":
            return httpx.Response(401, text="unauthorized")
        decoded = base64.b64decode(encoded).decode("utf-8")
        if decoded != f"{user}:{password}":
            return httpx.Response(401, text="unauthorized")
        return httpx.Response(200, text="basic-ok")

    return handler


@pytest.fixture
def bearer_authorizer():
    return BearerTokenAuthorizer("key", "value")


@pytest.fixture
def basic_authorizer():
    return BasicAuthAuthorizer("user", "password")


@pytest.fixture
def sample_request():
    """Fresh unsent GET request."""
    return httpx.Request("GET", SERVER_URL)
