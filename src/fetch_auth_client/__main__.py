"""
Demonstration entry point: one bearer-token fetch and one basic-auth fetch.

    python -m fetch_auth_client

Any failure propagates out of main and the process exits non-zero.
"""
import asyncio
import logging

from .auth import BasicAuthAuthorizer, BearerTokenAuthorizer
from .core.base_client import AsyncAuthClient

BEARER_URL = "http://site-that-needs-bearer-token"
BASIC_AUTH_URL = "http://site-that-needs-basic-auth"


async def main() -> None:
    async with AsyncAuthClient(BearerTokenAuthorizer("key", "value")) as bearer_client:
        resp = await bearer_client.fetch(BEARER_URL)
    print(resp)

    async with AsyncAuthClient(BasicAuthAuthorizer("user", "password")) as basic_auth_client:
        resp = await basic_auth_client.fetch(BASIC_AUTH_URL)
    print(resp)


def run() -> None:
    logging.basicConfig(level=logging.WARNING)
    asyncio.run(main())


if __name__ == "__main__":
    run()
