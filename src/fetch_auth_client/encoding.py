"""
Header encoding for the supported auth schemes.
"""
import base64
from typing import Any, Dict


def _base64_encode(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("utf-8")


def encode_auth(auth_type: str, **kwargs: Any) -> Dict[str, str]:
    """
    Encodes authentication credentials into HTTP headers based on the auth type.

    Args:
        auth_type: The type of authentication ('bearer', 'basic' or 'none').
        **kwargs: credentials: token for bearer, username and password for basic.

    Returns:
        A dictionary containing the HTTP headers.
    """
    auth_type = auth_type.lower()

    username = kwargs.get("username")
    password = kwargs.get("password")
    token = kwargs.get("token")

    # RFC 7617: user-id and password joined by a single colon, password may be empty
    if auth_type == "basic":
        if username is None or password is None:
            raise ValueError("basic requires username and password")
        credentials = f"{username}:{password}"
        return {"Authorization": f"Basic {_base64_encode(credentials)}"}

    if auth_type == "bearer":
        if token is None:
            raise ValueError("bearer requires token")
        return {"Authorization": f"Bearer {token}"}

    if auth_type == "none":
        return {}

    raise ValueError(f"Unsupported auth type: {auth_type}")
