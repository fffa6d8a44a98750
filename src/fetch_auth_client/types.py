"""
Type definitions for fetch_auth_client.
"""
from typing import Literal


# Auth types
#
# - bearer: Authorization: Bearer <token>
# - basic: Authorization: Basic <base64(username:password)>
AuthType = Literal["bearer", "basic"]

# Only GET is issued by the client
HttpMethod = Literal["GET"]
