"""
Daily Pause Backend — Session Token Extraction
===============================================

What:  Pulls the session token out of request headers.
Why:   Browsers on the same site send the `session` cookie; cross-site and
       native clients send `Authorization: Bearer <token>`.
How:   Bearer first (when allowed), then the cookie. Parsing is delegated to
       FastAPI's Authorization helper and Starlette's cookie parser, so
       both variants read headers exactly like `Request.cookies` would.
       The helpers take any Mapping with case-insensitive `.get()`
       (Starlette Headers qualify).
"""

from typing import Mapping, Optional

from fastapi.security.utils import get_authorization_scheme_param
from starlette.requests import cookie_parser


def bearer_token(headers: Mapping[str, str]) -> Optional[str]:
    """Token from `Authorization: Bearer <token>`, or None."""
    scheme, credentials = get_authorization_scheme_param(headers.get("authorization"))
    if scheme.lower() != "bearer":
        return None
    return credentials.strip() or None


def cookie_value(cookie_header: Optional[str], name: str) -> Optional[str]:
    """Value of cookie `name` in a raw `Cookie` header, or None."""
    if not cookie_header:
        return None
    return cookie_parser(cookie_header).get(name) or None


def extract_token(
    headers: Mapping[str, str],
    allow_bearer: bool = True,
    cookie_name: str = "session",
) -> Optional[str]:
    """
    Session token from a request, bearer header taking priority.

    Args:
        headers: Request headers (case-insensitive mapping)
        allow_bearer: False restricts lookup to the cookie
        cookie_name: Name of the session cookie
    """
    if allow_bearer:
        token = bearer_token(headers)
        if token:
            return token
    return cookie_value(headers.get("cookie"), cookie_name)
