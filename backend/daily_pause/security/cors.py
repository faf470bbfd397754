"""
Daily Pause Backend — CORS Policy
==================================

What:  Computes the CORS response headers for a request's Origin.
Why:   The frontend is deployed on several hosts (production domain plus
       per-branch preview URLs), so a static allow-list is not enough.
How:   An origin is echoed back when it is in the exact allow-list or ends
       with a configured suffix. Anything else gets the default origin, which
       the browser will then refuse to match. The policy never rejects a
       request itself.

Advertised on every response:
    Access-Control-Allow-Methods:     GET, POST, PUT, DELETE, OPTIONS
    Access-Control-Allow-Headers:     Content-Type, Authorization
    Access-Control-Allow-Credentials: true
"""

from typing import Dict, Iterable, Optional

from daily_pause.config import settings

ALLOWED_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
ALLOWED_HEADERS = "Content-Type, Authorization"


class CORSPolicy:
    def __init__(
        self,
        allowed_origins: Iterable[str] = (),
        allowed_suffixes: Iterable[str] = (),
        default_origin: str = "",
    ):
        self.allowed_origins = frozenset(allowed_origins)
        self.allowed_suffixes = tuple(allowed_suffixes)
        self.default_origin = default_origin

    def is_allowed(self, origin: Optional[str]) -> bool:
        if not origin:
            return False
        if origin in self.allowed_origins:
            return True
        return any(origin.endswith(suffix) for suffix in self.allowed_suffixes)

    def allow_origin(self, origin: Optional[str]) -> str:
        """Value for Access-Control-Allow-Origin."""
        if self.is_allowed(origin):
            return origin
        return self.default_origin

    def headers_for(self, origin: Optional[str]) -> Dict[str, str]:
        return {
            "Access-Control-Allow-Origin": self.allow_origin(origin),
            "Access-Control-Allow-Methods": ALLOWED_METHODS,
            "Access-Control-Allow-Headers": ALLOWED_HEADERS,
            "Access-Control-Allow-Credentials": "true",
            "Vary": "Origin",
        }

    @classmethod
    def from_settings(cls) -> "CORSPolicy":
        return cls(
            allowed_origins=settings.cors_origins_list,
            allowed_suffixes=settings.cors_origin_suffixes_list,
            default_origin=settings.cors_default_origin,
        )
