"""
Daily Pause Backend — Edge Route Table
=======================================

What:  A minimal method+path router with an explicit request context and a
       response builder, used by the edge variant of the API.
Why:   The edge deployment has no framework router; handlers are looked up in
       a table built once at process start and owned by the app instance.
How:   Routes are keyed "METHOD /path".

Lookup rules:
    1. Exact key match.
    2. Otherwise, wildcard keys (containing "*"): the key with "*" removed is
       a prefix the request key must start with. When several wildcard
       routes match, the LONGEST prefix wins; equal lengths fall back to
       registration order.
    3. Nothing matched → 404.

    OPTIONS preflight never reaches the table; the app answers it with the
    CORS headers first.

Example:
    table = RouteTable()

    @table.get("/api/journal")
    async def get_entry(ctx: RequestContext) -> ResponseBuilder:
        ...

    builder = await table.dispatch(ctx)
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession
from starlette.datastructures import Headers
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from daily_pause.exceptions import DailyPauseError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

WILDCARD = "*"


# ══════════════════════════════════════════════════════════════════════════
# Request Context
# ══════════════════════════════════════════════════════════════════════════

@dataclass
class RequestContext:
    """
    Everything a handler may read about the request.

    Attributes:
        method / path: Uppercased HTTP method and URL path
        headers:       Case-insensitive header mapping
        query:         Query string parameters
        body:          Raw request body
        db:            The request's database session (set by the app)
        state:         Per-request scratch space (e.g. "user_id")
    """

    method: str
    path: str
    headers: Mapping[str, str] = field(default_factory=lambda: Headers())
    query: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""
    db: Optional[AsyncSession] = None
    state: Dict[str, Any] = field(default_factory=dict)

    @property
    def key(self) -> str:
        return f"{self.method} {self.path}"

    def json(self, allow_null: bool = False) -> Dict[str, Any]:
        """
        Parsed JSON object body. An empty body reads as {}, and so does a
        literal `null` when `allow_null` is set.

        Raises:
            ValidationError: Body is not valid JSON, or not a JSON object.
        """
        if not self.body.strip():
            return {}
        try:
            data = json.loads(self.body)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ValidationError("Malformed JSON body") from e
        if data is None and allow_null:
            return {}
        if not isinstance(data, dict):
            raise ValidationError("JSON body must be an object")
        return data

    @classmethod
    async def from_request(cls, request: Request) -> "RequestContext":
        return cls(
            method=request.method.upper(),
            path=request.url.path,
            headers=request.headers,
            query=request.query_params,
            body=await request.body(),
        )


# ══════════════════════════════════════════════════════════════════════════
# Response Builder
# ══════════════════════════════════════════════════════════════════════════

@dataclass
class ResponseBuilder:
    """
    Status, headers and JSON body, converted to a Starlette response last.

    Cookies are kept as keyword sets for Starlette's set_cookie so several
    Set-Cookie headers can coexist.
    """

    status: int = 200
    body: Any = None
    headers: Dict[str, str] = field(default_factory=dict)
    cookies: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def json(cls, body: Any, status: int = 200) -> "ResponseBuilder":
        return cls(status=status, body=body)

    @classmethod
    def empty(cls, status: int = 204) -> "ResponseBuilder":
        return cls(status=status)

    @classmethod
    def error(cls, exc: DailyPauseError, request_id: str = "") -> "ResponseBuilder":
        """Error body in the same shape the server variant uses."""
        message = exc.message
        if exc.status_code >= 500:
            # Details stay in the server log
            message = "An internal error occurred. Please try again later."
        body: Dict[str, Any] = {"error": exc.error_code, "message": message}
        if exc.status_code == 400 and exc.context:
            body["details"] = exc.context
        if request_id:
            body["request_id"] = request_id
        return cls(status=exc.status_code, body=body)

    def set_cookie(
        self,
        name: str,
        value: str,
        max_age: int,
        secure: bool = True,
    ) -> "ResponseBuilder":
        self.cookies.append(
            {
                "key": name,
                "value": value,
                "max_age": max_age,
                "path": "/",
                "httponly": True,
                "secure": secure,
                "samesite": "strict",
            }
        )
        return self

    def clear_cookie(self, name: str, secure: bool = True) -> "ResponseBuilder":
        return self.set_cookie(name, "", max_age=0, secure=secure)

    def to_response(self) -> Response:
        if self.body is None:
            response: Response = Response(status_code=self.status, headers=self.headers)
        else:
            response = JSONResponse(self.body, status_code=self.status, headers=self.headers)
        for cookie in self.cookies:
            response.set_cookie(**cookie)
        return response


# ══════════════════════════════════════════════════════════════════════════
# Route Table
# ══════════════════════════════════════════════════════════════════════════

Handler = Callable[[RequestContext], Awaitable[ResponseBuilder]]


class RouteTable:
    def __init__(self):
        self._exact: Dict[str, Handler] = {}
        # (prefix, handler), kept sorted longest prefix first
        self._wildcards: List[Tuple[str, Handler]] = []

    def add(self, method: str, path: str, handler: Handler) -> None:
        key = f"{method.upper()} {path}"
        if WILDCARD in key:
            prefix = key.replace(WILDCARD, "", 1)
            self._wildcards.append((prefix, handler))
            # Stable sort: equal lengths keep registration order
            self._wildcards.sort(key=lambda route: len(route[0]), reverse=True)
        else:
            if key in self._exact:
                logger.warning("Route %s registered twice; last one wins", key)
            self._exact[key] = handler

    def route(self, method: str, path: str) -> Callable[[Handler], Handler]:
        def decorator(handler: Handler) -> Handler:
            self.add(method, path, handler)
            return handler

        return decorator

    def get(self, path: str) -> Callable[[Handler], Handler]:
        return self.route("GET", path)

    def post(self, path: str) -> Callable[[Handler], Handler]:
        return self.route("POST", path)

    def put(self, path: str) -> Callable[[Handler], Handler]:
        return self.route("PUT", path)

    def delete(self, path: str) -> Callable[[Handler], Handler]:
        return self.route("DELETE", path)

    def resolve(self, method: str, path: str) -> Optional[Handler]:
        key = f"{method.upper()} {path}"
        handler = self._exact.get(key)
        if handler is not None:
            return handler
        for prefix, candidate in self._wildcards:
            if key.startswith(prefix):
                return candidate
        return None

    async def dispatch(self, ctx: RequestContext) -> ResponseBuilder:
        handler = self.resolve(ctx.method, ctx.path)
        if handler is None:
            raise NotFoundError(resource="route", resource_id=ctx.key)
        return await handler(ctx)

    def __len__(self) -> int:
        return len(self._exact) + len(self._wildcards)
