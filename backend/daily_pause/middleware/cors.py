"""
Daily Pause Backend — CORS Middleware
======================================

What:  Applies CORSPolicy to every response of the server variant.
Why:   Starlette's CORSMiddleware matches origins by list or regex and drops
       the allow header for unknown origins; the frontend expects the
       suffix rule and a fixed fallback origin instead.
How:   OPTIONS preflight requests are answered here with 204 and the CORS
       headers only, before routing. Every other response gets the same
       headers added on the way out.
"""

from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from daily_pause.security.cors import CORSPolicy


class CORSPolicyMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, policy: Optional[CORSPolicy] = None, **kwargs):
        super().__init__(app, **kwargs)
        self.policy = policy or CORSPolicy.from_settings()

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        headers = self.policy.headers_for(request.headers.get("origin"))

        if request.method == "OPTIONS":
            return Response(status_code=204, headers=headers)

        response = await call_next(request)
        response.headers.update(headers)
        return response
