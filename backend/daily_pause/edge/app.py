"""
Daily Pause Backend — Edge Application (edge variant)
======================================================

What:  ASGI entry point for the edge deployment (uvicorn daily_pause.edge.app:app).
How:   A Starlette app with a single catch-all route. Everything else is ours:

    request ─▶ CORS preflight? ──yes──▶ 204 + CORS headers
                   │ no
                   ▼
             RequestContext ─▶ session_scope() ─▶ RouteTable.dispatch()
                   │
                   ▼
             ResponseBuilder (+ CORS headers, X-Request-ID) ─▶ Response

    Application errors become JSON error bodies via ResponseBuilder.error();
    anything unexpected is logged with its traceback and answered with a
    generic 500.
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Route

from daily_pause.database import dispose_engine, session_scope
from daily_pause.edge.handlers import build_route_table
from daily_pause.edge.router import RequestContext, ResponseBuilder, RouteTable
from daily_pause.exceptions import DailyPauseError
from daily_pause.logging_setup import log_configuration_warnings, setup_logging
from daily_pause.middleware.request_id import new_request_id, request_id_var
from daily_pause.security.cors import CORSPolicy

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("daily_pause.access")

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


class EdgeApp:
    """
    Owns the route table and CORS policy for the lifetime of the process.

    Both are built once in __init__ and only read afterwards.
    """

    def __init__(
        self,
        table: Optional[RouteTable] = None,
        cors: Optional[CORSPolicy] = None,
    ):
        self.table = table or build_route_table()
        self.cors = cors or CORSPolicy.from_settings()

    async def handle(self, request: Request) -> Response:
        start_time = time.perf_counter()
        rid = request.headers.get("X-Request-ID") or new_request_id()
        request_id_var.set(rid)
        cors_headers = self.cors.headers_for(request.headers.get("origin"))

        if request.method == "OPTIONS":
            return Response(status_code=204, headers=cors_headers)

        ctx = await RequestContext.from_request(request)
        try:
            async with session_scope() as db:
                ctx.db = db
                builder = await self.table.dispatch(ctx)
        except DailyPauseError as exc:
            if exc.status_code >= 500:
                logger.error("[%s] %s | Context: %s", rid, exc.message, exc.context)
            builder = ResponseBuilder.error(exc, request_id=rid)
        except Exception as exc:
            logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
            builder = ResponseBuilder.error(DailyPauseError(), request_id=rid)

        builder.headers.update(cors_headers)
        builder.headers["X-Request-ID"] = rid

        access_logger.info(
            "%s %s %d %.1fms [%s] user=%s",
            ctx.method,
            ctx.path,
            builder.status,
            (time.perf_counter() - start_time) * 1000,
            rid,
            ctx.state.get("user_id", "-"),
        )
        return builder.to_response()


@asynccontextmanager
async def lifespan(app: Starlette) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("Daily Pause edge router starting up...")
    log_configuration_warnings(logger)
    yield
    await dispose_engine()
    logger.info("Daily Pause edge router stopped.")


def create_edge_app(edge: Optional[EdgeApp] = None) -> Starlette:
    edge = edge or EdgeApp()
    app = Starlette(
        routes=[Route("/{path:path}", endpoint=edge.handle, methods=ALL_METHODS)],
        lifespan=lifespan,
    )
    app.state.edge = edge
    return app


app = create_edge_app()
