# Edge package init
"""
Daily Pause Backend — Edge Variant
===================================

What:  The same API as daily_pause.main, served through an explicit route
       table instead of FastAPI routing.

Modules:
    - router.py:   RouteTable, RequestContext, ResponseBuilder
    - handlers.py: the eight endpoints and build_route_table()
    - app.py:      EdgeApp + Starlette wrapper (`app` for uvicorn)
"""
