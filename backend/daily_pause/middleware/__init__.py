# Middleware package init
"""
Daily Pause Backend — Middleware Package
=========================================

What:  Cross-cutting concerns applied to every request of the server variant.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS policy] → Route Handler

    Why this order:
    1. Request ID first: every later log line can carry it
    2. Logging: sees the final status, including CORS preflight answers
    3. CORS innermost: preflight OPTIONS is answered before routing, and every
       routed response (errors included) gets the CORS headers. Unexpected
       500s are answered outside the chain, so their handler in main.py adds
       the same headers itself.
"""
