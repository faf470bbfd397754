# Routes package init
"""
Daily Pause Backend — API Routes Package (server variant)
==========================================================

Route Inventory:
    - auth.py:     POST /api/auth/register, POST /api/auth/login,
                   GET  /api/auth/me,       POST /api/auth/logout
    - journal.py:  POST /api/journal,       GET  /api/journal,
                   POST /api/journal/delete, GET /api/journal/dates
    - health.py:   GET  /health

Design Principle:
    Routes are THIN: extract inputs, call a service, shape the response.
    The edge variant (daily_pause.edge) calls the very same services.
"""
