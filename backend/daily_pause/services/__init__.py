# Services package init
"""
Daily Pause Backend — Services Layer
=====================================

What:  Business logic between the HTTP front doors and the database.

Service Inventory:
    - SessionService: issue, resolve (auth guard), revoke and purge sessions
    - AuthService:    register, login, logout
    - JournalService: save (upsert by day), get, delete, list dates

Each module exposes a ready-made singleton (`session_service`,
`auth_service`, `journal_service`); services are stateless and receive the
request's AsyncSession on every call.
"""
