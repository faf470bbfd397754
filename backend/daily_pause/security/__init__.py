# Security package init
"""
Daily Pause Backend — Security Helpers
=======================================

What:  Framework-free building blocks shared by both app variants.

Inventory:
    - passwords.py: PasswordHasher (hash / verify / needs_rehash)
    - tokens.py:    bearer_token, cookie_value, extract_token
    - cors.py:      CORSPolicy (origin allow-list + suffix matching)

None of these touch the database or the request object directly, so they
are unit-tested without any HTTP or SQL setup.
"""
