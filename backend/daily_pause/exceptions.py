"""
Daily Pause Backend — Custom Exception Hierarchy
=================================================

What:  Defines application-specific exceptions for different error scenarios.
Why:   Custom exceptions enable targeted error handling with appropriate HTTP
       status codes and user-friendly messages. They replace generic Python
       exceptions that would leak internal details to the client.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py, and the edge
       ResponseBuilder) turn them into structured JSON error responses.
Who:   Raised by services, dependencies and the edge router.

Exception Hierarchy:
    DailyPauseError (base)             → 500
    ├── ValidationError                → 400 Bad Request (client can fix)
    ├── AuthenticationError            → 401 Unauthorized
    ├── NotFoundError                  → 404 Not Found
    └── DatabaseError                  → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class DailyPauseError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client
                  unless the subclass says otherwise)
        status_code / error_code: HTTP mapping shared by both app variants
    """

    status_code = 500
    error_code = "server_error"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(DailyPauseError):
    """
    Raised when client input fails validation.

    When:    Duplicate email at registration, malformed JSON body, bad date.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "User already exists",
            "details": {"field": "email"}
        }
    """

    status_code = 400
    error_code = "validation_error"

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class AuthenticationError(DailyPauseError):
    """
    Raised when a request cannot be tied to a live session.

    Messages used:
        "Not authenticated"    → no token was presented at all
        "Session expired"      → token present, but no unexpired session row
        "Invalid credentials"  → login with unknown email or wrong password
    HTTP:    401 Unauthorized
    """

    status_code = 401
    error_code = "not_authenticated"

    def __init__(
        self,
        message: str = "Not authenticated",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(DailyPauseError):
    """
    Raised when a requested resource or route does not exist.

    Journal lookups never raise this: a missing entry is an empty object.
    HTTP:    404 Not Found
    """

    status_code = 404
    error_code = "not_found"

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(DailyPauseError):
    """
    Raised when database operations fail unexpectedly.

    Security Note:
        The message returned to the client is always generic.
        Detailed error info is logged server-side only.
    HTTP:    500 Internal Server Error
    """

    status_code = 500
    error_code = "server_error"

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
